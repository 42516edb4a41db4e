from linalg3d.vector3d import DTYPE, Vector3D
from linalg3d.matrix3d import Matrix3D

__all__ = ["DTYPE", "Matrix3D", "Vector3D"]
