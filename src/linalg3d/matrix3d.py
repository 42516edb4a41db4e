# linalg3d/matrix3d.py
import numpy as np

from linalg3d.kernels import mat3_mul, mat3_vec_mul
from linalg3d.vector3d import DTYPE, Vector3D, check_index, ieee


def _column(v) -> Vector3D:
    if not isinstance(v, Vector3D):
        raise TypeError(f"Matrix3D column must be a Vector3D, not {type(v).__name__}")
    return v


class Matrix3D:
    """
    A 3x3 float32 matrix addressed in (row, col) order but stored column-major.

    m[row, col] reads or writes a single entry. m[col] returns the column as a
    Vector3D view, so mutating the returned vector mutates the matrix.
    """
    __slots__ = ("n",)
    __hash__ = None
    __array_ufunc__ = None

    def __init__(self, n00: float, n01: float, n02: float,
                 n10: float, n11: float, n12: float,
                 n20: float, n21: float, n22: float):
        # Column-major: n[0] is the first column, n[2][1] the third column, second row.
        with ieee():
            self.n = np.array([[n00, n10, n20],
                               [n01, n11, n21],
                               [n02, n12, n22]], dtype=DTYPE)

    @classmethod
    def _from_buffer(cls, buffer: np.ndarray) -> "Matrix3D":
        m = cls.__new__(cls)
        m.n = buffer
        return m

    @staticmethod
    def from_vectors(v1: Vector3D, v2: Vector3D, v3: Vector3D) -> "Matrix3D":
        """
        Builds the matrix whose columns are v1, v2 and v3, in order.
        """
        columns = [_column(v).data for v in (v1, v2, v3)]
        return Matrix3D._from_buffer(np.array(columns, dtype=DTYPE))

    def _entry(self, key):
        if len(key) != 2:
            raise IndexError("Index out of bounds")
        row, col = key
        return check_index(col), check_index(row)

    def __getitem__(self, key):
        if isinstance(key, tuple):
            return self.n[self._entry(key)]
        return Vector3D._from_buffer(self.n[check_index(key)])

    def __setitem__(self, key, value):
        if isinstance(key, tuple):
            entry = self._entry(key)
            with ieee():
                self.n[entry] = value
            return
        i = check_index(key)
        self.n[i] = _column(value).data

    def __mul__(self, other):
        if isinstance(other, Matrix3D):
            out = np.empty((3, 3), dtype=DTYPE)
            mat3_mul(self.n, other.n, out)
            return Matrix3D._from_buffer(out)
        if isinstance(other, Vector3D):
            out = np.empty(3, dtype=DTYPE)
            mat3_vec_mul(self.n, other.data, out)
            return Vector3D._from_buffer(out)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix3D):
            return NotImplemented
        return bool(np.array_equal(self.n, other.n))

    def __repr__(self) -> str:
        entries = ", ".join(str(self.n[col, row]) for row in range(3) for col in range(3))
        return f"Matrix3D({entries})"
