# linalg3d/vector3d.py
import operator

import numpy as np

DTYPE = np.float32


def ieee():
    """
    Floating-point error state for component arithmetic: overflow, division
    by zero and invalid operations produce inf/nan per IEEE 754, silently.
    """
    return np.errstate(over="ignore", divide="ignore", invalid="ignore")


def check_index(index) -> int:
    """
    Returns index as an int if it addresses one of three slots, otherwise
    raises IndexError. Negative indices do not wrap around.
    """
    if isinstance(index, (bool, np.bool_)):
        raise TypeError("Index must be an integer, not bool")
    i = operator.index(index)
    if not 0 <= i <= 2:
        raise IndexError("Index out of bounds")
    return i


class Vector3D:
    """
    A 3D vector of float32 components supporting arithmetic, indexing,
    magnitude and normalization.

    Components live in a length-3 numpy buffer. Vectors returned by
    Matrix3D column indexing wrap a view of the matrix storage, so writes
    through them land in the matrix.
    """
    __slots__ = ("_v",)
    __hash__ = None
    # Keep numpy scalars from broadcasting over us; they defer to __rmul__.
    __array_ufunc__ = None

    def __init__(self, x: float, y: float, z: float):
        with ieee():
            self._v = np.array([x, y, z], dtype=DTYPE)

    @classmethod
    def _from_buffer(cls, buffer: np.ndarray) -> "Vector3D":
        v = cls.__new__(cls)
        v._v = buffer
        return v

    @property
    def data(self) -> np.ndarray:
        """The underlying float32 buffer (shared, not copied)."""
        return self._v

    @property
    def x(self):
        return self._v[0]

    @x.setter
    def x(self, value: float):
        self[0] = value

    @property
    def y(self):
        return self._v[1]

    @y.setter
    def y(self, value: float):
        self[1] = value

    @property
    def z(self):
        return self._v[2]

    @z.setter
    def z(self, value: float):
        self[2] = value

    def __getitem__(self, index):
        return self._v[check_index(index)]

    def __setitem__(self, index, value: float):
        i = check_index(index)
        with ieee():
            self._v[i] = value

    def __len__(self) -> int:
        return 3

    def __iter__(self):
        return iter(self._v)

    def __add__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        with ieee():
            return Vector3D._from_buffer(self._v + other._v)

    def __sub__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        with ieee():
            return Vector3D._from_buffer(self._v - other._v)

    def __neg__(self) -> "Vector3D":
        return Vector3D._from_buffer(-self._v)

    def __mul__(self, t) -> "Vector3D":
        if not _is_scalar(t):
            return NotImplemented
        with ieee():
            return Vector3D._from_buffer(self._v * DTYPE(t))

    def __rmul__(self, t) -> "Vector3D":
        return self.__mul__(t)

    def __imul__(self, t) -> "Vector3D":
        if not _is_scalar(t):
            return NotImplemented
        with ieee():
            self._v *= DTYPE(t)
        return self

    def __truediv__(self, t) -> "Vector3D":
        if not _is_scalar(t):
            return NotImplemented
        with ieee():
            return Vector3D._from_buffer(self._v / DTYPE(t))

    def __itruediv__(self, t) -> "Vector3D":
        if not _is_scalar(t):
            return NotImplemented
        with ieee():
            self._v /= DTYPE(t)
        return self

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def magnitude(self):
        """
        Returns the Euclidean norm, evaluated in float32. Components whose
        squares overflow give inf.
        """
        x, y, z = self._v
        with ieee():
            return np.sqrt(x * x + y * y + z * z)

    def normalize(self) -> "Vector3D":
        """
        Returns the vector scaled to unit length. The zero vector is not
        special-cased and comes back as NaN components.
        """
        return self / self.magnitude()

    def __repr__(self) -> str:
        return f"Vector3D({self.x}, {self.y}, {self.z})"


def _is_scalar(t) -> bool:
    return isinstance(t, (int, float, np.number)) and not isinstance(t, bool)
