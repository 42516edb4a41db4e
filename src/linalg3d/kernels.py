# linalg3d/kernels.py

from numba import njit

# Buffers are column-major float32: m[col, row] holds logical entry (row, col).
# Sums are unrolled in k order so results match the scalar definition bit for bit.


@njit
def mat3_mul(a, b, out):
    """
    Writes the 3x3 product a * b into out.
    """
    for col in range(3):
        for row in range(3):
            out[col, row] = (a[0, row] * b[col, 0]
                             + a[1, row] * b[col, 1]
                             + a[2, row] * b[col, 2])


@njit
def mat3_vec_mul(m, v, out):
    """
    Writes the matrix-vector product m * v into out.
    """
    for row in range(3):
        out[row] = m[0, row] * v[0] + m[1, row] * v[1] + m[2, row] * v[2]
