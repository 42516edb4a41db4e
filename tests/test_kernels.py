"""
Tests for the compiled column-major kernels, called on raw buffers.
"""

import numpy as np

from linalg3d.kernels import mat3_mul, mat3_vec_mul


def column_major(rows):
    return np.ascontiguousarray(np.array(rows, dtype=np.float32).T)


def test_mat3_mul_matches_numpy():
    a_rows = [[1, 3, -2], [0, -1, 4], [4, -3, 2]]
    b_rows = [[2, -2, 3], [1, 5, 3], [-3, 4, 1]]
    out = np.empty((3, 3), dtype=np.float32)
    mat3_mul(column_major(a_rows), column_major(b_rows), out)
    expected = np.array(a_rows, dtype=np.float32) @ np.array(b_rows, dtype=np.float32)
    assert np.array_equal(out.T, expected)
    assert out.dtype == np.float32


def test_mat3_vec_mul():
    m = column_major([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    v = np.array([1, -1, 2], dtype=np.float32)
    out = np.empty(3, dtype=np.float32)
    mat3_vec_mul(m, v, out)
    assert out.tolist() == [5.0, 11.0, 17.0]
