"""
pytest configuration and shared fixtures.
"""

import warnings

import pytest

from linalg3d import Matrix3D, Vector3D


@pytest.fixture
def warnings_as_errors():
    """Turn any warning raised inside the test into an exception."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        yield


@pytest.fixture
def v123():
    return Vector3D(1.0, 2.0, 3.0)


@pytest.fixture
def v456():
    return Vector3D(4.0, 5.0, 6.0)


@pytest.fixture
def m123():
    """Matrix 1..9 in row-major order."""
    return Matrix3D(1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0)


@pytest.fixture
def product_operands():
    """Two matrices whose product is known exactly."""
    m1 = Matrix3D(1.0, 3.0, -2.0, 0.0, -1.0, 4.0, 4.0, -3.0, 2.0)
    m2 = Matrix3D(2.0, -2.0, 3.0, 1.0, 5.0, 3.0, -3.0, 4.0, 1.0)
    return m1, m2
