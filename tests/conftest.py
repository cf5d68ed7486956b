import numpy as np
import pytest

from densematrix import Matrix


@pytest.fixture
def matrix_a() -> Matrix:
    """Provide [[1, 2], [3, 4]]."""
    return Matrix.from_array(np.array([[1.0, 2.0], [3.0, 4.0]]))


@pytest.fixture
def matrix_b() -> Matrix:
    """Provide [[5, 6], [7, 8]]."""
    return Matrix.from_array(np.array([[5.0, 6.0], [7.0, 8.0]]))


@pytest.fixture
def matrix_2x3() -> Matrix:
    """Provide a 2x3 matrix with distinct entries."""
    return Matrix.from_array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


@pytest.fixture
def matrix_3x2() -> Matrix:
    """Provide a 3x2 matrix with distinct entries."""
    return Matrix.from_array([[7.0, 8.0], [9.0, 10.0], [11.0, 12.0]])
