"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrices import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_2x2():
    """[[3, 4], [5, 6]] as int32; det = -2."""
    return Matrix([[3, 4], [5, 6]], dtype=np.int32)


@pytest.fixture
def square_3x3():
    """3 x 3 int32 example; det = -1713."""
    return Matrix(
        [
            [5, 3, 8],
            [1, 15, 77],
            [8, 9, 11],
        ],
        dtype=np.int32,
    )


@pytest.fixture
def square_4x4():
    """4 x 4 int32 example; det = 1365434865."""
    return Matrix(
        [
            [66, 13, 8, 45],
            [45, 12, 678, 33],
            [675, 123, 666, 99],
            [1010, 90, 67, 1],
        ],
        dtype=np.int32,
    )


@pytest.fixture
def matrix_5x3():
    """5 x 3 uint32 matrix holding 1..15 row-major."""
    return Matrix(
        [
            [1, 2, 3],
            [4, 5, 6],
            [7, 8, 9],
            [10, 11, 12],
            [13, 14, 15],
        ],
        dtype=np.uint32,
    )
