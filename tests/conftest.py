"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymath.linalg import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_pair():
    """The canonical 2x2 product operands."""
    a = Matrix([1.0, 2.0], [3.0, 4.0])
    b = Matrix([5.0, 6.0], [7.0, 8.0])
    return a, b


@pytest.fixture
def rect_pair():
    """A 2x3 and a 3x2 matrix."""
    a = Matrix([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
    b = Matrix([7.0, 8.0], [9.0, 10.0], [11.0, 12.0])
    return a, b


@pytest.fixture
def random_matrix(rng):
    """Factory for seeded standard-normal matrices of a given shape."""
    def make(rows, cols):
        return Matrix.from_rows(rng.standard_normal((rows, cols)))
    return make
