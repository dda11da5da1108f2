"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from linopt import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_int_matrix(rng):
    """Factory for n x m matrices of small Python ints."""
    def make(n, m, low=-9, high=10):
        return Matrix.from_array(rng.integers(low, high, size=(n, m)))
    return make


@pytest.fixture
def product_example():
    """3x4 and 4x2 operands with their known product."""
    a = Matrix.from_rows([
        [1, 2, 3, 4],
        [4, 3, 2, 1],
        [1, 2, 3, 4],
    ])
    b = Matrix.from_rows([
        [5, 6],
        [6, 5],
        [5, 6],
        [6, 5],
    ])
    expected = Matrix.from_rows([
        [56, 54],
        [54, 56],
        [56, 54],
    ])
    return a, b, expected
