"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pydense.matrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def tall_matrix(rng):
    """Well-conditioned 50 x 8 Gaussian matrix and its ndarray."""
    A_arr = rng.standard_normal((50, 8))
    return Matrix.from_array(A_arr), A_arr


@pytest.fixture
def dependent_columns(rng):
    """10 x 3 matrix whose third column is the sum of the first two."""
    x1 = rng.standard_normal(10)
    x2 = rng.standard_normal(10)
    x3 = x1 + x2  # Perfect collinearity
    return Matrix.from_array(np.column_stack([x1, x2, x3]))
