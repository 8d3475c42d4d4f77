"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def dominant_system(rng):
    """Strictly diagonally dominant 6x6 system with known solution."""
    n = 6
    A = rng.standard_normal((n, n))
    A[np.diag_indices(n)] = np.sum(np.abs(A), axis=1) + 1.0
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return A, b, x_true


@pytest.fixture
def tridiagonal_3x3():
    """A = [[4,1,0],[1,4,1],[0,1,4]], b = [5,6,5], x = [1,1,1]."""
    A = np.array([[4.0, 1.0, 0.0], [1.0, 4.0, 1.0], [0.0, 1.0, 4.0]])
    b = np.array([5.0, 6.0, 5.0])
    return A, b
