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
def spd_matrix(rng):
    """Random 4x4 symmetric positive definite matrix, well separated spectrum."""
    q, _ = np.linalg.qr(rng.standard_normal((4, 4)))
    return q @ np.diag([9.0, 4.0, 2.0, 0.5]) @ q.T


@pytest.fixture
def tall_matrix(rng):
    """Random 5x3 matrix with singular values 6, 3, 1."""
    u, _ = np.linalg.qr(rng.standard_normal((5, 3)))
    v, _ = np.linalg.qr(rng.standard_normal((3, 3)))
    return u @ np.diag([6.0, 3.0, 1.0]) @ v.T
