"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


# 9x9 constraint system: four bar-like rows, one -2000 spring row, and
# sparse +-1 coupling rows. Flat, row-major.
REFERENCE_MATRIX = [
    -1000., 0., 0., 0., 0., -1., 0., 0., 1.,
    0., -1000., 0., 0., 0., -1., 0., 1., 0.,
    0., 0., -1000., 0., 0., 0., 0., 1., -1.,
    0., 0., 0., -1000., 0., 0., 1., 0., -1.,
    0., 0., 0., 0., -2000., 0., 1., -1., 0.,
    0., 0., 0., 0., 0., 1., 0., 0., 0.,
    0., 0., 0., 0., 0., 0., 1., 0., 0.,
    1., 0., -1., -1., 0., 0., 0., 0., 0.,
    0., 1., 1., 0., -1., 0., 0., 0., 0.,
]
REFERENCE_RHS = [0., 0., 0., 0., 0., 10., 0., 0., 0.]
REFERENCE_SOLUTION = [
    -0.004615384615384615,
    -0.003846153846153847,
    0.0007692307692307683,
    -0.005384615384615385,
    -0.0030769230769230765,
    10.0,
    0.0,
    6.153846153846153,
    5.384615384615385,
]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def reference_system():
    """Fresh flat buffers for the 9x9 reference system."""
    a = np.array(REFERENCE_MATRIX, dtype=np.float64)
    b = np.array(REFERENCE_RHS, dtype=np.float64)
    return a, b


@pytest.fixture
def reference_solution():
    return np.array(REFERENCE_SOLUTION, dtype=np.float64)


@pytest.fixture
def random_system(rng):
    """Diagonally dominant 12x12 system with known solution."""
    n = 12
    A = rng.standard_normal((n, n))
    A += np.diag(np.abs(A).sum(axis=1) + 1.0)
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return A, b, x_true
