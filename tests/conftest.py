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
def normal_sample(rng):
    """2000 draws from the standard normal."""
    return rng.standard_normal(2000)


@pytest.fixture
def tied_sample():
    """Small sample with two tie groups (sizes 3 and 2)."""
    return np.array([3.0, 1.0, 4.0, 1.0, 5.0, 9.0, 2.0, 6.0, 5.0, 1.0])
