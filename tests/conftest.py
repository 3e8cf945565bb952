"""Pytest configuration and shared fixtures for fmin tests.

Provides a deterministic NumPy RNG so randomly generated problems are
reproducible.
"""

import os

import numpy as np
import pytest


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function")
def spd_matrix(rng: np.random.Generator):
    """Factory for well-conditioned symmetric positive-definite matrices."""

    def make(n: int) -> np.ndarray:
        m = rng.normal(size=(n, n))
        return m @ m.T + n * np.eye(n)

    return make
