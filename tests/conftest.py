"""Pytest configuration and shared fixtures for boxopt tests.

This module provides:
- A deterministic numpy RNG fixture
- Catalogue objects reused across test modules
"""

import os

import numpy as np
import pytest

from boxopt import QuarticValley, Region


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed numpy's global generator for code that draws from it directly."""
    np.random.seed(int(os.environ.get("TEST_RNG_SEED", "0")))


@pytest.fixture
def valley() -> QuarticValley:
    return QuarticValley()


@pytest.fixture
def box() -> Region:
    return Region([(-5.0, 5.0), (-5.0, 5.0)])
