"""Pytest configuration and shared fixtures for riskmin tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- Small regression data sets shared by the solver tests
"""

import os

import numpy as np
import pytest
import torch


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Auto-use fixture to set global random seeds for reproducibility."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


@pytest.fixture
def linreg_data(rng: np.random.Generator):
    """Noise-free linear regression problem: (X, y, true coefficients)."""
    X = rng.normal(size=(50, 3))
    w = np.array([1.5, -2.0, 0.5])
    return X, X @ w, w


@pytest.fixture
def logreg_data(rng: np.random.Generator):
    """Linearly separable-ish binary classification with labels in {-1, +1}."""
    X = rng.normal(size=(80, 2))
    w = np.array([2.0, -1.0])
    y = np.where(X @ w + 0.3 * rng.normal(size=80) >= 0, 1.0, -1.0)
    return X, y
