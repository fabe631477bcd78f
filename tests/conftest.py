"""Pytest configuration and shared fixtures for gradkit tests.

This module provides:
- A deterministic numpy Generator for the sampling solvers
- Small noiseless datasets used across the solver tests
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
    """Seed the global numpy and torch generators before every test."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


@pytest.fixture
def line_data() -> tuple[np.ndarray, np.ndarray]:
    """``y = 2x + 1`` on ``x = 1..5`` with a bias column."""
    X = np.array([[1, 1], [1, 2], [1, 3], [1, 4], [1, 5]], dtype=float)
    y = np.array([3, 5, 7, 9, 11], dtype=float)
    return X, y


@pytest.fixture
def house_data() -> tuple[np.ndarray, np.ndarray]:
    """House sizes against prices, ``price = 2 * size``."""
    X = np.array([[1, 50], [1, 80], [1, 100], [1, 120], [1, 150]], dtype=float)
    y = np.array([100, 160, 200, 240, 300], dtype=float)
    return X, y
