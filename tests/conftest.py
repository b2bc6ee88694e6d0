"""Pytest configuration and fixtures for corrstat tests."""

import numpy as np
import pytest

from corrstat.core.config import reset_config


@pytest.fixture(autouse=True)
def _restore_config():
    """Every test starts and ends with the default configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(2025)


@pytest.fixture
def tied_pair() -> tuple:
    """Paired sample with ties in x, in y and in both."""
    x = [1, 1, 1, 2, 2, 2, 3, 3, 3]
    y = [2, 2, 4, 4, 6, 6, 8, 8, 10]
    return x, y


@pytest.fixture
def data_matrix(rng) -> np.ndarray:
    """(6, 40) matrix with correlated, anti-correlated and noise rows."""
    base = rng.normal(size=40)
    return np.vstack([
        base,
        2.0 * base + 0.1 * rng.normal(size=40),
        -base + 0.3 * rng.normal(size=40),
        np.exp(base),
        rng.normal(size=40),
        rng.integers(0, 4, size=40).astype(float),
    ])
