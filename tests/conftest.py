"""Pytest configuration and shared fixtures for Quipu tests.

This module provides:
- A deterministic numpy RNG fixture
- A call-counting objective wrapper
"""

import os
from typing import Callable

import numpy as np
import pytest


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


class CountingObjective:
    """Wrap a function and count how often it is called."""

    def __init__(self, fun: Callable[..., float]) -> None:
        self.fun = fun
        self.calls = 0

    def __call__(self, *args: float) -> float:
        self.calls += 1
        return self.fun(*args)


@pytest.fixture
def counting() -> Callable[[Callable[..., float]], CountingObjective]:
    return CountingObjective
