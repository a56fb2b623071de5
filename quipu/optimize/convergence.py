"""Termination test for a ranked simplex.

A simplex is converged when both the spread of objective values and the
spread of vertex coordinates fall strictly below the tolerance:

    |f(x_N) - f(x_0)| < tol   and   max_i max_j |x_i[j] - x_0[j]| < tol

Any non-finite value makes the value spread infinite.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from ..exceptions import InvalidConfiguration
from .simplex import Simplex


def value_spread(simplex: Simplex) -> float:
    """Absolute difference between the worst and best objective values."""
    best = simplex.best.value
    worst = simplex.worst.value
    if not (math.isfinite(best) and math.isfinite(worst)):
        return math.inf
    return abs(worst - best)


def vertex_spread(simplex: Simplex) -> float:
    """Largest coordinate distance of any vertex from the best vertex."""
    points = simplex.points
    return float(np.max(np.abs(points[1:] - points[0])))


def check_convergence(simplex: Simplex, tol: float) -> bool:
    """Return True if the ranked simplex is within ``tol``."""
    return value_spread(simplex) < tol and vertex_spread(simplex) < tol


@dataclass(frozen=True)
class ConvergenceTest:
    """Convergence test bound to a fixed tolerance."""

    tol: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.tol) and self.tol > 0):
            raise InvalidConfiguration(f"tolerance must be positive and finite, got {self.tol}")

    def is_satisfied(self, simplex: Simplex) -> bool:
        return check_convergence(simplex, self.tol)

    __call__ = is_satisfied


__all__ = ["ConvergenceTest", "check_convergence", "value_spread", "vertex_spread"]
