"""Geometric moves of the Nelder-Mead method.

Every function is pure: it returns a new read-only point and never touches
the simplex it was given.

References:
    - Nelder & Mead, "A simplex method for function minimization" (1965)
    - Lagarias et al., "Convergence properties of the Nelder-Mead simplex
      method in low dimensions" (1998)
"""

from __future__ import annotations

from typing import List

from .core import Array, as_point
from .simplex import Simplex


def centroid(simplex: Simplex) -> Array:
    """Mean of all vertices except the worst of a ranked simplex."""
    return simplex.centroid()


def reflect(centroid: Array, worst: Array, rho: float) -> Array:
    """``centroid + rho * (centroid - worst)``."""
    return as_point(centroid + rho * (centroid - worst))


def expand(centroid: Array, reflected: Array, chi: float) -> Array:
    """``centroid + chi * (reflected - centroid)``."""
    return as_point(centroid + chi * (reflected - centroid))


def contract_outside(centroid: Array, reflected: Array, gamma: float) -> Array:
    """``centroid + gamma * (reflected - centroid)``."""
    return as_point(centroid + gamma * (reflected - centroid))


def contract_inside(centroid: Array, worst: Array, gamma: float) -> Array:
    """``centroid + gamma * (worst - centroid)``."""
    return as_point(centroid + gamma * (worst - centroid))


def shrink(best: Array, vertex: Array, sigma: float) -> Array:
    """``best + sigma * (vertex - best)``."""
    return as_point(best + sigma * (vertex - best))


def shrink_simplex(simplex: Simplex, sigma: float) -> List[Array]:
    """Shrunken points for every vertex but the best, in simplex order."""
    best = simplex.best.point
    return [shrink(best, v.point, sigma) for v in simplex.vertices[1:]]


__all__ = [
    "centroid",
    "contract_inside",
    "contract_outside",
    "expand",
    "reflect",
    "shrink",
    "shrink_simplex",
]
