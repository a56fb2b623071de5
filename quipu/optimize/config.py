"""Run configuration consumed by the Nelder-Mead loop."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Integral

from ..exceptions import ArityMismatch, InvalidConfiguration
from .core import DEFAULT_MAXITER, DEFAULT_TOL, TransformCoefficients
from .objective import ObjectiveAdapter
from .start import StartingPoint


def validate_maxiter(maxiter: int) -> int:
    if isinstance(maxiter, bool) or not isinstance(maxiter, Integral):
        raise InvalidConfiguration(
            f"maximum iterations must be an integer, got {type(maxiter).__name__}"
        )
    if maxiter <= 0:
        raise InvalidConfiguration(f"maximum iterations must be positive, got {maxiter}")
    return int(maxiter)


def validate_tol(tol: float) -> float:
    try:
        tol = float(tol)
    except (TypeError, ValueError) as exc:
        raise InvalidConfiguration(f"tolerance must be a real number, got {tol!r}") from exc
    if not (math.isfinite(tol) and tol > 0):
        raise InvalidConfiguration(f"tolerance must be positive and finite, got {tol}")
    return tol


@dataclass(frozen=True)
class RunConfiguration:
    """Everything a run needs, validated once at construction.

    Attributes:
        objective: Adapter over the user function.
        start: Initial simplex points; their dimension must match the
            objective's.
        maxiter: Iteration budget.
        tol: Convergence tolerance, see :mod:`quipu.optimize.convergence`.
        coefficients: Reflection, expansion, contraction and shrink factors.
    """

    objective: ObjectiveAdapter
    start: StartingPoint
    maxiter: int = DEFAULT_MAXITER
    tol: float = DEFAULT_TOL
    coefficients: TransformCoefficients = field(default_factory=TransformCoefficients)

    def __post_init__(self) -> None:
        if not isinstance(self.objective, ObjectiveAdapter):
            raise InvalidConfiguration(
                f"objective must be an ObjectiveAdapter, got {type(self.objective).__name__}"
            )
        if not isinstance(self.start, StartingPoint):
            raise InvalidConfiguration(
                f"start must be a StartingPoint, got {type(self.start).__name__}"
            )
        if not isinstance(self.coefficients, TransformCoefficients):
            raise InvalidConfiguration(
                "coefficients must be TransformCoefficients, "
                f"got {type(self.coefficients).__name__}"
            )
        object.__setattr__(self, "maxiter", validate_maxiter(self.maxiter))
        object.__setattr__(self, "tol", validate_tol(self.tol))
        if self.start.dim != self.objective.dim:
            raise ArityMismatch(str(self.objective.dim), self.start.dim)

    @property
    def dim(self) -> int:
        return self.objective.dim


__all__ = ["RunConfiguration", "validate_maxiter", "validate_tol"]
