"""Fluent, immutable builder for Nelder-Mead runs.

Example:
    >>> from quipu.optimize import NelderMead, Start
    >>> result = (
    ...     NelderMead.objective(lambda x, y: (x - 1) ** 2 + (y - 2) ** 2 + 42)
    ...     .with_maximum_iterations(100)
    ...     .with_tolerance(0.001)
    ...     .start_from(Start.around(100.0, 100.0))
    ...     .minimize()
    ... )
    >>> result.status
    <Status.OPTIMAL: 'optimal'>
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable, Optional, Union

from ..exceptions import ArityMismatch, InvalidConfiguration
from .config import RunConfiguration, validate_maxiter, validate_tol
from .core import (
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    Objective,
    PointLike,
    Solution,
    TransformCoefficients,
    VectorObjective,
)
from .nelder_mead import Callback, run
from .objective import ObjectiveAdapter, arity_range
from .start import Start, StartingPoint


@dataclass(frozen=True)
class NelderMead:
    """Immutable configuration chain; every ``with_*`` call returns a copy."""

    fun: Callable[..., float]
    dim: Optional[int] = None
    vectorized: bool = False
    maxiter: int = DEFAULT_MAXITER
    tol: float = DEFAULT_TOL
    coefficients: TransformCoefficients = field(default_factory=TransformCoefficients)
    start: Optional[StartingPoint] = None

    @classmethod
    def objective(cls, fun: Objective) -> "NelderMead":
        """Start from a function of N positional float arguments."""
        if not callable(fun):
            raise InvalidConfiguration(f"objective must be callable, got {type(fun).__name__}")
        bounds = arity_range(fun)
        dim = None
        if bounds is not None:
            low, high = bounds
            if high == 0:
                raise InvalidConfiguration("objective must accept at least one argument")
            if low == high:
                dim = low
        return cls(fun=fun, dim=dim)

    @classmethod
    def vector_objective(cls, fun: VectorObjective, dim: int) -> "NelderMead":
        """Start from a function taking the point as one array of length ``dim``."""
        ObjectiveAdapter.from_vector(fun, dim)
        return cls(fun=fun, dim=dim, vectorized=True)

    def with_maximum_iterations(self, maxiter: int) -> "NelderMead":
        return replace(self, maxiter=validate_maxiter(maxiter))

    def with_tolerance(self, tol: float) -> "NelderMead":
        return replace(self, tol=validate_tol(tol))

    def with_coefficients(self, coefficients: TransformCoefficients) -> "NelderMead":
        if not isinstance(coefficients, TransformCoefficients):
            raise InvalidConfiguration(
                f"coefficients must be TransformCoefficients, got {type(coefficients).__name__}"
            )
        return replace(self, coefficients=coefficients)

    def start_from(self, start: Union[StartingPoint, PointLike, float]) -> "NelderMead":
        """Set the initial simplex; plain points go through :meth:`Start.around`."""
        if not isinstance(start, StartingPoint):
            start = Start.around(start)
        if self.dim is not None and self.dim != start.dim:
            raise ArityMismatch(str(self.dim), start.dim)
        self._adapter(start.dim)
        return replace(self, start=start)

    def _adapter(self, dim: int) -> ObjectiveAdapter:
        if self.vectorized:
            return ObjectiveAdapter.from_vector(self.fun, dim)
        return ObjectiveAdapter(self.fun, dim)

    def build(self) -> RunConfiguration:
        """Validate and freeze the configuration without evaluating anything."""
        start = self.start
        if start is None:
            if self.dim is None:
                raise InvalidConfiguration(
                    "cannot infer the number of arguments of the objective; "
                    "use start_from() to give a starting point"
                )
            start = Start.origin(self.dim)
        return RunConfiguration(
            objective=self._adapter(start.dim),
            start=start,
            maxiter=self.maxiter,
            tol=self.tol,
            coefficients=self.coefficients,
        )

    def minimize(self, callback: Optional[Callback] = None, history: bool = False) -> Solution:
        return run(self.build(), callback=callback, history=history)


__all__ = ["NelderMead"]
