"""Uniform ``evaluate(point) -> float`` view over user objectives."""

from __future__ import annotations

import inspect
from typing import Callable, Optional

import numpy as np

from ..exceptions import ArityMismatch, EvaluationFault, InvalidConfiguration
from .core import Array, Objective, PointLike, VectorObjective, as_point

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def arity_range(fun: Callable) -> Optional[tuple[int, Optional[int]]]:
    """Return ``(min, max)`` positional arity of ``fun``.

    ``max`` is ``None`` when the function takes ``*args``. Returns ``None``
    when the signature cannot be inspected.
    """
    try:
        sig = inspect.signature(fun)
    except (TypeError, ValueError):
        return None
    params = list(sig.parameters.values())
    required = sum(
        1 for p in params if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty
    )
    total = sum(1 for p in params if p.kind in _POSITIONAL)
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        return required, None
    return required, total


def _describe(bounds: tuple[int, Optional[int]]) -> str:
    low, high = bounds
    if high is None:
        return f"at least {low}"
    if low == high:
        return str(low)
    return f"{low} to {high}"


class ObjectiveAdapter:
    """Evaluate a fixed-arity function on points of length ``dim``.

    The arity is checked once, at construction. Evaluation forwards the
    coordinates as positional arguments and returns the result as a float,
    NaN and infinities included. Exceptions raised by the function surface
    as :class:`~quipu.exceptions.EvaluationFault`.
    """

    def __init__(self, fun: Objective, dim: int) -> None:
        if not callable(fun):
            raise InvalidConfiguration(f"objective must be callable, got {type(fun).__name__}")
        if dim < 1:
            raise InvalidConfiguration(f"dim must be >= 1, got {dim}")
        bounds = arity_range(fun)
        if bounds is not None:
            low, high = bounds
            if dim < low or (high is not None and dim > high):
                raise ArityMismatch(_describe(bounds), dim)
        self._fun = fun
        self._dim = int(dim)
        self._vectorized = False

    @classmethod
    def from_vector(cls, fun: VectorObjective, dim: int) -> "ObjectiveAdapter":
        """Wrap a function taking the whole point as one array argument."""
        if not callable(fun):
            raise InvalidConfiguration(f"objective must be callable, got {type(fun).__name__}")
        if dim < 1:
            raise InvalidConfiguration(f"dim must be >= 1, got {dim}")
        adapter = cls.__new__(cls)
        adapter._fun = fun
        adapter._dim = int(dim)
        adapter._vectorized = True
        return adapter

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def vectorized(self) -> bool:
        return self._vectorized

    def evaluate(self, point: PointLike) -> float:
        x = point if isinstance(point, np.ndarray) else as_point(point)
        if x.shape != (self._dim,):
            raise ArityMismatch(str(self._dim), int(x.size))
        try:
            if self._vectorized:
                value = self._fun(x)
            else:
                value = self._fun(*(float(v) for v in x))
            return float(value)
        except Exception as exc:
            raise EvaluationFault(
                x, f"objective raised {type(exc).__name__} at {x.tolist()}: {exc}"
            ) from exc

    def __call__(self, point: Array) -> float:
        return self.evaluate(point)

    def __repr__(self) -> str:
        name = getattr(self._fun, "__name__", type(self._fun).__name__)
        kind = "vector" if self._vectorized else "positional"
        return f"ObjectiveAdapter({name}, dim={self._dim}, {kind})"


__all__ = ["ObjectiveAdapter", "arity_range"]
