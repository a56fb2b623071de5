"""Core data types shared by the Nelder-Mead components.

Points are one-dimensional, read-only ``float64`` arrays. Vertices pair a
point with its cached objective value, and a :class:`Solution` is the single
output of a run.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Union

import numpy as np

from ..exceptions import InvalidConfiguration

Array = np.ndarray
Objective = Callable[..., float]
VectorObjective = Callable[[Array], float]
PointLike = Union[Sequence[float], Array]

DEFAULT_MAXITER = 1000
DEFAULT_TOL = 1e-3


def as_point(values: PointLike) -> Array:
    """Return a read-only 1-D float copy of ``values``."""
    point = np.array(values, dtype=float).reshape(-1)
    point.setflags(write=False)
    return point


def rank_key(value: float) -> tuple[int, float]:
    """Total-order key for objective values: finite < +/-inf < NaN."""
    if math.isnan(value):
        return (2, 0.0)
    if math.isinf(value):
        return (1, 0.0)
    return (0, value)


def is_better(a: float, b: float) -> bool:
    """Return True if ``a`` ranks strictly before ``b``."""
    return rank_key(a) < rank_key(b)


class Status(Enum):
    """Terminal status of a Nelder-Mead run."""

    OPTIMAL = "optimal"
    MAX_ITERATIONS_EXCEEDED = "max_iterations_exceeded"
    FAILED = "failed"


@dataclass(frozen=True)
class Vertex:
    """A simplex vertex: a point and its objective value."""

    point: Array
    value: float

    @property
    def dim(self) -> int:
        return int(self.point.shape[0])


@dataclass(frozen=True)
class TransformCoefficients:
    """Reflection, expansion, contraction and shrink coefficients."""

    reflection: float = 1.0
    expansion: float = 2.0
    contraction: float = 0.5
    shrink: float = 0.5

    def __post_init__(self) -> None:
        if not self.reflection > 0:
            raise InvalidConfiguration(
                f"reflection must be positive, got {self.reflection}"
            )
        if not self.expansion > max(1.0, self.reflection):
            raise InvalidConfiguration(
                f"expansion must exceed max(1, reflection), got {self.expansion}"
            )
        if not 0 < self.contraction < 1:
            raise InvalidConfiguration(
                f"contraction must lie in (0, 1), got {self.contraction}"
            )
        if not 0 < self.shrink < 1:
            raise InvalidConfiguration(f"shrink must lie in (0, 1), got {self.shrink}")

    @classmethod
    def adaptive(cls, dim: int) -> "TransformCoefficients":
        """Dimension-dependent coefficients (Gao & Han, 2012).

        For ``dim <= 2`` these coincide with the standard coefficients.
        """
        if dim < 1:
            raise InvalidConfiguration(f"dim must be >= 1, got {dim}")
        n = max(dim, 2)
        return cls(
            reflection=1.0,
            expansion=1.0 + 2.0 / n,
            contraction=0.75 - 0.5 / n,
            shrink=1.0 - 1.0 / n,
        )


@dataclass(frozen=True)
class Candidate:
    """Best point found by a run together with its objective value."""

    arguments: Array
    value: float


@dataclass(frozen=True)
class Solution:
    """Result of a Nelder-Mead run.

    Attributes:
        status: Terminal status of the run.
        candidate: Best vertex found, or ``None`` when the run failed.
        nit: Number of iterations performed.
        nfev: Number of objective evaluations, including the initial simplex.
        message: Human-readable description of the status.
        error: The evaluation fault that ended a failed run.
        history: Best point after each iteration when requested.
    """

    status: Status
    candidate: Optional[Candidate]
    nit: int
    nfev: int
    message: str
    error: Optional[BaseException] = None
    history: List[Array] = field(default_factory=list)

    @property
    def has_solution(self) -> bool:
        return self.candidate is not None

    @property
    def success(self) -> bool:
        return self.status is Status.OPTIMAL

    @property
    def x(self) -> Optional[Array]:
        return None if self.candidate is None else self.candidate.arguments

    @property
    def fun(self) -> Optional[float]:
        return None if self.candidate is None else self.candidate.value

    def raise_for_status(self) -> None:
        """Re-raise the evaluation fault of a failed run."""
        if self.error is not None:
            raise self.error


__all__ = [
    "Array",
    "Candidate",
    "DEFAULT_MAXITER",
    "DEFAULT_TOL",
    "Objective",
    "PointLike",
    "Solution",
    "Status",
    "TransformCoefficients",
    "VectorObjective",
    "Vertex",
    "as_point",
    "is_better",
    "rank_key",
]
