"""Starting-point helpers that produce an initial simplex."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Optional, Sequence

import numpy as np

from ..exceptions import InvalidConfiguration
from .core import Array, PointLike, as_point

RELATIVE_STEP = 0.05
ZERO_STEP = 0.00025


def initial_simplex(x0: PointLike, size: Optional[float] = None) -> tuple[Array, ...]:
    """Build N+1 points around ``x0``.

    Vertex 0 is ``x0``. Vertex ``i`` moves coordinate ``i - 1`` by ``size``
    when given, otherwise by 5% of its magnitude, or by ``ZERO_STEP`` when
    the coordinate is zero.
    """
    x = as_point(x0)
    if x.size == 0:
        raise InvalidConfiguration("starting point must have at least one coordinate")
    if not np.all(np.isfinite(x)):
        raise InvalidConfiguration(f"starting point must be finite, got {x.tolist()}")
    if size is not None and not (np.isfinite(size) and size != 0):
        raise InvalidConfiguration(f"simplex size must be finite and non-zero, got {size}")
    points = [x]
    for i in range(x.size):
        vertex = x.copy()
        if size is not None:
            vertex[i] += size
        elif vertex[i] != 0:
            vertex[i] += RELATIVE_STEP * abs(vertex[i])
        else:
            vertex[i] = ZERO_STEP
        points.append(as_point(vertex))
    return tuple(points)


@dataclass(frozen=True)
class StartingPoint:
    """Initial simplex points, ``dim + 1`` of them."""

    points: tuple[Array, ...]

    def __post_init__(self) -> None:
        if not self.points:
            raise InvalidConfiguration("starting simplex is empty")
        dim = self.points[0].size
        if dim < 1:
            raise InvalidConfiguration("starting points must have at least one coordinate")
        if len(self.points) != dim + 1:
            raise InvalidConfiguration(
                f"a starting simplex in {dim} dimension(s) needs {dim + 1} points, "
                f"got {len(self.points)}"
            )
        for p in self.points:
            if p.shape != (dim,):
                raise InvalidConfiguration(
                    f"starting point dimension mismatch: expected {dim}, got {p.size}"
                )
            if not np.all(np.isfinite(p)):
                raise InvalidConfiguration(f"starting points must be finite, got {p.tolist()}")

    @property
    def dim(self) -> int:
        return int(self.points[0].size)

    @property
    def origin(self) -> Array:
        return self.points[0]


class Start:
    """Factories for :class:`StartingPoint`.

    Example:
        >>> Start.around(100.0, 100.0).dim
        2
        >>> Start.around([1.0, 2.0, 3.0]).dim
        3
    """

    @staticmethod
    def around(*values: float | Sequence[float] | Array, size: Optional[float] = None) -> StartingPoint:
        """Simplex around one point, given as a sequence or as N scalars."""
        if len(values) == 1 and not isinstance(values[0], Real):
            coords = values[0]
        else:
            coords = values
        return StartingPoint(initial_simplex(coords, size=size))

    @staticmethod
    def origin(dim: int, size: Optional[float] = None) -> StartingPoint:
        if dim < 1:
            raise InvalidConfiguration(f"dim must be >= 1, got {dim}")
        return StartingPoint(initial_simplex(np.zeros(dim), size=size))

    @staticmethod
    def from_simplex(points: Sequence[PointLike]) -> StartingPoint:
        """Use ``points`` as the initial simplex verbatim."""
        return StartingPoint(tuple(as_point(p) for p in points))


__all__ = ["RELATIVE_STEP", "Start", "StartingPoint", "ZERO_STEP", "initial_simplex"]
