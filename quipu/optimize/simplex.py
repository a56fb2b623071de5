"""Simplex container with ranked vertex queries."""

from __future__ import annotations

from typing import Iterator, List, Sequence

import numpy as np

from ..exceptions import InvalidConfiguration
from .core import Array, PointLike, Vertex, as_point, rank_key
from .objective import ObjectiveAdapter


class Simplex:
    """N+1 vertices in N dimensions, ordered best to worst after :meth:`rank`.

    Ranking uses :func:`~quipu.optimize.core.rank_key`, so non-finite values
    sort after every finite value and NaN sorts last. The sort is stable:
    tied vertices keep their current order.
    """

    def __init__(self, vertices: Sequence[Vertex]) -> None:
        vertices = list(vertices)
        if not vertices:
            raise InvalidConfiguration("simplex needs at least two vertices")
        dim = vertices[0].dim
        if dim < 1:
            raise InvalidConfiguration("simplex vertices must have at least one coordinate")
        if len(vertices) != dim + 1:
            raise InvalidConfiguration(
                f"a simplex in {dim} dimension(s) needs {dim + 1} vertices, got {len(vertices)}"
            )
        for vertex in vertices:
            if vertex.dim != dim:
                raise InvalidConfiguration(
                    f"vertex dimension mismatch: expected {dim}, got {vertex.dim}"
                )
        self._vertices: List[Vertex] = vertices
        self._dim = dim

    @classmethod
    def from_points(
        cls, objective: ObjectiveAdapter, points: Sequence[PointLike]
    ) -> "Simplex":
        """Evaluate ``points`` in order and build the simplex."""
        vertices = []
        for p in points:
            x = as_point(p)
            vertices.append(Vertex(x, objective.evaluate(x)))
        return cls(vertices)

    @property
    def dim(self) -> int:
        return self._dim

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __getitem__(self, index: int) -> Vertex:
        return self._vertices[index]

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        return tuple(self._vertices)

    @property
    def points(self) -> Array:
        """``(N+1, N)`` array of vertex coordinates in current order."""
        return np.stack([v.point for v in self._vertices])

    @property
    def values(self) -> Array:
        return np.array([v.value for v in self._vertices], dtype=float)

    def rank(self) -> None:
        """Sort vertices ascending by objective value."""
        self._vertices.sort(key=lambda v: rank_key(v.value))

    @property
    def best(self) -> Vertex:
        return self._vertices[0]

    @property
    def worst(self) -> Vertex:
        return self._vertices[-1]

    @property
    def second_worst(self) -> Vertex:
        return self._vertices[-2]

    def centroid(self) -> Array:
        """Componentwise mean of every vertex except the worst."""
        return as_point(np.mean(self.points[:-1], axis=0))

    def replace_worst(self, vertex: Vertex) -> None:
        self._check(vertex)
        self._vertices[-1] = vertex

    def replace_all_but_best(self, vertices: Sequence[Vertex]) -> None:
        vertices = list(vertices)
        if len(vertices) != self._dim:
            raise InvalidConfiguration(f"expected {self._dim} vertices, got {len(vertices)}")
        for vertex in vertices:
            self._check(vertex)
        self._vertices[1:] = vertices

    def _check(self, vertex: Vertex) -> None:
        if vertex.dim != self._dim:
            raise InvalidConfiguration(
                f"vertex dimension mismatch: expected {self._dim}, got {vertex.dim}"
            )

    def __repr__(self) -> str:
        return f"Simplex(dim={self._dim}, best={self.best.value!r}, worst={self.worst.value!r})"


__all__ = ["Simplex"]
