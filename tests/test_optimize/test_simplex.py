import math

import numpy as np
import pytest

from quipu.exceptions import InvalidConfiguration
from quipu.optimize import ObjectiveAdapter, Simplex, Vertex, as_point, rank_key


def _vertex(coords, value):
    return Vertex(as_point(coords), value)


def test_rank_key_orders_finite_before_infinite_before_nan():
    values = [math.nan, 3.0, math.inf, -math.inf, -1.0]
    ordered = sorted(values, key=rank_key)
    assert ordered[:2] == [-1.0, 3.0]
    assert all(math.isinf(v) for v in ordered[2:4])
    assert math.isnan(ordered[-1])


def test_rank_sorts_non_finite_values_last():
    simplex = Simplex(
        [
            _vertex([0.0, 0.0, 0.0], math.nan),
            _vertex([1.0, 0.0, 0.0], 3.0),
            _vertex([0.0, 1.0, 0.0], math.inf),
            _vertex([0.0, 0.0, 1.0], 1.0),
        ]
    )
    simplex.rank()
    values = simplex.values
    assert values[0] == 1.0
    assert values[1] == 3.0
    assert math.isinf(values[2])
    assert math.isnan(values[3])
    assert simplex.best.value == 1.0
    assert simplex.second_worst.value == math.inf
    assert math.isnan(simplex.worst.value)


def test_rank_is_stable_for_ties():
    first = _vertex([1.0, 0.0], 2.0)
    second = _vertex([0.0, 1.0], 2.0)
    simplex = Simplex([first, _vertex([5.0, 5.0], 9.0), second])
    simplex.rank()
    assert simplex[0] is first
    assert simplex[1] is second


def test_from_points_evaluates_each_point_in_order(counting):
    objective = counting(lambda x, y: x + 10 * y)
    adapter = ObjectiveAdapter(objective, 2)
    simplex = Simplex.from_points(adapter, [[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]])
    assert objective.calls == 3
    assert np.allclose(simplex.values, [0.0, 1.0, 10.0])
    assert simplex.dim == 2
    assert len(simplex) == 3


def test_centroid_uses_all_but_worst():
    simplex = Simplex(
        [
            _vertex([0.0, 0.0], 0.0),
            _vertex([4.0, 0.0], 1.0),
            _vertex([0.0, 4.0], 2.0),
        ]
    )
    assert np.allclose(simplex.centroid(), [2.0, 0.0])


def test_replace_worst_and_all_but_best():
    simplex = Simplex(
        [
            _vertex([0.0], 0.0),
            _vertex([1.0], 1.0),
        ]
    )
    simplex.replace_worst(_vertex([0.5], 0.25))
    assert simplex.worst.value == 0.25
    simplex.replace_all_but_best([_vertex([0.1], 0.01)])
    assert simplex.best.value == 0.0
    assert np.allclose(simplex.points, [[0.0], [0.1]])
    with pytest.raises(InvalidConfiguration):
        simplex.replace_worst(_vertex([0.0, 1.0], 0.0))
    with pytest.raises(InvalidConfiguration):
        simplex.replace_all_but_best([])


def test_wrong_vertex_count_is_rejected():
    with pytest.raises(InvalidConfiguration):
        Simplex([_vertex([0.0, 0.0], 0.0), _vertex([1.0, 0.0], 1.0)])
    with pytest.raises(InvalidConfiguration):
        Simplex([])


def test_mixed_dimensions_are_rejected():
    with pytest.raises(InvalidConfiguration):
        Simplex([_vertex([0.0], 0.0), _vertex([1.0, 1.0], 1.0)])


def test_degenerate_simplex_is_accepted():
    simplex = Simplex(
        [
            _vertex([0.0, 0.0], 0.0),
            _vertex([1.0, 1.0], 1.0),
            _vertex([2.0, 2.0], 2.0),
        ]
    )
    assert len(simplex) == 3
