import math

import numpy as np
import pytest

from quipu.exceptions import InvalidConfiguration
from quipu.optimize import Start, StartingPoint, initial_simplex
from quipu.optimize.start import RELATIVE_STEP, ZERO_STEP


def test_initial_simplex_perturbs_one_coordinate_per_vertex():
    points = initial_simplex([100.0, 0.0, -4.0])
    assert len(points) == 4
    assert np.allclose(points[0], [100.0, 0.0, -4.0])
    assert np.allclose(points[1], [100.0 + RELATIVE_STEP * 100.0, 0.0, -4.0])
    assert np.allclose(points[2], [100.0, ZERO_STEP, -4.0])
    assert np.allclose(points[3], [100.0, 0.0, -4.0 + RELATIVE_STEP * 4.0])


def test_initial_simplex_with_fixed_size():
    points = initial_simplex([1.0, 2.0], size=0.5)
    assert np.allclose(np.stack(points), [[1.0, 2.0], [1.5, 2.0], [1.0, 2.5]])


def test_initial_simplex_points_are_read_only():
    for p in initial_simplex([1.0, 2.0]):
        assert not p.flags.writeable


def test_around_accepts_sequence_or_scalars():
    a = Start.around([1.0, 2.0, 3.0])
    b = Start.around(1.0, 2.0, 3.0)
    c = Start.around(np.array([1.0, 2.0, 3.0]))
    for start in (b, c):
        assert start.dim == 3
        assert all(np.array_equal(p, q) for p, q in zip(a.points, start.points))


def test_origin():
    start = Start.origin(2)
    assert np.array_equal(start.origin, [0.0, 0.0])
    assert np.allclose(start.points[1], [ZERO_STEP, 0.0])
    with pytest.raises(InvalidConfiguration):
        Start.origin(0)


def test_from_simplex_uses_points_verbatim():
    start = Start.from_simplex([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]])
    assert isinstance(start, StartingPoint)
    assert start.dim == 2
    assert np.array_equal(start.points[2], [0.0, 1.0])


@pytest.mark.parametrize(
    "points",
    [
        [[0.0, 0.0], [1.0, 0.0]],
        [[0.0, 0.0], [1.0, 0.0], [0.0, 1.0], [1.0, 1.0]],
        [[0.0, 0.0], [1.0], [0.0, 1.0]],
        [[0.0, 0.0], [1.0, math.inf], [0.0, 1.0]],
        [],
    ],
)
def test_from_simplex_rejects_malformed_input(points):
    with pytest.raises(InvalidConfiguration):
        Start.from_simplex(points)


@pytest.mark.parametrize("x0", [[], [math.nan], [1.0, math.inf]])
def test_around_rejects_empty_or_non_finite(x0):
    with pytest.raises(InvalidConfiguration):
        Start.around(x0)


@pytest.mark.parametrize("size", [0.0, math.nan, math.inf])
def test_around_rejects_bad_size(size):
    with pytest.raises(InvalidConfiguration):
        Start.around([1.0], size=size)
