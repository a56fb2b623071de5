import dataclasses
import math

import numpy as np
import pytest

from quipu.exceptions import InvalidConfiguration
from quipu.optimize import Candidate, Solution, Status, TransformCoefficients, as_point
from quipu.optimize.core import is_better


def test_standard_coefficients():
    coeffs = TransformCoefficients()
    assert (coeffs.reflection, coeffs.expansion, coeffs.contraction, coeffs.shrink) == (
        1.0,
        2.0,
        0.5,
        0.5,
    )


@pytest.mark.parametrize(
    "kwargs",
    [
        {"reflection": 0.0},
        {"reflection": -1.0},
        {"expansion": 1.0},
        {"reflection": 2.0, "expansion": 1.5},
        {"contraction": 0.0},
        {"contraction": 1.0},
        {"shrink": 0.0},
        {"shrink": 1.5},
        {"shrink": math.nan},
    ],
)
def test_coefficient_validation(kwargs):
    with pytest.raises(InvalidConfiguration):
        TransformCoefficients(**kwargs)


@pytest.mark.parametrize("dim", [1, 2])
def test_adaptive_coefficients_match_standard_in_low_dimensions(dim):
    assert TransformCoefficients.adaptive(dim) == TransformCoefficients()


def test_adaptive_coefficients_in_higher_dimensions():
    coeffs = TransformCoefficients.adaptive(10)
    assert coeffs.expansion == pytest.approx(1.2)
    assert coeffs.contraction == pytest.approx(0.7)
    assert coeffs.shrink == pytest.approx(0.9)
    with pytest.raises(InvalidConfiguration):
        TransformCoefficients.adaptive(0)


def test_as_point_copies_and_freezes():
    source = np.array([1.0, 2.0])
    point = as_point(source)
    source[0] = 5.0
    assert point[0] == 1.0
    assert point.dtype == np.float64
    assert not point.flags.writeable
    assert as_point([[1, 2], [3, 4]]).shape == (4,)


def test_is_better_total_order():
    assert is_better(1.0, 2.0)
    assert not is_better(2.0, 2.0)
    assert is_better(1e300, math.inf)
    assert is_better(math.inf, math.nan)
    assert is_better(5.0, -math.inf)
    assert not is_better(math.nan, math.nan)
    assert not is_better(math.nan, 0.0)


def test_solution_accessors():
    candidate = Candidate(arguments=as_point([1.0, 2.0]), value=3.0)
    solution = Solution(
        status=Status.MAX_ITERATIONS_EXCEEDED,
        candidate=candidate,
        nit=7,
        nfev=20,
        message="Maximum iterations reached.",
    )
    assert solution.has_solution
    assert not solution.success
    assert solution.fun == 3.0
    assert np.array_equal(solution.x, [1.0, 2.0])
    solution.raise_for_status()
    with pytest.raises(dataclasses.FrozenInstanceError):
        solution.nit = 8


def test_failed_solution_has_no_candidate():
    solution = Solution(
        status=Status.FAILED, candidate=None, nit=0, nfev=0, message="failed"
    )
    assert not solution.has_solution
    assert solution.x is None
    assert solution.fun is None
