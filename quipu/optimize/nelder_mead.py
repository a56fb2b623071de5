"""Nelder-Mead iteration loop."""

from __future__ import annotations

from typing import Callable, Optional

from ..exceptions import EvaluationFault
from ..logging import get_logger
from .config import RunConfiguration
from .convergence import check_convergence
from .core import (
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    Array,
    Candidate,
    PointLike,
    Solution,
    Status,
    TransformCoefficients,
    Vertex,
    is_better,
)
from .objective import ObjectiveAdapter
from .simplex import Simplex
from .start import StartingPoint, initial_simplex
from .transforms import (
    centroid,
    contract_inside,
    contract_outside,
    expand,
    reflect,
    shrink_simplex,
)

logger = get_logger(__name__)

Callback = Callable[[int, Vertex], None]


def run(
    configuration: RunConfiguration,
    callback: Optional[Callback] = None,
    history: bool = False,
) -> Solution:
    """Minimize the configured objective with the Nelder-Mead method.

    Each iteration ranks the simplex, reflects the worst vertex through the
    centroid of the others, then expands, accepts, contracts or shrinks.
    The run stops with ``Status.OPTIMAL`` once the convergence test passes,
    with ``Status.MAX_ITERATIONS_EXCEEDED`` when ``maxiter`` iterations have
    been spent, and with ``Status.FAILED`` if the objective raises.

    Args:
        configuration: Validated run settings.
        callback: Called as ``callback(nit, best_vertex)`` after every
            iteration.
        history: Record the best point after every iteration.
    """
    objective = configuration.objective
    coeffs = configuration.coefficients
    tol = configuration.tol
    maxiter = configuration.maxiter
    hist: list[Array] = []
    nit = 0
    nfev = 0

    try:
        simplex = Simplex.from_points(objective, configuration.start.points)
        nfev += len(simplex)
        simplex.rank()
        if history:
            hist.append(simplex.best.point)

        status = Status.MAX_ITERATIONS_EXCEEDED
        message = "Maximum iterations reached."
        while nit < maxiter:
            best = simplex.best
            worst = simplex.worst
            second_worst = simplex.second_worst

            c = centroid(simplex)
            xr = reflect(c, worst.point, coeffs.reflection)
            fr = objective.evaluate(xr)
            nfev += 1
            accepted: Optional[Vertex] = None
            move = ""

            if is_better(fr, best.value):
                xe = expand(c, xr, coeffs.expansion)
                fe = objective.evaluate(xe)
                nfev += 1
                if is_better(fe, fr):
                    accepted, move = Vertex(xe, fe), "expand"
                else:
                    accepted, move = Vertex(xr, fr), "reflect"
            elif is_better(fr, second_worst.value):
                accepted, move = Vertex(xr, fr), "reflect"
            elif is_better(fr, worst.value):
                xc = contract_outside(c, xr, coeffs.contraction)
                fc = objective.evaluate(xc)
                nfev += 1
                if not is_better(fr, fc):
                    accepted, move = Vertex(xc, fc), "contract_outside"
            else:
                xc = contract_inside(c, worst.point, coeffs.contraction)
                fc = objective.evaluate(xc)
                nfev += 1
                if is_better(fc, worst.value):
                    accepted, move = Vertex(xc, fc), "contract_inside"

            if accepted is not None:
                simplex.replace_worst(accepted)
            else:
                move = "shrink"
                shrunk = []
                for x in shrink_simplex(simplex, coeffs.shrink):
                    shrunk.append(Vertex(x, objective.evaluate(x)))
                    nfev += 1
                simplex.replace_all_but_best(shrunk)

            simplex.rank()
            nit += 1
            logger.debug(
                "iteration %d: %s, best=%r, worst=%r",
                nit,
                move,
                simplex.best.value,
                simplex.worst.value,
            )
            if history:
                hist.append(simplex.best.point)
            if callback is not None:
                callback(nit, simplex.best)

            if check_convergence(simplex, tol):
                status = Status.OPTIMAL
                message = "Simplex converged within tolerance."
                break
    except EvaluationFault as fault:
        logger.error("run failed after %d iteration(s): %s", nit, fault)
        return Solution(
            status=Status.FAILED,
            candidate=None,
            nit=nit,
            nfev=nfev,
            message=str(fault),
            error=fault,
            history=hist,
        )

    best = simplex.best
    logger.info(
        "%s after %d iteration(s), %d evaluation(s): f=%r",
        status.value,
        nit,
        nfev,
        best.value,
    )
    return Solution(
        status=status,
        candidate=Candidate(arguments=best.point, value=best.value),
        nit=nit,
        nfev=nfev,
        message=message,
        history=hist,
    )


def nelder_mead(
    fun: Callable[..., float],
    x0: PointLike,
    maxiter: int = DEFAULT_MAXITER,
    tol: float = DEFAULT_TOL,
    coefficients: Optional[TransformCoefficients] = None,
    size: Optional[float] = None,
    vectorized: bool = False,
    callback: Optional[Callback] = None,
    history: bool = False,
) -> Solution:
    """Functional entry point around :func:`run`.

    Example:
        >>> res = nelder_mead(lambda x, y: (x - 1) ** 2 + (y - 2) ** 2, [0.0, 0.0])
        >>> res.status
        <Status.OPTIMAL: 'optimal'>

    Args:
        fun: Objective taking ``len(x0)`` positional floats, or a single array
            when ``vectorized`` is true.
        x0: Starting point.
        maxiter: Iteration budget.
        tol: Convergence tolerance.
        coefficients: Transform coefficients, standard ones by default.
        size: Fixed perturbation for the initial simplex.
        vectorized: Pass the point to ``fun`` as one array.
        callback: See :func:`run`.
        history: See :func:`run`.
    """
    start = StartingPoint(initial_simplex(x0, size=size))
    dim = start.dim
    if vectorized:
        objective = ObjectiveAdapter.from_vector(fun, dim)
    else:
        objective = ObjectiveAdapter(fun, dim)
    configuration = RunConfiguration(
        objective=objective,
        start=start,
        maxiter=maxiter,
        tol=tol,
        coefficients=coefficients or TransformCoefficients(),
    )
    return run(configuration, callback=callback, history=history)


__all__ = ["Callback", "nelder_mead", "run"]
