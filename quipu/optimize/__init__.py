"""Derivative-free minimization with the Nelder-Mead simplex method.

Example
-------
>>> from quipu.optimize import NelderMead, Start, Status
>>> def bowl(x, y):
...     return (x - 1) ** 2 + (y - 2) ** 2 + 42
>>> res = (
...     NelderMead.objective(bowl)
...     .with_maximum_iterations(100)
...     .with_tolerance(0.001)
...     .start_from(Start.around(100.0, 100.0))
...     .minimize()
... )
>>> res.status is Status.OPTIMAL
True
"""

from .builder import NelderMead
from .config import RunConfiguration
from .convergence import ConvergenceTest, check_convergence, value_spread, vertex_spread
from .core import (
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    Candidate,
    Solution,
    Status,
    TransformCoefficients,
    Vertex,
    as_point,
    rank_key,
)
from .nelder_mead import nelder_mead, run
from .objective import ObjectiveAdapter
from .simplex import Simplex
from .start import Start, StartingPoint, initial_simplex
from .transforms import (
    centroid,
    contract_inside,
    contract_outside,
    expand,
    reflect,
    shrink,
    shrink_simplex,
)

__all__ = [
    "DEFAULT_MAXITER",
    "DEFAULT_TOL",
    "Candidate",
    "ConvergenceTest",
    "NelderMead",
    "ObjectiveAdapter",
    "RunConfiguration",
    "Simplex",
    "Solution",
    "Start",
    "StartingPoint",
    "Status",
    "TransformCoefficients",
    "Vertex",
    "as_point",
    "centroid",
    "check_convergence",
    "contract_inside",
    "contract_outside",
    "expand",
    "initial_simplex",
    "nelder_mead",
    "rank_key",
    "reflect",
    "run",
    "shrink",
    "shrink_simplex",
    "value_spread",
    "vertex_spread",
]
