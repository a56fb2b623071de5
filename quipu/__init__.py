"""Quipu - a Nelder-Mead simplex minimizer for functions of N real arguments."""

__version__ = "0.1.0"

from .exceptions import ArityMismatch, EvaluationFault, InvalidConfiguration, QuipuError
from .logging import configure_logging, get_logger, set_log_level
from .optimize import (
    Candidate,
    NelderMead,
    ObjectiveAdapter,
    RunConfiguration,
    Solution,
    Start,
    StartingPoint,
    Status,
    TransformCoefficients,
    nelder_mead,
    run,
)

__all__ = [
    "__version__",
    # Errors
    "ArityMismatch",
    "EvaluationFault",
    "InvalidConfiguration",
    "QuipuError",
    # Logging
    "configure_logging",
    "get_logger",
    "set_log_level",
    # Optimization
    "Candidate",
    "NelderMead",
    "ObjectiveAdapter",
    "RunConfiguration",
    "Solution",
    "Start",
    "StartingPoint",
    "Status",
    "TransformCoefficients",
    "nelder_mead",
    "run",
]
