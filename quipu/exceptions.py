"""Exceptions raised within the `quipu` library."""

from __future__ import annotations

from typing import Optional

import numpy as np


class QuipuError(Exception):
    """Base class for all errors raised by quipu."""


class InvalidConfiguration(QuipuError, ValueError):
    """Raised when a run is configured with unusable settings.

    Covers non-positive tolerances or iteration budgets, out-of-range
    transform coefficients and malformed starting simplices. Always raised
    before the objective is evaluated.
    """


class ArityMismatch(InvalidConfiguration):
    """Raised when the objective's arity does not match the point length."""

    def __init__(self, expected: str, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"objective accepts {expected} argument(s) but the starting point "
            f"has {actual} coordinate(s)"
        )


class EvaluationFault(QuipuError, RuntimeError):  # noqa: N818
    """Raised when the objective function itself fails.

    The original exception is available as ``__cause__`` and the point being
    evaluated as `point`.
    """

    def __init__(self, point: Optional[np.ndarray], message: str) -> None:
        self.point = point
        super().__init__(message)


__all__ = [
    "ArityMismatch",
    "EvaluationFault",
    "InvalidConfiguration",
    "QuipuError",
]
