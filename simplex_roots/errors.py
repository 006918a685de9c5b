"""Exception hierarchy for the root finder."""
from __future__ import annotations

from typing import Any, Optional

__all__ = [
    "RootFindingError",
    "BoundsValidationError",
    "EvaluationError",
    "LookupTableError",
    "NonConvergenceError",
    "ExpressionError",
]


class RootFindingError(Exception):
    """Base class for every failure surfaced by :mod:`simplex_roots`."""


class BoundsValidationError(RootFindingError, ValueError):
    """Raised when the initial point and bounds shapes disagree."""


class EvaluationError(RootFindingError):
    """The caller-supplied function could not be evaluated at ``point``."""

    def __init__(self, message: str, point: Any = None) -> None:  # noqa: ANN401 – array-like
        super().__init__(message)
        self.point = point


class LookupTableError(RootFindingError, RuntimeError):
    """The lookup table was empty when a nearest-entry search ran."""


class NonConvergenceError(RootFindingError):
    """The iteration budget ran out before the tolerance was reached."""

    def __init__(
        self,
        message: str,
        *,
        magnitude: float,
        iterations: int,
        point: Any = None,  # noqa: ANN401 – array-like
        best: Optional[Any] = None,  # noqa: ANN401 – FunctionCall
    ) -> None:
        super().__init__(message)
        self.magnitude = magnitude
        self.iterations = iterations
        self.point = point
        self.best = best


class ExpressionError(RootFindingError, ValueError):
    """An equation system could not be turned into a vector function."""
