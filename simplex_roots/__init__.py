"""Derivative-free root finding for vector functions over a bounding box.

Importing this package gives you the entry points and the building blocks
without having to know the internal module layout.

Typical usage
-------------
>>> from simplex_roots import find_root
>>> find_root(lambda x: x**2 - 4, [1.0], [[-1.5, 10.0]])
array([2.])
"""
from importlib.metadata import version as _version  # type: ignore

from .config import SolverConfig
from .constants import DEFAULT_MAX_ITERS, DEFAULT_TOL
from .errors import (
    BoundsValidationError,
    EvaluationError,
    ExpressionError,
    LookupTableError,
    NonConvergenceError,
    RootFindingError,
)
from .evaluation import Objective
from .lookup_table import FunctionCall, LookupTable
from .sampling import boundary_corners, seed_lookup_table
from .signature import (
    complement_signature,
    sign_signature,
    signature_distance,
    squared_magnitude,
)
from .solver import RootResult, StepResult, find_root, simplex_step, solve

__all__ = [
    "find_root",
    "solve",
    "simplex_step",
    "RootResult",
    "StepResult",
    "SolverConfig",
    "DEFAULT_MAX_ITERS",
    "DEFAULT_TOL",
    "Objective",
    "FunctionCall",
    "LookupTable",
    "boundary_corners",
    "seed_lookup_table",
    "squared_magnitude",
    "sign_signature",
    "complement_signature",
    "signature_distance",
    "RootFindingError",
    "BoundsValidationError",
    "EvaluationError",
    "LookupTableError",
    "NonConvergenceError",
    "ExpressionError",
    "__version__",
]

try:
    __version__ = _version("simplex_roots")
except Exception:  # pragma: no cover – package not installed yet
    __version__ = "0.0.0"
