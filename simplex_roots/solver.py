from __future__ import annotations

"""Orthant-bisection root finder for vector-valued functions.

The search keeps, for every orthant its outputs have visited, the point with
the smallest ``|f(x)|**2`` (see :class:`~simplex_roots.lookup_table.LookupTable`).
Each step moves halfway from the current point towards the best point whose
output lies in the opposite orthant, which behaves like bisection once points
on both sides of the root are known.

Typical usage
-------------
>>> import numpy as np
>>> from simplex_roots import find_root
>>> find_root(lambda x: x**2 - 4, [1.0], [[-1.5, 10.0]])
array([2.])
"""

import logging
from dataclasses import dataclass, field
from typing import Any, NamedTuple, Optional

import numpy as np

from .config import SolverConfig
from .constants import DEFAULT_TOL
from .errors import BoundsValidationError, NonConvergenceError, RootFindingError
from .evaluation import Objective, VectorFunction
from .lookup_table import LookupTable
from .sampling import RandomSource, seed_lookup_table
from .signature import complement_signature, sign_signature, squared_magnitude

__all__ = ["StepResult", "RootResult", "simplex_step", "solve", "find_root"]

logger = logging.getLogger("simplex_roots.solver")


class StepResult(NamedTuple):
    magnitude: float
    point: np.ndarray
    table: LookupTable


@dataclass
class RootResult:
    """Outcome of :func:`solve`.

    ``root`` is the converged point, or the last iterate when the search
    failed after seeding (``None`` when it failed earlier). ``error`` holds
    the :class:`~simplex_roots.errors.RootFindingError` that ended an
    unsuccessful run.
    """

    root: Optional[np.ndarray]
    converged: bool
    magnitude: float = float("inf")
    iterations: int = 0
    evaluations: int = 0
    error: Optional[RootFindingError] = field(default=None, repr=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "root": None if self.root is None else [float(v) for v in self.root],
            "converged": self.converged,
            "magnitude": self.magnitude,
            "iterations": self.iterations,
            "evaluations": self.evaluations,
            "error": None if self.error is None else str(self.error),
        }


def simplex_step(
    objective: Objective,
    x: np.ndarray,
    table: LookupTable,
    tol: float = DEFAULT_TOL,
) -> StepResult:
    """Evaluate at ``x``, record it, and propose the next point.

    When ``|f(x)|**2 <= tol`` the point is returned unchanged. Otherwise the
    partner is the table entry for the complementary signature or, if that
    orthant was never seen, the entry closest to it by Hamming distance. The
    proposal is the midpoint of ``x`` and the partner's point.
    """
    res = objective(x)
    sign = sign_signature(res)
    magnitude = squared_magnitude(res)
    table.insert(x, sign, magnitude)

    if magnitude <= tol:
        return StepResult(magnitude, x, table)

    opposite = complement_signature(res)
    partner = table.get(opposite)
    if partner is None:
        partner = table.nearest(opposite)

    next_point = (x + partner.point) / 2.0
    return StepResult(magnitude, next_point, table)


def _validate(initial_point: Any, bounds: Any) -> tuple[np.ndarray, np.ndarray]:  # noqa: ANN401
    try:
        x0 = np.array(initial_point, dtype=float)
        b = np.array(bounds, dtype=float)
    except (TypeError, ValueError) as exc:
        raise BoundsValidationError(f"initial point and bounds must be numeric arrays: {exc}") from exc

    if x0.ndim == 0:
        x0 = x0.reshape(1)
    if x0.ndim != 1 or x0.size == 0:
        raise BoundsValidationError(f"initial point must be a non-empty vector, got shape {x0.shape}")

    if b.ndim != 2:
        raise BoundsValidationError(f"bounds must be a 2-D table of (lower, upper) rows, got shape {b.shape}")
    rows, cols = b.shape
    if rows != x0.size:
        raise BoundsValidationError(
            f"number of rows in bounds ({rows}) not equal to initial condition length ({x0.size})"
        )
    if cols != 2:
        raise BoundsValidationError(
            f"number of columns in bounds ({cols}) not equal to 2, corresponding to the bounds"
        )
    return x0, b


def _search(
    f: VectorFunction,
    initial_point: Any,  # noqa: ANN401
    bounds: Any,  # noqa: ANN401
    config: SolverConfig,
    rng: Optional[RandomSource],
    result: RootResult,
) -> np.ndarray:
    """Run the full search, keeping ``result`` up to date as it goes."""
    x0, b = _validate(initial_point, bounds)
    objective = Objective(f, x0.size)
    try:
        magnitude = squared_magnitude(objective(x0))
        result.magnitude = magnitude

        table = seed_lookup_table(objective, b, rng=rng)

        current = x0
        iterations = 0
        while iterations < config.max_iters and magnitude > config.tol:
            magnitude, current, table = simplex_step(objective, current, table, config.tol)
            iterations += 1
            result.root, result.magnitude, result.iterations = current, magnitude, iterations
            logger.debug(
                "[simplex-roots] step %d: |f|^2=%.6g next=%s", iterations, magnitude, current.tolist()
            )
    finally:
        result.evaluations = objective.calls

    if magnitude > config.tol:
        raise NonConvergenceError(
            "minimum tolerance not reached within number of iterations "
            f"({iterations} steps, |f|^2={magnitude:.6g} > {config.tol:g})",
            magnitude=magnitude,
            iterations=iterations,
            point=current,
            best=table.best(),
        )

    logger.info(
        "[simplex-roots] converged after %d step(s), %d evaluation(s): %s",
        iterations,
        objective.calls,
        current.tolist(),
    )
    return current


def solve(
    f: VectorFunction,
    initial_point: Any,  # noqa: ANN401 – array-like
    bounds: Any,  # noqa: ANN401 – array-like (n, 2)
    *,
    config: Optional[SolverConfig] = None,
    rng: Optional[RandomSource] = None,
) -> RootResult:
    """Search for a root of ``f`` and report the outcome without raising.

    Failures of the :class:`~simplex_roots.errors.RootFindingError` family are
    captured in :attr:`RootResult.error`; anything else propagates.
    """
    config = config or SolverConfig()
    result = RootResult(root=None, converged=False)
    try:
        result.root = _search(f, initial_point, bounds, config, rng, result)
    except RootFindingError as exc:
        logger.info("[simplex-roots] search failed: %s", exc)
        result.error = exc
        return result
    result.converged = True
    return result


def find_root(
    f: VectorFunction,
    initial_point: Any,  # noqa: ANN401 – array-like
    bounds: Any,  # noqa: ANN401 – array-like (n, 2)
    *,
    config: Optional[SolverConfig] = None,
    rng: Optional[RandomSource] = None,
) -> np.ndarray:
    """Return a point ``x`` with ``|f(x)|**2 <= config.tol``.

    Parameters
    ----------
    f:
        Callable mapping an ``n``-vector to an ``n``-vector. Raising signals
        that ``f`` is undefined at the given point and aborts the search.
    initial_point:
        Starting point of dimension ``n``.
    bounds:
        ``(n, 2)`` table of ``(lower, upper)`` per coordinate; its corners
        seed the search.
    config:
        Iteration budget and tolerance, defaults to :class:`SolverConfig`.
    rng:
        Random source for corner sampling; a fresh unseeded numpy generator
        when omitted.

    Raises
    ------
    BoundsValidationError
        Shapes of ``initial_point`` and ``bounds`` disagree.
    EvaluationError
        ``f`` failed at some point visited by the search.
    NonConvergenceError
        The iteration budget was exhausted.
    """
    result = RootResult(root=None, converged=False)
    return _search(f, initial_point, bounds, config or SolverConfig(), rng, result)
