from __future__ import annotations

"""Seed the lookup table from randomized corners of the bounding box.

Only ``2 * n`` corners are evaluated rather than all ``2 ** n``: for each
dimension ``i`` one corner has coordinate ``i`` pinned to its lower bound and
one to its upper bound, with every other coordinate drawn independently from
its two bounds.
"""

import logging
from typing import Any, Optional, Protocol

import numpy as np

from .evaluation import Objective
from .lookup_table import LookupTable
from .signature import sign_signature, squared_magnitude

__all__ = ["RandomSource", "boundary_corners", "seed_lookup_table"]

logger = logging.getLogger("simplex_roots.sampling")


class RandomSource(Protocol):
    """Anything with numpy ``Generator.integers`` semantics."""

    def integers(self, low: int, high: int) -> Any: ...  # noqa: ANN401


def boundary_corners(bounds: np.ndarray, rng: RandomSource) -> list[np.ndarray]:
    """Return the ``2 * n`` sampled corners, ordered ``lower_0, upper_0, lower_1, ...``.

    For every corner, each free coordinate consumes one draw from ``rng``
    (``0`` picks the lower bound, ``1`` the upper), lower corner first.
    """
    n = bounds.shape[0]
    corners: list[np.ndarray] = []
    for i in range(n):
        lower = bounds[:, 0].copy()
        upper = bounds[:, 1].copy()
        for j in range(n):
            if j == i:
                continue
            lower[j] = bounds[j, int(rng.integers(0, 2))]
            upper[j] = bounds[j, int(rng.integers(0, 2))]
        corners.extend((lower, upper))
    return corners


def seed_lookup_table(
    objective: Objective,
    bounds: Any,  # noqa: ANN401 – array-like (n, 2)
    rng: Optional[RandomSource] = None,
    table: Optional[LookupTable] = None,
) -> LookupTable:
    """Evaluate ``objective`` at sampled corners and record each result.

    The first failing evaluation aborts seeding by propagating its
    :class:`~simplex_roots.errors.EvaluationError`. Without ``rng`` a fresh,
    unseeded generator is used, so repeated runs explore different corners.
    """
    bounds_arr = np.asarray(bounds, dtype=float)
    if rng is None:
        rng = np.random.default_rng()
    if table is None:
        table = LookupTable()

    for corner in boundary_corners(bounds_arr, rng):
        res = objective(corner)
        table.insert(corner, sign_signature(res), squared_magnitude(res))

    logger.info(
        "[simplex-roots] seeded %d corner(s) into %d orthant(s)",
        2 * bounds_arr.shape[0],
        len(table),
    )
    return table
