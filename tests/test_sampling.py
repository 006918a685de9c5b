from __future__ import annotations

from typing import Any

import numpy as np
import pytest

from simplex_roots.errors import EvaluationError
from simplex_roots.evaluation import Objective
from simplex_roots.sampling import boundary_corners, seed_lookup_table


class ScriptedRng:
    """Replays a fixed sequence of 0/1 draws."""

    def __init__(self, draws: list[int]) -> None:
        self.draws = list(draws)
        self.calls: list[tuple[int, int]] = []

    def integers(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return self.draws.pop(0)


BOUNDS = np.array([[-1.0, 1.0], [-2.0, 2.0], [-3.0, 3.0]])


def test_boundary_corners_pins_each_dimension() -> None:
    # per dimension i: for every j != i, one draw for lower then one for upper
    rng = ScriptedRng([0, 1, 1, 1, 0, 0, 1, 0, 0, 1, 1, 0])
    corners = boundary_corners(BOUNDS, rng)
    assert [c.tolist() for c in corners] == [
        [-1.0, -2.0, 3.0],
        [1.0, 2.0, 3.0],
        [-1.0, -2.0, 3.0],
        [-1.0, 2.0, -3.0],
        [-1.0, 2.0, -3.0],
        [1.0, -2.0, 3.0],
    ]
    assert rng.draws == []
    assert all(call == (0, 2) for call in rng.calls)


def test_boundary_corners_one_dimension_needs_no_randomness() -> None:
    rng = ScriptedRng([])
    corners = boundary_corners(np.array([[-1.5, 10.0]]), rng)
    assert [c.tolist() for c in corners] == [[-1.5], [10.0]]


def test_seed_lookup_table_records_each_orthant() -> None:
    def identity(x: np.ndarray) -> np.ndarray:
        return x

    rng = ScriptedRng([0, 1, 1, 1, 0, 0, 1, 0, 0, 1, 1, 0])
    objective = Objective(identity, 3)
    table = seed_lookup_table(objective, BOUNDS, rng=rng)

    assert objective.calls == 6
    assert sorted(table) == [0b010, 0b100, 0b101, 0b111]
    assert table.get(0b111).point.tolist() == [1.0, 2.0, 3.0]
    assert table.get(0b111).magnitude == pytest.approx(14.0)
    assert table.get(0b100).point.tolist() == [-1.0, -2.0, 3.0]


def test_seed_lookup_table_with_default_rng_evaluates_2n_corners() -> None:
    seen: list[list[float]] = []

    def record(x: np.ndarray) -> np.ndarray:
        seen.append(x.tolist())
        return x

    seed_lookup_table(Objective(record, 3), BOUNDS)
    assert len(seen) == 6
    for point in seen:
        for j, value in enumerate(point):
            assert value in BOUNDS[j]


def test_seed_lookup_table_aborts_on_evaluation_failure() -> None:
    calls: list[Any] = []

    def fails_on_upper(x: np.ndarray) -> np.ndarray:
        calls.append(x)
        if x[0] > 0:
            raise ZeroDivisionError("undefined")
        return x

    with pytest.raises(EvaluationError) as excinfo:
        seed_lookup_table(Objective(fails_on_upper, 1), [[-1.0, 1.0]])
    assert len(calls) == 2
    assert isinstance(excinfo.value.__cause__, ZeroDivisionError)
    assert excinfo.value.point.tolist() == [1.0]
