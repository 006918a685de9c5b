from __future__ import annotations

import numpy as np
import pytest

from simplex_roots.errors import EvaluationError
from simplex_roots.evaluation import Objective


def test_scalar_output_accepted_for_one_dimension() -> None:
    objective = Objective(lambda x: float(x[0]) - 1.0, 1)
    assert objective([3.0]).tolist() == [2.0]
    assert objective.calls == 1


def test_passes_float_copy_to_function() -> None:
    seen: list[np.ndarray] = []

    def record(x: np.ndarray) -> np.ndarray:
        seen.append(x)
        return x

    point = [1, 2]
    Objective(record, 2)(point)
    assert seen[0].dtype == float
    assert seen[0].tolist() == [1.0, 2.0]


def test_complex_output_rejected() -> None:
    with pytest.raises(EvaluationError, match="non-numeric"):
        Objective(lambda x: np.array([1 + 2j]), 1)([0.0])


def test_evaluation_error_from_function_is_not_rewrapped() -> None:
    original = EvaluationError("stop requested", point=[9.0])

    def stop(x: np.ndarray) -> np.ndarray:
        raise original

    with pytest.raises(EvaluationError) as excinfo:
        Objective(stop, 1)([0.0])
    assert excinfo.value is original


def test_failed_calls_are_counted() -> None:
    objective = Objective(lambda x: 1 / 0, 1)
    for _ in range(2):
        with pytest.raises(EvaluationError):
            objective([0.0])
    assert objective.calls == 2
