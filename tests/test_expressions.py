from __future__ import annotations

import numpy as np
import pytest

from simplex_roots import find_root
from simplex_roots.errors import EvaluationError, ExpressionError
from simplex_roots.expressions import build_vector_function


def test_build_vector_function_evaluates_in_variable_order() -> None:
    func = build_vector_function(["x**2*y - 12", "y = x + 1"], ["x", "y"])
    out = func(np.array([2.0, 3.0]))
    assert out.tolist() == [0.0, 0.0]
    assert func(np.array([1.0, 1.0])).tolist() == [-11.0, -1.0]


def test_constant_equation_still_yields_vector() -> None:
    func = build_vector_function(["x - 1", "2"], ["x", "y"])
    assert func(np.array([1.0, 5.0])).tolist() == [0.0, 2.0]


def test_implicit_multiplication_is_accepted() -> None:
    func = build_vector_function(["2x - 4"], ["x"])
    assert func(np.array([2.0])).tolist() == [0.0]


def test_outside_real_domain_raises_evaluation_error() -> None:
    func = build_vector_function(["sqrt(x) - 1"], ["x"])
    with pytest.raises(EvaluationError):
        func(np.array([-4.0]))
    with pytest.raises(EvaluationError):
        build_vector_function(["1/x"], ["x"])(np.array([0.0]))


@pytest.mark.parametrize(
    "equations, variables",
    [
        (["x - 1"], ["x", "y"]),
        (["x - 1", "y"], ["x", "x"]),
        (["x + z"], ["x"]),
        (["x +* 1"], ["x"]),
        ([], []),
    ],
)
def test_bad_systems_raise_expression_error(equations: list[str], variables: list[str]) -> None:
    with pytest.raises(ExpressionError):
        build_vector_function(equations, variables)


def test_expression_system_solves_end_to_end() -> None:
    func = build_vector_function(["x**2 - 4"], ["x"])
    root = find_root(func, [1.0], [[-5.0, 1.5]])
    assert (root[0] + 2.0) ** 2 <= 1e-9
