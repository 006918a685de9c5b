"""Build vector functions from SymPy equation strings."""
from __future__ import annotations

from typing import Any, Callable, Sequence

import numpy as np

from .errors import EvaluationError, ExpressionError

__all__ = ["parse_equation", "build_vector_function"]


def parse_equation(text: str, symbols: dict[str, Any]) -> Any:  # noqa: ANN401 – sympy expr
    """Return ``lhs - rhs`` for ``"lhs = rhs"`` or the expression itself otherwise."""
    from sympy.parsing.sympy_parser import (
        implicit_multiplication_application,
        parse_expr,
        standard_transformations,
    )

    trans = (*standard_transformations, implicit_multiplication_application)
    try:
        if "=" in text:
            lhs, rhs = text.split("=", 1)
            return parse_expr(lhs, local_dict=symbols, transformations=trans) - parse_expr(
                rhs, local_dict=symbols, transformations=trans
            )
        return parse_expr(text, local_dict=symbols, transformations=trans)
    except Exception as exc:
        raise ExpressionError(f"could not parse equation '{text}': {exc}") from exc


def build_vector_function(
    equations: Sequence[str], variables: Sequence[str]
) -> Callable[[np.ndarray], np.ndarray]:
    """Compile ``equations`` (each read as ``expr = 0``) into ``x -> f(x)``.

    ``variables`` fixes the coordinate order. Points where any component is
    complex or non-finite raise :class:`EvaluationError`, e.g. ``sqrt(x)``
    for negative ``x``.
    """
    import sympy as sp

    if not variables:
        raise ExpressionError("at least one variable is required")
    if len(equations) != len(variables):
        raise ExpressionError(
            f"need as many equations as variables, got {len(equations)} and {len(variables)}"
        )
    if len(set(variables)) != len(variables):
        raise ExpressionError(f"duplicate variable names: {list(variables)}")

    symbols = {name: sp.Symbol(name) for name in variables}
    exprs = [parse_equation(eq, symbols) for eq in equations]
    unknown = set().union(*(e.free_symbols for e in exprs)) - set(symbols.values())
    if unknown:
        names = ", ".join(sorted(str(s) for s in unknown))
        raise ExpressionError(f"equations reference undeclared variables: {names}")

    compiled = sp.lambdify([symbols[name] for name in variables], exprs, modules="numpy")

    def _func(x: np.ndarray) -> np.ndarray:
        with np.errstate(all="ignore"):
            raw = compiled(*x)
        out = np.asarray(raw)
        if np.iscomplexobj(out):
            if np.any(out.imag != 0):
                raise EvaluationError(f"complex value at {list(x)}", point=x)
            out = out.real
        out = out.astype(float)
        if not np.all(np.isfinite(out)):
            raise EvaluationError(f"non-finite value at {list(x)}", point=x)
        return out

    return _func
