"""Command‑line interface wrapper around :pyfunc:`simplex_roots.solve`."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

import numpy as np

from . import constants as C
from .config import SolverConfig
from .errors import ExpressionError
from .expressions import build_vector_function
from .solver import RootResult, solve

__all__ = ["main"]


def _parse_cli(argv: list[str] | None = None) -> argparse.Namespace:  # noqa: D401 – imperative mood
    parser = argparse.ArgumentParser(
        description="Find a root of a system of equations inside a bounding box"
    )
    parser.add_argument(
        "-e",
        "--equation",
        action="append",
        dest="equations",
        default=[],
        help="Equation 'lhs = rhs' or expression assumed equal to 0 (repeat once per variable)",
    )
    parser.add_argument(
        "-v",
        "--variables",
        nargs="+",
        default=[],
        help="Variable names in coordinate order",
    )
    parser.add_argument(
        "--bounds",
        nargs=2,
        type=float,
        action="append",
        metavar=("LOW", "HIGH"),
        default=[],
        help="Lower and upper bound for one variable (repeat in variable order)",
    )
    parser.add_argument("--initial", nargs="+", type=float, help="Starting point, one value per variable")
    parser.add_argument("--demo", choices=sorted(C.DEMO_SYSTEMS), help="Solve a built-in example system")
    parser.add_argument("--max-iters", type=int, help=f"Step budget (default {C.DEFAULT_MAX_ITERS})")
    parser.add_argument("--tol", type=float, help=f"Tolerance on |f(x)|^2 (default {C.DEFAULT_TOL:g})")
    parser.add_argument("--seed", type=int, help="Seed for corner sampling (random when omitted)")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument(
        "--log-level",
        choices=["WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging level for simplex_roots",
    )
    return parser.parse_args(argv)


def _resolve_system(ns: argparse.Namespace) -> dict[str, Any]:
    if ns.demo:
        if ns.equations or ns.variables or ns.bounds or ns.initial:
            sys.exit("Error: --demo cannot be combined with -e/-v/--bounds/--initial.")
        return C.DEMO_SYSTEMS[ns.demo]

    if not ns.equations or not ns.variables:
        sys.exit("Error: -e/--equation and -v/--variables are required unless using --demo.")
    n = len(ns.variables)
    if len(ns.bounds) != n:
        sys.exit(f"Error: expected {n} --bounds pair(s), got {len(ns.bounds)}.")
    initial = ns.initial
    if initial is None:
        initial = [(lo + hi) / 2.0 for lo, hi in ns.bounds]
    elif len(initial) != n:
        sys.exit(f"Error: expected {n} --initial value(s), got {len(initial)}.")
    return {
        "equations": ns.equations,
        "variables": ns.variables,
        "bounds": ns.bounds,
        "initial": initial,
    }


def _format_result(result: RootResult, variables: list[str]) -> str:
    if not result.converged or result.root is None:
        return f"no root found: {result.error}"
    return ", ".join(f"{name} = {value:.12g}" for name, value in zip(variables, result.root))


def main(argv: list[str] | None = None) -> int:  # noqa: D401 – imperative mood
    ns = _parse_cli(argv)

    level = getattr(logging, ns.log_level)
    pkg_logger = logging.getLogger("simplex_roots")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(logging.BASIC_FORMAT))
    handler.setLevel(level)
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False
    pkg_logger.setLevel(level)

    system = _resolve_system(ns)
    try:
        func = build_vector_function(system["equations"], system["variables"])
        config = SolverConfig().with_overrides(max_iters=ns.max_iters, tol=ns.tol)
    except (ExpressionError, ValueError) as exc:
        sys.exit(f"Error: {exc}")

    rng = np.random.default_rng(ns.seed) if ns.seed is not None else None
    result = solve(func, system["initial"], system["bounds"], config=config, rng=rng)

    if ns.json:
        payload = {"variables": list(system["variables"]), **result.to_dict()}
        print(json.dumps(payload, ensure_ascii=False, separators=(",", ":")))
    else:
        print(_format_result(result, list(system["variables"])))
    return 0 if result.converged else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
