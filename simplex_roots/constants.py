"""Package‑wide constants and demo systems."""

from typing import Any

DEFAULT_MAX_ITERS = 10000
DEFAULT_TOL = 1e-16  # on the squared magnitude of f(x)

# Each demo is a ready-made CLI invocation: equations equal to zero, the
# variable order, per-variable bounds and the starting point.
DEMO_SYSTEMS: dict[str, dict[str, Any]] = {
    "quadratic": {
        "equations": ["x**2 - 4"],
        "variables": ["x"],
        "bounds": [[-1.5, 10.0]],
        "initial": [1.0],
    },
    "independent": {
        "equations": ["x**2 - x - 6", "y**3 - 2*y**2 - 19*y + 20"],
        "variables": ["x", "y"],
        "bounds": [[-1.0, 10.0], [-3.5, 3.5]],
        "initial": [1.0, 1.0],
    },
    "coupled": {
        "equations": ["x**2*y - 12", "y - x - 1"],
        "variables": ["x", "y"],
        "bounds": [[0.0, 12.0], [0.0, 12.0]],
        "initial": [3.0, 4.0],
    },
}

__all__ = [
    "DEFAULT_MAX_ITERS",
    "DEFAULT_TOL",
    "DEMO_SYSTEMS",
]
