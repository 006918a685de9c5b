"""Solver configuration knobs.

Defaults allow 10 000 refinement steps and a tolerance of ``1e-16`` on
the squared magnitude. Tests and callers override them by constructing a
new :class:`SolverConfig` or via :meth:`SolverConfig.with_overrides`.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .constants import DEFAULT_MAX_ITERS, DEFAULT_TOL

__all__ = ["SolverConfig"]


@dataclass(frozen=True)
class SolverConfig:
    """Iteration budget and convergence tolerance for one solve."""

    max_iters: int = DEFAULT_MAX_ITERS
    tol: float = DEFAULT_TOL

    def __post_init__(self) -> None:
        if int(self.max_iters) != self.max_iters or self.max_iters < 0:
            raise ValueError(f"max_iters must be a non-negative integer, got {self.max_iters!r}")
        if not self.tol >= 0:
            raise ValueError(f"tol must be a non-negative number, got {self.tol!r}")
        object.__setattr__(self, "max_iters", int(self.max_iters))
        object.__setattr__(self, "tol", float(self.tol))

    def with_overrides(self, **overrides: Any) -> "SolverConfig":  # noqa: ANN401
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self
