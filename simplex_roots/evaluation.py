"""Adapter around the caller-supplied vector function."""
from __future__ import annotations

from typing import Any, Callable

import numpy as np

from .errors import EvaluationError

__all__ = ["VectorFunction", "Objective"]

VectorFunction = Callable[[np.ndarray], Any]


class Objective:
    """Call ``func`` on float vectors and normalise the result.

    Any exception raised by ``func`` is re-raised as :class:`EvaluationError`
    with the original chained, and so is an output that is not a finite real
    vector of the expected dimension. ``calls`` counts every attempted evaluation.
    """

    def __init__(self, func: VectorFunction, dim: int) -> None:
        self.func = func
        self.dim = dim
        self.calls = 0

    def __call__(self, point: Any) -> np.ndarray:  # noqa: ANN401 – array-like
        x = np.array(point, dtype=float)
        self.calls += 1
        try:
            raw = self.func(x)
        except EvaluationError:
            raise
        except Exception as exc:
            raise EvaluationError(f"function evaluation failed at {x.tolist()}: {exc}", point=x) from exc

        try:
            arr = np.asarray(raw)
            if np.iscomplexobj(arr):
                raise TypeError("complex output")
            out = arr.astype(float).reshape(-1)
        except (TypeError, ValueError) as exc:
            raise EvaluationError(
                f"function returned a non-numeric value at {x.tolist()}: {raw!r}", point=x
            ) from exc
        if out.shape != (self.dim,):
            raise EvaluationError(
                f"function returned {out.size} components at {x.tolist()}, expected {self.dim}",
                point=x,
            )
        if not np.all(np.isfinite(out)):
            raise EvaluationError(f"function returned a non-finite value at {x.tolist()}: {out.tolist()}", point=x)
        return out
