from __future__ import annotations

"""Best-known evaluation per orthant.

The table maps a signature (see :mod:`simplex_roots.signature`) to the
lowest-magnitude :class:`FunctionCall` observed for that orthant during one
solve. Entries are only ever replaced, never removed.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional

import numpy as np

from .errors import LookupTableError
from .signature import signature_distance

__all__ = ["FunctionCall", "LookupTable"]


@dataclass(frozen=True, eq=False)
class FunctionCall:
    """One evaluation: squared magnitude of ``f(point)`` and the point itself."""

    magnitude: float
    point: np.ndarray


class LookupTable:
    def __init__(self) -> None:
        self._entries: Dict[int, FunctionCall] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, signature: object) -> bool:
        return signature in self._entries

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    def __repr__(self) -> str:
        body = ", ".join(f"{sig:#b}: {call.magnitude:.3g}" for sig, call in self._entries.items())
        return f"LookupTable({{{body}}})"

    def items(self) -> Iterator[tuple[int, FunctionCall]]:
        return iter(self._entries.items())

    def get(self, signature: int) -> Optional[FunctionCall]:
        return self._entries.get(signature)

    def insert(self, point: Any, signature: int, magnitude: float) -> "LookupTable":  # noqa: ANN401
        """Record ``point`` for ``signature`` unless a strictly better entry exists.

        Ties replace the stored entry, so the most recent of equally good
        points wins. Returns ``self``.
        """
        current = self._entries.get(signature)
        if current is None or current.magnitude >= magnitude:
            vec = np.array(point, dtype=float)
            vec.setflags(write=False)
            self._entries[signature] = FunctionCall(float(magnitude), vec)
        return self

    def nearest(self, signature: int) -> FunctionCall:
        """Return the entry whose signature is closest (Hamming) to ``signature``.

        Ties go to the entry met first, i.e. the signature inserted earliest.
        """
        best_sig: Optional[int] = None
        best_dist = -1
        for sig in self._entries:
            dist = signature_distance(sig, signature)
            if best_sig is None or dist < best_dist:
                best_sig, best_dist = sig, dist
        if best_sig is None:
            raise LookupTableError(
                f"lookup table should be pre-populated with at least one value (query={signature:#b})"
            )
        return self._entries[best_sig]

    def best(self) -> Optional[FunctionCall]:
        """Lowest-magnitude entry across all orthants, or ``None`` when empty."""
        if not self._entries:
            return None
        return min(self._entries.values(), key=lambda call: call.magnitude)
