from __future__ import annotations

"""Orthant signatures and the squared-magnitude score.

A signature packs the sign pattern of a function output into an ``int``: bit
``i`` is set when component ``i`` is strictly positive. The complementary
signature sets exactly the remaining bits, so the two always partition the
``n`` low bits.
"""

from typing import Any

import numpy as np

__all__ = [
    "squared_magnitude",
    "sign_signature",
    "complement_signature",
    "signature_distance",
]


def squared_magnitude(vec: Any) -> float:  # noqa: ANN401 – array-like
    """Return the sum of squares of ``vec``'s components."""
    arr = np.asarray(vec, dtype=float)
    return float(np.dot(arr, arr))


def sign_signature(vec: Any) -> int:  # noqa: ANN401 – array-like
    result = 0
    for i, value in enumerate(np.asarray(vec, dtype=float)):
        if value > 0:
            result |= 1 << i
    return result


def complement_signature(vec: Any) -> int:  # noqa: ANN401 – array-like
    # ``not value > 0`` rather than ``value <= 0`` so NaN lands here too and
    # the partition with ``sign_signature`` holds.
    result = 0
    for i, value in enumerate(np.asarray(vec, dtype=float)):
        if not value > 0:
            result |= 1 << i
    return result


def signature_distance(a: int, b: int) -> int:
    """Hamming distance between two signatures."""
    return bin(a ^ b).count("1")
