from __future__ import annotations

import math

import numpy as np
import pytest

from simplex_roots.signature import (
    complement_signature,
    sign_signature,
    signature_distance,
    squared_magnitude,
)


@pytest.mark.parametrize(
    "vec",
    [
        [0.0],
        [1.0],
        [-1.0, 2.0, 0.0],
        [3.0, 3.0, 3.0, 3.0],
        [-1e-300, 1e-300, -0.0, 5.0, -7.0],
        [math.nan, 1.0],
    ],
)
def test_signature_and_complement_partition_bits(vec: list[float]) -> None:
    sig = sign_signature(vec)
    comp = complement_signature(vec)
    full = (1 << len(vec)) - 1
    assert sig & comp == 0
    assert sig | comp == full


def test_sign_signature_sets_bits_for_strictly_positive() -> None:
    assert sign_signature([1.0, -1.0, 2.0]) == 0b101
    assert sign_signature([0.0, 0.0]) == 0
    assert complement_signature([0.0, 4.0]) == 0b01


def test_squared_magnitude_sums_squares() -> None:
    assert squared_magnitude([3.0, -4.0]) == pytest.approx(25.0)
    assert squared_magnitude(np.zeros(3)) == 0.0
    assert squared_magnitude([-2.0]) == squared_magnitude([2.0]) == pytest.approx(4.0)


def test_signature_distance_counts_differing_bits() -> None:
    assert signature_distance(0b1010, 0b1010) == 0
    assert signature_distance(0b1010, 0b0101) == 4
    assert signature_distance(0b0001, 0b0011) == 1
