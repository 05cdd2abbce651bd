"""Largest sum of a contiguous run of values."""

from __future__ import annotations

from itertools import accumulate
from typing import Sequence


def _require_values(values: Sequence[float]) -> None:
    if not values:
        raise ValueError("at least one value is required")


def max_subarray_windowed(values: Sequence[float]) -> float:
    """Score shifted windows and keep the best, starting from the first value.

    For each shift ``i`` from 1 to ``len(values)`` the score is the sum of
    ``values[i:]`` plus the pairwise differences ``values[j] - values[j - i]``.
    """
    _require_values(values)
    best = values[0]
    for shift in range(1, len(values) + 1):
        tail = values[shift:]
        score = sum(tail) + sum(later - earlier for earlier, later in zip(values, tail))
        best = max(best, score)
    return best


def max_subarray_kadane(values: Sequence[float]) -> float:
    """Return the largest contiguous sum in linear time."""
    _require_values(values)
    current = best = values[0]
    for value in values[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def max_subarray_brute(values: Sequence[float]) -> float:
    """Return the largest contiguous sum by trying every starting point."""
    _require_values(values)
    best = values[0]
    for start in range(len(values)):
        best = max(best, max(accumulate(values[start:])))
    return best