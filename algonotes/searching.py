"""Searching a sequence and finding its best fixed-size window."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = ["binary_search", "linear_search", "max_window_sum"]


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the ascending ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        probe = values[mid]
        if probe == target:
            return mid
        if probe < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def linear_search(values: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first occurrence of ``target``, or None if absent."""
    return next((i for i, value in enumerate(values) if value == target), None)


def max_window_sum(values: Sequence[int], k: int) -> int:
    """Return the largest sum of ``k`` consecutive values.

    Raises ValueError unless 1 <= k <= len(values).
    """
    if not 1 <= k <= len(values):
        raise ValueError(f"window size {k} does not fit a sequence of {len(values)}")
    current = sum(values[:k])
    best = current
    for leaving, entering in zip(values, values[k:]):
        current += entering - leaving
        best = max(best, current)
    return best