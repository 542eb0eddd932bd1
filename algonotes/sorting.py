"""Classic comparison and distribution sorts.

Every function takes any iterable and returns a new ascending list,
leaving the input untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = [
    "bucket_sort",
    "merge_sort",
    "quick_sort",
    "selection_sort",
    "bubble_sort",
    "heap_sort",
    "exchange_sort",
]


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in the half-open range [0, 1) by distributing them into buckets.

    There are as many buckets as values. A value ``v`` goes into bucket
    ``int(len(values) * v)``. Each bucket is sorted and the buckets are then
    joined in order.

    Raises ValueError for a value outside [0, 1).
    """
    items = list(values)
    size = len(items)
    buckets: list[list[float]] = [[] for _ in range(size)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(size * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    left_iter, right_iter = iter(left), iter(right)
    a = next(left_iter, _END)
    b = next(right_iter, _END)
    while a is not _END and b is not _END:
        if a < b:  # type: ignore[operator]
            merged.append(a)  # type: ignore[arg-type]
            a = next(left_iter, _END)
        else:
            merged.append(b)  # type: ignore[arg-type]
            b = next(right_iter, _END)
    if a is not _END:
        merged.append(a)  # type: ignore[arg-type]
        merged.extend(left_iter)
    if b is not _END:
        merged.append(b)  # type: ignore[arg-type]
        merged.extend(right_iter)
    return merged


_END: Any = object()


def merge_sort(values: Iterable[T]) -> list[T]:
    """Sort by splitting in halves, sorting each half and merging them."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def quick_sort(values: Iterable[T]) -> list[T]:
    """Sort by partitioning around the first element as pivot."""
    items = list(values)
    if len(items) <= 1:
        return items
    pivot, rest = items[0], items[1:]
    lower = [v for v in rest if v <= pivot]  # type: ignore[operator]
    upper = [v for v in rest if v > pivot]  # type: ignore[operator]
    return [*quick_sort(lower), pivot, *quick_sort(upper)]


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly moving the smallest remaining value into place."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by swapping adjacent out-of-order pairs, one pass per element."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for d in range(end):
            if items[d] > items[d + 1]:  # type: ignore[operator]
                items[d], items[d + 1] = items[d + 1], items[d]
    return items


def _sift_down(items: list[T], size: int, root: int) -> None:
    while True:
        largest = root
        for child in (2 * root + 1, 2 * root + 2):
            if child < size and items[child] > items[largest]:  # type: ignore[operator]
                largest = child
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[T]) -> list[T]:
    """Sort by building a max-heap and repeatedly moving its top to the end."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def exchange_sort(values: Iterable[T]) -> list[T]:
    """Sort by comparing each position with every later one and swapping when out of order."""
    items = list(values)
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            if items[i] > items[j]:  # type: ignore[operator]
                items[i], items[j] = items[j], items[i]
    return items