"""Algorithms over lists and matrices of numbers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T", bound=Hashable)


def boolean_matrix(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy where every row and column holding a 1 is filled with 1s."""
    rows = [1 in row for row in matrix]
    cols = [1 in col for col in zip(*matrix)]
    return [
        [1 if row_flag or col_flag else cell for cell, col_flag in zip(row, cols)]
        for row, row_flag in zip(matrix, rows)
    ]


def _shortest_window(values: Sequence[int], target: int) -> int | None:
    best: int | None = None
    total = 0
    left = 0
    for right, value in enumerate(values):
        total += value
        while total > target:
            total -= values[left]
            left += 1
        if total == target:
            length = right - left + 1
            best = length if best is None else min(best, length)
    return best


def min_size_subarray(nums: Sequence[int], target: int) -> int | None:
    """Shortest run of the endlessly repeated ``nums`` summing to ``target``, or None."""
    if not nums:
        raise ValueError("nums must not be empty")
    if any(value <= 0 for value in nums):
        raise ValueError("nums must hold positive numbers")
    if target < 0:
        raise ValueError("target must not be negative")
    full_cycles, remainder = divmod(target, sum(nums))
    window = _shortest_window(list(nums) * 2, remainder)
    if window is None:
        return None
    return window + full_cycles * len(nums)


def unique_elements(items: Iterable[T]) -> list[T]:
    """Return the distinct items in the order they first appear."""
    return list(dict.fromkeys(items))


def binary_search(items: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the sorted ``items``; raise ValueError if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == target:
            return mid
        if items[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    raise ValueError(f"{target!r} is not in the sequence")


def min_max(values: Iterable[Any]) -> tuple[Any, Any]:
    """Return the smallest and largest of ``values``."""
    items = list(values)
    if not items:
        raise ValueError("min_max() of an empty sequence")
    return min(items), max(items)


def count_good_pairs(nums: Iterable[Hashable]) -> int:
    """Count index pairs i < j whose values are equal."""
    return sum(count * (count - 1) // 2 for count in Counter(nums).values())