"""Searching exercises: rotated, binary and linear search, plus the aggressive cows problem."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise
from typing import Any


def search_rotated(items: Sequence[Any], key: Any) -> int | None:
    """Find ``key`` in a sorted sequence that has been rotated.

    Returns the index of ``key``, or ``None`` when it is absent.
    """
    start, end = 0, len(items) - 1
    while start <= end:
        mid = (start + end) // 2
        if items[mid] == key:
            return mid
        if items[start] <= items[mid]:
            # The left half, start..mid, is in order.
            if items[start] <= key <= items[mid]:
                end = mid - 1
            else:
                start = mid + 1
        elif items[mid] <= key <= items[end]:
            # The right half, mid..end, is in order.
            start = mid + 1
        else:
            end = mid - 1
    return None


def binary_search(items: Sequence[Any], key: Any) -> int | None:
    """Find ``key`` in an ascending sequence; return its index or ``None``."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = (start + end) // 2
        if items[mid] == key:
            return mid
        if items[mid] > key:
            end = mid - 1
        else:
            start = mid + 1
    return None


def linear_search(items: Sequence[Any], key: Any) -> int | None:
    """Scan from the end for ``key``; return the index of its last occurrence or ``None``."""
    for index in reversed(range(len(items))):
        if items[index] == key:
            return index
    return None


def is_strictly_increasing(items: Sequence[Any]) -> bool:
    """Tell whether every element is smaller than the one after it."""
    return all(left < right for left, right in pairwise(items))


def can_place_cows(stalls: Sequence[int], cows: int, min_sep: int) -> bool:
    """Tell whether ``cows`` cows fit in ``stalls`` at least ``min_sep`` apart.

    The first cow always takes the leftmost stall; the rest are placed greedily.
    """
    if cows < 1:
        raise ValueError(f"at least one cow is required, got {cows}")
    ordered = sorted(stalls)
    if not ordered:
        return False
    if cows == 1:
        return True
    last_cow = ordered[0]
    placed = 1
    for stall in ordered[1:]:
        if stall - last_cow >= min_sep:
            last_cow = stall
            placed += 1
            if placed == cows:
                return True
    return False


def largest_min_separation(stalls: Sequence[int], cows: int) -> int:
    """Return the largest minimum distance at which ``cows`` cows fit in ``stalls``.

    Gives 0 when no positive separation works.
    """
    if cows < 1:
        raise ValueError(f"at least one cow is required, got {cows}")
    ordered = sorted(stalls)
    if not ordered:
        raise ValueError("at least one stall is required")
    low, high = 0, ordered[-1] - ordered[0]
    best = 0
    while low <= high:
        mid = (low + high) // 2
        if can_place_cows(ordered, cows, mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best