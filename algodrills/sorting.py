"""Sorting exercises: merge, quick, bubble sort, inversions and ordering puzzles."""

from __future__ import annotations

import heapq
import random
import sys
from collections.abc import Iterable, Sequence
from itertools import islice
from typing import Any

_END_OF_WORD = sys.maxunicode + 1


def _merge(left: list[Any], right: list[Any]) -> tuple[list[Any], int]:
    """Merge two sorted lists, counting pairs where a left item exceeds a right one."""
    merged: list[Any] = []
    crossings = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            crossings += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, crossings


def _sort_and_count(items: list[Any]) -> tuple[list[Any], int]:
    if len(items) <= 1:
        return list(items), 0
    mid = (len(items) + 1) // 2
    left, left_count = _sort_and_count(items[:mid])
    right, right_count = _sort_and_count(items[mid:])
    merged, cross_count = _merge(left, right)
    return merged, left_count + right_count + cross_count


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list built by merge sort."""
    return _sort_and_count(list(items))[0]


def _partition(data: list[Any], start: int, end: int) -> int:
    """Partition around ``data[end]`` and return the pivot's final index."""
    pivot = data[end]
    boundary = start - 1
    for index in range(start, end):
        if data[index] <= pivot:
            boundary += 1
            data[boundary], data[index] = data[index], data[boundary]
    data[boundary + 1], data[end] = data[end], data[boundary + 1]
    return boundary + 1


def quicksort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list built by quicksort with the last element as pivot."""
    data = list(items)
    pending = [(0, len(data) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot = _partition(data, start, end)
        pending.append((start, pivot - 1))
        pending.append((pivot + 1, end))
    return data


def shuffle(items: Iterable[Any], rng: random.Random | None = None) -> list[Any]:
    """Return a Fisher-Yates shuffled copy of ``items``."""
    generator = rng if rng is not None else random.Random()
    data = list(items)
    for i in range(len(data) - 1, 0, -1):
        j = generator.randrange(i + 1)
        data[i], data[j] = data[j], data[i]
    return data


def randomised_quicksort(
    items: Iterable[Any], rng: random.Random | None = None
) -> list[Any]:
    """Shuffle ``items`` first, then quicksort them."""
    return quicksort(shuffle(items, rng))


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list built by bubble sort."""
    data = list(items)
    for last in range(len(data) - 1, 0, -1):
        for index in range(last):
            if data[index] > data[index + 1]:
                data[index], data[index + 1] = data[index + 1], data[index]
    return data


def inversion_count(items: Iterable[Any]) -> int:
    """Count pairs ``i < j`` with ``items[i] > items[j]``."""
    return _sort_and_count(list(items))[1]


def _prefix_last_key(word: str) -> list[int]:
    return [*map(ord, word), _END_OF_WORD]


def prefix_first_sort(words: Iterable[str]) -> list[str]:
    """Sort words lexicographically, except that a word comes after any longer word it prefixes."""
    return sorted(words, key=_prefix_last_key)


def merged_median(first: Iterable[Any], second: Iterable[Any]) -> Any:
    """Return the lower median of the merge of two ascending sequences."""
    left = list(first)
    right = list(second)
    total = len(left) + len(right)
    if total == 0:
        raise ValueError("cannot take the median of no elements")
    position = (total - 1) // 2
    return next(islice(heapq.merge(left, right), position, None))