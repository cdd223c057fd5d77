"""Containers: a doubling dynamic array and a k-th nearest point tracker."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator, Sequence
from typing import Any


class DynamicArray:
    """A growable array that starts with room for one item and doubles when full."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._slots: list[Any] = [None]
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end, doubling the storage if it is full."""
        if self._size == len(self._slots):
            self._slots.extend([None] * len(self._slots))
        self._slots[self._size] = value
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the last item; capacity is kept."""
        if not self._size:
            raise IndexError("pop from an empty DynamicArray")
        self._size -= 1
        value = self._slots[self._size]
        self._slots[self._size] = None
        return value

    def capacity(self) -> int:
        """Return how many items fit before the storage has to grow."""
        return len(self._slots)

    def first(self) -> Any:
        """Return the first item."""
        return self[0]

    def last(self) -> Any:
        """Return the last item."""
        return self[-1]

    def __getitem__(self, index: int) -> Any:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("DynamicArray index out of range")
        return self._slots[index]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[:self._size])

    def __repr__(self) -> str:
        return f"DynamicArray({list(self)!r})"


class KthNearest:
    """Track points and report the squared distance of the k-th nearest to the origin."""

    def __init__(self, k: int) -> None:
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")
        self.k = k
        self._nearest: list[int] = []  # negated squared distances, a max-heap

    def add(self, x: int, y: int) -> None:
        """Record the point ``(x, y)``."""
        heapq.heappush(self._nearest, -(x * x + y * y))
        if len(self._nearest) > self.k:
            heapq.heappop(self._nearest)

    def kth_distance(self) -> int:
        """Return the squared distance of the k-th nearest point seen so far."""
        if len(self._nearest) < self.k:
            raise LookupError(f"fewer than {self.k} points have been added")
        return -self._nearest[0]


def process_queries(k: int, queries: Iterable[Sequence[int]]) -> list[int]:
    """Run hostel queries and collect the answers.

    A query ``(1, x, y)`` adds a point; a query ``(2,)`` asks for the squared
    distance of the k-th nearest point. Other query kinds are ignored.
    """
    tracker = KthNearest(k)
    answers: list[int] = []
    for query in queries:
        kind = query[0]
        if kind == 1:
            _, x, y = query
            tracker.add(x, y)
        elif kind == 2:
            answers.append(tracker.kth_distance())
    return answers