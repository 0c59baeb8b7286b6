"""Heap-based exercises: a running k-th largest tracker and the stone game."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


class KthLargest:
    """Track the k-th largest value of a growing stream."""

    def __init__(self, k: int, nums: Iterable[int]) -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        self.k = k
        self._heap = list(nums)
        heapq.heapify(self._heap)
        while len(self._heap) > k:
            heapq.heappop(self._heap)

    def add(self, val: int) -> int:
        """Add ``val`` and return the current k-th largest value.

        While fewer than k values have been seen, the smallest is returned.
        """
        heapq.heappush(self._heap, val)
        if len(self._heap) > self.k:
            heapq.heappop(self._heap)
        return self._heap[0]


def last_stone_weight(stones: Iterable[int]) -> int:
    """Smash the two heaviest stones until at most one is left; return its weight."""
    heap = [-s for s in stones]
    heapq.heapify(heap)
    while len(heap) > 1:
        first = heapq.heappop(heap)
        second = heapq.heappop(heap)
        if second > first:
            heapq.heappush(heap, first - second)
    return -heap[0] if heap else 0