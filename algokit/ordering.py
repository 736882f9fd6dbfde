"""Algorithms built on ordering: heaps, monotonic stacks and sorting."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of all values of both sequences, or 0.0 when both are empty."""
    merged = sorted([*nums1, *nums2])
    if not merged:
        return 0.0
    mid = len(merged) // 2
    if len(merged) % 2:
        return float(merged[mid])
    return (merged[mid - 1] + merged[mid]) / 2


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle in the histogram."""
    stack: list[tuple[int, int]] = []
    best = 0
    for i, height in enumerate(heights):
        start = i
        while stack and height < stack[-1][1]:
            start, top = stack.pop()
            best = max(best, top * (i - start))
        stack.append((start, height))
    total = len(heights)
    for start, height in stack:
        best = max(best, height * (total - start))
    return best


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, most frequent first.

    Ties keep the order of first appearance. A ``k`` below one yields every value.
    """
    counts = Counter(nums)
    ranked = sorted(counts, key=counts.__getitem__, reverse=True)
    return ranked if k <= 0 else ranked[:k]


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """Return, for each day, how many days pass until a warmer one (0 if never)."""
    result = [0] * len(temperatures)
    waiting: list[int] = []
    for day, temperature in enumerate(temperatures):
        while waiting and temperature > temperatures[waiting[-1]]:
            earlier = waiting.pop()
            result[earlier] = day - earlier
        waiting.append(day)
    return result


def car_fleet(target: int, position: Sequence[int], speed: Sequence[int]) -> int:
    """Return how many fleets of cars reach ``target``."""
    cars = sorted(zip(position, speed, strict=True), reverse=True)
    fleets = 0
    slowest: float | None = None
    for start, velocity in cars:
        time = (target - start) / velocity
        if slowest is None or time > slowest:
            slowest = time
            fleets += 1
    return fleets


def last_stone_weight(stones: Sequence[int]) -> int:
    """Smash the two heaviest stones repeatedly; return the last weight or 0."""
    if len(stones) == 1:
        return stones[0]
    heap = [-stone for stone in stones]
    heapq.heapify(heap)
    while heap:
        heaviest = -heapq.heappop(heap)
        second = -heapq.heappop(heap)
        if heaviest != second:
            heapq.heappush(heap, second - heaviest)
        if len(heap) == 1:
            return -heap[0]
    return 0