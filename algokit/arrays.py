"""Algorithms over flat sequences of numbers and characters."""

from __future__ import annotations

import operator
from bisect import bisect_left
from collections.abc import Iterator, MutableSequence, Sequence
from itertools import accumulate


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return ``[i, j]`` with ``nums[i] + nums[j] == target`` and ``j < i``.

    The later index comes first. An empty list means no pair exists.
    """
    seen: dict[int, int] = {}
    for i, num in enumerate(nums):
        j = seen.get(target - num)
        if j is not None:
            return [i, j]
        seen[num] = i
    return []


def max_area(height: Sequence[int]) -> int:
    """Return the largest amount of water held between two of the lines."""
    if not height:
        raise ValueError("height must not be empty")
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triplet of values summing to zero, in sorted order."""
    values = sorted(nums)
    triplets: list[list[int]] = []
    for i, first in enumerate(values[:-2]):
        if i > 0 and values[i - 1] == first:
            continue
        left, right = i + 1, len(values) - 1
        while left < right:
            total = first + values[left] + values[right]
            if total == 0:
                triplets.append([first, values[left], values[right]])
                left += 1
                while left < right and values[left] == values[left - 1]:
                    left += 1
                right -= 1
                while right > left and values[right] == values[right + 1]:
                    right -= 1
            elif total < 0:
                left += 1
            else:
                right -= 1
    return triplets


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return where ``target`` sits among the distinct values of ``nums``.

    When ``target`` is larger than every value, the length of ``nums`` is returned.
    """
    unique = sorted(set(nums))
    position = bisect_left(unique, target)
    return position if position < len(unique) else len(nums)


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map traps."""
    if len(height) < 2:
        return 0
    left, right = 0, len(height) - 1
    max_left, max_right = height[left], height[right]
    water = 0
    while left < right:
        if max_left <= max_right:
            left += 1
            max_left = max(max_left, height[left])
            water += max_left - height[left]
        else:
            right -= 1
            max_right = max(max_right, height[right])
            water += max_right - height[right]
    return water


def _subsets_of(items: Sequence[int]) -> Iterator[list[int]]:
    if not items:
        yield []
        return
    head, tail = items[0], items[1:]
    rest = list(_subsets_of(tail))
    for subset in rest:
        yield [head, *subset]
    yield from rest


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return every subset, those holding an element listed before those without it."""
    return list(_subsets_of(list(nums)))


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Replace ``nums1`` in place with the sorted first ``m`` and ``n`` items of both."""
    nums1[:] = sorted([*nums1[:m], *nums2[:n]])


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sale."""
    if not prices:
        return 0
    low = prices[0]
    best = 0
    for price in prices[1:]:
        if price < low:
            low = price
        else:
            best = max(best, price - low)
    return best


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers present."""
    present = set(nums)
    best = 0
    for num in present:
        if num - 1 in present:
            continue
        length = 1
        while num + length in present:
            length += 1
        best = max(best, length)
    return best


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return 1-based indices of two entries of a sorted sequence summing to target."""
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return [left + 1, right + 1]
        if total > target:
            right -= 1
        else:
            left += 1
    return []


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Return whether any value appears more than once."""
    return len(set(nums)) != len(nums)


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all other entries."""
    values = list(nums)
    if not values:
        return []
    prefix = accumulate(values[:-1], operator.mul, initial=1)
    suffix = list(accumulate(reversed(values[1:]), operator.mul, initial=1))[::-1]
    return [before * after for before, after in zip(prefix, suffix)]


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the first value seen twice, or the first value if none repeats."""
    if not nums:
        raise ValueError("nums must not be empty")
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return num
        seen.add(num)
    return nums[0]


def reverse_string(chars: MutableSequence[str]) -> None:
    """Reverse ``chars`` in place."""
    chars.reverse()


def pivot_index(nums: Sequence[int]) -> int:
    """Return the leftmost index whose left and right sums agree, or -1."""
    total = sum(nums)
    left = 0
    for i, num in enumerate(nums):
        if left == total - left - num:
            return i
        left += num
    return -1