"""Binary-search based algorithms."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from math import isqrt


def int_sqrt(x: int) -> int:
    """Return the integer square root of ``x``; values below 2 are returned as is."""
    if x < 2:
        return x
    return isqrt(x)


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Return whether ``target`` is in a matrix whose rows, read in order, are sorted."""
    if not matrix:
        raise ValueError("matrix must have at least one row")
    cols = len(matrix[0])
    start, end = 0, len(matrix) * cols - 1
    while start <= end:
        mid = (start + end) // 2
        row, col = divmod(mid, cols)
        value = matrix[row][col]
        if value < target:
            start = mid + 1
        elif value > target:
            end = mid - 1
        else:
            return True
    return False


def find_min(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated ascending sequence."""
    if not nums:
        raise ValueError("nums must not be empty")
    start, end = 0, len(nums) - 1
    while start < end:
        mid = (start + end) // 2
        if nums[mid] > nums[end]:
            start = mid + 1
        else:
            end = mid
    return nums[start]


def first_bad_version(n: int, is_bad: Callable[[int], bool]) -> int:
    """Return the first version in ``0..n`` for which ``is_bad`` holds, or 0."""
    start, end = 0, n
    result = 0
    while start <= end:
        mid = (start + end) // 2
        if is_bad(mid):
            result = mid
            end = mid - 1
        else:
            start = mid + 1
    return result


def is_perfect_square(num: int) -> bool:
    """Return whether ``num`` is the square of a positive integer."""
    if num == 1:
        return True
    if num < 4:
        return False
    root = isqrt(num)
    return root * root == num


def judge_square_sum(c: int) -> bool:
    """Return whether ``c`` is the sum of two squares of non-negative integers."""
    if c < 0:
        raise ValueError("c must not be negative")
    left, right = 0, isqrt(c)
    while left <= right:
        total = left * left + right * right
        if total == c:
            return True
        if total < c:
            left += 1
        else:
            right -= 1
    return False


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in the ascending ``nums``, or -1."""
    start, end = 0, len(nums) - 1
    while start <= end:
        mid = (start + end) // 2
        if nums[mid] > target:
            end = mid - 1
        elif nums[mid] < target:
            start = mid + 1
        else:
            return mid
    return -1


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the smallest eating rate that finishes all piles within ``h`` hours."""
    if not piles:
        raise ValueError("piles must not be empty")
    start, end = 1, max(piles)
    result = end
    while start <= end:
        rate = (start + end) // 2
        hours = sum(-(-pile // rate) for pile in piles)
        if hours <= h:
            result = rate
            end = rate - 1
        else:
            start = rate + 1
    return result