import math

import pytest

from algokit.searching import (
    binary_search,
    find_min,
    first_bad_version,
    int_sqrt,
    is_perfect_square,
    judge_square_sum,
    min_eating_speed,
    search_matrix,
)

MATRIX = [[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 60]]


def test_int_sqrt_bounds():
    for x in range(0, 300):
        r = int_sqrt(x)
        assert r * r <= x < (r + 1) * (r + 1)


def test_int_sqrt_large():
    x = 2147395599
    r = int_sqrt(x)
    assert r * r <= x < (r + 1) * (r + 1)


def test_int_sqrt_small_values_returned_unchanged():
    assert int_sqrt(-5) == -5
    assert int_sqrt(1) == 1


def test_search_matrix_finds_every_value():
    for row in MATRIX:
        for value in row:
            assert search_matrix(MATRIX, value) is True


@pytest.mark.parametrize("target", [0, 2, 13, 61, 25])
def test_search_matrix_missing(target):
    assert search_matrix(MATRIX, target) is False


def test_search_matrix_empty_row():
    assert search_matrix([[]], 1) is False


def test_search_matrix_no_rows():
    with pytest.raises(ValueError):
        search_matrix([], 1)


def test_find_min_all_rotations():
    values = [11, 13, 15, 17, 19, 21]
    for shift in range(len(values)):
        rotated = values[shift:] + values[:shift]
        assert find_min(rotated) == min(values)


def test_find_min_single():
    assert find_min([5]) == 5


def test_find_min_empty():
    with pytest.raises(ValueError):
        find_min([])


def test_first_bad_version_every_boundary():
    n = 40
    for bad in range(1, n + 1):
        assert first_bad_version(n, lambda v, bad=bad: v >= bad) == bad


def test_first_bad_version_none_bad():
    assert first_bad_version(10, lambda v: False) == 0


def test_first_bad_version_calls_logarithmically():
    calls = []

    def is_bad(v):
        calls.append(v)
        return v >= 700

    assert first_bad_version(1000, is_bad) == 700
    assert len(calls) <= math.ceil(math.log2(1001)) + 1


def test_perfect_squares():
    for i in range(1, 60):
        assert is_perfect_square(i * i) is True


def test_non_squares():
    for i in range(2, 60):
        assert is_perfect_square(i * i + 1) is False
    assert is_perfect_square(2) is False
    assert is_perfect_square(0) is False


def test_square_sum_of_two_squares():
    for a in range(0, 20):
        for b in range(a, 20):
            assert judge_square_sum(a * a + b * b) is True


def test_square_sum_impossible():
    assert judge_square_sum(3) is False
    assert judge_square_sum(21) is False


def test_square_sum_negative():
    with pytest.raises(ValueError):
        judge_square_sum(-1)


def test_binary_search_finds_indices():
    nums = [-1, 0, 3, 5, 9, 12]
    for i, value in enumerate(nums):
        assert binary_search(nums, value) == i


def test_binary_search_missing():
    assert binary_search([-1, 0, 3, 5, 9, 12], 2) == -1
    assert binary_search([], 2) == -1


def test_min_eating_speed_example():
    assert min_eating_speed([3, 6, 7, 11], 8) == 4


def _hours(piles, rate):
    return sum(-(-p // rate) for p in piles)


@pytest.mark.parametrize(
    ("piles", "h"),
    [([30, 11, 23, 4, 20], 5), ([30, 11, 23, 4, 20], 6), ([312884470], 312884469), ([1, 1, 1], 10)],
)
def test_min_eating_speed_is_minimal(piles, h):
    rate = min_eating_speed(piles, h)
    assert _hours(piles, rate) <= h
    assert rate == 1 or _hours(piles, rate - 1) > h


def test_min_eating_speed_one_hour_per_pile():
    piles = [9, 4, 7]
    assert min_eating_speed(piles, len(piles)) == max(piles)


def test_min_eating_speed_empty():
    with pytest.raises(ValueError):
        min_eating_speed([], 3)