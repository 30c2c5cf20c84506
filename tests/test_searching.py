import math
import statistics
from bisect import bisect_left
from collections import Counter

import pytest

from algokit.searching import (
    find_duplicate,
    find_min_rotated,
    find_radius,
    find_radius_linear,
    integer_sqrt,
    kth_missing_positive,
    kth_root,
    lower_bound,
    max_min_cow_distance,
    median_of_sorted,
    min_days_for_bouquets,
    min_eating_speed,
    min_max_pages,
    search_rotated,
    search_rotated_with_duplicates,
    smallest_divisor,
)


def test_cows_worked_example():
    assert max_min_cow_distance([0, 3, 4, 7, 10, 9], 4) == 3


def test_two_cows_take_the_ends():
    stalls = [5, 1, 9, 14, 3]
    assert max_min_cow_distance(stalls, 2) == max(stalls) - min(stalls)


def test_cows_need_stalls():
    with pytest.raises(ValueError):
        max_min_cow_distance([], 2)


def test_pages_worked_example():
    assert min_max_pages([12, 34, 67, 90], 2) == 113


@pytest.mark.parametrize("pages", [[25, 46, 28, 49, 24], [12, 34, 67, 90], [7]])
def test_pages_extremes(pages):
    assert min_max_pages(pages, 1) == sum(pages)
    assert min_max_pages(pages, len(pages)) == max(pages)


def test_pages_rejects_no_students():
    with pytest.raises(ValueError):
        min_max_pages([1, 2], 0)


@pytest.mark.parametrize("values", [[3, 3, 3, 3, 3, 5], [1, 3, 4, 2, 2], [3, 1, 3, 4, 2]])
def test_find_duplicate_returns_repeated_value(values):
    result = find_duplicate(values)
    assert Counter(values)[result] > 1


@pytest.mark.parametrize(
    "houses, heaters",
    [([1, 2, 3], [2]), ([1, 2, 3, 4], [1, 4]), ([1, 5, 20, 30], [10, 2]), ([7], [7])],
)
def test_radius_methods_agree(houses, heaters):
    assert find_radius(houses, heaters) == find_radius_linear(houses, heaters)


def test_radius_single_heater():
    houses = [1, 9, 4, 15]
    assert find_radius(houses, [6]) == max(abs(h - 6) for h in houses)


def test_radius_rejects_empty():
    with pytest.raises(ValueError):
        find_radius([], [1])
    with pytest.raises(ValueError):
        find_radius_linear([1], [])


@pytest.mark.parametrize("shift", range(7))
def test_find_min_rotated(shift):
    base = [2, 4, 5, 8, 11, 13, 20]
    rotated = base[shift:] + base[:shift]
    assert find_min_rotated(rotated) == min(base)


def test_find_min_rotated_empty():
    with pytest.raises(ValueError):
        find_min_rotated([])


def test_koko_worked_example():
    assert min_eating_speed([3, 6, 7, 11], 8) == 4


def test_koko_extremes():
    piles = [30, 11, 23, 4, 20]
    assert min_eating_speed(piles, len(piles)) == max(piles)
    assert min_eating_speed(piles, sum(piles)) == 1


@pytest.mark.parametrize("values", [[2, 3, 4, 7, 11], [1, 2, 3, 4], [5, 6], [1, 5, 9]])
@pytest.mark.parametrize("k", [1, 2, 5, 7])
def test_kth_missing_matches_enumeration(values, k):
    present = set(values)
    missing = [x for x in range(1, max(values) + k + 2) if x not in present]
    assert kth_missing_positive(values, k) == missing[k - 1]


@pytest.mark.parametrize("n", [0, 1, 7, 8, 9, 26, 27, 28, 347, 1000])
@pytest.mark.parametrize("k", [1, 2, 3, 4])
def test_kth_root_bounds(n, k):
    root = kth_root(n, k)
    assert root**k <= n < (root + 1) ** k


def test_kth_root_rejects_bad_input():
    with pytest.raises(ValueError):
        kth_root(-1, 2)
    with pytest.raises(ValueError):
        kth_root(5, 0)


@pytest.mark.parametrize("target", range(0, 12))
def test_lower_bound_matches_bisect(target):
    values = [1, 2, 3, 5, 5, 7, 8, 10, 10]
    assert lower_bound(values, target) == bisect_left(values, target)


def test_lower_bound_empty():
    assert lower_bound([], 5) == 0


def test_bouquets_impossible():
    assert min_days_for_bouquets([1, 10, 3, 10, 2], 3, 2) == -1


def test_bouquets_extremes():
    days = [7, 7, 7, 7, 12, 7, 7]
    assert min_days_for_bouquets(days, 1, 1) == min(days)
    assert min_days_for_bouquets(days, 1, len(days)) == max(days)


def test_bouquets_result_is_a_bloom_day():
    days = [1, 10, 3, 10, 2]
    assert min_days_for_bouquets(days, 3, 1) in days


def test_bouquets_rejects_zero_k():
    with pytest.raises(ValueError):
        min_days_for_bouquets([1, 2], 1, 0)


@pytest.mark.parametrize(
    "first, second",
    [
        ([1, 3], [2]),
        ([1, 2], [3, 4]),
        ([], [1, 2, 3, 4]),
        ([5], []),
        ([-5, 0, 7, 9], [-3, 2, 2, 11, 12]),
        ([1, 1, 1], [1, 1]),
    ],
)
def test_median_matches_statistics(first, second):
    assert median_of_sorted(first, second) == statistics.median(first + second)


def test_median_of_nothing():
    assert median_of_sorted([], []) == 0.0


def test_smallest_divisor_extremes():
    values = [1, 2, 5, 9]
    assert smallest_divisor(values, sum(values)) == 1
    assert smallest_divisor(values, len(values)) == max(values)


def test_smallest_divisor_respects_threshold():
    values = [44, 22, 33, 11, 1]
    divisor = smallest_divisor(values, 5)
    assert sum(-(-v // divisor) for v in values) <= 5
    assert sum(-(-v // (divisor - 1)) for v in values) > 5


@pytest.mark.parametrize("shift", range(7))
def test_search_rotated_finds_every_index(shift):
    base = [0, 1, 2, 4, 5, 6, 7]
    rotated = base[shift:] + base[:shift]
    for index, value in enumerate(rotated):
        assert search_rotated(rotated, value) == index
    assert search_rotated(rotated, 3) == -1


@pytest.mark.parametrize("values", [[2, 5, 6, 0, 0, 1, 2], [1, 0, 1, 1, 1], [3, 3, 1, 3]])
@pytest.mark.parametrize("target", range(-1, 8))
def test_search_rotated_with_duplicates_membership(values, target):
    assert search_rotated_with_duplicates(values, target) == (target in values)


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4, 15, 16, 35, 36, 99, 10**6 + 1])
def test_integer_sqrt_matches_isqrt(n):
    assert integer_sqrt(n) == math.isqrt(n)


def test_integer_sqrt_negative():
    with pytest.raises(ValueError):
        integer_sqrt(-4)