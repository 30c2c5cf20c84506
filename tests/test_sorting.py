import random
from itertools import combinations

import pytest

from algokit.sorting import (
    MergeSortResult,
    build_max_heap,
    count_inversions,
    counting_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    quick_sort_lomuto,
)

SAMPLES = [
    [],
    [7],
    [3, 1, 9, 7, 1, 2, 4],
    [2, 0, 2, 3, 4, 1, 5],
    [4, 7, 3, 2, 9, 4, 5],
    [5, 4, 7, 1, 6, 0, 1, -1, 10],
    [42, 7, 13, 89, 21, 5, 66, 30, 18, 3, 54, 77, 1, 36, 25, 37, 80, 9, 23],
    [1, 1, 1, 1],
    list(range(10, 0, -1)),
]


def _random_lists(seed, count=20, size=30):
    rng = random.Random(seed)
    return [[rng.randint(-50, 50) for _ in range(rng.randint(0, size))] for _ in range(count)]


@pytest.mark.parametrize("values", [v for v in SAMPLES if all(x >= 0 for x in v)])
def test_counting_sort_matches_sorted(values):
    assert counting_sort(values) == sorted(values)


def test_counting_sort_rejects_negative():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])


def test_counting_sort_does_not_mutate():
    values = [3, 1, 2]
    counting_sort(values)
    assert values == [3, 1, 2]


@pytest.mark.parametrize("values", SAMPLES)
def test_merge_sort_matches_sorted(values):
    result = merge_sort(values)
    assert isinstance(result, MergeSortResult)
    assert result.values == sorted(values)


def test_merge_sort_comparisons_on_sorted_input():
    assert merge_sort(range(8)).comparisons == 12


def test_merge_sort_comparisons_bounded():
    for values in _random_lists(1):
        n = len(values)
        assert merge_sort(values).comparisons <= max(0, n * n)


def test_merge_sort_empty_has_no_comparisons():
    assert merge_sort([]).comparisons == 0


@pytest.mark.parametrize("sorter", [quick_sort, quick_sort_lomuto, insertion_sort, heap_sort])
@pytest.mark.parametrize("values", SAMPLES)
def test_sorters_match_sorted(sorter, values):
    assert sorter(values) == sorted(values)


@pytest.mark.parametrize("sorter", [quick_sort, quick_sort_lomuto, insertion_sort, heap_sort])
def test_sorters_on_random_data(sorter):
    for values in _random_lists(7):
        original = list(values)
        assert sorter(values) == sorted(values)
        assert values == original


def test_count_inversions_matches_pair_count():
    for values in _random_lists(3):
        expected = sum(1 for a, b in combinations(values, 2) if a > b)
        assert count_inversions(values) == expected


def test_count_inversions_sorted_and_reversed():
    values = list(range(15))
    assert count_inversions(values) == 0
    n = len(values)
    assert count_inversions(list(reversed(values))) == n * (n - 1) // 2


@pytest.mark.parametrize("values", SAMPLES)
def test_build_max_heap_property(values):
    heap = build_max_heap(values)
    assert sorted(heap) == sorted(values)
    for parent in range(len(heap)):
        for child in (2 * parent + 1, 2 * parent + 2):
            if child < len(heap):
                assert heap[parent] >= heap[child]