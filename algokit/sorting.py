"""Comparison and counting sorts, inversion counting and binary heaps."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import accumulate
from typing import Iterable


@dataclass(frozen=True)
class MergeSortResult:
    """Sorted values together with the number of element comparisons made."""

    values: list
    comparisons: int


def counting_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted with a stable counting sort.

    Only non-negative integers are accepted.
    """
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    positions = list(accumulate(counts))
    result = [0] * len(items)
    for value in reversed(items):
        positions[value] -= 1
        result[positions[value]] = value
    return result


def _merge(left: list, right: list) -> tuple[list, int, int]:
    """Merge two sorted lists; return merged list, comparisons and inversions."""
    merged = []
    comparisons = inversions = 0
    i = j = 0
    while i < len(left) and j < len(right):
        comparisons += 1
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            inversions += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, comparisons, inversions


def _merge_sort(items: list) -> tuple[list, int, int]:
    if len(items) <= 1:
        return items, 0, 0
    mid = (len(items) - 1) // 2 + 1
    left, left_cmp, left_inv = _merge_sort(items[:mid])
    right, right_cmp, right_inv = _merge_sort(items[mid:])
    merged, cmp, inv = _merge(left, right)
    return merged, left_cmp + right_cmp + cmp, left_inv + right_inv + inv


def merge_sort(values: Iterable) -> MergeSortResult:
    """Sort with top-down merge sort, counting comparisons between elements."""
    merged, comparisons, _ = _merge_sort(list(values))
    return MergeSortResult(merged, comparisons)


def count_inversions(values: Iterable) -> int:
    """Count pairs ``i < j`` with ``values[i] > values[j]``."""
    _, _, inversions = _merge_sort(list(values))
    return inversions


def _quick_sort(items: list, low: int, high: int) -> None:
    if low >= high:
        return
    pivot = items[low]
    left, right = low + 1, high
    while left <= right:
        while left <= high and items[left] <= pivot:
            left += 1
        while right > low and items[right] > pivot:
            right -= 1
        if left < right:
            items[left], items[right] = items[right], items[left]
    items[low], items[right] = items[right], items[low]
    _quick_sort(items, low, right - 1)
    _quick_sort(items, right + 1, high)


def quick_sort(values: Iterable) -> list:
    """Return the values sorted with quicksort using the first element as pivot."""
    items = list(values)
    _quick_sort(items, 0, len(items) - 1)
    return items


def _lomuto_partition(items: list, low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def _quick_sort_lomuto(items: list, low: int, high: int) -> None:
    if low < high:
        split = _lomuto_partition(items, low, high)
        _quick_sort_lomuto(items, low, split - 1)
        _quick_sort_lomuto(items, split + 1, high)


def quick_sort_lomuto(values: Iterable) -> list:
    """Return the values sorted with quicksort using the last element as pivot."""
    items = list(values)
    _quick_sort_lomuto(items, 0, len(items) - 1)
    return items


def insertion_sort(values: Iterable) -> list:
    """Return the values sorted with insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _sift_down(heap: list, size: int, index: int) -> None:
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == index:
            return
        heap[index], heap[largest] = heap[largest], heap[index]
        index = largest


def build_max_heap(values: Iterable) -> list:
    """Return the values arranged as a max-heap (children of ``i`` at ``2i+1``, ``2i+2``)."""
    heap = list(values)
    for index in reversed(range(len(heap) // 2)):
        _sift_down(heap, len(heap), index)
    return heap


def heap_sort(values: Iterable) -> list:
    """Return the values sorted ascending by repeatedly removing the heap maximum."""
    heap = build_max_heap(values)
    for end in range(len(heap) - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0)
    return heap