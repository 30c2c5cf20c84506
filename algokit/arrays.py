"""Array, matrix and sequence algorithms."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator, Sequence


def set_zeroes(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy where every row and column containing a zero is zeroed."""
    rows = {i for i, row in enumerate(matrix) if 0 in row}
    cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    return [
        [0 if i in rows or j in cols else value for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]


def two_sum_indices(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the first index pair ``(i, j)``, ``i < j``, whose values sum to target."""
    seen: dict[int, int] = {}
    for index, value in enumerate(values):
        if target - value in seen:
            return seen[target - value], index
        seen[value] = index
    return None


def has_pair_with_sum(values: Iterable[int], target: int) -> bool:
    """Tell whether two distinct elements sum to target."""
    items = sorted(values)
    left, right = 0, len(items) - 1
    while left < right:
        total = items[left] + items[right]
        if total == target:
            return True
        if total < target:
            left += 1
        else:
            right -= 1
    return False


def three_sum_hashing(values: Iterable[int], target: int) -> list[list[int]]:
    """Return the distinct sorted triplets summing to target, in sorted order."""
    items = list(values)
    found: set[tuple[int, int, int]] = set()
    for offset, first in enumerate(items[:-1]):
        seen: set[int] = set()
        for second in items[offset + 1:]:
            third = target - first - second
            if third in seen:
                found.add(tuple(sorted((first, second, third))))
            seen.add(second)
    return [list(triplet) for triplet in sorted(found)]


def three_sum(values: Iterable[int], target: int) -> list[list[int]]:
    """Return the distinct triplets summing to target using two pointers."""
    nums = sorted(values)
    n = len(nums)
    result = []
    i = 0
    while i < n - 2:
        j, k = i + 1, n - 1
        while j < k:
            total = nums[i] + nums[j] + nums[k]
            if total == target:
                result.append([nums[i], nums[j], nums[k]])
                j += 1
                while j < k and nums[j] == nums[j - 1]:
                    j += 1
                k -= 1
                while k > j and nums[k] == nums[k + 1]:
                    k -= 1
            elif total < target:
                j += 1
            else:
                k -= 1
        i += 1
        while i < n - 2 and nums[i] == nums[i - 1]:
            i += 1
    return result


def transpose(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the transpose of a matrix."""
    return [list(column) for column in zip(*matrix)]


def rotate_clockwise(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the matrix rotated 90 degrees clockwise."""
    return [list(reversed(row)) for row in transpose(matrix)]


def longest_consecutive_sorting(values: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers, found by sorting."""
    best = run = 0
    previous = None
    for value in sorted(set(values)):
        run = run + 1 if previous is not None and value == previous + 1 else 1
        best = max(best, run)
        previous = value
    return best


def longest_consecutive(values: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers, found with a set."""
    present = set(values)
    best = 0
    for start in present:
        if start - 1 in present:
            continue
        end = start
        while end + 1 in present:
            end += 1
        best = max(best, end - start + 1)
    return best


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous subarray (Kadane)."""
    best = None
    running = 0
    for value in values:
        running += value
        best = running if best is None else max(best, running)
        if running <= 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() needs at least one value")
    return best


def next_permutation(values: Sequence) -> list | None:
    """Return the next lexicographic permutation, or None after the last one."""
    items = list(values)
    i = len(items) - 1
    while i >= 1 and items[i - 1] >= items[i]:
        i -= 1
    if i <= 0:
        return None
    j = next(j for j in range(len(items) - 1, i - 1, -1) if items[j] > items[i - 1])
    items[i - 1], items[j] = items[j], items[i - 1]
    items[i:] = reversed(items[i:])
    return items


def permutations_in_order(values: Iterable) -> Iterator[list]:
    """Yield every distinct permutation in lexicographic order."""
    current: list | None = sorted(values)
    while current is not None:
        yield list(current)
        current = next_permutation(current)


def rotate_left(values: Sequence, d: int) -> list:
    """Return the values rotated left by ``d`` places."""
    items = list(values)
    if not items:
        return items
    d %= len(items)
    return items[d:] + items[:d]


def rotate_left_reversal(values: Sequence, d: int) -> list:
    """Rotate left by ``d`` places using three reversals."""
    items = list(values)
    if not items:
        return items
    d %= len(items)
    items[:d] = reversed(items[:d])
    items[d:] = reversed(items[d:])
    items.reverse()
    return items


def second_smallest(values: Iterable[int]) -> int:
    """Return the smallest value strictly greater than the minimum."""
    smallest = second = None
    for value in values:
        if smallest is None or value < smallest:
            second = smallest
            smallest = value
        elif value > smallest and (second is None or value < second):
            second = value
    if second is None:
        raise ValueError("no second distinct value")
    return second


def longest_subarray_with_sum(values: Iterable[int], k: int) -> int:
    """Length of the longest contiguous subarray summing to ``k``."""
    first_seen: dict[int, int] = {}
    best = total = 0
    for index, value in enumerate(values):
        total += value
        if total == k:
            best = max(best, index + 1)
        if total - k in first_seen:
            best = max(best, index - first_seen[total - k])
        first_seen.setdefault(total, index)
    return best


def longest_subarray_with_sum_nonnegative(values: Iterable[int], k: int) -> int:
    """Sliding-window variant of :func:`longest_subarray_with_sum` for non-negative values."""
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("values must be non-negative")
    left = total = best = 0
    for right, value in enumerate(items):
        total += value
        while left <= right and total > k:
            total -= items[left]
            left += 1
        if total == k:
            best = max(best, right - left + 1)
    return best


def count_subarrays_with_xor(values: Iterable[int], k: int) -> int:
    """Count contiguous subarrays whose elements XOR to ``k``."""
    prefixes = Counter({0: 1})
    running = count = 0
    for value in values:
        running ^= value
        count += prefixes[running ^ k]
        prefixes[running] += 1
    return count


def is_palindrome(text: str) -> bool:
    """Tell whether the text reads the same backwards."""
    return text == text[::-1]


def sort_by_second_then_first_desc(pairs: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Sort pairs by second element ascending, ties by first element descending."""
    return sorted(pairs, key=lambda pair: (pair[1], -pair[0]))