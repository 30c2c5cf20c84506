"""Binary-search based algorithms on sorted data and monotone predicates."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from itertools import pairwise
from typing import Callable, Iterable, Sequence


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def _last_true(lo: int, hi: int, predicate: Callable[[int], bool]) -> int:
    """Binary search over ``[lo, hi]``; return the largest value where predicate holds.

    The predicate must be true on a prefix of the range. Returns ``lo - 1`` if it
    never holds.
    """
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if predicate(mid):
            lo = mid + 1
        else:
            hi = mid - 1
    return hi


def _first_true(lo: int, hi: int, predicate: Callable[[int], bool]) -> int:
    """Binary search over ``[lo, hi]``; return the smallest value where predicate holds.

    The predicate must be true on a suffix of the range. Returns ``hi + 1`` if it
    never holds.
    """
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if predicate(mid):
            hi = mid - 1
        else:
            lo = mid + 1
    return lo


def max_min_cow_distance(stalls: Iterable[int], cows: int) -> int:
    """Largest possible minimum distance when placing ``cows`` in the stalls."""
    positions = sorted(stalls)
    if not positions:
        raise ValueError("no stalls given")

    def can_place(gap: int) -> bool:
        placed = 1
        last = positions[0]
        for position in positions[1:]:
            if position - last >= gap:
                placed += 1
                last = position
                if placed >= cows:
                    return True
        return placed >= cows

    return _last_true(1, positions[-1] - positions[0], can_place)


def min_max_pages(pages: Sequence[int], students: int) -> int:
    """Smallest possible maximum of pages given to one student.

    Books are handed out in order, each student receiving a contiguous run.
    """
    books = list(pages)
    if not books:
        raise ValueError("no books given")
    if students < 1:
        raise ValueError("at least one student is needed")

    def students_needed(limit: int) -> int:
        count = 1
        total = books[0]
        for book in books[1:]:
            if total + book > limit:
                total = book
                count += 1
            else:
                total += book
        return count

    return _first_true(max(books), 10**10, lambda limit: students_needed(limit) <= students)


def find_duplicate(values: Sequence[int]) -> int:
    """Find the repeated number among ``n`` values drawn from ``1..n-1``."""
    items = list(values)

    def too_many_up_to(mid: int) -> bool:
        return sum(1 for value in items if value <= mid) > mid

    return _first_true(1, len(items), too_many_up_to)


def find_radius(houses: Iterable[int], heaters: Iterable[int]) -> int:
    """Minimum heater radius covering every house, found by binary search."""
    homes = sorted(houses)
    sources = sorted(heaters)
    if not homes or not sources:
        raise ValueError("houses and heaters must not be empty")

    def covers(radius: int) -> bool:
        if sources[0] - radius > homes[0]:
            return False
        for previous, following in pairwise(sources):
            index = bisect_right(homes, previous + radius)
            if index < len(homes) and homes[index] < following - radius:
                return False
        return sources[-1] + radius >= homes[-1]

    return _first_true(0, 10**9, covers)


def find_radius_linear(houses: Iterable[int], heaters: Iterable[int]) -> int:
    """Minimum heater radius covering every house, found with a sweeping pointer."""
    homes = sorted(houses)
    sources = sorted(heaters)
    if not homes or not sources:
        raise ValueError("houses and heaters must not be empty")
    radius = 0
    j = 0
    for house in homes:
        while j + 1 < len(sources) and abs(sources[j + 1] - house) <= abs(sources[j] - house):
            j += 1
        radius = max(radius, abs(sources[j] - house))
    return radius


def find_min_rotated(values: Sequence[int]) -> int:
    """Minimum of a rotated sorted sequence of distinct values."""
    if not values:
        raise ValueError("find_min_rotated() needs at least one value")
    lo, hi = 0, len(values) - 1
    while lo < hi:
        mid = lo + (hi - lo) // 2
        if values[hi] < values[mid]:
            lo = mid + 1
        else:
            hi = mid
    return values[lo]


def min_eating_speed(piles: Sequence[int], hours: int) -> int:
    """Smallest eating speed that finishes every pile within ``hours``."""
    heaps = list(piles)
    if not heaps:
        raise ValueError("no piles given")

    def fast_enough(speed: int) -> bool:
        spent = 0
        for pile in heaps:
            spent += _ceil_div(pile, speed)
            if spent > hours:
                return False
        return True

    best = max(heaps)
    lo, hi = 1, best
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if fast_enough(mid):
            best = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return best


def kth_missing_positive(values: Sequence[int], k: int) -> int:
    """The ``k``-th positive integer absent from a strictly increasing sequence."""
    if not values or values[0] > k:
        return k
    last = _last_true(0, len(values) - 1, lambda mid: values[mid] - (mid + 1) < k)
    last = max(last, 0)
    return values[last] + k - (values[last] - (last + 1))


def kth_root(n: int, k: int) -> int:
    """Largest integer ``r`` with ``r ** k <= n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if k < 1:
        raise ValueError("k must be positive")
    return _last_true(1, n, lambda mid: mid**k <= n)


def lower_bound(values: Sequence[int], target: int) -> int:
    """Index of the first element not less than target, or ``len(values)``."""
    answer = len(values)
    lo, hi = 0, len(values) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if values[mid] >= target:
            answer = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return answer


def min_days_for_bouquets(bloom_days: Sequence[int], m: int, k: int) -> int:
    """Fewest days until ``m`` bouquets of ``k`` adjacent flowers can be made.

    Returns -1 when there are too few flowers.
    """
    days = list(bloom_days)
    if k < 1:
        raise ValueError("k must be positive")
    if len(days) < m * k:
        return -1

    def enough(day: int) -> bool:
        bouquets = run = 0
        for bloom in days:
            if bloom <= day:
                run += 1
            else:
                bouquets += run // k
                run = 0
        bouquets += run // k
        return bouquets >= m

    return _first_true(min(days), max(days), enough)


def median_of_sorted(first: Sequence[int], second: Sequence[int]) -> float:
    """Median of the union of two sorted integer sequences; 0.0 when both are empty."""
    a, b = list(first), list(second)
    if not a and not b:
        return 0.0
    if not a or not b:
        single = a or b
        mid = len(single) // 2
        if len(single) % 2:
            return float(single[mid])
        return (single[mid - 1] + single[mid]) / 2

    total = len(a) + len(b)
    smallest = min(a[0], b[0])
    largest = max(a[-1], b[-1])

    def value_at_rank(rank: int) -> int:
        return _last_true(
            smallest, largest, lambda mid: bisect_left(a, mid) + bisect_left(b, mid) <= rank
        )

    upper = value_at_rank(total // 2)
    if total % 2:
        return float(upper)
    lower = value_at_rank(total // 2 - 1)
    return (upper + lower) / 2


def smallest_divisor(values: Sequence[int], threshold: int) -> int:
    """Smallest divisor keeping the sum of rounded-up quotients within threshold."""
    items = list(values)
    if not items:
        raise ValueError("no values given")
    return _first_true(
        1, max(items), lambda divisor: sum(_ceil_div(v, divisor) for v in items) <= threshold
    )


def search_rotated(values: Sequence[int], target: int) -> int:
    """Index of target in a rotated sorted sequence of distinct values, or -1."""
    lo, hi = 0, len(values) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if values[mid] == target:
            return mid
        if values[lo] <= values[mid]:
            if values[lo] <= target < values[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif values[mid] < target <= values[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def search_rotated_with_duplicates(values: Sequence[int], target: int) -> bool:
    """Tell whether target occurs in a rotated sorted sequence that may repeat values."""
    lo, hi = 0, len(values) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if values[mid] == target:
            return True
        if values[lo] == values[mid] == values[hi]:
            lo += 1
            hi -= 1
        elif values[lo] <= values[mid]:
            if values[lo] <= target < values[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif values[mid] < target <= values[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return False


def integer_sqrt(n: int) -> int:
    """Largest integer whose square does not exceed ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return _last_true(1, n, lambda mid: mid * mid <= n)