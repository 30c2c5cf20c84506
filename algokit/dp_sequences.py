"""Dynamic programming over sequences: knapsack, robbers, coins and subset sums."""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Iterable, Sequence


def _require_non_negative(values: Sequence[int], what: str) -> None:
    if any(value < 0 for value in values):
        raise ValueError(f"{what} must be non-negative")


def _knapsack_items(capacity: int, values: Iterable[int], weights: Iterable[int]) -> tuple[list[int], list[int]]:
    vals, wts = list(values), list(weights)
    if len(vals) != len(wts):
        raise ValueError("values and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    _require_non_negative(wts, "weights")
    return vals, wts


def knapsack(capacity: int, values: Iterable[int], weights: Iterable[int]) -> int:
    """Best total value of items fitting in ``capacity`` (0/1 knapsack, memoised)."""
    vals, wts = _knapsack_items(capacity, values, weights)

    @lru_cache(maxsize=None)
    def best(i: int, room: int) -> int:
        if i < 0:
            return 0
        skip = best(i - 1, room)
        take = vals[i] + best(i - 1, room - wts[i]) if room >= wts[i] else 0
        return max(skip, take)

    return best(len(vals) - 1, capacity)


def knapsack_tabulated(capacity: int, values: Iterable[int], weights: Iterable[int]) -> int:
    """Best total value of items fitting in ``capacity`` (0/1 knapsack, bottom-up)."""
    vals, wts = _knapsack_items(capacity, values, weights)
    if not vals:
        return 0
    row = [vals[0] if room >= wts[0] else 0 for room in range(capacity + 1)]
    for value, weight in zip(vals[1:], wts[1:]):
        row = [
            max(row[room], value + row[room - weight] if room >= weight else 0)
            for room in range(capacity + 1)
        ]
    return row[capacity]


def _rob_line(houses: Sequence[int]) -> int:
    before, best = 0, houses[0]
    for value in houses[1:]:
        before, best = best, max(value + before, best)
    return best


def rob_circular(values: Iterable[int]) -> int:
    """Largest sum of non-adjacent houses arranged in a circle."""
    houses = list(values)
    if not houses:
        raise ValueError("rob_circular() needs at least one house")
    if len(houses) == 1:
        return houses[0]
    return max(_rob_line(houses[:-1]), _rob_line(houses[1:]))


def _heights(heights: Iterable[int]) -> list[int]:
    items = list(heights)
    if not items:
        raise ValueError("at least one height is needed")
    return items


def frog_min_cost(heights: Iterable[int]) -> int:
    """Least energy to reach the last stair jumping one or two steps (memoised)."""
    h = _heights(heights)

    @lru_cache(maxsize=None)
    def cost(i: int) -> int:
        if i == 0:
            return 0
        best = cost(i - 1) + abs(h[i] - h[i - 1])
        if i >= 2:
            best = min(best, cost(i - 2) + abs(h[i] - h[i - 2]))
        return best

    return cost(len(h) - 1)


def frog_min_cost_tabulated(heights: Iterable[int]) -> int:
    """Least energy to reach the last stair, computed bottom-up."""
    h = _heights(heights)
    costs = [0] * len(h)
    for i in range(1, len(h)):
        one = costs[i - 1] + abs(h[i] - h[i - 1])
        two = costs[i - 2] + abs(h[i] - h[i - 2]) if i >= 2 else math.inf
        costs[i] = min(one, two)
    return costs[-1]


def frog_min_cost_optimized(heights: Iterable[int]) -> int:
    """Least energy to reach the last stair, keeping only two previous costs."""
    h = _heights(heights)
    two_back = one_back = 0
    for i in range(1, len(h)):
        one = one_back + abs(h[i] - h[i - 1])
        two = two_back + abs(h[i] - h[i - 2]) if i >= 2 else math.inf
        two_back, one_back = one_back, min(one, two)
    return one_back


def max_non_adjacent_sum_quadratic(values: Iterable[int]) -> int:
    """Largest sum of non-adjacent elements, scanning earlier choices for each element."""
    items = list(values)
    if not items:
        raise ValueError("at least one value is needed")
    ending_at: list[int] = []
    best = 0
    for i, value in enumerate(items):
        if i < 2:
            total = value
        else:
            total = 0
            for j in range(i - 2, -1, -1):
                candidate = value + ending_at[j]
                if total > candidate:
                    break
                total = candidate
        ending_at.append(total)
        best = max(best, total)
    return best


def max_non_adjacent_sum(values: Iterable[int]) -> int:
    """Largest sum of non-adjacent elements in linear time."""
    items = list(values)
    if not items:
        raise ValueError("at least one value is needed")
    return _rob_line(items)


def _coins(coins: Iterable[int], amount: int) -> list[int]:
    items = list(coins)
    if not items:
        raise ValueError("at least one coin is needed")
    if any(coin <= 0 for coin in items):
        raise ValueError("coins must be positive")
    if amount < 0:
        raise ValueError("amount must be non-negative")
    return items


def _or_minus_one(count: float) -> int:
    return -1 if math.isinf(count) else int(count)


def min_coins(coins: Iterable[int], amount: int) -> int:
    """Fewest coins (unlimited supply) making ``amount``, or -1 (memoised)."""
    items = _coins(coins, amount)

    @lru_cache(maxsize=None)
    def fewest(i: int, remaining: int) -> float:
        if i < 0:
            return 0 if remaining == 0 else math.inf
        if remaining < 0:
            return math.inf
        if remaining == 0:
            return 0
        return min(1 + fewest(i, remaining - items[i]), fewest(i - 1, remaining))

    return _or_minus_one(fewest(len(items) - 1, amount))


def min_coins_tabulated(coins: Iterable[int], amount: int) -> int:
    """Fewest coins making ``amount``, or -1, with a full table."""
    items = _coins(coins, amount)
    previous: list[float] | None = None
    for coin in items:
        row: list[float] = [0] + [math.inf] * amount
        for target in range(1, amount + 1):
            take = 1 + row[target - coin] if coin <= target else math.inf
            skip = previous[target] if previous is not None else math.inf
            row[target] = min(take, skip)
        previous = row
    return _or_minus_one(previous[amount])


def min_coins_optimized(coins: Iterable[int], amount: int) -> int:
    """Fewest coins making ``amount``, or -1, with a single row."""
    items = _coins(coins, amount)
    best: list[float] = [0] + [math.inf] * amount
    for coin in items:
        for target in range(coin, amount + 1):
            best[target] = min(best[target], best[target - coin] + 1)
    return _or_minus_one(best[amount])


def min_partition_difference(values: Iterable[int]) -> int:
    """Smallest difference between the sums of two parts of the values (memoised)."""
    nums = list(values)
    _require_non_negative(nums, "values")
    total = sum(nums)

    @lru_cache(maxsize=None)
    def best(i: int, chosen: int) -> int:
        if i < 0:
            return abs(2 * chosen - total)
        return min(best(i - 1, chosen + nums[i]), best(i - 1, chosen))

    return best(len(nums) - 1, 0)


def min_partition_difference_tabulated(values: Iterable[int]) -> int:
    """Smallest difference between the sums of two parts of the values (bottom-up)."""
    nums = list(values)
    _require_non_negative(nums, "values")
    if not nums:
        return 0
    total = sum(nums)
    first = nums[0]
    row = [min(abs(2 * s - total), abs(2 * (s + first) - total)) for s in range(total + 1)]
    for value in nums[1:]:
        row = [
            min(row[s + value], row[s]) if s + value <= total else row[s]
            for s in range(total + 1)
        ]
    return row[0]


def _training_days(points: Iterable[Sequence[int]]) -> list[list[int]]:
    days = [list(day) for day in points]
    if not days:
        raise ValueError("at least one day is needed")
    if any(len(day) != 3 for day in days):
        raise ValueError("every day must list exactly three activities")
    return days


def _next_day(day: list[int], previous: list[int]) -> list[int]:
    return [
        day[k] + max(previous[j] for j in range(3) if j != k)
        for k in range(3)
    ]


def ninja_training(points: Iterable[Sequence[int]]) -> int:
    """Most merit points when the same activity is never done on two days running."""
    days = _training_days(points)
    table = [days[0]]
    for day in days[1:]:
        table.append(_next_day(day, table[-1]))
    return max(table[-1])


def ninja_training_optimized(points: Iterable[Sequence[int]]) -> int:
    """Same as :func:`ninja_training`, keeping only the previous day."""
    days = _training_days(points)
    previous = days[0]
    for day in days[1:]:
        previous = _next_day(day, previous)
    return max(previous)


def _subset_input(values: Iterable[int], target: int) -> list[int]:
    items = list(values)
    _require_non_negative(items, "values")
    if target < 0:
        raise ValueError("target must be non-negative")
    return items


def is_subset_sum(values: Iterable[int], target: int) -> bool:
    """Tell whether some subset of the values sums to target (memoised)."""
    items = _subset_input(values, target)

    @lru_cache(maxsize=None)
    def reachable(i: int, remaining: int) -> bool:
        if remaining == 0:
            return True
        if i < 0:
            return False
        if i == 0:
            return items[0] == remaining
        if reachable(i - 1, remaining):
            return True
        return remaining >= items[i] and reachable(i - 1, remaining - items[i])

    return reachable(len(items) - 1, target)


def is_subset_sum_tabulated(values: Iterable[int], target: int) -> bool:
    """Tell whether some subset of the values sums to target, with a full table."""
    items = _subset_input(values, target)
    if not items:
        return target == 0
    first = [t == 0 or t == items[0] for t in range(target + 1)]
    table = [first]
    for value in items[1:]:
        above = table[-1]
        table.append([above[t] or (t >= value and above[t - value]) for t in range(target + 1)])
    return table[-1][target]


def is_subset_sum_optimized(values: Iterable[int], target: int) -> bool:
    """Tell whether some subset of the values sums to target, with one row."""
    items = _subset_input(values, target)
    if not items:
        return target == 0
    row = [t == 0 or t == items[0] for t in range(target + 1)]
    for value in items[1:]:
        row = [row[t] or (t >= value and row[t - value]) for t in range(target + 1)]
    return row[target]


def count_subsets_with_sum(values: Iterable[int], target: int) -> int:
    """Number of subsets (by position) of the values that sum to target."""
    items = _subset_input(values, target)

    @lru_cache(maxsize=None)
    def count(i: int, remaining: int) -> int:
        if i < 0:
            return 1 if remaining == 0 else 0
        total = count(i - 1, remaining)
        if remaining >= items[i]:
            total += count(i - 1, remaining - items[i])
        return total

    return count(len(items) - 1, target)