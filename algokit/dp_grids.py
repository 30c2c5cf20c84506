"""Dynamic programming over grids, triangles and lattice paths."""

from __future__ import annotations

import math
from typing import Sequence

Grid = Sequence[Sequence[int]]


def _rows(grid: Grid) -> list[list[int]]:
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    return rows


def cherry_pickup(grid: Grid) -> int:
    """Most cherries two robots collect walking down from the top corners.

    A cell visited by both robots is counted once.
    """
    rows = _rows(grid)
    width = len(rows[0])
    first = rows[0]
    layer: list[list[int | None]] = [[None] * width for _ in range(width)]
    layer[0][width - 1] = first[0] + (first[width - 1] if width > 1 else 0)
    for row in rows[1:]:
        following: list[list[int | None]] = [[None] * width for _ in range(width)]
        for a in range(width):
            for b in range(width):
                reachable = [
                    layer[a + da][b + db]
                    for da in (-1, 0, 1)
                    for db in (-1, 0, 1)
                    if 0 <= a + da < width
                    and 0 <= b + db < width
                    and layer[a + da][b + db] is not None
                ]
                if reachable:
                    following[a][b] = row[a] + (row[b] if a != b else 0) + max(reachable)
        layer = following
    return max(value for line in layer for value in line if value is not None)


def min_falling_path_sum(matrix: Grid) -> int:
    """Smallest sum of a path moving down one row at a time, shifting at most one column."""
    rows = _rows(matrix)
    previous = rows[0]
    for row in rows[1:]:
        previous = [
            value + min(previous[max(j - 1, 0): j + 2])
            for j, value in enumerate(row)
        ]
    return min(previous)


def min_path_sum(grid: Grid) -> int:
    """Smallest sum of a path from the top-left to the bottom-right moving right or down."""
    rows = _rows(grid)
    table = [[0] * len(row) for row in rows]
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            if i == 0 and j == 0:
                table[i][j] = value
                continue
            up = table[i - 1][j] if i > 0 else math.inf
            left = table[i][j - 1] if j > 0 else math.inf
            table[i][j] = value + min(up, left)
    return table[-1][-1]


def min_path_sum_optimized(grid: Grid) -> int:
    """Same as :func:`min_path_sum`, keeping a single row."""
    rows = _rows(grid)
    previous: list[float] | None = None
    for row in rows:
        current: list[float] = []
        for j, value in enumerate(row):
            if previous is None and j == 0:
                current.append(value)
                continue
            up = previous[j] if previous is not None else math.inf
            left = current[j - 1] if j > 0 else math.inf
            current.append(value + min(up, left))
        previous = current
    return int(previous[-1])


def _triangle(triangle: Grid) -> list[list[int]]:
    rows = [list(row) for row in triangle]
    if not rows or not rows[0]:
        raise ValueError("triangle must not be empty")
    return rows


def minimum_total(triangle: Grid) -> int:
    """Smallest top-to-bottom path sum in a triangle, stepping to adjacent entries."""
    rows = _triangle(triangle)
    table = [rows[0][:1]]
    for row in rows[1:]:
        above = table[-1]
        table.append([
            value + min(
                above[j] if j < len(above) else math.inf,
                above[j - 1] if 0 <= j - 1 < len(above) else math.inf,
            )
            for j, value in enumerate(row)
        ])
    return min(table[-1])


def minimum_total_optimized(triangle: Grid) -> int:
    """Same as :func:`minimum_total`, keeping only the previous row."""
    rows = _triangle(triangle)
    previous = rows[0][:1]
    for row in rows[1:]:
        current = []
        for j, value in enumerate(row):
            straight = previous[j] if j < len(previous) else math.inf
            diagonal = previous[j - 1] if 0 <= j - 1 < len(previous) else math.inf
            current.append(value + min(straight, diagonal))
        previous = current
    return min(previous)


def _check_dimensions(m: int, n: int) -> None:
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")


def unique_paths(m: int, n: int) -> int:
    """Number of right/down paths across an ``m`` x ``n`` grid."""
    _check_dimensions(m, n)
    row = [1] * n
    for _ in range(1, m):
        for j in range(1, n):
            row[j] += row[j - 1]
    return row[-1]


def unique_paths_combinatorial(m: int, n: int) -> int:
    """Number of right/down paths across an ``m`` x ``n`` grid, as a binomial coefficient."""
    _check_dimensions(m, n)
    return math.comb(m + n - 2, min(m, n) - 1)


def unique_paths_with_obstacles(grid: Grid) -> int:
    """Number of right/down paths avoiding cells marked 1."""
    rows = _rows(grid)
    table = [[0] * len(row) for row in rows]
    table[0][0] = 0 if rows[0][0] == 1 else 1
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            if (i == 0 and j == 0) or cell == 1:
                continue
            up = table[i - 1][j] if i > 0 and rows[i - 1][j] != 1 else 0
            left = table[i][j - 1] if j > 0 and row[j - 1] != 1 else 0
            table[i][j] = up + left
    return table[-1][-1]