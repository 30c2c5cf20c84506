"""Breadth-first searches over two-dimensional grids."""

from __future__ import annotations

from collections import deque
from itertools import product
from typing import Iterator, Sequence

_ORTHOGONAL = ((1, 0), (-1, 0), (0, 1), (0, -1))
_ALL_EIGHT = ((1, 0), (-1, 0), (0, 1), (0, -1), (1, -1), (1, 1), (-1, 1), (-1, -1))


def _cells(grid: Sequence[Sequence]) -> list[list]:
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")
    return rows


def _neighbours(
    row: int, col: int, height: int, width: int, directions: Sequence[tuple[int, int]]
) -> Iterator[tuple[int, int]]:
    for d_row, d_col in directions:
        r, c = row + d_row, col + d_col
        if 0 <= r < height and 0 <= c < width:
            yield r, c


def flood_fill(image: Sequence[Sequence[int]], row: int, col: int, color: int) -> list[list[int]]:
    """Return a copy of the image with the region around ``(row, col)`` recoloured."""
    pixels = _cells(image)
    height, width = len(pixels), len(pixels[0])
    if not (0 <= row < height and 0 <= col < width):
        raise ValueError("start position lies outside the image")
    original = pixels[row][col]
    seen = {(row, col)}
    queue = deque([(row, col)])
    while queue:
        r, c = queue.popleft()
        pixels[r][c] = color
        for nr, nc in _neighbours(r, c, height, width, _ORTHOGONAL):
            if (nr, nc) not in seen and pixels[nr][nc] == original:
                seen.add((nr, nc))
                queue.append((nr, nc))
    return pixels


def count_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of islands of ``'L'`` cells, counting diagonal neighbours as joined."""
    cells = _cells(grid)
    height, width = len(cells), len(cells[0])
    seen: set[tuple[int, int]] = set()
    islands = 0
    for start in product(range(height), range(width)):
        if cells[start[0]][start[1]] != "L" or start in seen:
            continue
        islands += 1
        seen.add(start)
        queue = deque([start])
        while queue:
            r, c = queue.popleft()
            for nr, nc in _neighbours(r, c, height, width, _ALL_EIGHT):
                if (nr, nc) not in seen and cells[nr][nc] == "L":
                    seen.add((nr, nc))
                    queue.append((nr, nc))
    return islands


def count_distinct_islands(grid: Sequence[Sequence[int]]) -> int:
    """Number of differently shaped islands of 1-cells; translated copies count once."""
    cells = _cells(grid)
    height, width = len(cells), len(cells[0])
    seen: set[tuple[int, int]] = set()
    shapes: set[tuple[tuple[int, int], ...]] = set()
    for start in product(range(height), range(width)):
        if cells[start[0]][start[1]] != 1 or start in seen:
            continue
        base_row, base_col = start
        seen.add(start)
        queue = deque([start])
        shape = []
        while queue:
            r, c = queue.popleft()
            shape.append((r - base_row, c - base_col))
            for nr, nc in _neighbours(r, c, height, width, _ORTHOGONAL):
                if (nr, nc) not in seen and cells[nr][nc] == 1:
                    seen.add((nr, nc))
                    queue.append((nr, nc))
        shapes.add(tuple(shape))
    return len(shapes)


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until no fresh orange (1) is left beside a rotten one (2) spreading rot.

    Returns -1 when some fresh orange can never rot.
    """
    cells = _cells(grid)
    height, width = len(cells), len(cells[0])
    fresh = sum(value == 1 for row in cells for value in row)
    if not fresh:
        return 0
    queue = deque(
        (r, c) for r, c in product(range(height), range(width)) if cells[r][c] == 2
    )
    minutes = -1
    while queue:
        minutes += 1
        for _ in range(len(queue)):
            r, c = queue.popleft()
            for nr, nc in _neighbours(r, c, height, width, _ORTHOGONAL):
                if cells[nr][nc] == 1:
                    cells[nr][nc] = 2
                    fresh -= 1
                    queue.append((nr, nc))
    return minutes if fresh == 0 else -1