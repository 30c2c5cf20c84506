import pytest

from algokit.dp_grids import (
    cherry_pickup,
    min_falling_path_sum,
    min_path_sum,
    min_path_sum_optimized,
    minimum_total,
    minimum_total_optimized,
    unique_paths,
    unique_paths_combinatorial,
    unique_paths_with_obstacles,
)

CHERRY_GRIDS = [
    [[3, 1, 1], [2, 5, 1], [1, 5, 5], [2, 1, 1]],
    [[1, 0, 0, 0, 0, 0, 1], [2, 0, 0, 0, 0, 3, 0], [2, 0, 9, 0, 0, 0, 0], [0, 3, 0, 5, 4, 0, 0]],
    [[4, 7], [1, 1], [9, 2]],
]


def test_cherry_single_row():
    grid = [[3, 1, 5]]
    assert cherry_pickup(grid) == grid[0][0] + grid[0][-1]


def test_cherry_single_column_counts_once():
    grid = [[1], [2], [3]]
    assert cherry_pickup(grid) == sum(row[0] for row in grid)


@pytest.mark.parametrize("grid", CHERRY_GRIDS)
def test_cherry_bounds(grid):
    result = cherry_pickup(grid)
    straight_down = sum(row[0] + row[-1] for row in grid)
    assert straight_down <= result <= sum(sum(row) for row in grid)


def test_cherry_empty():
    with pytest.raises(ValueError):
        cherry_pickup([])


def test_falling_single_cell():
    assert min_falling_path_sum([[-4]]) == -4


@pytest.mark.parametrize(
    "matrix",
    [[[2, 1, 3], [6, 5, 4], [7, 8, 9]], [[-19, 57], [-40, -5]], [[1, 2, 3], [4, 5, 6], [7, 8, 9]]],
)
def test_falling_bounds(matrix):
    result = min_falling_path_sum(matrix)
    columns = list(zip(*matrix))
    assert sum(min(row) for row in matrix) <= result <= min(sum(col) for col in columns)


def test_falling_empty():
    with pytest.raises(ValueError):
        min_falling_path_sum([])


def test_min_path_sum_example():
    grid = [[1, 3, 1], [1, 5, 1], [4, 2, 1]]
    assert min_path_sum(grid) == 7
    assert min_path_sum_optimized(grid) == 7


@pytest.mark.parametrize(
    "grid", [[[1, 2, 3], [4, 5, 6]], [[5]], [[1], [9], [2]], [[7, 1, 8, 2]], [[0, 4], [3, 0], [1, 1]]]
)
def test_min_path_sum_variants_agree(grid):
    assert min_path_sum_optimized(grid) == min_path_sum(grid)


def test_min_path_sum_single_row_is_row_sum():
    grid = [[7, 1, 8, 2]]
    assert min_path_sum(grid) == sum(grid[0])


def test_min_path_sum_empty():
    with pytest.raises(ValueError):
        min_path_sum([])
    with pytest.raises(ValueError):
        min_path_sum_optimized([[]])


def test_triangle_example():
    triangle = [[2], [3, 4], [6, 5, 7], [4, 1, 8, 3]]
    assert minimum_total(triangle) == 11
    assert minimum_total_optimized(triangle) == 11


@pytest.mark.parametrize(
    "triangle", [[[-10]], [[1], [2, 3]], [[-1], [2, 3], [1, -1, -3]], [[5], [9, 1], [4, 8, 1], [2, 6, 3, 7]]]
)
def test_triangle_variants_agree(triangle):
    result = minimum_total(triangle)
    assert minimum_total_optimized(triangle) == result
    assert result >= sum(min(row) for row in triangle)


def test_triangle_single_row():
    assert minimum_total([[-10]]) == -10


def test_triangle_empty():
    with pytest.raises(ValueError):
        minimum_total([])


def test_unique_paths_example():
    assert unique_paths(3, 7) == 28
    assert unique_paths_combinatorial(3, 7) == 28


@pytest.mark.parametrize("m, n", [(m, n) for m in range(1, 7) for n in range(1, 7)])
def test_unique_paths_variants_agree(m, n):
    count = unique_paths(m, n)
    assert unique_paths_combinatorial(m, n) == count
    assert unique_paths(n, m) == count
    assert unique_paths_with_obstacles([[0] * n for _ in range(m)]) == count


def test_unique_paths_single_line():
    assert unique_paths(1, 9) == unique_paths(9, 1) == 1


def test_unique_paths_bad_dimensions():
    with pytest.raises(ValueError):
        unique_paths(0, 3)
    with pytest.raises(ValueError):
        unique_paths_combinatorial(2, -1)


def test_obstacle_in_middle_reduces_paths():
    grid = [[0, 0, 0], [0, 1, 0], [0, 0, 0]]
    assert 0 < unique_paths_with_obstacles(grid) < unique_paths(3, 3)


def test_blocked_corners():
    assert unique_paths_with_obstacles([[1, 0], [0, 0]]) == 0
    assert unique_paths_with_obstacles([[0, 0], [0, 1]]) == 0


def test_obstacle_wall_blocks_everything():
    grid = [[0, 1, 0], [0, 1, 0], [0, 1, 0]]
    assert unique_paths_with_obstacles(grid) == 0