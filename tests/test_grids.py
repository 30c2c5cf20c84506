import copy

import pytest

from algokit.grids import count_distinct_islands, count_islands, flood_fill, oranges_rotting


def test_flood_fill_worked_example():
    image = [[1, 1, 1], [1, 1, 0], [1, 0, 1]]
    assert flood_fill(image, 1, 1, 2) == [[2, 2, 2], [2, 2, 0], [2, 0, 1]]


def test_flood_fill_leaves_input_untouched():
    image = [[1, 1, 0], [0, 1, 0]]
    snapshot = copy.deepcopy(image)
    result = flood_fill(image, 0, 0, 7)
    assert image == snapshot
    assert result[0][0] == 7


def test_flood_fill_with_same_colour_changes_nothing():
    image = [[3, 3, 1], [1, 3, 3]]
    assert flood_fill(image, 0, 0, 3) == image


def test_flood_fill_rejects_start_outside():
    with pytest.raises(ValueError):
        flood_fill([[1]], 1, 0, 2)


@pytest.mark.parametrize("k", range(5))
def test_count_islands_counts_separated_cells(k):
    row = "W".join("L" * k) if k else "W"
    grid = ["W" * len(row), row, "W" * len(row)]
    assert count_islands(grid) == k


def test_count_islands_joins_diagonals():
    assert count_islands(["LWW", "WLW", "WWL"]) == 1


def test_count_islands_rejects_empty_grid():
    with pytest.raises(ValueError):
        count_islands([])


@pytest.mark.parametrize("copies", [1, 2, 4])
def test_translated_copies_are_one_shape(copies):
    top = [1, 1, 0] * copies
    bottom = [1, 0, 0] * copies
    grid = [top, bottom]
    assert count_distinct_islands(grid) == 1


@pytest.mark.parametrize("k", [1, 2, 3, 5])
def test_bars_of_different_lengths_are_distinct(k):
    row = [cell for length in range(1, k + 1) for cell in [1] * length + [0]]
    assert count_distinct_islands([row]) == k


def test_oranges_without_fresh_take_no_time():
    assert oranges_rotting([[2, 0], [0, 2]]) == 0


def test_unreachable_orange_never_rots():
    assert oranges_rotting([[2, 0, 1]]) == -1


@pytest.mark.parametrize("n", [2, 3, 6])
def test_rot_spreads_one_cell_per_minute(n):
    grid = [[2] + [1] * (n - 1)]
    snapshot = copy.deepcopy(grid)
    assert oranges_rotting(grid) == n - 1
    assert grid == snapshot


def test_oranges_reject_ragged_grid():
    with pytest.raises(ValueError):
        oranges_rotting([[1, 2], [1]])