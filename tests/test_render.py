import numpy as np
import pytest

from render import cell_label, logical_addresses, placement_str, solution_grid, solution_str
from tests.conftest import LEFT_BLOCK, RIGHT_BLOCK


def test_cell_labels():
    assert cell_label(0) == "Jan"
    assert cell_label(5) == "Jun"
    assert cell_label(8) == "Jul"
    assert cell_label(13) == "Dec"
    assert cell_label(16) == "1"
    assert cell_label(24) == "8"
    assert cell_label(50) == "31"


@pytest.mark.parametrize("address", [6, 7, 15, 23, 51, 63])
def test_guard_cells_have_no_label(address):
    with pytest.raises(ValueError):
        cell_label(address)


def test_logical_addresses_are_the_labelled_cells():
    addresses = logical_addresses()
    assert len(addresses) == 43
    assert addresses[-1] == 50
    for address in addresses:
        cell_label(address)


def test_solution_grid_numbers_bricks_in_order():
    grid = solution_grid([LEFT_BLOCK, RIGHT_BLOCK])
    assert grid.shape == (8, 8)
    assert grid[0].tolist() == [1, 1, 1, 2, 2, 2, 0, 0]
    assert grid[1].tolist() == [1, 1, 1, 2, 2, 2, 0, 0]
    assert not np.any(grid[2:])


def test_solution_str_marks_uncovered_cells():
    lines = solution_str([LEFT_BLOCK, RIGHT_BLOCK]).splitlines()
    assert lines == ["111222", "111222"] + ["OOOOOOO"] * 4 + ["OOO"]


def test_placement_str():
    lines = placement_str(RIGHT_BLOCK).splitlines()
    assert lines[0] == "...XXX"
    assert lines[1] == "...XXX"
    assert lines[2] == "......."
    assert lines[-1] == "..."
