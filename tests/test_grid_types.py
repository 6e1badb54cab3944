"""
Tests for grid types and coordinate enumerators.
"""

import numpy as np
import pytest

from sudoku_csp.core.grid_types import (
    EMPTY,
    as_grid,
    box_coords,
    box_index,
    cell_values,
    col_coords,
    empty_grid,
    get_cell,
    peers,
    row_coords,
    set_cell,
    unit_scope,
    unit_values,
)


def test_row_and_col_coords():
    assert row_coords(3) == [(3, c) for c in range(9)]
    assert col_coords(5) == [(r, 5) for r in range(9)]


def test_box_coords_middle_right_block():
    cells = box_coords(4, 7)
    assert cells == [(3, 6), (3, 7), (3, 8),
                     (4, 6), (4, 7), (4, 8),
                     (5, 6), (5, 7), (5, 8)]
    assert box_index(4, 7) == 5


def test_peers_are_twenty_distinct_cells():
    for r in range(9):
        for c in range(9):
            ps = peers(r, c)
            assert len(ps) == 20
            assert len(set(ps)) == 20
            assert (r, c) not in ps


def test_unit_scope_includes_cell_itself():
    scope = unit_scope(0, 0)
    assert scope[0, 0]
    assert scope.sum() == 21
    assert scope[2, 2] and not scope[3, 3]


def test_unit_values_covers_all_units():
    grid = np.arange(81).reshape(9, 9) % 10
    units = unit_values(grid)
    assert len(units) == 27
    labels = [label for label, _ in units]
    assert labels[0] == "row 0" and labels[9] == "column 0" and labels[26] == "box 8"
    assert all(values.shape == (9,) for _, values in units)


def test_unit_values_follow_enumerators():
    grid = np.arange(81).reshape(9, 9)
    units = dict(unit_values(grid))
    assert units["row 4"].tolist() == grid[4, :].tolist()
    assert units["column 7"].tolist() == grid[:, 7].tolist()
    # Block 5 is rows 3-5, columns 6-8
    assert units["box 5"].tolist() == grid[3:6, 6:9].ravel().tolist()
    assert cell_values(grid, box_coords(4, 7)).tolist() == units["box 5"].tolist()


def test_as_grid_copies_input():
    values = [[0] * 9 for _ in range(9)]
    grid = as_grid(values)
    grid[0, 0] = 5
    assert values[0][0] == 0


def test_as_grid_rejects_bad_shape_and_values():
    with pytest.raises(ValueError):
        as_grid(np.zeros((4, 4), dtype=int))

    bad = empty_grid()
    bad[2, 3] = 10
    with pytest.raises(ValueError, match="0..9"):
        as_grid(bad)


def test_get_and_set_cell():
    grid = empty_grid()
    set_cell(grid, (1, 2), 7)
    assert get_cell(grid, (1, 2)) == 7
    set_cell(grid, (1, 2), EMPTY)
    assert get_cell(grid, (1, 2)) == EMPTY

    with pytest.raises(ValueError):
        set_cell(grid, (0, 0), 12)
