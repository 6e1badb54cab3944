"""
Tests for most-constrained-cell selection and least-constraining-value ordering.
"""

import numpy as np

from sudoku_csp.constraints.tracker import ConstraintState, build_initial_state
from sudoku_csp.solver.heuristics import (
    least_constraining_values,
    most_constrained_cell,
    value_popularity,
)


def test_most_constrained_picks_single_candidate_cell(mrv_grid):
    state = build_initial_state(mrv_grid)
    assert state.count[8, 8] == 8
    assert state.count[0, 0] == 4
    assert most_constrained_cell(state.count, mrv_grid) == (8, 8)


def test_most_constrained_ties_go_to_row_major_first():
    grid = np.zeros((9, 9), dtype=int)
    count = np.zeros((9, 9), dtype=int)
    count[6, 1] = 5
    count[2, 7] = 5
    count[2, 8] = 4
    assert most_constrained_cell(count, grid) == (2, 7)


def test_most_constrained_skips_filled_cells():
    grid = np.zeros((9, 9), dtype=int)
    count = np.zeros((9, 9), dtype=int)
    grid[0, 0] = 1
    count[0, 0] = 9
    count[3, 3] = 2
    assert most_constrained_cell(count, grid) == (3, 3)


def test_most_constrained_on_full_grid(classic_solution):
    count = np.zeros((9, 9), dtype=int)
    assert most_constrained_cell(count, classic_solution) is None


def test_all_digits_equal_on_empty_mask():
    state = ConstraintState()
    assert value_popularity(0, 0, state.mask).tolist() == [20] * 9
    assert least_constraining_values(0, 0, state.mask) == list(range(1, 10))


def test_least_constraining_value_order():
    state = ConstraintState()
    # Digit 1 is already ruled out in the rest of row 0 and two block cells
    state.mask[0, 1:, 0] = True
    state.mask[1, 1, 0] = True
    state.mask[2, 2, 0] = True
    # Digit 5 is ruled out in the rest of column 0
    state.mask[1:, 0, 4] = True
    # Digit 9 is forbidden at the cell itself
    state.mask[0, 0, 8] = True

    popularity = value_popularity(0, 0, state.mask)
    assert popularity[0] == 10
    assert popularity[4] == 12
    assert popularity[1] == 20

    assert least_constraining_values(0, 0, state.mask) == [1, 5, 2, 3, 4, 6, 7, 8]


def test_block_peers_sharing_row_are_counted_once():
    state = ConstraintState()
    # (0, 1) is both a row peer and a block peer of (0, 0)
    state.mask[0, 1, 2] = True
    assert value_popularity(0, 0, state.mask)[2] == 19


def test_no_candidates_gives_empty_list():
    state = ConstraintState()
    state.mask[4, 4, :] = True
    assert least_constraining_values(4, 4, state.mask) == []
