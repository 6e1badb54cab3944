"""
Shared puzzles for the test suite.

All grids are built fresh per test so tests may mutate them.
"""

import numpy as np
import pytest


CLASSIC_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

CLASSIC_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


def grid_from_string(cells: str) -> np.ndarray:
    """81 characters, row-major, '0' or '.' for EMPTY."""
    assert len(cells) == 81
    return np.array(
        [0 if ch in "0." else int(ch) for ch in cells], dtype=int
    ).reshape(9, 9)


@pytest.fixture
def classic_puzzle_text() -> str:
    """The classic puzzle as 81 characters, row-major, '0' for EMPTY."""
    return CLASSIC_PUZZLE


@pytest.fixture
def classic_puzzle() -> np.ndarray:
    return grid_from_string(CLASSIC_PUZZLE)


@pytest.fixture
def classic_solution() -> np.ndarray:
    return grid_from_string(CLASSIC_SOLUTION)


@pytest.fixture
def one_missing(classic_solution) -> np.ndarray:
    """The classic solution with (0, 0) cleared; only a 5 fits there."""
    grid = classic_solution.copy()
    grid[0, 0] = 0
    return grid


@pytest.fixture
def row_duplicate() -> np.ndarray:
    """Two 4s in row 0."""
    grid = np.zeros((9, 9), dtype=int)
    grid[0, 0] = 4
    grid[0, 8] = 4
    return grid


@pytest.fixture
def dead_end() -> np.ndarray:
    """
    Valid givens with no completion.

    Row 0 holds 1..7 and leaves (0, 0) and (0, 1) open; the 9 at (1, 2)
    shares block 0 with both, so both cells can only take an 8.
    """
    grid = np.zeros((9, 9), dtype=int)
    grid[0, 2:] = [1, 2, 3, 4, 5, 6, 7]
    grid[1, 2] = 9
    return grid


@pytest.fixture
def mrv_grid(classic_solution) -> np.ndarray:
    """
    (8, 8) has exactly one candidate (9); (0, 0) has five.

    Keeps row 8 of the classic solution except its last cell, plus
    3, 4, 6, 7 in columns 1..4 of row 0. Everything else is EMPTY, so a
    completion exists.
    """
    grid = np.zeros((9, 9), dtype=int)
    grid[8, :8] = classic_solution[8, :8]
    grid[0, 1:5] = classic_solution[0, 1:5]
    return grid
