"""
Variable and value ordering heuristics for the backtracking search.

  - most_constrained_cell: most-constrained-variable (MRV). Picks the EMPTY
    cell with the most forbidden digits, i.e. the fewest legal candidates.
  - least_constraining_values: least-constraining-value (LCV). Orders the
    legal digits of a cell so that the digit the fewest peers still permit is
    tried first; placing it takes the fewest options away from the peers.
"""

from typing import List, Optional

import numpy as np

from sudoku_csp.core.grid_types import EMPTY, SIZE, Cell, Grid, unit_scope


def most_constrained_cell(count: np.ndarray, grid: Grid) -> Optional[Cell]:
    """
    Return the EMPTY cell with the highest forbidden-value count.

    Ties go to the first such cell in row-major order. Returns None when the
    grid has no EMPTY cell.

    Example:
        >>> grid = np.zeros((9, 9), dtype=int)
        >>> count = np.zeros((9, 9), dtype=int); count[2, 5] = 3
        >>> most_constrained_cell(count, grid)
        (2, 5)
    """
    open_cells = grid == EMPTY
    if not open_cells.any():
        return None

    # Filled cells score -1 so they can never win; argmax returns the first
    # maximum in row-major order.
    scores = np.where(open_cells, count, -1)
    idx = int(np.argmax(scores))
    return (idx // SIZE, idx % SIZE)


def value_popularity(row: int, col: int, mask: np.ndarray) -> np.ndarray:
    """
    For each digit, how many peers of (row, col) still permit it.

    Peers are the union of the row, column and block cells, each counted
    once, the cell itself excluded.

    Returns:
        int array of shape (9,); entry v is the score of digit v+1
    """
    scope = unit_scope(row, col)
    scope[row, col] = False
    return (~mask[scope]).sum(axis=0)


def least_constraining_values(row: int, col: int, mask: np.ndarray) -> List[int]:
    """
    Legal digits for (row, col), least constraining first.

    Digits are sorted ascending by value_popularity; equal scores keep
    ascending digit order.

    Args:
        row, col: Cell to fill
        mask: Forbidden-value mask, shape (9, 9, 9)

    Returns:
        List of digits 1..9 (empty if the cell has no legal candidate)
    """
    popularity = value_popularity(row, col, mask)
    legal = [v for v in range(SIZE) if not mask[row, col, v]]
    legal.sort(key=lambda v: popularity[v])
    return [v + 1 for v in legal]
