"""
Backtracking search over a Sudoku grid.

BacktrackingSearch owns the working grid, the ConstraintState and the stats
of a single solve. Each call to _search is one node of the search tree:

  1. validity check     duplicate scan of rows, columns and blocks
  2. terminal check     every cell filled -> success
  3. variable choice    most_constrained_cell (MRV)
  4. value ordering     least_constraining_values (LCV)
  5. branch             place, apply delta, recurse; undo on failure
  6. exhaustion         no digit worked -> fail back to the parent

Each placement and each undo counts one step. Depth is bounded by the number
of EMPTY cells at the root (at most 81), and every node tries at most its
number of legal digits.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from sudoku_csp.config import SolverConfig
from sudoku_csp.constraints.tracker import (
    ConstraintState,
    Delta,
    apply_delta,
    build_initial_state,
    compute_delta,
    undo_delta,
)
from sudoku_csp.core.grid_types import EMPTY, Grid, set_cell, unit_values
from sudoku_csp.solver.heuristics import least_constraining_values, most_constrained_cell


class SearchInvariantError(AssertionError):
    """Raised when a search node below the root sees a duplicate digit."""
    pass


def has_duplicates(values: np.ndarray) -> bool:
    """True if a non-EMPTY value occurs more than once."""
    filled = values[values != EMPTY]
    return len(np.unique(filled)) != len(filled)


def find_conflicts(grid: Grid) -> List[str]:
    """
    Labels of every unit holding a duplicate digit.

    Scans all 9 rows, 9 columns and 9 blocks.

    Example:
        >>> grid = np.zeros((9, 9), dtype=int); grid[0, 0] = grid[0, 8] = 4
        >>> find_conflicts(grid)
        ['row 0']
    """
    return [label for label, values in unit_values(grid) if has_duplicates(values)]


def is_valid(grid: Grid) -> bool:
    """True if no row, column or block holds a duplicate digit."""
    return not any(has_duplicates(values) for _, values in unit_values(grid))


def is_filled(grid: Grid) -> bool:
    """True if every cell is filled (says nothing about validity)."""
    return not (grid == EMPTY).any()


@dataclass
class SearchStats:
    """
    Effort counters for one search.

    Attributes:
        placements: Digits written into the grid
        backtracks: Placements undone after a failed branch
        nodes: Search nodes visited (calls to the recursive step)
        max_depth: Deepest node reached (root is depth 0)
        trace: (row, col, digit) per placement, when tracing is enabled
    """
    placements: int = 0
    backtracks: int = 0
    nodes: int = 0
    max_depth: int = 0
    trace: List[Tuple[int, int, int]] = field(default_factory=list)

    @property
    def steps(self) -> int:
        """Every placement and every undo counts one step."""
        return self.placements + self.backtracks


class BacktrackingSearch:
    """
    Recursive MRV/LCV backtracking with incremental constraint tracking.

    The search mutates its own copy of the grid. After run() returns True,
    `grid` holds the solution; after False it holds the starting grid again,
    since every placement has been undone.

    Example:
        >>> search = BacktrackingSearch(puzzle)
        >>> if search.run():
        ...     print(search.grid, search.stats.steps)
    """

    def __init__(self, grid: Grid, config: SolverConfig | None = None):
        self.config = config if config is not None else SolverConfig()
        self.grid = np.array(grid, dtype=int, copy=True)
        self.state: ConstraintState = build_initial_state(self.grid)
        self.stats = SearchStats()

    def run(self) -> bool:
        """Search from the current grid; True once a full valid grid is reached."""
        return self._search(depth=0)

    def _search(self, depth: int) -> bool:
        self.stats.nodes += 1
        self.stats.max_depth = max(self.stats.max_depth, depth)

        # Below the root a duplicate can only come from a broken apply/undo
        # pairing; the root scan is the invalid-input check.
        if depth == 0 or self.config.check_invariants:
            conflicts = find_conflicts(self.grid)
            if conflicts:
                if depth > 0:
                    raise SearchInvariantError(
                        f"Duplicate digits at depth {depth}: {', '.join(conflicts)}"
                    )
                return False

        if is_filled(self.grid):
            return True

        cell = most_constrained_cell(self.state.count, self.grid)
        row, col = cell
        for value in least_constraining_values(row, col, self.state.mask):
            delta = self._place(row, col, value)
            solved = False
            try:
                solved = self._search(depth + 1)
            finally:
                if not solved:
                    self._unplace(row, col, delta)
            if solved:
                return True

        return False

    def _place(self, row: int, col: int, value: int) -> Delta:
        set_cell(self.grid, (row, col), value)
        delta = compute_delta(row, col, value, self.state.mask)
        apply_delta(self.state, delta)
        self.stats.placements += 1
        if self.config.record_trace:
            self.stats.trace.append((row, col, value))
        return delta

    def _unplace(self, row: int, col: int, delta: Delta) -> None:
        undo_delta(self.state, delta)
        set_cell(self.grid, (row, col), EMPTY)
        self.stats.backtracks += 1
