"""
Result and diagnostics structures for the Sudoku solver.

This module defines SolveResult, the single structured object that captures
everything about a solve attempt - especially failures.

Key components:
  - SolveResult: Complete solve attempt record (status, grid, effort)
  - compute_grid_mismatches: Per-cell diff between an expected and a produced grid
  - compute_given_violations: Givens of the puzzle that a produced grid overwrote
  - is_complete_solution: Fully filled and valid
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal

import numpy as np

from sudoku_csp.core.grid_types import EMPTY, Grid
from sudoku_csp.solver.search import SearchStats, is_filled, is_valid


# Status type for solve attempts
SolveStatus = Literal["solved", "invalid", "infeasible"]


@dataclass
class SolveResult:
    """
    Complete record of a single solve attempt.

    Attributes:
        status: Solve outcome - one of:
            - "solved": grid is a complete valid solution
            - "invalid": the puzzle already had a duplicate in some unit;
                         no placement was attempted
            - "infeasible": the puzzle is valid but the search exhausted
                            every branch without a solution
        grid: The solution when solved, otherwise a copy of the puzzle
        steps: Placements plus undone placements (0 for "invalid")
        stats: Detailed search counters
        conflicts: Units holding duplicates (only for "invalid"),
                   e.g. ["row 0", "box 1"]
        method: "search" or "ilp"
    """
    status: SolveStatus
    grid: Grid
    steps: int
    stats: SearchStats = field(default_factory=SearchStats)
    conflicts: List[str] = field(default_factory=list)
    method: str = "search"

    @property
    def solved(self) -> bool:
        return self.status == "solved"

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly view (grid as nested lists, trace as lists)."""
        return {
            "status": self.status,
            "method": self.method,
            "steps": self.steps,
            "placements": self.stats.placements,
            "backtracks": self.stats.backtracks,
            "nodes": self.stats.nodes,
            "max_depth": self.stats.max_depth,
            "conflicts": list(self.conflicts),
            "grid": self.grid.tolist(),
            "trace": [list(t) for t in self.stats.trace],
        }


def is_complete_solution(grid: Grid) -> bool:
    """
    True if the grid is fully filled and has no duplicate in any unit.

    This is how callers of the plain (grid, steps) contract tell a solved
    grid from the unchanged puzzle handed back on failure.
    """
    return is_filled(grid) and is_valid(grid)


def compute_grid_mismatches(
    true_grid: Grid,
    pred_grid: Grid
) -> List[Dict[str, int]]:
    """
    Compute per-cell mismatches between an expected and a produced grid.

    Args:
        true_grid: Expected grid (9 x 9)
        pred_grid: Produced grid (9 x 9)

    Returns:
        Empty list if the grids are identical, otherwise one record per
        differing cell: {"r": row, "c": col, "true": digit, "pred": digit}

    Raises:
        ValueError: If the shapes differ

    Example:
        >>> true = np.array([[1, 2], [3, 4]])
        >>> pred = np.array([[1, 9], [3, 4]])
        >>> compute_grid_mismatches(true, pred)
        [{'r': 0, 'c': 1, 'true': 2, 'pred': 9}]
    """
    if true_grid.shape != pred_grid.shape:
        raise ValueError(
            f"Grid shapes differ: {true_grid.shape} vs {pred_grid.shape}"
        )

    diff_cells = []
    for coord in np.argwhere(true_grid != pred_grid):
        r, c = int(coord[0]), int(coord[1])
        diff_cells.append({
            "r": r,
            "c": c,
            "true": int(true_grid[r, c]),
            "pred": int(pred_grid[r, c])
        })

    return diff_cells


def compute_given_violations(puzzle: Grid, grid: Grid) -> List[Dict[str, int]]:
    """
    Givens of the puzzle that the grid does not keep.

    Only non-EMPTY cells of the puzzle are compared.
    """
    givens = puzzle != EMPTY
    return [
        m for m in compute_grid_mismatches(puzzle, grid)
        if givens[m["r"], m["c"]]
    ]
