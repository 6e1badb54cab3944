"""
Core solve entrypoints for the Sudoku constraint solver.

This module ties the pipeline together:
  1. Validate and copy the caller's grid
  2. Reject puzzles whose givens already clash (status "invalid")
  3. Run the backtracking search (or the ILP reference solver)
  4. Return a SolveResult with the outcome and search effort

solve() returns the typed result; solve_grid() keeps the plain
(grid, steps) contract where failure is only visible by inspecting the grid.
"""

from __future__ import annotations

import logging
from typing import Tuple

from sudoku_csp.config import SolverConfig
from sudoku_csp.core.grid_types import EMPTY, Grid, as_grid
from sudoku_csp.runners.results import SolveResult
from sudoku_csp.solver.lp_solver import InfeasibleModelError, solve_with_ilp
from sudoku_csp.solver.search import BacktrackingSearch, SearchStats, find_conflicts


logger = logging.getLogger(__name__)


def solve(grid, config: SolverConfig | None = None) -> SolveResult:
    """
    Solve a puzzle with MRV/LCV backtracking.

    The caller's grid is never modified.

    Args:
        grid: 9x9 nested sequence or array, 0 = EMPTY, 1..9 = given
        config: SolverConfig (defaults: invariant checks on, no trace)

    Returns:
        SolveResult:
          - "solved": result.grid is the completed grid
          - "invalid": givens clash; result.conflicts names the units, steps == 0
          - "infeasible": search exhausted; result.grid is a copy of the puzzle

    Raises:
        ValueError: If the grid has the wrong shape or values outside 0..9
        SearchInvariantError: If invariant checks catch an internal fault

    Example:
        >>> result = solve(puzzle)
        >>> if result.solved:
        ...     print(result.steps)
    """
    if config is None:
        config = SolverConfig()

    puzzle = as_grid(grid)

    conflicts = find_conflicts(puzzle)
    if conflicts:
        logger.warning("Did not solve puzzle: givens clash in %s", ", ".join(conflicts))
        return SolveResult(
            status="invalid",
            grid=puzzle,
            steps=0,
            conflicts=conflicts,
        )

    search = BacktrackingSearch(puzzle, config)
    logger.debug("Starting search with %d empty cells", int((puzzle == EMPTY).sum()))

    if search.run():
        logger.debug(
            "Solved in %d steps (%d nodes, max depth %d)",
            search.stats.steps, search.stats.nodes, search.stats.max_depth,
        )
        return SolveResult(
            status="solved",
            grid=search.grid,
            steps=search.stats.steps,
            stats=search.stats,
        )

    logger.warning(
        "Did not solve puzzle: search exhausted after %d steps", search.stats.steps
    )
    return SolveResult(
        status="infeasible",
        grid=puzzle,
        steps=search.stats.steps,
        stats=search.stats,
    )


def solve_grid(grid) -> Tuple[Grid, int]:
    """
    Plain (grid, steps) contract.

    Returns the solved grid, or a copy of the unmodified puzzle when no
    solution was found; check with results.is_complete_solution.
    """
    result = solve(grid)
    return result.grid, result.steps


def solve_ilp(grid) -> SolveResult:
    """
    Solve a puzzle with the ILP reference solver.

    Uses the same statuses as solve(); steps are always 0 since no search
    tree is explored.
    """
    puzzle = as_grid(grid)

    conflicts = find_conflicts(puzzle)
    if conflicts:
        logger.warning("Did not solve puzzle: givens clash in %s", ", ".join(conflicts))
        return SolveResult(
            status="invalid", grid=puzzle, steps=0, conflicts=conflicts, method="ilp"
        )

    try:
        solution = solve_with_ilp(puzzle)
    except InfeasibleModelError as e:
        logger.warning("Did not solve puzzle: %s", e)
        return SolveResult(status="infeasible", grid=puzzle, steps=0, method="ilp")

    return SolveResult(
        status="solved", grid=solution, steps=0, stats=SearchStats(), method="ilp"
    )
