"""
Sudoku constraint solver.

Constraint-propagating backtracking search for standard 9x9 Sudoku.

Key components:
  - core/grid_types.py: Grid alias and row/column/block enumerators
  - core/grid_io.py: Text parsing and formatting of grids
  - constraints/tracker.py: Forbidden-value mask with delta apply/undo
  - solver/heuristics.py: Most-constrained cell, least-constraining values
  - solver/search.py: Recursive backtracking engine
  - solver/lp_solver.py: ILP reference solver (pulp)
  - runners/kernel.py: solve() / solve_grid() entrypoints
"""

from sudoku_csp.config import SolverConfig
from sudoku_csp.runners.kernel import solve, solve_grid, solve_ilp
from sudoku_csp.runners.results import SolveResult, is_complete_solution

__all__ = [
    "SolverConfig",
    "SolveResult",
    "is_complete_solution",
    "solve",
    "solve_grid",
    "solve_ilp",
]
