"""
ILP reference solver for Sudoku grids.

This module provides an independent solver that:
  - Creates binary variables y[r,c,d] ∈ {0,1} (cell (r,c) holds digit d)
  - Adds one-digit-per-cell and one-per-unit constraints
  - Fixes the givens
  - Solves using PuLP's CBC solver
  - Returns a (9, 9) numpy grid

It shares no code with the backtracking search, which makes it a useful
oracle for feasibility and a second method for the CLI.
"""

from typing import List

import numpy as np
import pulp

from sudoku_csp.core.grid_types import BOX, EMPTY, SIZE, Grid, as_grid, empty_grid


class InfeasibleModelError(Exception):
    """Raised when the ILP model is infeasible or not optimal."""
    pass


def solve_with_ilp(grid: Grid) -> Grid:
    """
    Build and solve the Sudoku ILP for one grid.

      - Variables: y ∈ {0,1}^(9*9*9)
      - Cells:   Σ_d y[r,c,d] = 1      ∀ r, c
      - Rows:    Σ_c y[r,c,d] = 1      ∀ r, d
      - Columns: Σ_r y[r,c,d] = 1      ∀ c, d
      - Blocks:  Σ_{(r,c)∈b} y[r,c,d] = 1  ∀ b, d
      - Givens:  y[r,c,grid[r,c]] = 1
      - Objective: zero (feasibility only)

    Args:
        grid: Puzzle, shape (9, 9), 0 = EMPTY

    Returns:
        Solved grid, shape (9, 9), digits 1..9

    Raises:
        ValueError: If the grid has the wrong shape or values
        InfeasibleModelError: If the model has no solution

    Example:
        >>> solution = solve_with_ilp(np.zeros((9, 9), dtype=int))
        >>> sorted(solution[0].tolist())
        [1, 2, 3, 4, 5, 6, 7, 8, 9]
    """
    puzzle = as_grid(grid)
    digits = range(SIZE)

    # 1. Create model
    prob = pulp.LpProblem("sudoku_ilp", pulp.LpMinimize)

    # 2. Create binary variables y[r][c][d], d is the 0-based digit index
    y = [
        [
            [pulp.LpVariable(f"y_{r}_{c}_{d}", cat=pulp.LpBinary) for d in digits]
            for c in range(SIZE)
        ]
        for r in range(SIZE)
    ]

    # 3. Exactly one digit per cell
    for r in range(SIZE):
        for c in range(SIZE):
            prob += (pulp.lpSum(y[r][c][d] for d in digits) == 1)

    # 4. Each digit once per row, column and block
    for d in digits:
        for i in range(SIZE):
            prob += (pulp.lpSum(y[i][c][d] for c in range(SIZE)) == 1)
            prob += (pulp.lpSum(y[r][i][d] for r in range(SIZE)) == 1)
        for r0 in range(0, SIZE, BOX):
            for c0 in range(0, SIZE, BOX):
                cells: List = [
                    y[r0 + dr][c0 + dc][d] for dr in range(BOX) for dc in range(BOX)
                ]
                prob += (pulp.lpSum(cells) == 1)

    # 5. Fix givens
    for r, c in np.argwhere(puzzle != EMPTY):
        prob += (y[r][c][int(puzzle[r, c]) - 1] == 1)

    # 6. Zero objective (feasibility only)
    prob += 0

    # 7. Solve using pulp's CBC solver
    status = prob.solve(pulp.PULP_CBC_CMD(msg=False))

    if pulp.LpStatus[status] != "Optimal":
        raise InfeasibleModelError(
            f"Solver status: {pulp.LpStatus[status]}. "
            f"Puzzle has no completion."
        )

    # 8. Decode: digit with y > 0.5 per cell (guards against float noise)
    solution = empty_grid()
    for r in range(SIZE):
        for c in range(SIZE):
            for d in digits:
                val = pulp.value(y[r][c][d])
                if val is not None and val > 0.5:
                    solution[r, c] = d + 1

    # 9. Sanity check: every cell decoded
    if (solution == EMPTY).any():
        bad_cells = np.argwhere(solution == EMPTY)
        raise AssertionError(
            f"One-hot constraint violated in solution at cells: {bad_cells.tolist()}"
        )

    return solution
