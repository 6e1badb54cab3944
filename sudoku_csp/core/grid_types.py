"""
Core grid types and utilities for the Sudoku constraint solver.

This module defines the fundamental Grid representation and the coordinate
enumerators that every other layer builds on.

Grid: always shape (9, 9), integer dtype
Cells: indexed as (row, col) tuples, both 0-based
Values: EMPTY (0) or a digit in 1..9
"""

from typing import List, Tuple, TypeAlias

import numpy as np


# Block width and total grid width
BOX = 3
SIZE = BOX * BOX

EMPTY = 0
DIGITS = tuple(range(1, SIZE + 1))

Grid: TypeAlias = np.ndarray  # shape: (9, 9), dtype: int, values in {0, ..., 9}
Cell: TypeAlias = Tuple[int, int]  # (row, col) in {0, ..., 8} x {0, ..., 8}


def as_grid(values) -> Grid:
    """
    Convert any 9x9 nested sequence (or array) into a fresh Grid.

    The result never shares memory with the input, so callers may mutate
    it freely.

    Args:
        values: 9x9 nested list/tuple or numpy array of ints in 0..9

    Returns:
        New numpy array of shape (9, 9), dtype=int

    Raises:
        ValueError: If the shape is not (9, 9) or a value is outside 0..9
    """
    grid = np.array(values, dtype=int, copy=True)

    if grid.shape != (SIZE, SIZE):
        raise ValueError(f"Grid must have shape ({SIZE}, {SIZE}), got {grid.shape}")

    if grid.min() < EMPTY or grid.max() > SIZE:
        bad = np.argwhere((grid < EMPTY) | (grid > SIZE))[0]
        raise ValueError(
            f"Cell values must be in 0..{SIZE}, got {int(grid[bad[0], bad[1]])} "
            f"at ({int(bad[0])}, {int(bad[1])})"
        )

    return grid


def empty_grid() -> Grid:
    """Return an all-EMPTY 9x9 grid."""
    return np.zeros((SIZE, SIZE), dtype=int)


def get_cell(grid: Grid, cell: Cell) -> int:
    return int(grid[cell[0], cell[1]])


def set_cell(grid: Grid, cell: Cell, value: int) -> None:
    if value != EMPTY and value not in DIGITS:
        raise ValueError(f"Cell value must be EMPTY or 1..{SIZE}, got {value}")
    grid[cell[0], cell[1]] = value


def row_coords(row: int) -> List[Cell]:
    """All coordinates of one row, left to right."""
    return [(row, col) for col in range(SIZE)]


def col_coords(col: int) -> List[Cell]:
    """All coordinates of one column, top to bottom."""
    return [(row, col) for row in range(SIZE)]


def box_origin(row: int, col: int) -> Cell:
    """Top-left coordinate of the 3x3 block containing (row, col)."""
    return (row // BOX * BOX, col // BOX * BOX)


def box_coords(row: int, col: int) -> List[Cell]:
    """
    All coordinates of the 3x3 block containing (row, col), row-major.

    Example:
        >>> box_coords(4, 7)[:3]
        [(3, 6), (3, 7), (3, 8)]
    """
    r0, c0 = box_origin(row, col)
    return [(r0 + dr, c0 + dc) for dr in range(BOX) for dc in range(BOX)]


def box_index(row: int, col: int) -> int:
    """Block number 0..8, row-major over blocks."""
    return (row // BOX) * BOX + (col // BOX)


def cell_values(grid: Grid, cells: List[Cell]) -> np.ndarray:
    """Values at the given coordinates, in order."""
    rows, cols = zip(*cells)
    return grid[list(rows), list(cols)]


def peers(row: int, col: int) -> List[Cell]:
    """
    Cells sharing a row, column or block with (row, col), itself excluded.

    Each peer appears exactly once (20 cells for a 9x9 grid), in row-major
    order.
    """
    scope = unit_scope(row, col)
    scope[row, col] = False
    return [(int(r), int(c)) for r, c in np.argwhere(scope)]


def unit_scope(row: int, col: int) -> np.ndarray:
    """
    Boolean (9, 9) mask of the row, column and block of (row, col).

    The cell itself is included.
    """
    scope = np.zeros((SIZE, SIZE), dtype=bool)
    scope[row, :] = True
    scope[:, col] = True
    r0, c0 = box_origin(row, col)
    scope[r0:r0 + BOX, c0:c0 + BOX] = True
    return scope


def unit_values(grid: Grid) -> List[Tuple[str, np.ndarray]]:
    """
    Label and contents of all 27 units: 9 rows, 9 columns, 9 blocks.

    Labels look like "row 0", "column 4", "box 8".
    """
    units = []
    for i in range(SIZE):
        units.append((f"row {i}", cell_values(grid, row_coords(i))))
    for i in range(SIZE):
        units.append((f"column {i}", cell_values(grid, col_coords(i))))
    for r0 in range(0, SIZE, BOX):
        for c0 in range(0, SIZE, BOX):
            units.append(
                (f"box {box_index(r0, c0)}", cell_values(grid, box_coords(r0, c0)))
            )
    return units


def print_grid(grid: Grid) -> None:
    """
    Print the grid for debugging, EMPTY cells as '.'.

    This is purely for human inspection during development; use
    grid_io.format_grid for the file format.
    """
    assert grid.ndim == 2, f"Grid must be 2D, got {grid.ndim}D"

    for row in grid:
        print(' '.join(str(int(val)) if val != EMPTY else '.' for val in row))


if __name__ == "__main__":
    # Self-test: enumerator sizes and peer counts
    for r in range(SIZE):
        for c in range(SIZE):
            assert len(set(row_coords(r) + col_coords(c) + box_coords(r, c))) == 21
            assert len(peers(r, c)) == 20, f"Peer count wrong at {(r, c)}"
            assert unit_scope(r, c).sum() == 21

    assert box_coords(4, 7)[0] == (3, 6)
    assert box_index(8, 8) == 8

    print("Grid:")
    print_grid(empty_grid())
    print("\n✓ grid_types.py sanity checks passed.")
