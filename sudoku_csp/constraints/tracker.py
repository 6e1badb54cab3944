"""
Incremental constraint tracking for the backtracking search.

The tracker keeps two derived structures in lockstep with the grid:

  - mask:  boolean array, shape (9, 9, 9)
           mask[r, c, d - 1] is True iff digit d is held by some cell in the
           row, column or block of (r, c). The cell itself is part of that
           scope, so a filled cell forbids its own digit.
  - count: int array, shape (9, 9)
           count[r, c] == mask[r, c].sum(), cached to avoid rescanning the
           nine digits per lookup.

Placements are made reversible through deltas: compute_delta returns exactly
the mask entries a placement would newly turn on, apply_delta turns them on,
and undo_delta turns the same entries off again. A delta is only valid for
the state it was computed against; undoing a delta that was never applied
(or twice) trips the pairing assertions.

Conventions:
  - Digits are 1..9 at the API; the mask's last axis is 0-based (d - 1).
  - All functions take explicit state; there are no module-level globals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import numpy as np

from sudoku_csp.core.grid_types import EMPTY, SIZE, Grid, get_cell, unit_scope


Delta = np.ndarray  # shape: (9, 9, 9), dtype: bool


def _zeros_mask() -> np.ndarray:
    return np.zeros((SIZE, SIZE, SIZE), dtype=bool)


def _zeros_count() -> np.ndarray:
    return np.zeros((SIZE, SIZE), dtype=int)


@dataclass
class ConstraintState:
    """
    Forbidden-value mask plus per-cell forbidden counts for one solve.

    Attributes:
        mask: (9, 9, 9) bool; mask[r, c, v] True iff digit v+1 is forbidden at (r, c)
        count: (9, 9) int; number of forbidden digits per cell
    """
    mask: np.ndarray = field(default_factory=_zeros_mask)
    count: np.ndarray = field(default_factory=_zeros_count)

    def copy(self) -> "ConstraintState":
        return ConstraintState(mask=self.mask.copy(), count=self.count.copy())

    def is_consistent(self) -> bool:
        """True if count still equals the per-cell sum over mask."""
        return bool(np.array_equal(self.count, self.mask.sum(axis=2)))


def compute_delta(row: int, col: int, value: int, mask: np.ndarray) -> Delta:
    """
    Mask entries that placing `value` at (row, col) would newly forbid.

    Covers the full row, the full column and the full containing block (the
    cell itself included). Entries that are already forbidden are left out,
    so applying the delta never double-counts.

    Args:
        row, col: Cell being filled (0-based)
        value: Digit being placed (1..9)
        mask: Current forbidden-value mask (not modified)

    Returns:
        Boolean array of shape (9, 9, 9) with True only in plane value-1

    Example:
        >>> delta = compute_delta(0, 0, 5, np.zeros((9, 9, 9), dtype=bool))
        >>> int(delta.sum())
        21
    """
    if value not in range(1, SIZE + 1):
        raise ValueError(f"value must be a digit 1..{SIZE}, got {value}")

    v = value - 1
    delta = _zeros_mask()
    delta[:, :, v] = unit_scope(row, col) & ~mask[:, :, v]
    return delta


def apply_delta(state: ConstraintState, delta: Delta) -> None:
    """
    Turn on every mask entry in delta and bump the affected counts.

    Raises:
        AssertionError: If an entry in delta is already forbidden, meaning the
                        delta does not belong to the current state
    """
    assert not state.mask[delta].any(), \
        "apply_delta: delta overlaps entries that are already forbidden"

    state.mask |= delta
    state.count += delta.sum(axis=2)


def undo_delta(state: ConstraintState, delta: Delta) -> None:
    """
    Exact inverse of apply_delta for the same delta.

    Raises:
        AssertionError: If an entry in delta is not currently forbidden, meaning
                        the delta was never applied or was already undone
    """
    assert state.mask[delta].all(), \
        "undo_delta: delta contains entries that are not currently forbidden"

    state.mask &= ~delta
    state.count -= delta.sum(axis=2)


def build_initial_state(grid: Grid) -> ConstraintState:
    """
    Build mask/count for the filled cells of a starting grid.

    Every non-EMPTY cell is processed in row-major order by computing and
    applying its delta, exactly as the search does for its own placements.

    Args:
        grid: Starting grid (not modified)

    Returns:
        ConstraintState consistent with the grid's filled cells
    """
    state = ConstraintState()
    for r, c in np.argwhere(grid != EMPTY):
        r, c = int(r), int(c)
        delta = compute_delta(r, c, get_cell(grid, (r, c)), state.mask)
        apply_delta(state, delta)
    return state


def candidates(state: ConstraintState, row: int, col: int) -> List[int]:
    """Digits (1..9) not forbidden at (row, col), ascending."""
    return [int(v) + 1 for v in np.flatnonzero(~state.mask[row, col])]


def expected_mask(grid: Grid) -> np.ndarray:
    """
    Recompute the mask from scratch for a grid.

    This is the reference the incremental mask must always agree with; it is
    used by invariant checks and tests, never by the search itself.
    """
    mask = _zeros_mask()
    for r, c in np.argwhere(grid != EMPTY):
        r, c = int(r), int(c)
        mask[:, :, get_cell(grid, (r, c)) - 1] |= unit_scope(r, c)
    return mask


if __name__ == "__main__":
    # Sanity checks: idempotence and apply/undo inverse
    state = ConstraintState()
    d1 = compute_delta(4, 4, 7, state.mask)
    apply_delta(state, d1)
    assert state.count[4, 0] == 1 and state.count[0, 0] == 0
    assert not compute_delta(4, 4, 7, state.mask).any(), "Re-placing must add nothing"

    before = state.copy()
    d2 = compute_delta(0, 0, 7, state.mask)
    apply_delta(state, d2)
    undo_delta(state, d2)
    assert np.array_equal(before.mask, state.mask)
    assert np.array_equal(before.count, state.count)
    assert state.is_consistent()

    print("✓ tracker.py sanity checks passed.")
