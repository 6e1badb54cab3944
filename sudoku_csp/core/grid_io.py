"""
Text IO for Sudoku grids.

A grid file holds nine lines, one per row. Each row may be spelled as:

  - nine whitespace-separated tokens:      5 3 0 0 7 0 0 0 0
    ('0', '.', '_' and '-' mean EMPTY)
  - one nine-character token:              53..7....
  - the fixed-width print layout:          "5 3     7        "
    (digit positions 0, 2, 4, ...; a blank there means EMPTY)

A single line of 81 cells is accepted as well. Lines starting with '#'
are comments.

format_grid writes the fixed-width print layout: digits separated by single
spaces, EMPTY cells as a blank.
"""

from pathlib import Path
from typing import List

from sudoku_csp.core.grid_types import EMPTY, SIZE, Grid, as_grid


EMPTY_TOKENS = frozenset({"0", ".", "_", "-"})


class GridFormatError(ValueError):
    """Raised when text cannot be read as a 9x9 grid."""
    pass


def _parse_token(token: str, line_no: int) -> int:
    if token in EMPTY_TOKENS or token == " ":
        return EMPTY
    if len(token) == 1 and token in "123456789":
        return int(token)
    raise GridFormatError(f"Line {line_no}: unexpected cell value {token!r}")


def _parse_row(line: str, line_no: int) -> List[int]:
    tokens = line.split()

    if len(tokens) == SIZE:
        return [_parse_token(t, line_no) for t in tokens]

    if len(tokens) == 1 and len(tokens[0]) == SIZE:
        return [_parse_token(ch, line_no) for ch in tokens[0]]

    # Fixed-width layout: cell j sits at column 2*j, separators are blanks
    width = 2 * SIZE - 1
    padded = line.ljust(width)
    if len(padded.rstrip()) <= width and all(ch == " " for ch in padded[1:width:2]):
        return [_parse_token(ch, line_no) for ch in padded[0:width:2]]

    raise GridFormatError(
        f"Line {line_no}: expected {SIZE} cells, got {line!r}"
    )


def parse_grid(text: str) -> Grid:
    """
    Parse a textual grid.

    Args:
        text: Grid text in any of the layouts described in the module docstring

    Returns:
        Grid of shape (9, 9)

    Raises:
        GridFormatError: If the text is not a 9x9 grid of EMPTY/1..9 cells

    Example:
        >>> grid = parse_grid("\\n".join(["123456789"] + ["........."] * 8))
        >>> grid[0].tolist()
        [1, 2, 3, 4, 5, 6, 7, 8, 9]
    """
    lines = [
        (i + 1, line.rstrip("\r\n"))
        for i, line in enumerate(text.splitlines())
        if not line.lstrip().startswith("#")
    ]

    # Surrounding blank lines are padding, but a blank line inside the grid
    # is an all-EMPTY row of the fixed-width layout.
    while lines and not lines[-1][1].strip() and len(lines) > SIZE:
        lines.pop()
    while lines and not lines[0][1].strip() and len(lines) > SIZE:
        lines.pop(0)

    if len(lines) == 1:
        cells = lines[0][1].strip()
        if len(cells) == SIZE * SIZE:
            values = [_parse_token(ch, lines[0][0]) for ch in cells]
            return as_grid([values[i:i + SIZE] for i in range(0, SIZE * SIZE, SIZE)])

    if len(lines) != SIZE:
        raise GridFormatError(f"Expected {SIZE} rows, got {len(lines)}")

    rows = [_parse_row(line, line_no) for line_no, line in lines]
    return as_grid(rows)


def format_grid(grid: Grid) -> str:
    """
    Format a grid in the fixed-width print layout.

    Each row is printed on its own line; EMPTY cells become blanks so the
    layout parses back to the same grid.
    """
    lines = []
    for row in grid:
        lines.append(" ".join(str(int(v)) if v != EMPTY else " " for v in row))
    return "\n".join(lines) + "\n"


def load_grid(path: Path) -> Grid:
    """
    Load a grid from a text file.

    Raises:
        OSError: If the file cannot be read
        GridFormatError: If the contents are not a valid grid
    """
    with open(path, "r", encoding="utf-8") as f:
        return parse_grid(f.read())


def save_grid(grid: Grid, path: Path) -> None:
    """Write a grid to a text file in the fixed-width print layout."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_grid(grid))
