"""
Command-line driver: solve one puzzle file and report the search effort.

Usage:
    python -m sudoku_csp.runners.solve_puzzle puzzles/easy.txt

    # Print the solved grid and a JSON diagnostics record
    python -m sudoku_csp.runners.solve_puzzle puzzles/easy.txt --print-grid --json

    # Check the answer against a known solution
    python -m sudoku_csp.runners.solve_puzzle puzzles/easy.txt \
        --solution-path puzzles/easy.solution.txt

Output:
    The step count on stdout (always), then the grid and/or JSON if asked.
    Diagnostics go to stderr through logging.

Exit codes:
    0  solved
    1  read or parse error
    2  usage error (from argparse)
    3  not solved (invalid or infeasible puzzle)
    4  solved, but differs from --solution-path
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from sudoku_csp.config import load_solver_config
from sudoku_csp.core.grid_io import format_grid, load_grid
from sudoku_csp.runners.kernel import solve, solve_ilp
from sudoku_csp.runners.results import compute_grid_mismatches


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_UNSOLVED = 3
EXIT_MISMATCH = 4


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments for the solver.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Solve a 9x9 Sudoku puzzle read from a text file."
    )
    parser.add_argument(
        "path",
        type=Path,
        help="Puzzle file: nine rows, 0 or blank for empty cells"
    )
    parser.add_argument(
        "--method",
        choices=["search", "ilp"],
        default="search",
        help="Backtracking search (default) or the ILP reference solver"
    )
    parser.add_argument(
        "--print-grid",
        action="store_true",
        help="Print the resulting grid after the step count"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON diagnostics record after the step count"
    )
    parser.add_argument(
        "--solution-path",
        type=Path,
        default=None,
        help="Known solution to compare the result against"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON solver config (check_invariants, record_trace)"
    )
    parser.add_argument(
        "--no-invariant-checks",
        action="store_true",
        help="Skip the duplicate scan below the root node"
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Record every placement (shown in the JSON record)"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entrypoint; returns the process exit code."""
    args = parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s: %(message)s"
    )

    try:
        config = load_solver_config(args.config)
        puzzle = load_grid(args.path)
        expected = load_grid(args.solution_path) if args.solution_path else None
    except OSError as e:
        logger.error("Could not read file: %s", e)
        return EXIT_ERROR
    except ValueError as e:
        # GridFormatError and config errors
        logger.error("%s", e)
        return EXIT_ERROR

    if args.no_invariant_checks:
        config.check_invariants = False
    if args.trace:
        config.record_trace = True

    logger.info("Solving %s with method=%s", args.path, args.method)
    if args.method == "ilp":
        result = solve_ilp(puzzle)
    else:
        result = solve(puzzle, config)

    print(result.steps)

    if args.print_grid:
        sys.stdout.write(format_grid(result.grid))

    mismatches = []
    if expected is not None and result.solved:
        mismatches = compute_grid_mismatches(expected, result.grid)
        if mismatches:
            logger.warning(
                "Result differs from %s in %d cell(s)", args.solution_path, len(mismatches)
            )

    if args.json:
        record = result.to_dict()
        record["path"] = str(args.path)
        if expected is not None:
            record["solution_mismatches"] = mismatches
        print(json.dumps(record, indent=2))

    if not result.solved:
        return EXIT_UNSOLVED
    if mismatches:
        return EXIT_MISMATCH
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
