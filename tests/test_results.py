"""
Tests for SolveResult and the mismatch helpers.
"""

import json

import numpy as np
import pytest

from sudoku_csp.config import SolverConfig
from sudoku_csp.runners.kernel import solve
from sudoku_csp.runners.results import (
    compute_given_violations,
    compute_grid_mismatches,
    is_complete_solution,
)


def test_identical_grids_have_no_mismatches(classic_solution):
    assert compute_grid_mismatches(classic_solution, classic_solution.copy()) == []


def test_mismatch_records(classic_solution):
    pred = classic_solution.copy()
    pred[1, 1] = 9
    pred[2, 0] = 5

    diff = compute_grid_mismatches(classic_solution, pred)
    assert diff == [
        {"r": 1, "c": 1, "true": 7, "pred": 9},
        {"r": 2, "c": 0, "true": 1, "pred": 5},
    ]


def test_mismatch_shape_error():
    with pytest.raises(ValueError):
        compute_grid_mismatches(np.zeros((9, 9)), np.zeros((3, 3)))


def test_given_violations_only_look_at_givens(classic_puzzle, classic_solution):
    assert compute_given_violations(classic_puzzle, classic_solution) == []

    altered = classic_solution.copy()
    altered[0, 0] = 1   # a given
    altered[0, 2] = 9   # not a given
    violations = compute_given_violations(classic_puzzle, altered)
    assert violations == [{"r": 0, "c": 0, "true": 5, "pred": 1}]


def test_is_complete_solution(classic_puzzle, classic_solution):
    assert is_complete_solution(classic_solution)
    assert not is_complete_solution(classic_puzzle)

    broken = classic_solution.copy()
    broken[0, 0], broken[0, 1] = broken[0, 1], broken[0, 0]
    assert not is_complete_solution(broken)


def test_result_to_dict_is_json_ready(one_missing):
    result = solve(one_missing, SolverConfig(record_trace=True))
    record = json.loads(json.dumps(result.to_dict()))

    assert record["status"] == "solved"
    assert record["steps"] == 1
    assert record["placements"] == 1
    assert record["trace"] == [[0, 0, 5]]
    assert record["grid"][0][0] == 5


def test_invalid_result_names_conflicts(row_duplicate):
    record = solve(row_duplicate).to_dict()
    assert record["status"] == "invalid"
    assert record["conflicts"] == ["row 0"]
