"""
Solver configuration.

SolverConfig holds the switches of one solve. It can be built directly or
loaded from a JSON object on disk:

    {
      "check_invariants": true,
      "record_trace": false
    }

Missing keys keep their defaults; unknown keys are rejected so typos do not
go unnoticed.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass
class SolverConfig:
    """
    Switches for one solve.

    Attributes:
        check_invariants: Re-run the duplicate scan at every search node below
                          the root and fail loudly if it ever finds one.
                          The root scan (invalid-input detection) always runs.
        record_trace: Keep the (row, col, digit) of every placement in
                      order, on the search stats.
    """
    check_invariants: bool = True
    record_trace: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def solver_config_from_dict(data: Dict[str, Any]) -> SolverConfig:
    """
    Build a SolverConfig from a plain dict.

    Raises:
        ValueError: On unknown keys or non-boolean values
    """
    if not isinstance(data, dict):
        raise ValueError(f"Solver config must be a JSON object, got {type(data).__name__}")

    known = {f.name for f in fields(SolverConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown solver config keys: {unknown}")

    for key, value in data.items():
        if not isinstance(value, bool):
            raise ValueError(f"Solver config key {key!r} must be true/false, got {value!r}")

    return SolverConfig(**data)


def load_solver_config(path: Optional[Path]) -> SolverConfig:
    """
    Load a SolverConfig from a JSON file.

    Args:
        path: JSON file, or None for the defaults

    Returns:
        SolverConfig

    Raises:
        OSError: If the file cannot be read
        ValueError: If the file is not valid JSON or has bad keys/values
    """
    if path is None:
        return SolverConfig()

    with Path(path).open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in solver config {path}: {e}") from e

    return solver_config_from_dict(data)
