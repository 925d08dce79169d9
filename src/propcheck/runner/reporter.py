"""Failure message composition for assert_property().

The message carries everything needed to reproduce and understand a
failure: seed, counterexample path, run count, the shrunk value, the
original cause and, in verbose runs, every failing value visited.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import Any

from propcheck.constants import FAILURE_LIST_HEADER
from propcheck.diagnostics import PropertyFailedError

from .details import RunDetails
from .stringify import Formatter, stringify

__all__ = ["format_failure", "throw_if_failed"]


def format_failure(details: RunDetails[Any], formatter: Formatter = stringify) -> str:
    """Render the report of a failed run.

    Example:
        Property failed after 1 tests (seed: 42, path: 0): [1,2]
        Shrunk 0 time(s)
        Got error: boom
    """
    lines = [
        f"Property failed after {details.num_runs} tests "
        f"(seed: {details.seed}, path: {details.counterexample_path}): "
        f"{formatter(details.counterexample)}",
        f"Shrunk {details.num_shrinks} time(s)",
        f"Got error: {details.error}",
    ]
    if details.failures:
        lines.extend(("", FAILURE_LIST_HEADER))
        lines.extend(f"- {formatter(value)}" for value in details.failures)
    return "\n".join(lines)


def throw_if_failed(details: RunDetails[Any], formatter: Formatter = stringify) -> None:
    """Raise if details describes a failed run; do nothing otherwise.

    Raises:
        PropertyFailedError: If details.failed is True
    """
    if details.failed:
        raise PropertyFailedError(format_failure(details, formatter), details)
