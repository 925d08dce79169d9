"""Shared constants for propcheck.

This module provides centralized configuration constants used across
the core, property and runner packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Run defaults: Values applied when RunParameters fields are omitted
- Random bounds: Integer range handed out by Random.next_int
- Reporting: Separators used when composing paths and failure messages

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Run defaults
    "DEFAULT_NUM_RUNS",
    "SEED_MASK",
    # Random bounds
    "MIN_INT",
    "MAX_INT",
    # Reporting
    "PATH_SEPARATOR",
    "FAILURE_LIST_HEADER",
    "FALSE_RESULT_CAUSE",
]

# ============================================================================
# RUN DEFAULTS
# ============================================================================

# Number of non-skipped trials a property must pass before the run succeeds.
DEFAULT_NUM_RUNS: int = 100

# Seeds derived from the clock are truncated to 32 bits so they stay short
# enough to copy from a failure message.
SEED_MASK: int = 0xFFFF_FFFF

# ============================================================================
# RANDOM BOUNDS
# ============================================================================

# Default inclusive range of Random.next_int (signed 32-bit).
MIN_INT: int = -(2**31)
MAX_INT: int = 2**31 - 1

# ============================================================================
# REPORTING
# ============================================================================

# Joins the run index and the shrink indices of a counterexample path.
PATH_SEPARATOR: str = ":"

# Header preceding the verbose list of failing values in assertion messages.
FAILURE_LIST_HEADER: str = "Encountered failures were:"

# Cause recorded when a predicate returns False instead of raising.
FALSE_RESULT_CAUSE: str = "Property failed by returning false"
