"""Run configuration for check() and assert_property().

Provides a single frozen dataclass holding every knob of a run. check()
accepts either an instance or the same fields as keyword options.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from propcheck.constants import DEFAULT_NUM_RUNS, SEED_MASK
from propcheck.diagnostics import ErrorTemplate

__all__ = ["RunParameters", "default_seed"]


def default_seed() -> int:
    """Seed derived from the clock, truncated to 32 bits."""
    return time.time_ns() & SEED_MASK


@dataclass(frozen=True, slots=True)
class RunParameters:
    """Immutable configuration of one run.

    All fields have sensible defaults; ``RunParameters()`` runs 100 trials
    from a clock-derived seed. The resolved seed is always reported back in
    RunDetails so any run can be replayed.

    Attributes:
        seed: Seed of the run's Random (default: derived from the clock).
        num_runs: Non-skipped trials required before the run succeeds
            (default: 100).
        timeout: Per-evaluation limit in milliseconds, applied to
            asynchronous properties only (default: None, no limit).
        verbose: Keep every failing value visited while shrinking
            (default: False).

    Example:
        >>> params = RunParameters(seed=42, num_runs=500)
        >>> params.seed
        42
    """

    seed: int | None = None
    num_runs: int = DEFAULT_NUM_RUNS
    timeout: float | None = None
    verbose: bool = False

    def __post_init__(self) -> None:
        """Resolve the seed and validate values at construction time.

        Raises:
            ValueError: If num_runs or timeout is negative.
        """
        if self.seed is None:
            object.__setattr__(self, "seed", default_seed())
        if self.num_runs < 0:
            msg = ErrorTemplate.negative_parameter("num_runs")
            raise ValueError(msg)
        if self.timeout is not None and self.timeout < 0:
            msg = ErrorTemplate.negative_parameter("timeout")
            raise ValueError(msg)

    @property
    def resolved_seed(self) -> int:
        """The seed, typed as int (always set after construction)."""
        assert self.seed is not None  # Type narrowing: set by __post_init__
        return self.seed

    @classmethod
    def resolve(
        cls, params: RunParameters | None, options: Mapping[str, Any]
    ) -> RunParameters:
        """Build parameters from an instance or from keyword options.

        Raises:
            TypeError: If both params and options are given, or an option
                name is unknown.
            ValueError: If an option value is invalid.
        """
        if params is not None:
            if options:
                msg = ErrorTemplate.parameters_conflict()
                raise TypeError(msg)
            return params
        return cls(**options)
