"""Structured report of a completed run.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["RunDetails"]


@dataclass(frozen=True, slots=True)
class RunDetails[T]:
    """Outcome of one check() invocation.

    counterexample, counterexample_path and error are only meaningful when
    failed is True; they are None otherwise. A None counterexample on a
    failed run means the failing value itself was None.

    Attributes:
        failed: True if some trial falsified the property
        num_runs: Non-skipped trials performed, the failing one included
        num_skips: Trials discarded by a precondition
        num_shrinks: Successful shrink descents
        seed: Seed of the run
        counterexample: Smallest failing value found
        counterexample_path: Run index then sibling indices taken while
            shrinking, colon-joined (e.g. ``"3:0:5"``)
        failures: Every failing value visited, root first (verbose only)
        error: Cause reported by the last failing evaluation
    """

    failed: bool
    num_runs: int
    num_skips: int
    num_shrinks: int
    seed: int
    counterexample: T | None = None
    counterexample_path: str | None = None
    failures: tuple[T, ...] = ()
    error: str | None = None
