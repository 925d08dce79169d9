"""Mutable state of one in-flight run.

RunExecution accumulates counters, the counterexample path and the failing
values while the trial loop and the shrink search advance, then assembles
the immutable RunDetails once the run is over. One instance belongs to
exactly one check() invocation.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from propcheck.constants import PATH_SEPARATOR

from .details import RunDetails

__all__ = ["RunExecution"]


@dataclass(slots=True)
class RunExecution[T]:
    """Counters and failure trail of a run.

    Mutability Note:
        Intentionally mutable; the trial loop and shrink search update it in
        place. Nothing outside the owning run ever sees it.

    Attributes:
        verbose: Keep every failing value in failures
        num_runs: Non-skipped trials so far
        num_skips: Skipped trials so far
        path: Run index of the failure followed by shrink indices
        failures: Failing values in visiting order (verbose only)
        failed: True once a trial failed
        value: Latest (smallest so far) failing value
        error: Cause of the latest failure
    """

    verbose: bool = False
    num_runs: int = 0
    num_skips: int = 0
    path: list[int] = field(default_factory=list)
    failures: list[T] = field(default_factory=list)
    failed: bool = False
    value: T | None = None
    error: str | None = None

    def succeed(self) -> None:
        """Count a passing trial."""
        self.num_runs += 1

    def skip(self) -> None:
        """Count a trial discarded by a precondition."""
        self.num_skips += 1

    def fail_run(self, value: T, cause: str | None) -> None:
        """Count a failing trial and start the path at its run index."""
        run_index = self.num_runs
        self.num_runs += 1
        self._record(value, run_index, cause)

    def fail_shrink(self, value: T, index: int, cause: str | None) -> None:
        """Record a failing shrink candidate at sibling position index."""
        self._record(value, index, cause)

    def _record(self, value: T, index: int, cause: str | None) -> None:
        self.failed = True
        self.path.append(index)
        self.value = value
        self.error = cause
        if self.verbose:
            self.failures.append(value)

    @property
    def num_shrinks(self) -> int:
        return max(len(self.path) - 1, 0)

    def to_details(self, seed: int) -> RunDetails[T]:
        """Assemble the final report. Pure; may be called repeatedly."""
        if not self.failed:
            return RunDetails(
                failed=False,
                num_runs=self.num_runs,
                num_skips=self.num_skips,
                num_shrinks=0,
                seed=seed,
            )
        return RunDetails(
            failed=True,
            num_runs=self.num_runs,
            num_skips=self.num_skips,
            num_shrinks=self.num_shrinks,
            seed=seed,
            counterexample=self.value,
            counterexample_path=PATH_SEPARATOR.join(str(index) for index in self.path),
            failures=tuple(self.failures),
            error=self.error,
        )
