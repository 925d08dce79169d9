"""Depth-first search for a minimal counterexample.

Starting from a failing Shrinkable, each level's children are scanned in
order and evaluated one at a time. The first failing child wins: its
siblings further down the stream are never evaluated, its index extends the
counterexample path, and the search continues from it. A level whose whole
stream passes (or skips) ends the search.

The search is written as a generator that yields values and receives their
TrialOutcome, so the same code serves synchronous and asynchronous runs:
the driver decides how evaluate() is called and awaited.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Generator

from propcheck.core import Shrinkable
from propcheck.property import TrialOutcome

from .execution import RunExecution

__all__ = ["Evaluations", "shrink_steps"]

logger = logging.getLogger(__name__)

# Yields a value to evaluate, receives its outcome.
type Evaluations[T] = Generator[T, TrialOutcome, None]


def shrink_steps[T](root: Shrinkable[T], execution: RunExecution[T]) -> Evaluations[T]:
    """Shrink root, recording every descent in execution.

    Terminates on finite trees; each descent goes one level deeper and a
    leaf has no children.
    """
    current = root
    while True:
        for index, child in enumerate(current.shrink()):
            outcome = yield child.value
            if outcome.is_failure:
                execution.fail_shrink(child.value, index, outcome.cause)
                logger.debug("Shrink step %d: candidate %d fails", execution.num_shrinks, index)
                current = child
                break
        else:
            return
