"""Per-evaluation timeout for asynchronous properties.

TimeoutProperty decorates an asynchronous property: every evaluate() call
runs as a task raced against a timer. If the timer wins, the trial fails
with a timeout cause and the task is cancelled; whatever it later produces
is dropped, never awaited and never evaluated again.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import TYPE_CHECKING, Any

from propcheck.diagnostics import ErrorTemplate

from .outcome import TrialOutcome

if TYPE_CHECKING:
    from propcheck.core import Random, Shrinkable

    from .contract import EvaluationResult, PropertyLike

__all__ = ["TimeoutProperty"]

logger = logging.getLogger(__name__)


def _discard(task: asyncio.Task[Any]) -> None:
    # Retrieve the late result so asyncio does not report it as never retrieved.
    if not task.cancelled():
        task.exception()


class TimeoutProperty[T]:
    """Asynchronous property bounded by a timeout in milliseconds.

    Attributes:
        timeout: Limit applied to each evaluate() call, in milliseconds
    """

    def __init__(self, wrapped: PropertyLike[T], timeout: float) -> None:
        self._wrapped = wrapped
        self.timeout = timeout

    def is_async(self) -> bool:
        return True

    def generate(self, random: Random) -> Shrinkable[T]:
        return self._wrapped.generate(random)

    async def evaluate(self, value: T) -> EvaluationResult:
        pending = self._wrapped.evaluate(value)
        if not inspect.isawaitable(pending):
            return pending

        task = asyncio.ensure_future(pending)
        done, _ = await asyncio.wait({task}, timeout=self.timeout / 1000)
        if task in done:
            return task.result()

        task.cancel()
        task.add_done_callback(_discard)
        logger.debug("Evaluation of %r exceeded %g ms; discarded", value, self.timeout)
        return TrialOutcome.failure(ErrorTemplate.evaluation_timeout(self.timeout))
