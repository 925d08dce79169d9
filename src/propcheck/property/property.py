"""Concrete properties built from arbitraries and a predicate.

Property draws one value per arbitrary, packs them into a tuple, and calls
the predicate with the tuple unpacked. The predicate passes by returning
None or True, fails by returning anything else or by raising, and skips the
trial by calling pre(False). AsyncProperty does the same with a coroutine
predicate.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from propcheck.constants import FALSE_RESULT_CAUSE
from propcheck.core import Random, Shrinkable
from propcheck.diagnostics import ErrorTemplate

from .arbitrary import Arbitrary, TupleArbitrary
from .outcome import TrialOutcome
from .precondition import PreconditionFailure

__all__ = ["AsyncProperty", "Property"]

logger = logging.getLogger(__name__)

type Predicate = Callable[..., object]
type AsyncPredicate = Callable[..., Awaitable[object]]


def _outcome_of_return(result: object) -> TrialOutcome:
    if result is None or result is True:
        return TrialOutcome.success()
    return TrialOutcome.failure(FALSE_RESULT_CAUSE)


def _outcome_of_exception(exc: Exception) -> TrialOutcome:
    if isinstance(exc, PreconditionFailure):
        return TrialOutcome.skip()
    logger.debug("Predicate raised %s", type(exc).__name__, exc_info=exc)
    return TrialOutcome.failure(ErrorTemplate.predicate_raised(exc))


class _BaseProperty:
    """Shared generation logic for Property and AsyncProperty."""

    def __init__(self, arbitraries: tuple[Arbitrary[Any], ...]) -> None:
        if not arbitraries:
            msg = ErrorTemplate.no_arbitraries()
            raise ValueError(msg)
        self._arbitrary = TupleArbitrary(arbitraries)

    def generate(self, random: Random) -> Shrinkable[tuple[Any, ...]]:
        return self._arbitrary.generate(random)


class Property(_BaseProperty):
    """Synchronous property.

    Example:
        >>> prop = Property(numbers, numbers, predicate=lambda a, b: a + b == b + a)
        >>> check(prop).failed
        False
    """

    def __init__(self, *arbitraries: Arbitrary[Any], predicate: Predicate) -> None:
        super().__init__(arbitraries)
        self._predicate = predicate

    def is_async(self) -> bool:
        return False

    def evaluate(self, value: tuple[Any, ...]) -> TrialOutcome:
        try:
            result = self._predicate(*value)
        except Exception as exc:  # noqa: BLE001 - a raising predicate is a failed trial
            return _outcome_of_exception(exc)
        return _outcome_of_return(result)


class AsyncProperty(_BaseProperty):
    """Property whose predicate is a coroutine function."""

    def __init__(self, *arbitraries: Arbitrary[Any], predicate: AsyncPredicate) -> None:
        super().__init__(arbitraries)
        self._predicate = predicate

    def is_async(self) -> bool:
        return True

    async def evaluate(self, value: tuple[Any, ...]) -> TrialOutcome:
        try:
            result = await self._predicate(*value)
        except Exception as exc:  # noqa: BLE001 - a raising predicate is a failed trial
            return _outcome_of_exception(exc)
        return _outcome_of_return(result)
