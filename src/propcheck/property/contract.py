"""Capabilities the runner requires of a property.

Any object exposing is_async(), generate(random) and evaluate(value) as
callables can be run; it need not inherit from anything here. The
PropertyLike protocol documents the shape for type checkers, and
validate_property() enforces it at runtime before a single trial runs.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Awaitable
from typing import TYPE_CHECKING, Any, Protocol

from propcheck.diagnostics import ErrorTemplate, PropertyContractError

if TYPE_CHECKING:
    from propcheck.core import Random, Shrinkable

    from .outcome import TrialOutcome
    from .precondition import PreconditionFailure

__all__ = ["EvaluationResult", "PropertyLike", "validate_property"]

type EvaluationResult = TrialOutcome | PreconditionFailure | str | None

_REQUIRED_CAPABILITIES: tuple[str, ...] = ("is_async", "generate", "evaluate")


class PropertyLike[T](Protocol):
    """Protocol for values accepted by check() and assert_property().

    is_async() must be constant for the property's lifetime. generate() may
    draw from the random source and must return a fresh Shrinkable on every
    call. evaluate() returns an EvaluationResult, or an awaitable of one when
    is_async() is true.
    """

    def is_async(self) -> bool:
        ...  # pragma: no cover  # Protocol stub - not executable

    def generate(self, random: Random, /) -> Shrinkable[T]:
        ...  # pragma: no cover  # Protocol stub - not executable

    def evaluate(
        self, value: T, /
    ) -> EvaluationResult | Awaitable[EvaluationResult]:
        ...  # pragma: no cover  # Protocol stub - not executable


def validate_property(candidate: Any) -> None:
    """Reject anything that does not expose the three required callables.

    Raises:
        PropertyContractError: If candidate is None or any capability is
            missing or not callable
    """
    missing = tuple(
        name
        for name in _REQUIRED_CAPABILITIES
        if not callable(getattr(candidate, name, None))
    )
    if missing:
        raise PropertyContractError(
            ErrorTemplate.missing_capabilities(type(candidate).__name__, missing)
        )
