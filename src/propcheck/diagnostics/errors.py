"""propcheck exception hierarchy.

Only three situations surface as exceptions: a property that does not honour
the contract, a generator that raises, and (from ``assert_property`` only)
a property that was falsified. Trial failures and timeouts are captured in
``RunDetails`` instead.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from propcheck.runner.details import RunDetails

__all__ = [
    "GenerationError",
    "PropCheckError",
    "PropertyContractError",
    "PropertyFailedError",
]


class PropCheckError(Exception):
    """Base exception for all propcheck errors."""


class PropertyContractError(PropCheckError, TypeError):
    """Object handed to the runner is not a usable property.

    Raised before any trial runs when ``is_async``, ``generate`` or
    ``evaluate`` is missing or not callable, and during a run when
    ``evaluate`` returns something that is not a recognised outcome.
    """


class GenerationError(PropCheckError):
    """A property's ``generate`` raised during a trial.

    Fatal to the run: the trial is not retried and there is no value to
    shrink. The original exception is available as ``__cause__``.

    Attributes:
        seed: Seed of the run in which generation failed
        run_index: Zero-based index of the trial being generated
    """

    def __init__(self, message: str, *, seed: int, run_index: int) -> None:
        """Initialize GenerationError.

        Args:
            message: Error message string
            seed: Seed of the failing run
            run_index: Zero-based index of the trial being generated
        """
        super().__init__(message)
        self.seed = seed
        self.run_index = run_index


class PropertyFailedError(PropCheckError, AssertionError):
    """Property was falsified; raised by ``assert_property``.

    Subclasses ``AssertionError`` so test frameworks report it as a test
    failure rather than an error.

    Attributes:
        details: The RunDetails of the failed run
    """

    def __init__(self, message: str, details: RunDetails[Any]) -> None:
        """Initialize PropertyFailedError.

        Args:
            message: Fully rendered failure report
            details: The RunDetails of the failed run
        """
        super().__init__(message)
        self.details = details
