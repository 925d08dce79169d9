"""Tagged result of evaluating one value.

evaluate() may answer with the historical loose forms (None, a cause string,
a PreconditionFailure) or with a TrialOutcome directly. The runner normalises
every answer through TrialOutcome.from_result() and branches on the status
alone, so skips and failures never travel as exceptions inside the loop.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from propcheck.diagnostics import ErrorTemplate, PropertyContractError

from .precondition import PreconditionFailure

__all__ = ["TrialOutcome", "TrialStatus"]


class TrialStatus(StrEnum):
    """Status of one evaluation.

    Categories:
        SUCCESS: The value satisfied the property
        SKIP: The value did not meet a precondition
        FAILURE: The value falsified the property
    """

    SUCCESS = "success"
    SKIP = "skip"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class TrialOutcome:
    """Outcome of exactly one evaluate() call.

    Attributes:
        status: SUCCESS, SKIP or FAILURE
        cause: Failure cause; None unless status is FAILURE
    """

    status: TrialStatus
    cause: str | None = None

    @classmethod
    def success(cls) -> TrialOutcome:
        return _SUCCESS

    @classmethod
    def skip(cls) -> TrialOutcome:
        return _SKIP

    @classmethod
    def failure(cls, cause: str) -> TrialOutcome:
        return cls(TrialStatus.FAILURE, cause)

    @property
    def is_failure(self) -> bool:
        return self.status is TrialStatus.FAILURE

    @classmethod
    def from_result(cls, result: object) -> TrialOutcome:
        """Normalise a raw evaluate() result.

        Mapping:
            None -> success
            PreconditionFailure instance -> skip
            str -> failure with that cause
            TrialOutcome -> itself

        Raises:
            PropertyContractError: For any other result
        """
        match result:
            case None:
                return _SUCCESS
            case TrialOutcome():
                return result
            case PreconditionFailure():
                return _SKIP
            case str():
                return cls.failure(result)
            case _:
                raise PropertyContractError(ErrorTemplate.unexpected_outcome(result))


_SUCCESS = TrialOutcome(TrialStatus.SUCCESS)
_SKIP = TrialOutcome(TrialStatus.SKIP)
