"""Precondition skip marker.

A predicate calls pre(condition) to declare that the generated value does not
apply; the runner then discards the trial without counting it. The marker is
recognised by type, never by content.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = ["PreconditionFailure", "pre"]


class PreconditionFailure(Exception):  # noqa: N818 - a control signal, not an error
    """Signals that the current trial should be skipped.

    May be raised from a predicate (or from evaluate) or returned from
    evaluate. Either way the trial becomes a skip.
    """

    def __init__(self, message: str = "Precondition not met") -> None:
        super().__init__(message)


def pre(condition: bool) -> None:
    """Skip the current trial unless condition holds.

    Raises:
        PreconditionFailure: If condition is false
    """
    if not condition:
        raise PreconditionFailure
