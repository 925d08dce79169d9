"""Trial runner, shrink search and reporting.

Exports:
    check: Run a property and return RunDetails
    assert_property: Run a property and raise PropertyFailedError on failure
    RunParameters: Run configuration
    RunDetails: Run report
    RunExecution: In-flight run state
    format_failure: Render the failure message of a RunDetails
    stringify: Default value renderer

Python 3.13+.
"""

from .configuration import RunParameters
from .details import RunDetails
from .execution import RunExecution
from .reporter import format_failure, throw_if_failed
from .runner import assert_property, check
from .stringify import Formatter, stringify

__all__ = [
    "Formatter",
    "RunDetails",
    "RunExecution",
    "RunParameters",
    "assert_property",
    "check",
    "format_failure",
    "stringify",
    "throw_if_failed",
]
