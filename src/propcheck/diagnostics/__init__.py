"""Error types and message templates.

Exports:
    PropCheckError: Base class of every propcheck exception
    PropertyContractError: Property lacks is_async/generate/evaluate
    GenerationError: generate() raised during a trial
    PropertyFailedError: Raised by assert_property on a falsified property
    ErrorTemplate: Centralized error message factory

Python 3.13+. Zero external dependencies.
"""

from .errors import (
    GenerationError,
    PropCheckError,
    PropertyContractError,
    PropertyFailedError,
)
from .templates import ErrorTemplate

__all__ = [
    "ErrorTemplate",
    "GenerationError",
    "PropCheckError",
    "PropertyContractError",
    "PropertyFailedError",
]
