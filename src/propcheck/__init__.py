"""propcheck - seeded trial runner and shrink search for property-based testing.

Runs a property (a generator of shrinkable values plus a predicate) for a
number of trials, stops at the first falsifying value, then descends the
value's lazy shrink tree to a minimal counterexample. Every run is fully
reproducible from the seed reported alongside it.

Public API:
    check - Run a property and return RunDetails
    assert_property - Run a property and raise on failure
    RunParameters - Run configuration (seed, num_runs, timeout, verbose)
    RunDetails - Structured run report
    Property / AsyncProperty - Predicate-based properties
    Arbitrary - Base class of value sources
    Shrinkable - Value plus lazy sequence of simpler values
    Stream - Single-pass lazy sequence
    Random - Seeded random source
    pre - Skip the current trial unless a condition holds

Exceptions:
    PropCheckError - Base exception class
    PropertyContractError - Object is not a valid property
    GenerationError - generate() raised during a trial
    PropertyFailedError - Raised by assert_property on failure

Submodules:
    propcheck.core - Random, Stream, Shrinkable
    propcheck.property - Property contract, outcomes, concrete properties
    propcheck.runner - check/assert_property, shrink search, reporting
    propcheck.diagnostics - Exceptions and message templates
"""

from .core import Random, Shrinkable, Stream
from .diagnostics import (
    GenerationError,
    PropCheckError,
    PropertyContractError,
    PropertyFailedError,
)
from .property import (
    Arbitrary,
    AsyncProperty,
    PreconditionFailure,
    Property,
    PropertyLike,
    TrialOutcome,
    TrialStatus,
    pre,
)
from .runner import RunDetails, RunParameters, assert_property, check

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("propcheck")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Arbitrary",
    "AsyncProperty",
    "GenerationError",
    "PreconditionFailure",
    "PropCheckError",
    "Property",
    "PropertyContractError",
    "PropertyFailedError",
    "PropertyLike",
    "Random",
    "RunDetails",
    "RunParameters",
    "Shrinkable",
    "Stream",
    "TrialOutcome",
    "TrialStatus",
    "__version__",
    "assert_property",
    "check",
    "pre",
]
