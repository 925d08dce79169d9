"""Property contract, outcomes and concrete properties.

Exports:
    PropertyLike: Protocol of objects accepted by the runner
    validate_property: Upfront contract check
    TrialOutcome, TrialStatus: Tagged evaluation result
    PreconditionFailure, pre: Trial skip marker
    Arbitrary, TupleArbitrary: Value sources for concrete properties
    Property, AsyncProperty: Predicate-based properties
    TimeoutProperty: Timeout decorator for asynchronous properties

Python 3.13+.
"""

from .arbitrary import Arbitrary, MappedArbitrary, TupleArbitrary, shrink_tuple
from .contract import EvaluationResult, PropertyLike, validate_property
from .outcome import TrialOutcome, TrialStatus
from .precondition import PreconditionFailure, pre
from .property import AsyncProperty, Property
from .timeout import TimeoutProperty

__all__ = [
    "Arbitrary",
    "AsyncProperty",
    "EvaluationResult",
    "MappedArbitrary",
    "PreconditionFailure",
    "Property",
    "PropertyLike",
    "TimeoutProperty",
    "TrialOutcome",
    "TrialStatus",
    "TupleArbitrary",
    "pre",
    "shrink_tuple",
    "validate_property",
]
