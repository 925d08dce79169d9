"""Trial runner: check() and assert_property().

check() validates the property, then alternates generate and evaluate until
num_runs trials pass or one fails; a failure hands over to the shrink
search. The loop itself is a generator (_trial_steps) that yields each value
to evaluate and receives its TrialOutcome back. Two small drivers feed it:
one calls evaluate() directly, the other awaits it. Both therefore walk the
exact same sequence of values for a given seed, and the asynchronous driver
never has more than one evaluation pending.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Coroutine
from typing import Any

from propcheck.core import Random, Shrinkable
from propcheck.diagnostics import ErrorTemplate, GenerationError
from propcheck.property import (
    PreconditionFailure,
    PropertyLike,
    TimeoutProperty,
    TrialOutcome,
    TrialStatus,
    validate_property,
)

from .configuration import RunParameters
from .details import RunDetails
from .execution import RunExecution
from .reporter import throw_if_failed
from .shrink import Evaluations, shrink_steps
from .stringify import Formatter, stringify

__all__ = ["assert_property", "check"]

logger = logging.getLogger(__name__)


def _generate[T](
    prop: PropertyLike[T], random: Random, seed: int, run_index: int
) -> Shrinkable[T]:
    try:
        return prop.generate(random.derive())
    except Exception as exc:
        raise GenerationError(
            ErrorTemplate.generation_failed(run_index, seed, exc),
            seed=seed,
            run_index=run_index,
        ) from exc


def _trial_steps[T](
    prop: PropertyLike[T], params: RunParameters, execution: RunExecution[T]
) -> Evaluations[T]:
    seed = params.resolved_seed
    random = Random(seed)
    while execution.num_runs < params.num_runs:
        shrinkable = _generate(prop, random, seed, execution.num_runs)
        outcome = yield shrinkable.value
        match outcome.status:
            case TrialStatus.SKIP:
                execution.skip()
            case TrialStatus.SUCCESS:
                execution.succeed()
            case TrialStatus.FAILURE:
                execution.fail_run(shrinkable.value, outcome.cause)
                logger.info(
                    "Property failed after %d runs (seed: %d); shrinking",
                    execution.num_runs,
                    seed,
                )
                yield from shrink_steps(shrinkable, execution)
                logger.info(
                    "Shrinking finished after %d step(s); path %s",
                    execution.num_shrinks,
                    execution.path,
                )
                return


def _evaluate_sync[T](prop: PropertyLike[T], value: T) -> TrialOutcome:
    try:
        result = prop.evaluate(value)
    except PreconditionFailure:
        return TrialOutcome.skip()
    return TrialOutcome.from_result(result)


async def _evaluate_async[T](prop: PropertyLike[T], value: T) -> TrialOutcome:
    try:
        result = prop.evaluate(value)
        if inspect.isawaitable(result):
            result = await result
    except PreconditionFailure:
        return TrialOutcome.skip()
    return TrialOutcome.from_result(result)


def _run_sync[T](prop: PropertyLike[T], params: RunParameters) -> RunDetails[T]:
    execution: RunExecution[T] = RunExecution(verbose=params.verbose)
    steps = _trial_steps(prop, params, execution)
    outcome: TrialOutcome | None = None
    while True:
        try:
            value = steps.send(outcome)  # type: ignore[arg-type]
        except StopIteration:
            break
        outcome = _evaluate_sync(prop, value)
    return execution.to_details(params.resolved_seed)


async def _run_async[T](prop: PropertyLike[T], params: RunParameters) -> RunDetails[T]:
    execution: RunExecution[T] = RunExecution(verbose=params.verbose)
    steps = _trial_steps(prop, params, execution)
    outcome: TrialOutcome | None = None
    while True:
        try:
            value = steps.send(outcome)  # type: ignore[arg-type]
        except StopIteration:
            break
        outcome = await _evaluate_async(prop, value)
    return execution.to_details(params.resolved_seed)


def check(
    prop: PropertyLike[Any], params: RunParameters | None = None, /, **options: Any
) -> RunDetails[Any] | Coroutine[Any, Any, RunDetails[Any]]:
    """Run a property and report the outcome.

    Trial failures never raise: they are captured in the returned
    RunDetails. For an asynchronous property the return value is a
    coroutine resolving to RunDetails.

    Args:
        prop: Object exposing is_async(), generate() and evaluate()
        params: Run configuration; alternatively pass its fields as options
        **options: RunParameters fields (seed, num_runs, timeout, verbose)

    Returns:
        RunDetails, or a coroutine of RunDetails when prop.is_async()

    Raises:
        PropertyContractError: If prop is not a valid property
        GenerationError: If prop.generate() raises (async: when awaited)
        TypeError: If both params and options are given
        ValueError: If a parameter value is invalid
    """
    validate_property(prop)
    parameters = RunParameters.resolve(params, options)
    is_async = prop.is_async()
    logger.debug(
        "Checking property: seed=%d num_runs=%d async=%s",
        parameters.resolved_seed,
        parameters.num_runs,
        is_async,
    )
    if is_async:
        if parameters.timeout is not None:
            prop = TimeoutProperty(prop, parameters.timeout)
        return _run_async(prop, parameters)
    if parameters.timeout is not None:
        logger.debug("Timeout of %g ms ignored for synchronous property", parameters.timeout)
    return _run_sync(prop, parameters)


async def _assert_async(
    pending: Coroutine[Any, Any, RunDetails[Any]], formatter: Formatter
) -> None:
    throw_if_failed(await pending, formatter)


def assert_property(
    prop: PropertyLike[Any],
    params: RunParameters | None = None,
    /,
    *,
    formatter: Formatter = stringify,
    **options: Any,
) -> Coroutine[Any, Any, None] | None:
    """Run a property and raise if it fails.

    Args:
        prop: Object exposing is_async(), generate() and evaluate()
        params: Run configuration; alternatively pass its fields as options
        formatter: Renders values in the failure message
        **options: RunParameters fields (seed, num_runs, timeout, verbose)

    Returns:
        None, or a coroutine to await when prop.is_async()

    Raises:
        PropertyFailedError: If the property was falsified (async: when
            awaited)
        PropertyContractError: If prop is not a valid property
        GenerationError: If prop.generate() raises
    """
    validate_property(prop)
    result = check(prop, params, **options)
    if isinstance(result, RunDetails):
        throw_if_failed(result, formatter)
        return None
    return _assert_async(result, formatter)
