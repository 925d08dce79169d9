"""Tests for run configuration, execution state and value rendering."""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from propcheck import RunParameters
from propcheck.constants import DEFAULT_NUM_RUNS, SEED_MASK
from propcheck.runner import RunExecution, stringify

# ============================================================================
# RUN PARAMETERS
# ============================================================================


class TestRunParameters:
    """Validation and defaults of RunParameters."""

    def test_defaults(self) -> None:
        params = RunParameters()
        assert params.num_runs == DEFAULT_NUM_RUNS
        assert params.timeout is None
        assert params.verbose is False
        assert params.seed is not None
        assert 0 <= params.resolved_seed <= SEED_MASK

    def test_explicit_seed_is_kept(self) -> None:
        assert RunParameters(seed=-5).resolved_seed == -5

    def test_zero_runs_allowed(self) -> None:
        assert RunParameters(num_runs=0).num_runs == 0

    def test_negative_runs_rejected(self) -> None:
        with pytest.raises(ValueError, match="num_runs"):
            RunParameters(num_runs=-1)

    def test_negative_timeout_rejected(self) -> None:
        with pytest.raises(ValueError, match="timeout"):
            RunParameters(timeout=-0.5)

    def test_frozen(self) -> None:
        params = RunParameters(seed=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.seed = 2  # type: ignore[misc]

    def test_resolve_from_options(self) -> None:
        params = RunParameters.resolve(None, {"seed": 9, "verbose": True})
        assert params == RunParameters(seed=9, verbose=True)

    def test_resolve_returns_instance(self) -> None:
        params = RunParameters(seed=1)
        assert RunParameters.resolve(params, {}) is params


# ============================================================================
# RUN EXECUTION
# ============================================================================


class TestRunExecution:
    """Result assembly from in-flight state."""

    def test_counts_without_failure(self) -> None:
        execution: RunExecution[int] = RunExecution()
        execution.succeed()
        execution.skip()
        execution.succeed()
        details = execution.to_details(seed=4)
        assert (details.failed, details.num_runs, details.num_skips) == (False, 2, 1)
        assert details.counterexample_path is None

    def test_failure_path_and_shrinks(self) -> None:
        execution: RunExecution[str] = RunExecution(verbose=True)
        execution.succeed()
        execution.fail_run("root", "first")
        execution.fail_shrink("child", 3, "second")
        execution.fail_shrink("leaf", 0, "third")
        details = execution.to_details(seed=4)
        assert details.num_runs == 2
        assert details.counterexample_path == "1:3:0"
        assert details.num_shrinks == 2
        assert details.counterexample == "leaf"
        assert details.error == "third"
        assert details.failures == ("root", "child", "leaf")

    def test_non_verbose_keeps_no_failures(self) -> None:
        execution: RunExecution[str] = RunExecution()
        execution.fail_run("root", "cause")
        assert execution.to_details(seed=0).failures == ()

    def test_to_details_is_repeatable(self) -> None:
        execution: RunExecution[str] = RunExecution()
        execution.fail_run("root", "cause")
        assert execution.to_details(seed=0) == execution.to_details(seed=0)


# ============================================================================
# STRINGIFY
# ============================================================================


class TestStringify:
    """Compact value rendering."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (42, "42"),
            (None, "None"),
            ("hi", '"hi"'),
            ([1, "a"], '[1,"a"]'),
            ((1, (2, 3)), "[1,[2,3]]"),
            ({"a": [1]}, '{"a":[1]}'),
            ((), "[]"),
        ],
    )
    def test_rendering(self, value: object, expected: str) -> None:
        assert stringify(value) == expected

    def test_custom_repr_is_used(self) -> None:
        class Point:
            def __repr__(self) -> str:
                return "Point(1, 2)"

        assert stringify([Point()]) == "[Point(1, 2)]"

    @given(st.lists(st.integers()))
    def test_integer_lists_render_without_spaces(self, values: list[int]) -> None:
        assert stringify(values) == repr(values).replace(" ", "")
