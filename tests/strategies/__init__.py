"""Hypothesis strategies for propcheck property-based testing.

Strategies describe run scenarios (seeds, trial counts, where a property
starts failing) rather than values, since the code under test is itself a
property runner.

Usage:
    from tests.strategies import seeds, failure_points, success_schedules
"""

from .runs import failure_points, num_runs, seeds, success_schedules

__all__ = [
    "failure_points",
    "num_runs",
    "seeds",
    "success_schedules",
]
