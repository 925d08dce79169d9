"""Quickstart example for propcheck.

This example demonstrates checking properties with a small hand-written
arbitrary, reading the run report, and replaying a failure from its seed.

Run this example:
    python examples/quickstart.py

Python 3.13+.
"""

import asyncio
import logging
from collections.abc import Iterator

from propcheck import (
    Arbitrary,
    AsyncProperty,
    Property,
    PropertyFailedError,
    Random,
    Shrinkable,
    assert_property,
    check,
    pre,
)


def shrink_int(n: int) -> Shrinkable[int]:
    """Integer shrinking toward zero by halving the distance."""
    if n == 0:
        return Shrinkable(0)

    def children() -> Iterator[Shrinkable[int]]:
        distance = n
        while distance != 0:
            yield shrink_int(n - distance)
            distance = int(distance / 2)

    return Shrinkable(n, children)


class Integers(Arbitrary[int]):
    """Integers in [-bound, bound]."""

    def __init__(self, bound: int = 10_000) -> None:
        self.bound = bound

    def generate(self, random: Random) -> Shrinkable[int]:
        return shrink_int(random.next_int(-self.bound, self.bound))


logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

# Example 1: A property that holds
print("=" * 50)
print("Example 1: Passing property")
print("=" * 50)

details = check(Property(Integers(), Integers(), predicate=lambda a, b: a + b == b + a))
print(f"failed={details.failed} runs={details.num_runs} seed={details.seed}")

# Example 2: A falsified property, shrunk
print("\n" + "=" * 50)
print("Example 2: Shrinking a counterexample")
print("=" * 50)

details = check(Property(Integers(), predicate=lambda n: n < 1234), seed=42, verbose=True)
print(f"counterexample={details.counterexample} path={details.counterexample_path}")
print(f"shrinks={details.num_shrinks} error={details.error!r}")

# Example 3: Preconditions
print("\n" + "=" * 50)
print("Example 3: Skipping inapplicable values")
print("=" * 50)


def halving_is_exact(n: int) -> bool:
    pre(n % 2 == 0)
    return (n // 2) * 2 == n


details = check(Property(Integers(), predicate=halving_is_exact), seed=7)
print(f"runs={details.num_runs} skips={details.num_skips}")

# Example 4: assert_property inside a test
print("\n" + "=" * 50)
print("Example 4: assert_property message")
print("=" * 50)

try:
    assert_property(Property(Integers(), Integers(), predicate=lambda a, b: a <= b), seed=42)
except PropertyFailedError as e:
    print(e)

# Example 5: Asynchronous property with a timeout
print("\n" + "=" * 50)
print("Example 5: Async property with timeout")
print("=" * 50)


async def slow_for_large(n: int) -> bool:
    if abs(n) > 5000:
        await asyncio.sleep(1)
    return True


details = asyncio.run(check(AsyncProperty(Integers(), predicate=slow_for_large), timeout=50))
print(f"failed={details.failed} counterexample={details.counterexample} error={details.error!r}")
