"""Seeded random source handed to generators.

A Random wraps a seed into a deterministic stream of integers. The runner
owns one Random per run and advances it exactly once per trial, deriving an
independent child Random for that trial's generate() call. How many draws a
generator makes therefore never shifts the values of later trials.

The bit generator itself is the standard library Mersenne Twister; only its
seeding and the handful of draws below are part of propcheck's contract.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import random

from propcheck.constants import MAX_INT, MIN_INT

__all__ = ["Random"]

# Width of the seed drawn for each derived Random.
_DERIVED_SEED_BITS = 64


class Random:
    """Deterministic, stateful integer source.

    Two instances built from the same seed and advanced the same way produce
    identical outputs. Instances are never shared between runs.

    Attributes:
        seed: Seed the source was created from
    """

    __slots__ = ("_generator", "seed")

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._generator = random.Random(seed)

    def __repr__(self) -> str:
        return f"Random(seed={self.seed})"

    def next_int(self, min_value: int = MIN_INT, max_value: int = MAX_INT) -> int:
        """Draw an integer in the inclusive range [min_value, max_value].

        Raises:
            ValueError: If min_value > max_value
        """
        return self._generator.randint(min_value, max_value)

    def next_bool(self) -> bool:
        """Draw a boolean."""
        return self._generator.getrandbits(1) == 1

    def next_double(self) -> float:
        """Draw a float in [0.0, 1.0)."""
        return self._generator.random()

    def derive(self) -> Random:
        """Advance once and return an independent Random seeded from the draw."""
        return Random(self._generator.getrandbits(_DERIVED_SEED_BITS))

    def clone(self) -> Random:
        """Copy this source; the copy replays the same future draws."""
        copy = Random(self.seed)
        copy._generator.setstate(self._generator.getstate())
        return copy
