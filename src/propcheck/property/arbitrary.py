"""Generator abstraction consumed by concrete properties.

An Arbitrary produces a Shrinkable from a Random. Concrete strategies
(integers, strings, collections) live outside propcheck; this module only
defines the base class, value mapping and the tuple combination that lets a
property draw several values per trial.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator, Sequence
from typing import Any

from propcheck.core import Random, Shrinkable

__all__ = ["Arbitrary", "MappedArbitrary", "TupleArbitrary", "shrink_tuple"]


class Arbitrary[T](ABC):
    """Source of shrinkable values.

    Subclasses implement generate(); it may draw from random freely but must
    not consult any other source of entropy.
    """

    @abstractmethod
    def generate(self, random: Random) -> Shrinkable[T]:
        """Produce a fresh Shrinkable from random."""

    def map[U](self, mapper: Callable[[T], U]) -> Arbitrary[U]:
        """Arbitrary whose values (and their shrinks) pass through mapper."""
        return MappedArbitrary(self, mapper)


class MappedArbitrary[T, U](Arbitrary[U]):
    """Arbitrary applying a function to another arbitrary's values."""

    def __init__(self, source: Arbitrary[T], mapper: Callable[[T], U]) -> None:
        self._source = source
        self._mapper = mapper

    def generate(self, random: Random) -> Shrinkable[U]:
        return self._source.generate(random).map(self._mapper)


def shrink_tuple(parts: Sequence[Shrinkable[Any]]) -> Shrinkable[tuple[Any, ...]]:
    """Combine shrinkables into one shrinkable tuple.

    Children shrink one position at a time: every child of the first
    position first, then every child of the second, and so on. Each child
    is itself combined the same way, so descent keeps shrinking the other
    positions too.
    """
    frozen = tuple(parts)

    def children() -> Iterator[Shrinkable[tuple[Any, ...]]]:
        for index, part in enumerate(frozen):
            for child in part.shrink():
                yield shrink_tuple((*frozen[:index], child, *frozen[index + 1 :]))

    value = tuple(part.value for part in frozen)
    if all(part.is_leaf for part in frozen):
        return Shrinkable(value)
    return Shrinkable(value, children)


class TupleArbitrary(Arbitrary[tuple[Any, ...]]):
    """Draws one value from each arbitrary, left to right, into a tuple."""

    def __init__(self, arbitraries: Sequence[Arbitrary[Any]]) -> None:
        self._arbitraries = tuple(arbitraries)

    def __len__(self) -> int:
        return len(self._arbitraries)

    def generate(self, random: Random) -> Shrinkable[tuple[Any, ...]]:
        return shrink_tuple([arb.generate(random) for arb in self._arbitraries])
