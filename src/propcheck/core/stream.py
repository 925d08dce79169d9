"""Single-pass lazy sequences.

A Stream wraps an iterator and exposes chainable, lazy combinators over it.
Like any Python iterator it is consumed once, left to right; to enumerate
the same elements again, call the factory that produced the stream again.
Shrinkable.shrink() builds a fresh Stream on every call for exactly that
reason.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator

__all__ = ["Stream"]


class Stream[T]:
    """Lazy, possibly infinite, single-pass sequence.

    Example:
        >>> Stream(itertools.count()).map(lambda n: n * 2).take(3).to_list()
        [0, 2, 4]
    """

    __slots__ = ("_iterator",)

    def __init__(self, source: Iterable[T]) -> None:
        self._iterator: Iterator[T] = iter(source)

    @staticmethod
    def nil() -> Stream[T]:
        """Empty stream."""
        return Stream(())

    @staticmethod
    def of(*values: T) -> Stream[T]:
        """Stream over the given values."""
        return Stream(values)

    def __iter__(self) -> Iterator[T]:
        return self._iterator

    def __next__(self) -> T:
        return next(self._iterator)

    def map[U](self, mapper: Callable[[T], U]) -> Stream[U]:
        """Lazily apply mapper to every element."""
        return Stream(map(mapper, self._iterator))

    def filter(self, predicate: Callable[[T], bool]) -> Stream[T]:
        """Lazily keep elements satisfying predicate."""
        return Stream(filter(predicate, self._iterator))

    def take(self, count: int) -> Stream[T]:
        """First count elements (fewer if the stream ends first)."""
        return Stream(itertools.islice(self._iterator, max(count, 0)))

    def drop(self, count: int) -> Stream[T]:
        """Skip the first count elements."""
        return Stream(itertools.islice(self._iterator, max(count, 0), None))

    def join(self, *others: Iterable[T]) -> Stream[T]:
        """Elements of this stream followed by those of others."""
        return Stream(itertools.chain(self._iterator, *others))

    def to_list(self) -> list[T]:
        """Consume the stream into a list. Never returns on infinite streams."""
        return list(self._iterator)
