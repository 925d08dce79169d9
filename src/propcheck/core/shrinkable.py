"""Lazily expandable shrink tree nodes.

A Shrinkable holds one generated value together with an optional factory
producing its "simpler" variants. The tree below a node is never built up
front: each shrink() call invokes the factory again and returns a new Stream,
so children are created on demand and no iterator state is shared between
two enumerations of the same node.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .stream import Stream

__all__ = ["ShrinkFactory", "Shrinkable"]

type ShrinkFactory[T] = Callable[[], Iterable[Shrinkable[T]]]


class Shrinkable[T]:
    """Value plus lazy sequence of simpler candidate values.

    A node without a shrink factory is a leaf. The factory must be
    deterministic: every call yields the same children in the same order.

    Attributes:
        value: The concrete value held by this node
    """

    __slots__ = ("_shrink", "value")

    def __init__(self, value: T, shrink: ShrinkFactory[T] | None = None) -> None:
        self.value = value
        self._shrink = shrink

    def __repr__(self) -> str:
        return f"Shrinkable({self.value!r})"

    @property
    def is_leaf(self) -> bool:
        """True if the node has no shrink factory."""
        return self._shrink is None

    def shrink(self) -> Stream[Shrinkable[T]]:
        """Fresh stream of children, empty for a leaf."""
        if self._shrink is None:
            return Stream.nil()
        return Stream(self._shrink())

    def map[U](self, mapper: Callable[[T], U]) -> Shrinkable[U]:
        """Node whose value and descendants are transformed by mapper."""
        if self._shrink is None:
            return Shrinkable(mapper(self.value))
        return Shrinkable(
            mapper(self.value),
            lambda: self.shrink().map(lambda child: child.map(mapper)),
        )
