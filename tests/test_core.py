"""Tests for core building blocks: Random, Stream and Shrinkable."""

from __future__ import annotations

import itertools
from collections.abc import Iterator

import pytest
from hypothesis import given
from hypothesis import strategies as st

from propcheck import Random, Shrinkable, Stream
from tests.strategies import seeds

# ============================================================================
# RANDOM
# ============================================================================


class TestRandom:
    """Seeded random source."""

    @given(seed=seeds)
    def test_same_seed_same_sequence(self, seed: int) -> None:
        """Two sources from one seed agree draw for draw."""
        first, second = Random(seed), Random(seed)
        assert [first.next_int() for _ in range(20)] == [second.next_int() for _ in range(20)]

    @given(seed=seeds, bounds=st.tuples(st.integers(-1000, 1000), st.integers(0, 1000)))
    def test_next_int_respects_bounds(self, seed: int, bounds: tuple[int, int]) -> None:
        """Draws stay within the inclusive range."""
        low, width = bounds
        value = Random(seed).next_int(low, low + width)
        assert low <= value <= low + width

    def test_next_int_rejects_empty_range(self) -> None:
        """min_value above max_value is an error."""
        with pytest.raises(ValueError):
            Random(0).next_int(5, 4)

    @given(seed=seeds)
    def test_next_double_in_unit_interval(self, seed: int) -> None:
        """Doubles are in [0, 1)."""
        assert 0.0 <= Random(seed).next_double() < 1.0

    def test_next_bool_yields_both_values(self) -> None:
        """Booleans are not stuck on one value."""
        source = Random(11)
        assert {source.next_bool() for _ in range(64)} == {True, False}

    @given(seed=seeds)
    def test_derive_is_deterministic(self, seed: int) -> None:
        """Derived sources depend only on the parent's seed and position."""
        first, second = Random(seed), Random(seed)
        assert first.derive().next_int() == second.derive().next_int()
        assert first.derive().next_int() == second.derive().next_int()

    def test_derive_advances_parent_once(self) -> None:
        """Deriving consumes exactly one draw of the parent."""
        parent, reference = Random(3), Random(3)
        parent.derive()
        reference.derive()
        assert parent.next_int() == reference.next_int()

    def test_derived_draws_do_not_touch_parent(self) -> None:
        """Drawing from a child leaves the parent's sequence unchanged."""
        busy, idle = Random(5), Random(5)
        child = busy.derive()
        idle.derive()
        for _ in range(10):
            child.next_int()
        assert busy.next_int() == idle.next_int()

    def test_clone_replays_future_draws(self) -> None:
        """A clone produces the same upcoming values as its original."""
        source = Random(21)
        source.next_int()
        copy = source.clone()
        assert [source.next_int() for _ in range(5)] == [copy.next_int() for _ in range(5)]
        assert copy.seed == 21


# ============================================================================
# STREAM
# ============================================================================


class TestStream:
    """Lazy single-pass sequences."""

    def test_nil_is_empty(self) -> None:
        assert Stream.nil().to_list() == []

    def test_of(self) -> None:
        assert Stream.of(1, 2, 3).to_list() == [1, 2, 3]

    def test_combinators_on_infinite_stream(self) -> None:
        """map/filter/drop/take compose lazily over infinite sources."""
        result = (
            Stream(itertools.count())
            .map(lambda n: n * 3)
            .filter(lambda n: n % 2 == 0)
            .drop(1)
            .take(3)
            .to_list()
        )
        assert result == [6, 12, 18]

    def test_join(self) -> None:
        assert Stream.of(1).join([2, 3], (4,)).to_list() == [1, 2, 3, 4]

    def test_negative_counts_are_clamped(self) -> None:
        assert Stream.of(1, 2).take(-1).to_list() == []
        assert Stream.of(1, 2).drop(-1).to_list() == [1, 2]

    def test_single_pass(self) -> None:
        """A consumed stream stays consumed."""
        stream = Stream.of(1, 2)
        assert list(stream) == [1, 2]
        assert list(stream) == []

    def test_next(self) -> None:
        stream = Stream.of("a")
        assert next(stream) == "a"
        with pytest.raises(StopIteration):
            next(stream)

    def test_elements_produced_on_demand(self) -> None:
        """Nothing is pulled from the source until requested."""
        pulled: list[int] = []

        def source() -> Iterator[int]:
            for n in range(10):
                pulled.append(n)
                yield n

        stream = Stream(source()).map(lambda n: n + 1)
        assert pulled == []
        assert next(stream) == 1
        assert pulled == [0]


# ============================================================================
# SHRINKABLE
# ============================================================================


class TestShrinkable:
    """Lazily expandable shrink tree nodes."""

    def test_leaf_has_no_children(self) -> None:
        node = Shrinkable(7)
        assert node.is_leaf
        assert node.shrink().to_list() == []

    def test_shrink_is_re_enumerable(self) -> None:
        """Every shrink() call yields a fresh stream with the same children."""
        node = Shrinkable(3, lambda: (Shrinkable(n) for n in range(3)))
        first = [child.value for child in node.shrink()]
        second = [child.value for child in node.shrink()]
        assert first == second == [0, 1, 2]

    def test_shrink_is_lazy(self) -> None:
        """The factory runs only when shrink() is called."""
        calls: list[int] = []

        def factory() -> Iterator[Shrinkable[int]]:
            calls.append(1)
            yield Shrinkable(0)

        node = Shrinkable(1, factory)
        assert calls == []
        node.shrink()
        assert calls == [1]

    def test_map_transforms_value_and_descendants(self) -> None:
        node = Shrinkable(2, lambda: iter([Shrinkable(1, lambda: iter([Shrinkable(0)]))]))
        mapped = node.map(lambda n: n * 10)
        child = next(mapped.shrink())
        grandchild = next(child.shrink())
        assert (mapped.value, child.value, grandchild.value) == (20, 10, 0)

    def test_map_of_leaf_is_leaf(self) -> None:
        assert Shrinkable(1).map(str).is_leaf

    def test_repr(self) -> None:
        assert repr(Shrinkable("x")) == "Shrinkable('x')"
