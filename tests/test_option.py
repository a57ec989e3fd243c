"""Tests for the Option container."""

from __future__ import annotations

import pytest
from typing_extensions import assert_type

from purify import NOTHING, Err, Ok, Option, Some
from purify.option import (
    _NothingType,
    from_nullable,
    is_nothing,
    is_some,
    nothing,
    sequence_options,
    some,
    traverse_options,
)


class TestSomeBasics:
    """Tests for Some variant basic behavior."""

    def test_some_is_some(self) -> None:
        assert some(42).is_some() is True

    def test_some_is_nothing(self) -> None:
        assert some(42).is_nothing() is False

    def test_some_get(self) -> None:
        assert some(42).get() == 42

    def test_some_repr(self) -> None:
        assert repr(Some(42)) == "Some(42)"
        assert repr(Some("hello")) == "Some('hello')"

    def test_some_eq_same_value(self) -> None:
        assert Some(1) == Some(1)

    def test_some_eq_different_value(self) -> None:
        assert Some(1) != Some(2)

    def test_some_eq_different_type(self) -> None:
        assert Some(1) != 1
        assert Some(1) != Ok(1)

    def test_some_hash(self) -> None:
        s = {Some(1), Some(1), Some(2)}
        assert len(s) == 2


class TestNothingBasics:
    """Tests for the absent state."""

    def test_nothing_predicates(self) -> None:
        assert NOTHING.is_some() is False
        assert NOTHING.is_nothing() is True

    def test_nothing_get_returns_none(self) -> None:
        assert NOTHING.get() is None

    def test_nothing_repr(self) -> None:
        assert repr(NOTHING) == "Nothing"

    def test_nothing_is_singleton(self) -> None:
        assert _NothingType() is NOTHING
        assert nothing() is NOTHING

    def test_nothing_hashable(self) -> None:
        assert len({NOTHING, nothing()}) == 1


class TestConstructors:
    def test_of_value(self) -> None:
        assert Option.of(5) == Some(5)

    def test_of_none(self) -> None:
        assert Option.of(None) is NOTHING

    def test_from_nullable_falsy_values_are_present(self) -> None:
        assert from_nullable(0) == Some(0)
        assert from_nullable("") == Some("")
        assert from_nullable(False) == Some(False)
        assert from_nullable([]) == Some([])

    def test_some_with_none_collapses(self) -> None:
        assert some(None) is NOTHING


class TestMap:
    """Tests for map and the collapse to Nothing."""

    def test_map_on_some(self) -> None:
        assert some(5).map(lambda x: x + 1) == Some(6)

    def test_map_on_nothing_never_calls_fn(self) -> None:
        calls = 0

        def inc(x: int) -> int:
            nonlocal calls
            calls += 1
            return x + 1

        option: Option[int] = nothing()
        assert option.map(inc) is NOTHING
        assert calls == 0

    def test_map_to_none_collapses(self) -> None:
        collapsed = some(5).map(lambda x: None)
        assert collapsed is NOTHING
        assert collapsed == nothing()
        assert collapsed.get() is None

    def test_collapse_is_permanent(self) -> None:
        calls: list[object] = []
        result = (
            some({"name": "ada"})
            .map(lambda d: d.get("email"))
            .map(lambda email: calls.append(email) or email)
            .map(str.lower)
        )
        assert result is NOTHING
        assert calls == []

    def test_map_does_not_mutate_receiver(self) -> None:
        original = some(1)
        original.map(lambda x: x + 1)
        assert original == Some(1)


class TestFmap:
    def test_fmap_some_to_some(self) -> None:
        assert some(2).fmap(lambda x: some(x * 2)) == Some(4)

    def test_fmap_some_to_nothing(self) -> None:
        assert some(2).fmap(lambda x: nothing()) is NOTHING

    def test_fmap_on_nothing(self) -> None:
        called = []
        option: Option[int] = NOTHING
        assert option.fmap(lambda x: called.append(x) or some(x)) is NOTHING
        assert called == []


class TestGetOrElse:
    def test_on_some(self) -> None:
        assert some(5).get_or_else(lambda: 0) == 5

    def test_on_nothing(self) -> None:
        option: Option[int] = NOTHING
        assert option.get_or_else(lambda: 42) == 42

    def test_fallback_not_called_on_some(self) -> None:
        called = []
        some(5).get_or_else(lambda: called.append(True) or 0)
        assert called == []


class TestFilter:
    def test_filter_some_passes(self) -> None:
        assert some(4).filter(lambda x: x > 0) == Some(4)

    def test_filter_some_fails(self) -> None:
        assert some(-1).filter(lambda x: x > 0) is NOTHING

    def test_filter_nothing(self) -> None:
        option: Option[int] = NOTHING
        assert option.filter(lambda x: x > 0) is NOTHING


class TestToResult:
    def test_some_to_ok(self) -> None:
        assert some(5).to_result("missing") == Ok(5)

    def test_nothing_to_err(self) -> None:
        assert nothing().to_result("missing") == Err("missing")


class TestPatternMatching:
    """Tests for pattern matching via __match_args__."""

    def test_match_some(self) -> None:
        option: Option[int] = some(42)
        match option:
            case Some(value):
                assert value == 42
            case _:
                pytest.fail("Should have matched Some")

    def test_match_nothing(self) -> None:
        option: Option[int] = nothing()
        match option:
            case Some(_):
                pytest.fail("Should have matched Nothing")
            case _NothingType():
                pass


class TestPredicates:
    def test_module_level_predicates(self) -> None:
        options = [some(1), nothing(), some(3)]
        assert [o.get() for o in filter(is_some, options)] == [1, 3]
        assert len(list(filter(is_nothing, options))) == 1


class TestSequenceOptions:
    """Tests for sequence_options and traverse_options."""

    def test_sequence_all_some(self) -> None:
        assert sequence_options([some(1), some(2), some(3)]) == Some([1, 2, 3])

    def test_sequence_with_nothing(self) -> None:
        assert sequence_options([some(1), nothing(), some(3)]) is NOTHING

    def test_sequence_empty(self) -> None:
        assert sequence_options([]) == Some([])

    def test_traverse_fails_fast(self) -> None:
        seen: list[int] = []

        def half(x: int) -> Option[int]:
            seen.append(x)
            return some(x // 2) if x % 2 == 0 else nothing()

        assert traverse_options([2, 3, 4], half) is NOTHING
        assert seen == [2, 3]

    def test_traverse_all_some(self) -> None:
        assert traverse_options([1, 2, 3], lambda x: some(x * 2)) == Some([2, 4, 6])


class TestOptionTypes:
    """Static type assertions (no-ops at runtime)."""

    def test_from_nullable_type(self) -> None:
        value: int | None = 3
        assert_type(from_nullable(value), Option[int])

    def test_map_type(self) -> None:
        option: Option[int] = some(3)
        assert_type(option.map(str), Option[str])
