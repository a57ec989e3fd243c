from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Final, Generic, Iterable, TypeVar, cast

if TYPE_CHECKING:
    from purify.result import Result

T = TypeVar("T")  # Contained type
U = TypeVar("U")  # Mapped type
E = TypeVar("E")  # Error type for to_result


class Option(ABC, Generic[T]):
    """An absence-safe value holder: either Some(value) or Nothing.

    A transformation that returns None collapses the option to Nothing, and
    once it is Nothing no further function is ever called. An explicit None
    payload and a missing value are therefore the same thing.

    Build options with from_nullable(), some() or nothing(). The Some class
    itself is there for isinstance checks and pattern matching.
    """

    @staticmethod
    def of(value: T | None) -> Option[T]:
        """From-value constructor, same as from_nullable()."""
        return from_nullable(value)

    @abstractmethod
    def is_some(self) -> bool: ...

    @abstractmethod
    def get(self) -> T | None:
        """Return the raw value, or None when absent. Never raises."""

    def is_nothing(self) -> bool:
        return not self.is_some()

    def map(self, fn: Callable[[T], U | None]) -> Option[U]:
        if self.is_some():
            return from_nullable(fn(cast(T, self.get())))
        return NOTHING

    def fmap(self, fn: Callable[[T], Option[U]]) -> Option[U]:
        """Chain an Option-returning function and flatten the result."""
        if self.is_some():
            return from_nullable(fn(cast(T, self.get())).get())
        return NOTHING

    def get_or_else(self, fallback: Callable[[], T]) -> T:
        if self.is_some():
            return cast(T, self.get())
        return fallback()

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        if self.is_some() and predicate(cast(T, self.get())):
            return self
        return NOTHING

    def to_result(self, error: E) -> Result[T, E]:
        """Some(v) -> Ok(v), Nothing -> Err(error)."""
        from purify.result import Err, Ok

        if self.is_some():
            return Ok(cast(T, self.get()))
        return Err(error)


class Some(Option[T]):
    __match_args__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"Some({self._value!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Some) and self._value == other._value

    def __hash__(self) -> int:
        return hash(("Some", self._value))

    def is_some(self) -> bool:
        return True

    def get(self) -> T:
        return self._value


class _NothingType(Option[Any]):
    """The absent state. There is exactly one instance, NOTHING."""

    _instance: _NothingType | None = None

    def __new__(cls) -> _NothingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nothing"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _NothingType)

    def __hash__(self) -> int:
        return hash("Nothing")

    def is_some(self) -> bool:
        return False

    def get(self) -> None:
        return None


NOTHING: Final = _NothingType()
Nothing = _NothingType


def from_nullable(value: T | None) -> Option[T]:
    """None -> NOTHING, anything else (0, "", False included) -> Some(value)."""
    if value is None:
        return NOTHING
    return Some(value)


def some(value: T) -> Option[T]:
    """Explicit-present constructor. some(None) still collapses to NOTHING."""
    return from_nullable(value)


def nothing() -> Option[Any]:
    """Explicit-absent constructor."""
    return NOTHING


def is_some(option: Option[Any]) -> bool:
    return option.is_some()


def is_nothing(option: Option[Any]) -> bool:
    return option.is_nothing()


def sequence_options(options: Iterable[Option[T]]) -> Option[list[T]]:
    """Collect options into Some(list). Fails fast on the first Nothing."""
    values: list[T] = []
    for option in options:
        if option.is_nothing():
            return NOTHING
        values.append(cast(T, option.get()))
    return Some(values)


def traverse_options(items: Iterable[U], fn: Callable[[U], Option[T]]) -> Option[list[T]]:
    """Map fn over items and sequence the options. Fails fast on the first Nothing."""
    return sequence_options(fn(item) for item in items)
