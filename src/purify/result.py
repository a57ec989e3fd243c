from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, TypeVar, cast

if TYPE_CHECKING:
    from purify.option import Option

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success
F = TypeVar("F")  # Mapped error


class Result(ABC, Generic[T, E]):
    """A success value or an error payload: Ok(value) or Err(error).

    The variant is the discriminant. A mapping function may return err(...)
    to fail inline without raising; from then on map() is a no-op and only
    map_err() touches the payload.
    """

    @staticmethod
    def of(value: T | Err[Any, E]) -> Result[T, E]:
        """Same as result_of()."""
        return result_of(value)

    @abstractmethod
    def is_ok(self) -> bool: ...

    @abstractmethod
    def get(self) -> T | Err[T, E]:
        """Return the success value, or the Err wrapper itself.

        There is no automatic unwrap: branch on is_ok()/is_err().
        """

    def is_err(self) -> bool:
        return not self.is_ok()

    def map(self, fn: Callable[[T], U | Err[Any, F]]) -> Result[U, E | F]:
        if self.is_ok():
            return result_of(fn(cast(T, self.get())))
        return cast(Result[U, E | F], self)

    def fmap(self, fn: Callable[[T], Result[U, F]]) -> Result[U, E | F]:
        """Chain a Result-returning function and flatten the result."""
        if self.is_ok():
            return result_of(fn(cast(T, self.get())).get())
        return cast(Result[U, E | F], self)

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        if self.is_err():
            return Err(fn(cast(Err[T, E], self).error))
        return cast(Result[T, F], self)

    def get_or_else(self, fallback: Callable[[], T]) -> T:
        if self.is_ok():
            return cast(T, self.get())
        return fallback()

    def to_option(self) -> Option[T]:
        """Ok(v) -> from_nullable(v), Err -> NOTHING."""
        from purify.option import NOTHING, from_nullable

        if self.is_ok():
            return from_nullable(cast(T, self.get()))
        return NOTHING


class Ok(Result[T, E]):
    __match_args__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Ok) and self._value == other._value

    def __hash__(self) -> int:
        return hash(("Ok", self._value))

    def is_ok(self) -> bool:
        return True

    def get(self) -> T:
        return self._value


class Err(Result[T, E]):
    """The error variant. It doubles as the error wrapper returned by get()."""

    __match_args__ = ("error",)

    def __init__(self, error: E) -> None:
        self._error = error

    @property
    def error(self) -> E:
        return self._error

    def __repr__(self) -> str:
        return f"Err({self._error!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Err) and self._error == other._error

    def __hash__(self) -> int:
        return hash(("Err", self._error))

    def is_ok(self) -> bool:
        return False

    def get(self) -> Err[T, E]:
        return self


def err(error: E) -> Err[Any, E]:
    """Wrap an error payload. Return this from map() to fail inline."""
    return Err(error)


oops = err


def ok(value: T) -> Ok[T, Any]:
    return Ok(value)


def result_of(value: T | Err[Any, E]) -> Result[T, E]:
    """Err instances stay errors, every other value becomes Ok(value).

    Only real Err instances count. Objects that merely resemble one (a dict
    with an "error" key, an object with an .error attribute) are successes.
    """
    if isinstance(value, Err):
        return value
    return Ok(value)


def is_ok(result: Result[Any, Any]) -> bool:
    return result.is_ok()


def is_err(result: Result[Any, Any]) -> bool:
    return result.is_err()


def sequence_results(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Sequence Results into Result of list. Fails fast on first Err."""
    values: list[T] = []
    for r in results:
        if r.is_err():
            return cast(Result[list[T], E], r)
        values.append(cast(T, r.get()))
    return Ok(values)


def traverse_results(items: Iterable[U], fn: Callable[[U], Result[T, E]]) -> Result[list[T], E]:
    """Map fn over items, sequence into Result. Fails fast on first Err."""
    return sequence_results(fn(item) for item in items)
