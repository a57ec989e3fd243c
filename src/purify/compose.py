"""Fuse two container kinds into one chain.

compose_m() takes a reinjection function (raw value -> container of some
kind) and returns a constructor that wraps an existing container. Every
map() on the wrapper applies the function inside the wrapped container,
feeds the result through the reinjection function and immediately
materializes it, so each step passes through both effects.

The reinjection function must satisfy left identity, reinject(x).get() == x.
Otherwise values change silently on every step.

Example:
    io_option = compose_m(lambda x: IO.of(lambda: x))
    io_option(some(5)).map(lambda x: x + 1).get()  # 6
    io_option(nothing()).map(lambda x: x + 1).get()  # None
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from purify.io import IO
from purify.monad import Monad, Reinject
from purify.option import nothing, some

T = TypeVar("T")
U = TypeVar("U")


class Fused(Generic[T]):
    """A container whose every step is re-threaded through a second effect."""

    __slots__ = ("_inner", "_reinject")

    def __init__(self, inner: Monad[T], reinject: Reinject) -> None:
        self._inner = inner
        self._reinject = reinject

    @property
    def inner(self) -> Monad[T]:
        return self._inner

    def _through_reinject(self, value: Any) -> Any:
        return self._reinject(value).get()

    def map(self, fn: Callable[[T], U]) -> Fused[U]:
        return Fused(self._inner.map(fn).map(self._through_reinject), self._reinject)

    def fmap(self, fn: Callable[[T], Monad[U]]) -> Fused[U]:
        """fn returns a container of the wrapped kind.

        The wrapped container's own fmap flattens it, so an absent Option or
        an Err stays what it is instead of leaking out as a raw value.
        """
        return Fused(self._inner.fmap(fn).map(self._through_reinject), self._reinject)

    def get(self) -> Any:
        return self._inner.get()

    def __repr__(self) -> str:
        return f"Fused({self._inner!r})"


def compose_m(reinject: Reinject) -> Callable[[Monad[T]], Fused[T]]:
    def fuse(container: Monad[T]) -> Fused[T]:
        return Fused(container, reinject)

    return fuse


def _reinject_io(value: T) -> IO[T]:
    return IO.of(lambda: value)


io_option = compose_m(_reinject_io)


def io_some(value: T) -> Fused[T]:
    """An Option whose steps each pass through IO."""
    return io_option(some(value))


def io_nothing() -> Fused[Any]:
    return io_option(nothing())
