from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterable, TypeVar

from purify._pending import Pending
from purify.monad import materialize

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger(__name__)


def _nothing_to_do() -> None:
    return None


class IO(Generic[T]):
    """A deferred computation built from an ordered list of steps.

    The first step takes no argument and produces the seed; each later step
    takes the previous result. map() and fmap() only record steps. Nothing
    runs until get(), and every get() runs the whole list again.

    Example:
        greeting = IO.of(lambda: "world").map(lambda s: f"hello {s}")
        greeting.get()  # "hello world"
    """

    __slots__ = ("_pending",)

    def __init__(self, pending: Pending[T]) -> None:
        self._pending = pending

    @classmethod
    def new(cls, steps: Iterable[Callable[..., Any]]) -> IO[Any]:
        """Build from [seed_producer, step, step, ...]. An empty list yields None."""
        steps = tuple(steps)
        if not steps:
            return cls(Pending(_nothing_to_do))
        first, *rest = steps
        return cls(Pending(first, tuple(rest)))

    @classmethod
    def of(cls, thunk: Callable[[], T]) -> IO[T]:
        return cls(Pending(thunk))

    @property
    def steps(self) -> tuple[Callable[..., Any], ...]:
        return (self._pending.seed, *self._pending.steps)

    def map(self, fn: Callable[[T], U]) -> IO[U]:
        return IO(self._pending.then(fn))

    def fmap(self, fn: Callable[[T], IO[U]]) -> IO[U]:
        """Record fn plus an unwrapping step that runs the IO it returns."""
        return IO(self._pending.then(fn).then(materialize))

    def get(self) -> T:
        logger.debug("Running IO with %d step(s)", len(self._pending))
        return self._pending.run()

    def __repr__(self) -> str:
        return f"IO(<{len(self._pending)} step(s)>)"


DO_NOTHING: IO[None] = IO.of(_nothing_to_do)
