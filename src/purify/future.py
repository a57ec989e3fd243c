"""Seed-plus-steps deferred computation.

Despite the name there is nothing asynchronous here: get() folds the steps
over the seed on the calling thread and returns the final value. No event
loop, no pending state, no awaitables.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable, Generic, Iterable, TypeVar

from purify._pending import Pending
from purify.monad import identity, materialize

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger(__name__)


class Future(Generic[T]):
    """A seed value and the steps still to be folded over it.

    Example:
        Future.new(2, [lambda x: x + 1, lambda x: x * 3]).get()  # 9
    """

    __slots__ = ("_seed", "_pending")

    def __init__(self, seed: Any, steps: Iterable[Callable[[Any], Any]] = ()) -> None:
        self._seed = seed
        self._pending: Pending[T] = Pending(partial(identity, seed), tuple(steps))

    @classmethod
    def new(cls, seed: Any, steps: Iterable[Callable[[Any], Any]]) -> Future[Any]:
        return cls(seed, steps)

    @classmethod
    def of(cls, value: T) -> Future[T]:
        """A Future with no steps; get() returns value."""
        return cls(value)

    @classmethod
    def defer(cls, thunk: Callable[[], T]) -> Future[T]:
        """Wrap a zero-argument thunk, e.g. as the target of lift()."""
        return cls(None, (lambda _: thunk(),))

    @property
    def seed(self) -> Any:
        return self._seed

    @property
    def steps(self) -> tuple[Callable[[Any], Any], ...]:
        return self._pending.steps

    def map(self, fn: Callable[[T], U]) -> Future[U]:
        return Future(self._seed, (*self._pending.steps, fn))

    def fmap(self, fn: Callable[[T], Future[U]]) -> Future[U]:
        return Future(self._seed, (*self._pending.steps, fn, materialize))

    def get(self) -> T:
        logger.debug("Folding %d step(s) over Future seed", len(self._pending.steps))
        return self._pending.run()

    def __repr__(self) -> str:
        return f"Future({self._seed!r}, <{len(self._pending.steps)} step(s)>)"
