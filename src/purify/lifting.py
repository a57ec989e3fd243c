"""Turn a record of plain functions into functions that return containers.

lift(container_fn) returns a lifter. Given a mapping or an object, the
lifter builds a new record where every callable is replaced by a wrapper
that does not call the original. Instead it returns
container_fn(lambda: original(*args, **kwargs)), so the call only happens
when that container is materialized.

Non-callable entries are dropped from the output, and nested records are not
walked. Pass names=[...] to lift a fixed set of fields instead of whatever
the record happens to contain.

Example:
    pure_math = lift(IO.of)({"add": lambda a, b: a + b, "pi": 3.14})
    task = pure_math["add"](2, 3)  # nothing has run yet
    task.get()  # 5
    "pi" in pure_math  # False
"""

from __future__ import annotations

import functools
import logging
from types import SimpleNamespace
from typing import Any, Callable, Iterable, Mapping, TypeVar

from purify.monad import Lifter, Monad

T = TypeVar("T")

logger = logging.getLogger(__name__)


def lift_function(container_fn: Lifter, fn: Callable[..., T]) -> Callable[..., Monad[T]]:
    """Lift one function. The wrapper keeps fn's name, docstring and signature."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Monad[T]:
        return container_fn(lambda: fn(*args, **kwargs))

    return wrapper


def lifted(container_fn: Lifter) -> Callable[[Callable[..., T]], Callable[..., Monad[T]]]:
    """Decorator form of lift_function().

    @lifted(IO.of)
    def read_config(path): ...
    """

    def decorator(fn: Callable[..., T]) -> Callable[..., Monad[T]]:
        return lift_function(container_fn, fn)

    return decorator


def _members(module: Any) -> Mapping[str, Any]:
    if isinstance(module, Mapping):
        return module
    # Private and dunder attributes of modules and classes are not part of
    # the record. Values are read with getattr so classmethod and staticmethod
    # descriptors resolve to their callables.
    return {name: getattr(module, name) for name in vars(module) if not name.startswith("_")}


def lift(container_fn: Lifter) -> Callable[..., Any]:
    def lifter(module: Any, *, names: Iterable[str] | None = None) -> Any:
        members = _members(module)
        selected = list(members) if names is None else list(names)

        lifted_members: dict[str, Callable[..., Any]] = {}
        for name in selected:
            value = members[name]
            if callable(value):
                lifted_members[name] = lift_function(container_fn, value)

        logger.debug("Lifted %d of %d member(s)", len(lifted_members), len(selected))

        if isinstance(module, Mapping):
            return lifted_members
        return SimpleNamespace(**lifted_members)

    return lifter
