"""The container contract shared by every purify type.

A container holds a value (or the recipe for one) and exposes three
operations:

    map(fn)   apply a plain function, return a new container of the same kind
    fmap(fn)  apply a function that returns a container, flatten the nesting
    get()     materialize the final value

Containers never mutate: every map/fmap returns a new instance.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Monad(Protocol[T_co]):
    """Structural type for anything with map/fmap/get.

    Option, Result, IO, Future and Fused all satisfy it without inheriting
    from it.
    """

    def map(self, fn: Callable[[Any], Any]) -> Monad[Any]: ...

    def fmap(self, fn: Callable[[Any], Any]) -> Monad[Any]: ...

    def get(self) -> Any: ...


# Raw value -> container. Must satisfy reinject(x).get() == x.
Reinject = Callable[[Any], Monad[Any]]

# Zero-argument thunk -> container.
Lifter = Callable[[Callable[[], Any]], Monad[Any]]


def identity(x: T) -> T:
    """Return the argument unchanged."""
    return x


def materialize(container: Monad[T]) -> T:
    """Flattening step: run a container and hand back its value."""
    return container.get()
