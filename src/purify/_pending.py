from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


def _apply(acc: Any, step: Callable[[Any], Any]) -> Any:
    return step(acc)


@dataclass(frozen=True, slots=True)
class Pending(Generic[T]):
    """A computation that has not run yet: a seed thunk plus unary steps.

    Appending a step builds a new Pending. User code only runs inside run(),
    and every run() starts again from the seed.
    """

    seed: Callable[[], Any]
    steps: tuple[Callable[[Any], Any], ...] = ()

    def then(self, fn: Callable[[Any], Any]) -> Pending[Any]:
        return Pending(self.seed, (*self.steps, fn))

    def run(self) -> T:
        return reduce(_apply, self.steps, self.seed())

    def __len__(self) -> int:
        return 1 + len(self.steps)
