""" Array context: every element is one possible outcome """
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, TypeVar, Self

from .functor import Functor

B = TypeVar('B')

@dataclass(frozen=True)
class Array[A](Functor[A]):
    """
    An immutable sequence of outcomes.
    Binding runs the continuation on each outcome and concatenates
    the results in order, so a StateT over Array explores every branch.
    """
    a: tuple[A, ...]

    def __iter__(self):
        return iter(self.a)

    def __len__(self):
        return len(self.a)

    def append(self, other: Array[A]) -> Array[A]:
        """Outcomes of self followed by outcomes of other."""
        return Array(self.a + other.a)

    @classmethod
    def snoc(cls, ar: Self, x: A) -> Self:
        return cls(ar.a + (x,))

    @classmethod
    def mempty(cls) -> Array:
        """No outcomes at all."""
        return cls(())

    @classmethod
    def pure(cls, x: A) -> Array[A]:
        return cls((x,))

    def map(self, f: Callable[[A], B]) -> Array[B]:
        return Array(tuple(f(x) for x in self.a))

    def __rshift__(self, m: Callable[[A], Array[B]]) -> Array[B]:
        return self._bind(m)

    def _bind(self, m: Callable[[A], Array[B]]) -> Array[B]:
        return Array(tuple(y for x in self.a for y in m(x)))

    def __repr__(self):
        return f"[{', '.join(repr(x) for x in self.a)}]"

    def __eq__(self, other) -> bool:
        return isinstance(other, Array) and self.a == other.a
