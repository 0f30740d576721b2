""" Identity context: a box with no effect at all """
from dataclasses import dataclass
from typing import Callable, TypeVar

from .functor import Functor, map # pylint:disable=redefined-builtin

A = TypeVar("A")
B = TypeVar("B")

@dataclass(frozen=True)
class Identity[A](Functor[A]):
    """
    Wraps a single value. StateT over Identity is the plain State monad.
    """
    value: A

    def map(self, f: Callable[[A], B]) -> "Identity[B]":
        return Identity(f(self.value))

    def __rand__(self, other: Callable[[A], B]) -> "Identity[B]":
        return map(other, self)

    def __rshift__(self, m: Callable[[A], "Identity[B]"]) -> "Identity[B]":
        return self._bind(m)

    def _bind(self, m: Callable[[A], "Identity[B]"]) -> "Identity[B]":
        return m(self.value)

    @classmethod
    def pure(cls, value: A) -> "Identity[A]":
        return cls(value)

    def __repr__(self):
        return f"Identity({self.value!r})"
