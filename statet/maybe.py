""" Maybe context: a value that may be missing """
from abc import ABCMeta
from enum import Enum, EnumMeta
from dataclasses import dataclass
from typing import Callable, TypeVar

from .functor import Functor, map # pylint:disable=redefined-builtin

A = TypeVar("A")
B = TypeVar("B")

type Maybe[A] = Just[A] | _Nothing


class NothingMaybeMeta(ABCMeta, EnumMeta):
    pass


class _Nothing(Functor, Enum, metaclass=NothingMaybeMeta):
    NOTHING = "Nothing"

    def __rand__(self, other: Callable[[A], B]) -> "_Nothing":
        return Nothing

    def map(self, f: Callable[[A], B]) -> "_Nothing":
        return Nothing

    def __rshift__(self, m: Callable[[A], "Maybe[B]"]) -> "_Nothing":
        return Nothing

    def _bind(self, m: Callable[[A], "Maybe[B]"]) -> "_Nothing":
        return Nothing

    def __or__(self, other: Maybe[A]) -> Maybe[A]:
        return self.alt(other)

    def alt(self, other: Maybe[A]) -> Maybe[A]:
        """Nothing gives way to the alternative."""
        return other

    def __repr__(self):
        return "Nothing"

    def __eq__(self, other) -> bool:
        return isinstance(other, _Nothing)

    def __hash__(self):
        return hash(self.value)

# singleton instance
Nothing: _Nothing = _Nothing.NOTHING

@dataclass(frozen=True)
class Just[A](Functor[A]):
    a: A

    def map(self, f: Callable[[A], B]) -> "Just[B]":
        return Just(f(self.a))

    def __rand__(self, other: Callable[[A], B]) -> "Just[B]":
        return map(other, self)

    def __rshift__(self, m: Callable[[A], Maybe[B]]) -> Maybe[B]:
        """Passes the value inside Just on to m."""
        return self._bind(m)

    def _bind(self, m: Callable[[A], Maybe[B]]) -> Maybe[B]:
        return m(self.a)

    def __or__(self, other: Maybe[A]) -> Maybe[A]:
        return self.alt(other)

    def alt(self, other: Maybe[A]) -> Maybe[A]:
        """The first Just wins."""
        return self

    def __repr__(self):
        return f"Just({self.a!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Just) and self.a == other.a

    @classmethod
    def pure(cls, value: A) -> 'Just[A]':
        return cls(value)
