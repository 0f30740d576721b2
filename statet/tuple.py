"""
The (state, result) pair produced by every state transition.
"""
from collections.abc import Callable
from typing import Iterator, TypeVar
from dataclasses import dataclass

from .functor import Functor, map # pylint:disable=W0622
A = TypeVar('A')
B = TypeVar('B')
L = TypeVar('L')


@dataclass(frozen=True)
class Tuple[L,A](Functor[A]):
    """A pair that maps over its second value.

    For a state transition fst is the state and snd is the result.
    Unpacks like a builtin pair: `s, a = t`.
    """

    fst: L
    snd: A

    def map(self, f: Callable[[A], B]) -> "Tuple[L, B]":
        return Tuple(self.fst, f(self.snd))

    def __rand__(self, other: Callable[[A], B]):
        return map(other, self)

    def __iter__(self) -> Iterator[L | A]:
        yield self.fst
        yield self.snd

    def __repr__(self):
        return f'Tuple ({self.fst!r}, {self.snd!r})'

    def __eq__(self, other) -> bool:
        return isinstance(other, Tuple) \
            and self.fst == other.fst and self.snd == other.snd
