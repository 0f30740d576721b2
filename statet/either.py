"""
Either context: a result or the reason there is none

Besides modelling failure, Either is the loop signal of tail_rec_m:
Left carries the next seed, Right carries the final result.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, TypeVar, Callable

from .functor import Functor, map # pylint:disable=redefined-builtin

L = TypeVar("L")
R = TypeVar("R")
S = TypeVar("S")

type Either[L,R] = 'Left[L]' | 'Right[R]'

@dataclass(frozen=True)
class Left[L](Functor):
    """
    A failed computation carrying l.
    """
    l: L

    def map(self, f: Callable[[R], S]) -> Left[L]:
        return self

    def __rshift__(self, m: Callable[[R], Either[L, S]]) -> Left[L]:
        return self

    def _bind(self, m: Callable[[R], Either[L, S]]) -> Left[L]:  # pylint: disable=unused-argument
        return self

    def __or__(self, other: Either[L, R]) -> Either[L, R]:
        return self.alt(other)

    def alt(self, other: Either[L, R]) -> Either[L, R]:
        """A Left gives way to the alternative, whatever it holds."""
        return other

    def __rand__(self, other: Callable[[R], S]) -> Left[L]:
        return map(other, self)

    def __repr__(self):
        return f"Left({self.l!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Left) and self.l == other.l

@dataclass(frozen=True)
class Right[R](Functor[R]):
    """
    A successful computation carrying r.
    """
    r: R

    def map(self, f: Callable[[R], S]) -> Right[S]:
        return Right(f(self.r))

    def __rshift__(self, m: Callable[[R], Either[L, S]]) -> Either[L, S]:
        return self._bind(m)

    def _bind(self, m: Callable[[R], Either[L, S]]) -> Either[L, S]:
        return m(self.r)

    def __or__(self, other: Either[L, R]) -> Either[L, R]:
        return self.alt(other)

    def alt(self, other: Either[L, R]) -> Either[L, R]:  # pylint: disable=unused-argument
        """The first Right wins."""
        return self

    @classmethod
    def pure(cls, value: R) -> Either[Any, R]:
        return cls(value)

    def __rand__(self, other: Callable[[R], S]) -> Right[S]:
        return map(other, self)

    def __repr__(self):
        return f"Right({self.r!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Right) and self.r == other.r
