""" Abstract base class for Functor """
from abc import ABC, abstractmethod
from typing import Callable, Self, TypeVar

# pylint:disable=C0105
A = TypeVar('A', covariant=True)
B = TypeVar('B', covariant=True)

class Functor[A](ABC):
    """Base class for the concrete contexts shipped with statet.

    Sub-classes override map so that the functor laws hold. The
    & operator is sugar for map with the function on the left:

        (lambda x: x + 1) & Just(2) == Just(3)
    """

    def __rand__(self, other: Callable[[A], B]) -> "Functor[B]":
        """Defines the right-hand side of the map operation."""
        return map(other, self)

    @abstractmethod
    def map(self: Self, f: Callable[[A], B]) -> "Functor[B]":
        """Applies a function to the value inside the Functor."""

def map(fn, f):  # pylint:disable=W0622
    """Applies the function 'fn' to the value inside the functor
    'f' using its map method."""
    return f.map(fn)
