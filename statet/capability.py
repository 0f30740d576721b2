"""
Capability protocols for the contexts StateT runs in.

Python has no higher-kinded types, so a context is described by a
capability object passed explicitly at every call site (dictionary
passing). The object bundles the operations of one context:

    pure(a)               -> F[A]
    map(fa, f)            -> F[B]
    flat_map(fa, f)       -> F[B]
    map2(fa, fb, f)       -> F[C]
    tail_rec_m(a, f)      -> F[B]     f: A -> F[Either[A, B]]
    combine_k(x, y)       -> F[A]     optional

Each capability is a plain object; nothing is resolved globally.
"""
from __future__ import annotations
# pylint:disable=W2301
from abc import ABC, abstractmethod
from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

from .either import Either, Left, Right
from .errors import CapabilityError, LoopSignalError
from .tuple import Tuple

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')

@runtime_checkable
class FunctorK(Protocol):
    """
    Capability to map over a value in context.
    """
    def map(self, fa: Any, f: Callable[[A], B]) -> Any:
        """
        Applies f to the value inside fa.
        """
        ...

@runtime_checkable
class ApplicativeK(FunctorK, Protocol):
    """
    Capability to wrap pure values and combine independent values in context.
    """
    def pure(self, a: A) -> Any:
        """
        Wraps a value in the context with no effect.
        """
        ...

    def map2(self, fa: Any, fb: Any, f: Callable[[A, B], C]) -> Any:
        """
        Combines two independent values in context.
        """
        ...

@runtime_checkable
class MonadK(ApplicativeK, Protocol):
    """
    Capability to sequence computations in context.
    """
    def flat_map(self, fa: Any, f: Callable[[A], Any]) -> Any:
        """
        Passes the value inside fa to f, which returns a new context value.
        """
        ...

    def tail_rec_m(self, a: A, f: Callable[[A], Any]) -> Any:
        """
        Applies f repeatedly while it yields Left(next seed) in context,
        stopping at Right(result). Must not grow the call stack per step.
        """
        ...

@runtime_checkable
class SemigroupK(Protocol):
    """
    Capability to combine two values of the same context,
    e.g. first success wins or concatenation.
    """
    def combine_k(self, x: Any, y: Any) -> Any:
        """
        Combines two context values.
        """
        ...


class DerivedMonad(ABC):
    """
    Base class for capability objects.

    Sub-classes provide pure, flat_map and tail_rec_m; map and map2
    are derived from them and can be overridden for efficiency.
    """
    name: str = "context"

    @abstractmethod
    def pure(self, a: A) -> Any:
        """Wraps a value in the context."""

    @abstractmethod
    def flat_map(self, fa: Any, f: Callable[[A], Any]) -> Any:
        """Sequences fa with f."""

    @abstractmethod
    def tail_rec_m(self, a: A, f: Callable[[A], Any]) -> Any:
        """Stack safe monadic loop."""

    def map(self, fa: Any, f: Callable[[A], B]) -> Any:
        return self.flat_map(fa, lambda a: self.pure(f(a)))

    def map2(self, fa: Any, fb: Any, f: Callable[[A, B], C]) -> Any:
        return \
            self.flat_map(fa, lambda a:
            self.map(fb, lambda b:
            f(a, b)
            ))

    def product(self, fa: Any, fb: Any) -> Any:
        """Pairs two independent values in context."""
        return self.map2(fa, fb, Tuple)

    def __repr__(self):
        return f"<{type(self).__name__} {self.name}>"


def loop_step(e: Either[A, B]) -> Either[A, B]:
    """Identity on loop signals; anything else is a programming error."""
    match e:
        case Left(_) | Right(_):
            return e
        case _:
            raise LoopSignalError(
                f"tail_rec_m step must yield Left or Right, got {e!r}")


def require_combine_k(sf: Any) -> SemigroupK:
    """
    Returns sf if it can combine context values, raises CapabilityError otherwise.
    """
    if not isinstance(sf, SemigroupK):
        raise CapabilityError(
            f"{sf!r} does not provide combine_k")
    return sf
