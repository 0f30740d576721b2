"""
Capability objects for the contexts shipped with statet.

Every object is registered by name in CONTEXTS so callers such as the
command line can select a context at run time.
"""
import logging
from typing import Any, Callable, TypeVar

from .array import Array
from .capability import DerivedMonad, loop_step
from .either import Either, Left, Right
from .identity import Identity
from .maybe import Just, Maybe, Nothing

A = TypeVar("A")
B = TypeVar("B")

logger = logging.getLogger(__name__)

CONTEXTS: dict[str, DerivedMonad] = {}

def register(name: str) -> Callable[[type], type]:
    """
    Decorator for capability classes
    Instantiates the class and registers the instance in CONTEXTS
    """
    def decorator(cls: type) -> type:
        if name in CONTEXTS:
            raise ValueError(f"Context {name} registered twice")
        instance = cls()
        instance.name = name
        CONTEXTS[name] = instance
        return cls
    return decorator

def _finished(name: str, steps: int) -> None:
    logger.debug("%s tail_rec_m finished after %d steps", name, steps)


@register("identity")
class IdentityMonad(DerivedMonad):
    """ Capability for Identity: no effect, StateT over it is plain State """

    def pure(self, a: A) -> Identity[A]:
        return Identity(a)

    def map(self, fa: Identity[A], f: Callable[[A], B]) -> Identity[B]:
        return f & fa

    def flat_map(self, fa: Identity[A], f: Callable[[A], Identity[B]]) \
        -> Identity[B]:
        return fa >> f

    def tail_rec_m(self, a: A, f: Callable[[A], Identity[Either[A, B]]]) \
        -> Identity[B]:
        steps = 0
        while True:
            steps += 1
            match loop_step(f(a).value):
                case Left(nxt):
                    a = nxt
                case Right(b):
                    _finished(self.name, steps)
                    return Identity(b)


@register("maybe")
class MaybeMonad(DerivedMonad):
    """ Capability for Maybe: Nothing short-circuits, first Just wins """

    def pure(self, a: A) -> Maybe[A]:
        return Just(a)

    def map(self, fa: Maybe[A], f: Callable[[A], B]) -> Maybe[B]:
        return f & fa

    def flat_map(self, fa: Maybe[A], f: Callable[[A], Maybe[B]]) -> Maybe[B]:
        return fa >> f

    def tail_rec_m(self, a: A, f: Callable[[A], Maybe[Either[A, B]]]) \
        -> Maybe[B]:
        steps = 0
        while True:
            steps += 1
            match f(a):
                case Just(e):
                    match loop_step(e):
                        case Left(nxt):
                            a = nxt
                        case Right(b):
                            _finished(self.name, steps)
                            return Just(b)
                case _:
                    _finished(self.name, steps)
                    return Nothing

    def combine_k(self, x: Maybe[A], y: Maybe[A]) -> Maybe[A]:
        return x.alt(y)


@register("either")
class EitherMonad(DerivedMonad):
    """ Capability for Either: Left short-circuits, first Right wins """

    def pure(self, a: A) -> Either[Any, A]:
        return Right(a)

    def map(self, fa: Either[Any, A], f: Callable[[A], B]) -> Either[Any, B]:
        return f & fa

    def flat_map(self, fa: Either[Any, A],
                 f: Callable[[A], Either[Any, B]]) -> Either[Any, B]:
        return fa >> f

    def tail_rec_m(self, a: A, f: Callable[[A], Either[Any, Either[A, B]]]) \
        -> Either[Any, B]:
        steps = 0
        while True:
            steps += 1
            match f(a):
                case Right(e):
                    match loop_step(e):
                        case Left(nxt):
                            a = nxt
                        case Right(b):
                            _finished(self.name, steps)
                            return Right(b)
                case err:
                    _finished(self.name, steps)
                    return err

    def combine_k(self, x: Either[Any, A], y: Either[Any, A]) \
        -> Either[Any, A]:
        return x.alt(y)


_EXHAUSTED = object()

@register("array")
class ArrayMonad(DerivedMonad):
    """ Capability for Array: every element is one outcome """

    def pure(self, a: A) -> Array[A]:
        return Array.pure(a)

    def map(self, fa: Array[A], f: Callable[[A], B]) -> Array[B]:
        return fa.map(f)

    def flat_map(self, fa: Array[A], f: Callable[[A], Array[B]]) -> Array[B]:
        return fa >> f

    def tail_rec_m(self, a: A, f: Callable[[A], Array[Either[A, B]]]) \
        -> Array[B]:
        # depth first over an explicit stack keeps flat_map's ordering
        steps = 1
        stack = [iter(f(a))]
        out: list[B] = []
        while stack:
            e = next(stack[-1], _EXHAUSTED)
            if e is _EXHAUSTED:
                stack.pop()
                continue
            match loop_step(e):
                case Left(nxt):
                    steps += 1
                    stack.append(iter(f(nxt)))
                case Right(b):
                    out.append(b)
        _finished(self.name, steps)
        return Array(tuple(out))

    def combine_k(self, x: Array[A], y: Array[A]) -> Array[A]:
        return x.append(y)


identity_monad: IdentityMonad = CONTEXTS["identity"]  # type: ignore[assignment]
maybe_monad: MaybeMonad = CONTEXTS["maybe"]  # type: ignore[assignment]
either_monad: EitherMonad = CONTEXTS["either"]  # type: ignore[assignment]
array_monad: ArrayMonad = CONTEXTS["array"]  # type: ignore[assignment]
