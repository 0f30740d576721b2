"""
StateT: a state-threading computation over an arbitrary context.

A StateT[F, S, A] wraps a transition function S -> F[Tuple[S, A]],
itself stored inside the context F. Every operation takes the capability
object of F explicitly (see capability.py), methods as their last
argument and constructors as their first:

    push = StateT.modify(maybe_monad, lambda s: ("a", *s))
    top = StateT.gets(maybe_monad, lambda s: s[0])
    prog = push.then(top, maybe_monad)
    prog.run(("b",), maybe_monad) == Just(Tuple(("a", "b"), "a"))

Execution order and failure are entirely those of F: a Nothing or Left
produced by any step stops the computation and no later transition runs.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from .capability import ApplicativeK, DerivedMonad, FunctorK, MonadK, \
    loop_step, require_combine_k
from .either import Either, Left, Right
from .identity import Identity
from .instances import identity_monad
from .monad import Unit, unit
from .tuple import Tuple

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
S = TypeVar("S")
Z = TypeVar("Z")

# S -> F[Tuple[S, A]]
type Transition[S, A] = Callable[[S], Any]


@dataclass(frozen=True)
class StateT[F, S, A]:
    """
    Immutable state-threading computation.
    run_f holds the transition function inside the context F.
    """
    run_f: Any

    # ===== Constructors =====

    @classmethod
    def of(cls, mf: ApplicativeK, run: Transition[S, A]) -> StateT[F, S, A]:
        """Wraps a bare transition function, lifting it into the context."""
        return cls(mf.pure(run))

    @staticmethod
    def pure(af: ApplicativeK, a: A) -> StateT[F, S, A]:
        """Leaves the state untouched and yields a."""
        return StateT(af.pure(lambda s: af.pure(Tuple(s, a))))

    @staticmethod
    def lift(mf: ApplicativeK, fa: Any) -> StateT[F, S, A]:
        """Promotes a context value F[A]; the state is untouched."""
        return StateT(mf.pure(lambda s: mf.map(fa, lambda a: Tuple(s, a))))

    @staticmethod
    def get(af: ApplicativeK) -> StateT[F, S, S]:
        """Yields the current state."""
        return StateT(af.pure(lambda s: af.pure(Tuple(s, s))))

    @staticmethod
    def gets(af: ApplicativeK, f: Callable[[S], A]) -> StateT[F, S, A]:
        """Yields f applied to the current state."""
        return StateT(af.pure(lambda s: af.pure(Tuple(s, f(s)))))

    @staticmethod
    def set(af: ApplicativeK, s: S) -> StateT[F, S, Unit]:
        """Replaces the state with s."""
        return StateT(af.pure(lambda _: af.pure(Tuple(s, unit))))

    @staticmethod
    def set_f(af: ApplicativeK, fs: Any) -> StateT[F, S, Unit]:
        """Replaces the state with the value produced by fs: F[S]."""
        return StateT(af.pure(lambda _: af.map(fs, lambda s: Tuple(s, unit))))

    @staticmethod
    def modify(af: ApplicativeK, f: Callable[[S], S]) -> StateT[F, S, Unit]:
        """Replaces the state with f(state)."""
        return StateT(af.pure(lambda s: af.pure(Tuple(f(s), unit))))

    @staticmethod
    def modify_f(af: ApplicativeK, f: Callable[[S], Any]) \
        -> StateT[F, S, Unit]:
        """
        Replaces the state with the value inside f(state): F[S].
        The modification may fail in the context.
        """
        return StateT(af.pure(lambda s: af.map(f(s), lambda s1: Tuple(s1, unit))))

    @staticmethod
    def tail_rec_m(a: A, f: Callable[[A], StateT[F, S, Either[A, B]]],
                   mf: MonadK) -> StateT[F, S, B]:
        """
        Runs f from seed a, threading state, until it yields Right(b).
        Left(next) continues with the next seed. The loop itself is the
        context's tail_rec_m, so the stack does not grow per iteration.
        """
        def redistribute(t: Tuple[S, Either[A, B]]) -> Either[Tuple, Tuple]:
            match loop_step(t.snd):
                case Left(nxt):
                    return Left(Tuple(t.fst, nxt))
                case Right(b):
                    return Right(Tuple(t.fst, b))

        def step(pair: Tuple[S, A]) -> Any:
            s, a0 = pair
            return mf.map(f(a0).run(s, mf), redistribute)

        return StateT(mf.pure(lambda s: mf.tail_rec_m(Tuple(s, a), step)))

    # ===== Execution =====

    def run(self, initial: S, mf: MonadK) -> Any:
        """
        Runs the computation from initial, returning F[Tuple[S, A]].
        """
        return mf.flat_map(self.run_f, lambda f: f(initial))

    def run_a(self, initial: S, mf: MonadK) -> Any:
        """Runs the computation and keeps only the result: F[A]."""
        return mf.map(self.run(initial, mf), lambda t: t.snd)

    def run_s(self, initial: S, mf: MonadK) -> Any:
        """Runs the computation and keeps only the final state: F[S]."""
        return mf.map(self.run(initial, mf), lambda t: t.fst)

    # ===== Combinators =====

    def transform(self, f: Callable[[Tuple[S, A]], Tuple[S, B]],
                  ff: FunctorK) -> StateT[F, S, B]:
        """Applies f to the (state, result) pair produced by this computation."""
        return StateT(
            ff.map(self.run_f, lambda sfsa:
                lambda s: ff.map(sfsa(s), f)))

    def map(self, f: Callable[[A], B], ff: FunctorK) -> StateT[F, S, B]:
        """Applies f to the result; the state is what this computation left."""
        return self.transform(lambda t: t.map(f), ff)

    def flat_map(self, f: Callable[[A], StateT[F, S, B]],
                 mf: MonadK) -> StateT[F, S, B]:
        """
        Runs this computation, passes its result to f and runs the
        computation f returns from the state this one left behind.
        """
        return StateT(
            mf.map(self.run_f, lambda sfsa:
                lambda s: mf.flat_map(sfsa(s), lambda t:
                    f(t.snd).run(t.fst, mf))))

    def flat_map_f(self, f: Callable[[A], Any], mf: MonadK) -> StateT[F, S, B]:
        """
        Like flat_map for a function returning a bare context value F[B].
        f never sees nor changes the state.
        """
        return StateT(
            mf.map(self.run_f, lambda sfsa:
                lambda s: mf.flat_map(sfsa(s), lambda t:
                    mf.map(f(t.snd), lambda b: Tuple(t.fst, b)))))

    def then(self, sb: StateT[F, S, B], mf: MonadK) -> StateT[F, S, B]:
        """Sequences sb after this computation, keeping the result of sb."""
        return self.flat_map(lambda _: sb, mf)

    def map2(self, sb: StateT[F, S, B], fn: Callable[[A, B], Z],
             mf: MonadK) -> StateT[F, S, Z]:
        """
        Runs this computation and sb independently from the same state
        and combines their results with fn. sb does not see the state
        this computation produces; the final state is the one sb left.
        """
        return StateT(
            mf.map2(self.run_f, sb.run_f, lambda ssa, ssb:
                lambda s: mf.map2(ssa(s), ssb(s), lambda ta, tb:
                    Tuple(tb.fst, fn(ta.snd, tb.snd)))))

    def product(self, sb: StateT[F, S, B], mf: MonadK) \
        -> StateT[F, S, Tuple[A, B]]:
        """Pairs the results of two independent computations."""
        return self.map2(sb, Tuple, mf)

    def ap(self, ff: StateT[F, S, Callable[[A], B]],
           mf: MonadK) -> StateT[F, S, B]:
        """Applies the function produced by ff to the result of this one."""
        return ff.map2(self, lambda f, a: f(a), mf)

    def combine_k(self, y: StateT[F, S, A], mf: MonadK,
                  sf: Any) -> StateT[F, S, A]:
        """
        Runs this computation and y from the same state and merges the
        two context values with sf.combine_k (e.g. first success wins).
        """
        sk = require_combine_k(sf)
        return StateT(mf.pure(lambda s: sk.combine_k(self.run(s, mf), y.run(s, mf))))


class StateTMonad(DerivedMonad):
    """
    Capability object for StateT[F, S, _] given the capability of F.
    Lets generic code written against MonadK run state computations,
    and lets StateT be stacked over another StateT.
    """

    def __init__(self, mf: MonadK):
        self.mf = mf
        self.name = f"StateT[{getattr(mf, 'name', mf)}]"

    def pure(self, a: A) -> StateT:
        return StateT.pure(self.mf, a)

    def map(self, fa: StateT, f: Callable[[A], B]) -> StateT:
        return fa.map(f, self.mf)

    def flat_map(self, fa: StateT, f: Callable[[A], StateT]) -> StateT:
        return fa.flat_map(f, self.mf)

    def map2(self, fa: StateT, fb: StateT, f: Callable[[A, B], C]) -> StateT:
        return fa.map2(fb, f, self.mf)

    def tail_rec_m(self, a: A, f: Callable[[A], StateT]) -> StateT:
        return StateT.tail_rec_m(a, f, self.mf)

    def combine_k(self, x: StateT, y: StateT) -> StateT:
        return x.combine_k(y, self.mf, self.mf)


# ===== Plain State =====

type State[S, A] = StateT[Identity, S, A]

def state(f: Callable[[S], Tuple[S, A]]) -> State[S, A]:
    """Builds a plain State computation from S -> Tuple[S, A]."""
    return StateT.of(identity_monad, lambda s: Identity(f(s)))

def run_state(prog: State[S, A], initial: S) -> Tuple[S, A]:
    """Runs a plain State computation, returning the final Tuple(state, result)."""
    return prog.run(initial, identity_monad).value
