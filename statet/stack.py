"""
A stack of strings driven by StateT programs.

The state is a plain tuple with the top of the stack first. Every
program works in any context; popping an empty stack produces the
caller's `empty` context value (Nothing, Left(...), an empty Array)
instead of raising.
"""
from dataclasses import dataclass
from typing import Any, Sequence

from .array import Array
from .capability import MonadK
from .either import Left, Right
from .identity import Identity
from .maybe import Nothing
from .statet import StateT
from .tuple import Tuple

type Stack = tuple[str, ...]

EMPTY_STACK = "empty stack"


@dataclass(frozen=True)
class Push:
    """Push a value on the stack."""
    value: str


@dataclass(frozen=True)
class Pop:
    """Remove the top of the stack and yield it."""


@dataclass(frozen=True)
class Peek:
    """Yield the top of the stack, leaving it in place."""


type Command = Push | Pop | Peek


def push(mf: MonadK, value: str) -> StateT:
    return StateT.modify(mf, lambda s: (value, *s))

def pop(mf: MonadK, empty: Any) -> StateT:
    """
    Removes and yields the top of the stack.
    On an empty stack yields `empty`, a context value, with the state unchanged.
    """
    def transition(s: Stack) -> Any:
        match s:
            case (top, *rest):
                return mf.pure(Tuple(tuple(rest), top))
            case _:
                return mf.map(empty, lambda a: Tuple(s, a))
    return StateT.of(mf, transition)

def peek(mf: MonadK, empty: Any) -> StateT:
    """Yields the top of the stack, or `empty` when there is none."""
    def transition(s: Stack) -> Any:
        match s:
            case (top, *_):
                return mf.pure(Tuple(s, top))
            case _:
                return mf.map(empty, lambda a: Tuple(s, a))
    return StateT.of(mf, transition)

def command(mf: MonadK, cmd: Command, empty: Any) -> StateT:
    """Translates one command into its StateT program."""
    match cmd:
        case Push(value):
            return push(mf, value)
        case Pop():
            return pop(mf, empty)
        case Peek():
            return peek(mf, empty)
        case _:
            raise TypeError(f"Unknown stack command {cmd!r}")

def parse_command(text: str) -> Command:
    """
    Parses "push:X", "pop" or "peek".
    """
    match text.strip().split(":", 1):
        case ["push", value] if value:
            return Push(value)
        case ["pop"]:
            return Pop()
        case ["peek"]:
            return Peek()
        case _:
            raise ValueError(f"Invalid stack command: {text!r}")

def run_commands(mf: MonadK, commands: Sequence[Command],
                 empty: Any) -> StateT:
    """
    Builds one program running every command in order.
    Its result is the Array of values yielded by pop and peek.
    The commands run in a tail_rec_m loop, so long lists are stack safe.
    """
    cmds = tuple(commands)

    def collect(acc: Array, cmd: Command, value: Any) -> Array:
        return acc if isinstance(cmd, Push) else Array.snoc(acc, value)

    def step(seed: tuple[int, Array]) -> StateT:
        i, acc = seed
        if i == len(cmds):
            return StateT.pure(mf, Right(acc))
        return command(mf, cmds[i], empty).map(
            lambda value: Left((i + 1, collect(acc, cmds[i], value))), mf)

    return StateT.tail_rec_m((0, Array.mempty()), step, mf)

def empty_for(context: str) -> Any:
    """
    The value an empty stack produces in each registered context.
    """
    match context:
        case "identity":
            return Identity(None)
        case "maybe":
            return Nothing
        case "either":
            return Left(EMPTY_STACK)
        case "array":
            return Array.mempty()
        case _:
            raise ValueError(f"No empty stack value for context {context!r}")
