"""
Rendering of StateT run results for the terminal
"""
from typing import Any, Union

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .array import Array
from .either import Left, Right
from .identity import Identity
from .maybe import Just
from .tuple import Tuple


def outcomes(result: Any) -> tuple[Tuple, ...]:
    """
    Flattens a run result F[Tuple[S, A]] into its successful outcomes.
    Nothing, Left and an empty Array have none.
    """
    match result:
        case Identity(t) | Just(t) | Right(t):
            return (t,)
        case Array(ts):
            return ts
        case _:
            return ()

def failure(result: Any) -> str | None:
    """Describes a failed run, or None if the run succeeded."""
    match result:
        case Left(e):
            return f"Left: {e}"
        case _ if not outcomes(result):
            return repr(result)
        case _:
            return None

def rich_to_str(text: Union[Text, Table, str], end = '\n') -> str:
    """
    Returns directly printable string corresponding to a text
    Applies style formatting and word wrapping automatically
    """
    console = Console()
    with console.capture() as capture:
        console.print(text, end=end)
    return capture.get()

def outcome_table(context: str, result: Any) -> str:
    """
    Return formatted table with one row per outcome:
    final stack (top first) and the values yielded.
    """
    table = Table(title=f"context: {context}", row_styles=['', 'bold on grey85'])
    table.add_column("outcome")
    table.add_column("final stack")
    table.add_column("yielded")
    for i, (stack, yielded) in enumerate(outcomes(result), start=1):
        table.add_row(str(i), ", ".join(stack), ", ".join(map(str, yielded)))
    return rich_to_str(table)
