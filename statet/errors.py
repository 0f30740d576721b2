"""
Exceptions for programming errors in StateT programs.

Failures of the computation itself are never raised: they are values
of the context (Nothing, Left, an empty Array) and flow through the
combinators untouched.
"""

class StateTError(Exception):
    """
    Base class for statet exceptions
    """


class CapabilityError(StateTError, TypeError):
    """
    A capability object lacks an operation a combinator needs
    """


class LoopSignalError(StateTError, TypeError):
    """
    A tail_rec_m step produced something other than Left or Right
    """
