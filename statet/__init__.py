""" imports for statet """
from .array import Array
from .capability import ApplicativeK, DerivedMonad, FunctorK, MonadK, \
    SemigroupK
from .either import Either, Left, Right
from .errors import CapabilityError, LoopSignalError, StateTError
from .functor import Functor, map #pylint: disable=redefined-builtin
from .identity import Identity
from .instances import CONTEXTS, array_monad, either_monad, identity_monad, \
    maybe_monad
from .maybe import Maybe, Just, Nothing
from .monad import Unit, unit
from .statet import State, StateT, StateTMonad, run_state, state
from .tuple import Tuple
