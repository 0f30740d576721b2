""" The unit value shared by the contexts and StateT
"""
from enum import Enum

class Unit(Enum):
    """ The single value of a computation with no meaningful result """
    UNIT = "unit"

    def __repr__(self):
        return "unit"

unit: Unit = Unit.UNIT
