"""
Settings for the stack demonstration command.
"""
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from .stack import Command, parse_command

ContextName = Literal["identity", "maybe", "either", "array"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

class StackDemoConfig(BaseModel):
    """
    Validated settings for one run of a stack program
    """
    context: ContextName = "either"
    initial: tuple[str, ...] = Field(
        default=(), description="Initial stack, top first")
    commands: tuple[str, ...] = Field(
        min_length=1, description="push:X, pop or peek, in order")
    log_level: LogLevel = "WARNING"

    @field_validator("initial", mode="before")
    @classmethod
    def split_initial(cls, v):
        """Accepts a comma separated string as well as a sequence."""
        if isinstance(v, str):
            return tuple(x for x in v.split(",") if x)
        return v

    @field_validator("commands")
    @classmethod
    def check_commands(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        for text in v:
            parse_command(text)
        return v

    def parsed_commands(self) -> tuple[Command, ...]:
        """The commands as Push/Pop/Peek values."""
        return tuple(parse_command(text) for text in self.commands)
