"""
Command Data Models

Commands are produced from key presses by the terminal adapter and
applied to the game by the game service.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CommandType(Enum):
    TYPE_CHAR = "TYPE_CHAR"
    BACKSPACE = "BACKSPACE"
    SUBMIT = "SUBMIT"
    QUIT = "QUIT"
    COPY = "COPY"


@dataclass(frozen=True)
class Command:
    """A player command; ``char`` is only set for TYPE_CHAR."""
    type: CommandType
    char: Optional[str] = None

    @classmethod
    def type_char(cls, char: str) -> 'Command':
        return cls(CommandType.TYPE_CHAR, char)


BACKSPACE = Command(CommandType.BACKSPACE)
SUBMIT = Command(CommandType.SUBMIT)
QUIT = Command(CommandType.QUIT)
COPY = Command(CommandType.COPY)
