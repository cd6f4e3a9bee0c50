"""
Key Translation

Maps raw curses key input to game commands.
"""

import curses
from typing import Optional, Union

from ..models.command import BACKSPACE, COPY, QUIT, SUBMIT, Command
from ..models.game import GameState

Key = Union[str, int]

ESCAPE_KEYS = {"\x1b", 27}
ENTER_KEYS = {"\n", "\r", 10, 13, curses.KEY_ENTER}
BACKSPACE_KEYS = {"\x7f", "\b", 127, 8, curses.KEY_BACKSPACE}
COPY_KEYS = {"c", "C"}


def translate(key: Key, state: GameState) -> Optional[Command]:
    """
    Translates one key press into a command.

    ``key`` is what ``get_wch`` returns: a one-character string for
    ordinary input, or an int key code for special keys.
    """
    if key in ESCAPE_KEYS:
        return QUIT
    if key in ENTER_KEYS:
        return SUBMIT
    if key in BACKSPACE_KEYS:
        return BACKSPACE
    if state.status.is_over and key in COPY_KEYS:
        return COPY
    if isinstance(key, str) and len(key) == 1 and key.isprintable():
        return Command.type_char(key)
    return None
