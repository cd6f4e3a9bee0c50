"""
Terminal Session

Runs one game in the terminal with curses: owns raw mode for the whole
session, paints frames, reads keys and feeds commands to the game.
"""

import curses
from typing import Dict, FrozenSet

from rich.cells import cell_len

from ..models.game import GameStatus
from ..services.clipboard_service import ClipboardService
from ..services.game_service import GameService
from ..utils.errors import TerminalIOError
from ..utils.game_logger import get_game_logger
from . import renderer
from .keys import translate
from .renderer import Frame, Line

# Color pair indices
PAIR_RED = 1
PAIR_GREEN = 2
PAIR_YELLOW = 3
PAIR_GRAY = 4
PAIR_BORDER = 5

MARGIN = 2


def init_colors():
    """Initialize curses color pairs."""
    if not curses.has_colors():
        return
    curses.start_color()
    curses.use_default_colors()
    gray = 8 if curses.COLORS > 8 else curses.COLOR_WHITE
    curses.init_pair(PAIR_RED, curses.COLOR_RED, -1)
    curses.init_pair(PAIR_GREEN, curses.COLOR_GREEN, -1)
    curses.init_pair(PAIR_YELLOW, curses.COLOR_YELLOW, -1)
    curses.init_pair(PAIR_GRAY, gray, -1)
    curses.init_pair(PAIR_BORDER, curses.COLOR_YELLOW, -1)


def style_attributes() -> Dict[str, int]:
    """Curses attributes for each renderer style name."""
    return {
        renderer.DEFAULT: curses.A_NORMAL,
        renderer.BOLD: curses.A_BOLD,
        renderer.DIM: curses.A_DIM,
        renderer.RED: curses.color_pair(PAIR_RED),
        renderer.GREEN: curses.color_pair(PAIR_GREEN),
        renderer.GREEN_BOLD: curses.color_pair(PAIR_GREEN) | curses.A_BOLD,
        renderer.YELLOW: curses.color_pair(PAIR_YELLOW),
        renderer.DARK_GRAY: curses.color_pair(PAIR_GRAY),
    }


def safe_addstr(win, y, x, text, attr=0):
    """addstr that silently ignores curses errors at screen edges."""
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        pass


def line_width(line: Line) -> int:
    """Terminal cells taken by a line; emoji squares are two cells wide."""
    return sum(cell_len(segment.text) for segment in line)


def paint(stdscr, frame: Frame, attributes: Dict[str, int]):
    """Draw a frame: a titled rule, then each line centered."""
    stdscr.erase()
    height, width = stdscr.getmaxyx()

    rule = "─" * max(0, width - 2 * MARGIN)
    safe_addstr(stdscr, MARGIN - 1, MARGIN, rule, curses.color_pair(PAIR_BORDER))
    title = f" {frame.title} "
    safe_addstr(stdscr, MARGIN - 1, max(MARGIN, (width - cell_len(title)) // 2), title, curses.A_BOLD)

    for row, line in enumerate(frame.lines):
        y = MARGIN + row
        if y >= height:
            break
        x = max(0, (width - line_width(line)) // 2)
        for segment in line:
            safe_addstr(stdscr, y, x, segment.text, attributes.get(segment.style, curses.A_NORMAL))
            x += cell_len(segment.text)

    stdscr.refresh()


def run_app(stdscr, game: GameService) -> GameStatus:
    """Main curses loop: render, block for a key, apply the command."""
    init_colors()
    curses.set_escdelay(25)
    attributes = style_attributes()

    while True:
        paint(stdscr, renderer.render(game.state), attributes)

        key = stdscr.get_wch()
        if key == curses.KEY_RESIZE:
            continue

        command = translate(key, game.state)
        if command is None:
            continue
        if not game.apply(command):
            return game.state.status


def run_session(word: str, allowed_guesses: FrozenSet[str], index: int) -> GameStatus:
    """
    Plays one game in the terminal and returns how it ended.

    curses.wrapper restores the terminal on every exit path, including
    exceptions and KeyboardInterrupt.

    Raises:
        TerminalIOError: If the terminal cannot be set up, read or painted
    """
    game = GameService(word, allowed_guesses, index, renderer.result_text, clipboard=ClipboardService())

    logger = get_game_logger()
    if logger:
        logger.log_game_event(index, 'game_started', allowed_guesses=len(game.state.allowed_guesses))

    try:
        return curses.wrapper(run_app, game)
    except curses.error as e:
        if logger:
            logger.log_error(e, 'run_session', index)
        raise TerminalIOError(f"terminal failure: {e}") from e
