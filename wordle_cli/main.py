"""
wordle-cli - Main Entry Point

Parses the command line, loads the word lists and saved progress, plays
one game in the terminal and advances the saved word index once the game
is finished.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import Config
from .config.game_settings import (
    build_allowed_guesses,
    load_allowed_guesses,
    load_word_list,
    select_word,
    validate_word_list_integrity,
)
from .models.game import GameStatus
from .services.progress_service import ProgressData, get_data_path, load_progress, save_progress
from .utils.errors import ProgressError, WordleError
from .utils.game_logger import get_game_logger, initialize_game_logger, shutdown_game_logger

ABOUT = "wordle-cli (wrdl) is a terminal-based game of Wordle."

console = Console()
error_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wrdl", description=ABOUT)
    parser.add_argument(
        '-a', '--allowed-guesses', nargs='?', const='', metavar='PATH',
        help="Specify path to allowed guesses file, leave blank to unset"
    )
    parser.add_argument(
        '-r', '--reset', action='store_true',
        help="Set the next word pointer to the beginning"
    )
    parser.add_argument(
        '-V', '--version', action='version', version=__version__,
        help="Print version information"
    )
    parser.add_argument(
        '-w', '--words', nargs='?', const='', metavar='PATH',
        help="Specify path to allowed words file, leave blank to unset"
    )
    return parser


def verify_path(path: str) -> Optional[str]:
    """Canonicalizes an override path; an empty path unsets the override."""
    if not path:
        return None
    try:
        return str(Path(path).resolve(strict=True))
    except (OSError, RuntimeError):
        raise ProgressError("path does not exist")


def apply_settings(args: argparse.Namespace, data: ProgressData) -> bool:
    """
    Applies command-line settings to the saved data.

    Returns:
        bool: True if any setting was given (and no game should be played)
    """
    changed = False

    if args.words is not None:
        data.words_path = verify_path(args.words)
        console.print(f"✓ Words file: {data.words_path or 'default'}")
        changed = True

    if args.allowed_guesses is not None:
        data.allowed_guesses_path = verify_path(args.allowed_guesses)
        console.print(f"✓ Allowed guesses file: {data.allowed_guesses_path or 'default'}")
        changed = True

    if args.reset:
        data.index = 0
        console.print("✓ Next word reset to the beginning")
        changed = True

    return changed


def play(data: ProgressData) -> GameStatus:
    """Loads the word lists and plays the word at the saved index."""
    from .ui.terminal import run_session

    words = load_word_list(data.words_path)
    validate_word_list_integrity(words)
    word = select_word(words, data.index)

    allowed_guesses = build_allowed_guesses(load_allowed_guesses(data.allowed_guesses_path), words)

    return run_session(word, allowed_guesses, data.index)


def run(argv: Optional[List[str]] = None) -> None:
    """Runs the app."""
    args = build_parser().parse_args(argv)

    data_path = get_data_path()
    data = load_progress(data_path)

    if apply_settings(args, data):
        save_progress(data, data_path)
        return

    status = play(data)

    # Quitting before the game is decided keeps the same word for next time
    if status.is_over:
        data.index += 1
        save_progress(data, data_path)


def start_logging():
    """Opens the game log when logging is enabled."""
    if not Config.LOG_ENABLED:
        return
    try:
        initialize_game_logger(Config.LOG_DIR, Config.LOG_LEVEL)
    except OSError as e:
        raise WordleError(f"unable to open log directory {Config.LOG_DIR}: {e}") from e


def main(argv: Optional[List[str]] = None) -> int:
    """Main function: runs the app and reports failures."""
    try:
        start_logging()
        run(argv)
    except WordleError as e:
        logger = get_game_logger()
        if logger:
            logger.log_error(e, 'main')
        error_console.print(f"[bold red]error[/]: {escape(str(e))}", highlight=False, soft_wrap=True)
        return 1
    except KeyboardInterrupt:
        return 130
    finally:
        shutdown_game_logger()

    return 0


def entry_point():
    sys.exit(main())


if __name__ == '__main__':
    entry_point()
