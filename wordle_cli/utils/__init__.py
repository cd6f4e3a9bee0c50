"""
Utilities Package

Contains the error types and the game logger.
"""

from .errors import (
    ClipboardError,
    ProgressError,
    ResourceAcquisitionError,
    TerminalIOError,
    WordleError,
    WordListError,
)
from .game_logger import GameLogger, get_game_logger, initialize_game_logger, shutdown_game_logger

__all__ = [
    'ClipboardError', 'ProgressError', 'ResourceAcquisitionError', 'TerminalIOError',
    'WordleError', 'WordListError',
    'GameLogger', 'get_game_logger', 'initialize_game_logger', 'shutdown_game_logger'
]
