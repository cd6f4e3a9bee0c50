"""
Game Logger Module for wordle-cli

This module provides structured logging for player actions and game
events. Logs go to a dated file only: the terminal belongs to curses
while a game is running.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path


class GameLogger:
    """
    Centralized logging system for the terminal game.

    Features:
    - Player action tracking (typed guesses, copies, quits)
    - Game event logging (wins, losses, rejected guesses)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper())
        if not isinstance(self.level, int):
            self.level = logging.INFO

        # Setup main game logger
        self.logger = self._setup_logger()

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        logger = logging.getLogger('wordle_cli')
        logger.setLevel(self.level)
        logger.propagate = False

        # Prevent duplicate handlers
        if logger.handlers:
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()

        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

        logger.addHandler(file_handler)

        return logger

    def _create_log_entry(self,
                         event_type: str,
                         action: str,
                         details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False)

    def log_user_action(self, action: str, session_index: Optional[int] = None, **kwargs):
        """
        Log player actions with full context.

        Args:
            action: Type of action (e.g., 'submit_guess', 'copy_result', 'quit')
            session_index: Index of the word being played, if applicable
            **kwargs: Additional details to log
        """
        details = {
            'session_index': session_index,
            **kwargs
        }

        log_message = self._create_log_entry('USER_ACTION', action, details)
        self.logger.info(log_message)

    def log_game_event(self, session_index: int, event: str, **kwargs):
        """
        Log game-specific events (wins, losses, etc.).

        Args:
            session_index: Index of the word being played
            event: Type of game event (e.g., 'game_won', 'game_lost', 'guess_rejected')
            **kwargs: Additional game details
        """
        details = {
            'session_index': session_index,
            **kwargs
        }

        log_message = self._create_log_entry('GAME_EVENT', event, details)
        self.logger.info(log_message)

    def log_error(self, error: Exception, action: str, session_index: Optional[int] = None):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            session_index: Index of the word being played, if applicable
        """
        details = {
            'session_index': session_index,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry('ERROR', action, details)
        self.logger.error(log_message)

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events (useful for monitoring)."""
        log_file = self.log_file
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'user_actions': 0,
            'game_events': 0,
            'errors': 0
        }

        with open(log_file, 'r', encoding='utf-8') as f:
            for line in f:
                if line.strip():
                    stats['total_entries'] += 1
                    if 'USER_ACTION' in line:
                        stats['user_actions'] += 1
                    elif 'GAME_EVENT' in line:
                        stats['game_events'] += 1
                    elif 'ERROR' in line:
                        stats['errors'] += 1

        return stats

    def close(self):
        """Release the log file handle."""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)


# Global logger instance
_game_logger = None


def get_game_logger() -> Optional[GameLogger]:
    """Get the global game logger instance, if logging is enabled."""
    return _game_logger


def initialize_game_logger(log_dir: str = "logs", level: str = "INFO") -> GameLogger:
    """Initialize the global game logger instance."""
    global _game_logger
    _game_logger = GameLogger(log_dir, level)
    return _game_logger


def shutdown_game_logger():
    """Close and forget the global game logger instance."""
    global _game_logger
    if _game_logger is not None:
        _game_logger.close()
    _game_logger = None
