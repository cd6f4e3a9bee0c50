"""
Services Package

Contains all game logic and the small I/O services around it.
"""

from .clipboard_service import ClipboardService
from .evaluator import evaluate, merge_status
from .game_service import GameService
from .progress_service import ProgressData, get_data_path, load_progress, save_progress

__all__ = [
    'ClipboardService',
    'evaluate', 'merge_status',
    'GameService',
    'ProgressData', 'get_data_path', 'load_progress', 'save_progress'
]
