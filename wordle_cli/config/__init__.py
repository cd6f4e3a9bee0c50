"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Runtime configuration (environment-based)
- game_settings.py: Game rules, constants and word lists (business logic)
"""

from .app_config import Config
from .game_settings import (
    ALPHABET,
    MAX_ROUNDS,
    WORD_LENGTH,
    build_allowed_guesses,
    load_allowed_guesses,
    load_word_list,
    select_word,
    validate_word_list_integrity,
)

__all__ = [
    # Runtime configuration
    'Config',
    # Game rules
    'ALPHABET', 'MAX_ROUNDS', 'WORD_LENGTH',
    'build_allowed_guesses', 'load_allowed_guesses', 'load_word_list',
    'select_word', 'validate_word_list_integrity'
]
