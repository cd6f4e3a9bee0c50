"""
Data Models Package

Contains all data models used throughout the application.
"""

from .command import Command, CommandType
from .game import GameState, GameStatus, Guess, LetterStatus, Spot

__all__ = ['Command', 'CommandType', 'GameState', 'GameStatus', 'Guess', 'LetterStatus', 'Spot']
