"""
Terminal UI Package

Rendering and key translation. The curses session lives in
``wordle_cli.ui.terminal`` and is imported where a game is played.
"""

from .keys import translate
from .renderer import Frame, Segment, render, result_lines, result_text

__all__ = ['Frame', 'Segment', 'render', 'result_lines', 'result_text', 'translate']
