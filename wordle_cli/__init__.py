"""
wordle-cli Application Package

A terminal game of Wordle: six attempts to find a five-letter word, with
per-letter feedback after every guess.
"""

__version__ = "0.1.0"
