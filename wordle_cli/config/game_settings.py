"""
Game Configuration Constants Module

This module defines all game configuration constants and the word lists
the game is played with. The default lists ship with the package as JSON
files; either can be replaced by a JSON file chosen on the command line.

"""

import json
import os
from typing import Final, FrozenSet, Iterable, List, Optional, Set

from ..utils.errors import WordListError

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in every secret word and every guess.
"""

MAX_ROUNDS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

_CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_WORDS_PATH: Final[str] = os.path.join(_CONFIG_DIR, 'words.json')
DEFAULT_ALLOWED_GUESSES_PATH: Final[str] = os.path.join(_CONFIG_DIR, 'allowed_guesses.json')


def _load_json_words(json_file_path: str) -> List[str]:
    """
    Load a JSON array of words from disk.

    Args:
        json_file_path: Path to a JSON file holding an array of strings

    Returns:
        List[str]: Words in file order, unchanged

    Raises:
        WordListError: If the file is missing, malformed, or not an array of strings
    """
    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise WordListError(f"Word list file not found: {json_file_path}")
    except OSError as e:
        raise WordListError(f"Unable to read word list {json_file_path}: {e}")
    except json.JSONDecodeError as e:
        raise WordListError(f"Invalid JSON in {json_file_path}: {e}")

    if not isinstance(word_list, list):
        raise WordListError(f"{json_file_path} must contain an array of words")

    if not all(isinstance(word, str) for word in word_list):
        raise WordListError(f"{json_file_path} must contain only strings")

    return word_list


def load_word_list(path: Optional[str] = None) -> List[str]:
    """Load the ordered list of secret words, defaulting to the bundled list."""
    return _load_json_words(path or DEFAULT_WORDS_PATH)


def load_allowed_guesses(path: Optional[str] = None) -> Set[str]:
    """Load the set of extra accepted guesses, defaulting to the bundled list."""
    return set(_load_json_words(path or DEFAULT_ALLOWED_GUESSES_PATH))


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates the integrity and consistency of a secret word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly WORD_LENGTH characters
    2. Character validation: Only ASCII alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries (case-insensitive)

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        WordListError: If any validation check fails with detailed error message
    """
    if not words:
        raise WordListError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise WordListError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not (word.isascii() and word.isalpha()):
            raise WordListError(f"Word at index {index} '{word}' contains non-alphabetic characters")

    uppercase_words = [word.upper() for word in words]
    if len(uppercase_words) != len(set(uppercase_words)):
        duplicates = sorted({word for word in uppercase_words if uppercase_words.count(word) > 1})
        raise WordListError(f"Duplicate words found in word list: {duplicates}")

    return True


def build_allowed_guesses(allowed_guesses: Iterable[str], words: Iterable[str]) -> FrozenSet[str]:
    """
    Union the allow-list with every secret word, uppercased.

    Any past or future secret word is therefore always a valid guess.
    """
    return frozenset(word.upper() for word in (*allowed_guesses, *words))


def select_word(words: List[str], index: int) -> str:
    """Return the secret word for a session index, uppercased."""
    if index < 0 or index >= len(words):
        raise WordListError("all available words have been used")
    return words[index].upper()
