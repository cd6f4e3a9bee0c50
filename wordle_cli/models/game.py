"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterator, List, Optional, Tuple


class LetterStatus(Enum):
    """Letter evaluation status for one board position."""
    CORRECT = "CORRECT"
    INCORRECT = "INCORRECT"  # In the word, wrong position
    NOT_IN_WORD = "NOT_IN_WORD"

    @property
    def rank(self) -> int:
        """Display precedence: CORRECT > INCORRECT > NOT_IN_WORD."""
        return _STATUS_RANK[self]


_STATUS_RANK = {
    LetterStatus.NOT_IN_WORD: 1,
    LetterStatus.INCORRECT: 2,
    LetterStatus.CORRECT: 3,
}


class GameStatus(Enum):
    """Lifecycle of a single game."""
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_over(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


@dataclass(frozen=True)
class Spot:
    """A letter and its status at one board position."""
    letter: str
    status: LetterStatus

    @classmethod
    def correct(cls, letter: str) -> 'Spot':
        return cls(letter, LetterStatus.CORRECT)

    @classmethod
    def incorrect(cls, letter: str) -> 'Spot':
        return cls(letter, LetterStatus.INCORRECT)

    @classmethod
    def not_in_word(cls, letter: str) -> 'Spot':
        return cls(letter, LetterStatus.NOT_IN_WORD)


@dataclass(frozen=True)
class Guess:
    """An evaluated guess: one Spot per letter of the secret word."""
    spots: Tuple[Spot, ...]

    @property
    def word(self) -> str:
        return "".join(spot.letter for spot in self.spots)

    def __iter__(self) -> Iterator[Spot]:
        return iter(self.spots)

    def __len__(self) -> int:
        return len(self.spots)

    def __getitem__(self, index: int) -> Spot:
        return self.spots[index]


@dataclass
class GameState:
    """State of the single game played in a terminal session."""
    word: str
    allowed_guesses: FrozenSet[str]
    index: int
    guesses: List[Guess] = field(default_factory=list)
    input: str = ""
    alphabet_statuses: Dict[str, LetterStatus] = field(default_factory=dict)
    status: GameStatus = GameStatus.IN_PROGRESS
    message: Optional[str] = None  # Transient text shown above the board

    @property
    def attempts(self) -> int:
        return len(self.guesses)
