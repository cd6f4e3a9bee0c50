"""
Guess Evaluator

Scores a guess against the secret word and merges letter statuses into
the alphabet summary.
"""

from typing import Optional

from ..models.game import Guess, LetterStatus, Spot


def evaluate(guess: str, secret: str) -> Guess:
    """
    Score each letter of ``guess`` against ``secret``.

    A letter at the right position is CORRECT; otherwise it is INCORRECT
    if it appears anywhere in the secret, else NOT_IN_WORD. Letter counts
    are not tracked, so a repeated letter is INCORRECT at every misplaced
    occurrence even when the secret holds it once.

    Both words must already be validated to the same length.
    """
    spots = []
    for letter, target in zip(guess, secret):
        if letter == target:
            spots.append(Spot.correct(letter))
        elif letter in secret:
            spots.append(Spot.incorrect(letter))
        else:
            spots.append(Spot.not_in_word(letter))
    return Guess(tuple(spots))


def merge_status(current: Optional[LetterStatus], new: LetterStatus) -> LetterStatus:
    """Return the better-ranked of two statuses; ``None`` means not yet seen."""
    if current is None or new.rank > current.rank:
        return new
    return current
