"""
Frame Renderer

Turns a GameState into a Frame: lines of styled text segments that the
terminal session paints. Rendering is a pure function of the state, so
the layout can be checked without a terminal.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config.game_settings import ALPHABET, MAX_ROUNDS, WORD_LENGTH
from ..models.game import GameState, GameStatus, LetterStatus

# Style names understood by the terminal painter
DEFAULT = "default"
BOLD = "bold"
DIM = "dim"
RED = "red"
GREEN = "green"
GREEN_BOLD = "green_bold"
YELLOW = "yellow"
DARK_GRAY = "dark_gray"

_STATUS_STYLES = {
    LetterStatus.CORRECT: GREEN,
    LetterStatus.INCORRECT: YELLOW,
    LetterStatus.NOT_IN_WORD: DARK_GRAY,
}

_STATUS_EMOJI = {
    LetterStatus.CORRECT: "🟩",
    LetterStatus.INCORRECT: "🟨",
    LetterStatus.NOT_IN_WORD: "⬛",
}


@dataclass(frozen=True)
class Segment:
    text: str
    style: str = DEFAULT


Line = Tuple[Segment, ...]


@dataclass(frozen=True)
class Frame:
    """A full screen: an optional boxed title and centered lines."""
    title: str
    lines: Tuple[Line, ...]

    @property
    def text(self) -> str:
        """Plain text of the frame, one line per row."""
        return "\n".join("".join(segment.text for segment in line) for line in self.lines)


def style_for_status(status: Optional[LetterStatus]) -> str:
    """Maps a letter status to its display style; unseen letters keep the default."""
    if status is None:
        return DEFAULT
    return _STATUS_STYLES[status]


def emoji_for_status(status: LetterStatus) -> str:
    return _STATUS_EMOJI[status]


def result_lines(state: GameState) -> List[str]:
    """Header and one emoji row per guess, as shared after a game."""
    lines = [f"Wordle {state.index + 1} {state.attempts}/{MAX_ROUNDS}"]
    for guess in state.guesses:
        lines.append("".join(emoji_for_status(spot.status) for spot in guess))
    return lines


def result_text(state: GameState) -> str:
    """The shareable result block: header, blank line, emoji rows."""
    header, *rows = result_lines(state)
    return "\n".join([header, "", *rows]) + "\n"


def render(state: GameState) -> Frame:
    if state.status is GameStatus.WON:
        return _result_frame(state, "RESULT", "Correct! The word was ")
    if state.status is GameStatus.LOST:
        return _result_frame(state, "Result!", "The correct word was ")
    return _game_frame(state)


def _game_frame(state: GameState) -> Frame:
    lines: List[Line] = [(
        Segment("Press "),
        Segment("Esc", BOLD),
        Segment(" to stop editing, "),
        Segment("enter", BOLD),
        Segment(" to submit a word."),
    )]
    if state.message:
        lines.append((Segment(state.message, RED),))
    lines.append(())

    for guess in state.guesses:
        lines.append(tuple(Segment(spot.letter, style_for_status(spot.status)) for spot in guess))
    lines.append((Segment(state.input or "_" * WORD_LENGTH),))
    lines.append(())

    lines.append((Segment("Alphabets", BOLD),))
    lines.extend(_alphabet_lines(state))

    return Frame(title=f"Guesses {state.attempts}/{MAX_ROUNDS}", lines=tuple(lines))


def _alphabet_lines(state: GameState) -> List[Line]:
    # Rows of eight; the last two letters stay on the third row
    rows = [ALPHABET[0:8], ALPHABET[8:16], ALPHABET[16:]]
    return [
        tuple(Segment(letter, style_for_status(state.alphabet_statuses.get(letter))) for letter in row)
        for row in rows
    ]


def _result_frame(state: GameState, title: str, lead: str) -> Frame:
    lines: List[Line] = [
        (Segment(lead), Segment(state.word, GREEN_BOLD), Segment(".")),
        (),
        (),
    ]
    lines.extend((Segment(text),) for text in result_lines(state))
    lines.extend([
        (),
        (),
        (Segment("Press C to copy result to clipboard", DIM),),
        (Segment("Press Esc to exit", DIM),),
    ])
    if state.message:
        lines.append((Segment(state.message, BOLD),))
    return Frame(title=title, lines=tuple(lines))
