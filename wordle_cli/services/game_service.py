"""
Game Service

Contains the game state machine: typing, deleting, submitting guesses,
and copying the result once the game is over.
"""

from typing import Callable, FrozenSet, Optional, Tuple

from ..config.game_settings import MAX_ROUNDS, WORD_LENGTH
from ..models.command import Command, CommandType
from ..models.game import GameState, GameStatus
from ..utils.errors import ClipboardError
from ..utils.game_logger import get_game_logger
from .clipboard_service import ClipboardService
from .evaluator import evaluate, merge_status

INVALID_GUESS_MESSAGE = "Not a valid five letter word. Try again... "
COPIED_MESSAGE = "Result copied to clipboard."


class GameService:
    """
    Core game service driving a single game.

    This class handles:
    - Input buffer editing (type, backspace)
    - Guess validation against the allow-list
    - Guess evaluation and alphabet status tracking
    - Win / loss transitions
    - Copying the shareable result to the clipboard
    """

    def __init__(self,
                 word: str,
                 allowed_guesses: FrozenSet[str],
                 index: int,
                 formatter: Callable[[GameState], str],
                 clipboard: Optional[ClipboardService] = None):
        self.state = GameState(word=word.upper(), allowed_guesses=frozenset(allowed_guesses), index=index)
        self.clipboard = clipboard or ClipboardService()
        self.formatter = formatter

    @property
    def is_over(self) -> bool:
        return self.state.status.is_over

    def apply(self, command: Command) -> bool:
        """
        Applies a player command to the game.

        Returns:
            bool: False when the session should end, True otherwise
        """
        if command.type is CommandType.QUIT:
            self._log_action('quit', attempts=self.state.attempts, status=self.state.status.value)
            return False

        if command.type is CommandType.COPY:
            self.copy_result()
        elif command.type is CommandType.TYPE_CHAR:
            self.type_char(command.char or "")
        elif command.type is CommandType.BACKSPACE:
            self.backspace()
        elif command.type is CommandType.SUBMIT:
            self.submit()

        return True

    def type_char(self, char: str) -> None:
        """Appends an uppercased letter to the input buffer if there is room."""
        state = self.state
        if self.is_over or len(char) != 1 or not (char.isascii() and char.isalpha()):
            return
        if len(state.input) < WORD_LENGTH:
            state.input += char.upper()

    def backspace(self) -> None:
        """Removes the last letter of the input buffer."""
        if self.is_over:
            return
        self.state.input = self.state.input[:-1]

    def is_valid_guess(self, guess: str) -> Tuple[bool, str]:
        """
        Validates a guess against the word length and allow-list.

        Args:
            guess: The word to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if self.is_over:
            return False, "Game is already over"

        if len(guess) != WORD_LENGTH:
            return False, INVALID_GUESS_MESSAGE

        if guess.upper() not in self.state.allowed_guesses:
            return False, INVALID_GUESS_MESSAGE

        return True, ""

    def submit(self) -> bool:
        """
        Processes the input buffer as a guess and updates game state.

        Returns:
            bool: True if a guess was recorded, False if it was rejected
        """
        if self.is_over:
            return False

        state = self.state
        guess_word = state.input.upper()

        is_valid, error = self.is_valid_guess(guess_word)
        if not is_valid:
            state.message = error
            self._log_event('guess_rejected', guess=guess_word, attempts=state.attempts)
            return False

        state.message = None

        guess = evaluate(guess_word, state.word)
        state.guesses.append(guess)
        state.input = ""

        for spot in guess:
            state.alphabet_statuses[spot.letter] = merge_status(
                state.alphabet_statuses.get(spot.letter), spot.status
            )

        if guess_word == state.word:
            state.status = GameStatus.WON
            self._log_event('game_won', attempts=state.attempts)
        elif state.attempts >= MAX_ROUNDS:
            state.status = GameStatus.LOST
            self._log_event('game_lost', attempts=state.attempts)
        else:
            self._log_action('submit_guess', guess=guess_word, attempts=state.attempts)

        return True

    def copy_result(self) -> bool:
        """
        Copies the shareable result block to the system clipboard.

        Only available once the game is over. Clipboard failures are shown
        to the player and do not end the session.

        Returns:
            bool: True if the result was copied
        """
        if not self.is_over:
            return False

        try:
            self.clipboard.copy(self.formatter(self.state))
        except ClipboardError as e:
            self.state.message = str(e)
            logger = get_game_logger()
            if logger:
                logger.log_error(e, 'copy_result', self.state.index)
            return False

        self.state.message = COPIED_MESSAGE
        self._log_action('copy_result', attempts=self.state.attempts)
        return True

    def _log_event(self, event: str, **kwargs) -> None:
        logger = get_game_logger()
        if logger:
            logger.log_game_event(self.state.index, event, **kwargs)

    def _log_action(self, action: str, **kwargs) -> None:
        logger = get_game_logger()
        if logger:
            logger.log_user_action(action, self.state.index, **kwargs)
