import inspect

import pytest

from wordle_cli.models.command import BACKSPACE, COPY, QUIT, SUBMIT, Command
from wordle_cli.models.game import GameStatus, LetterStatus
from wordle_cli.services.game_service import COPIED_MESSAGE, INVALID_GUESS_MESSAGE, GameService

from conftest import FakeClipboard

WRONG_GUESSES = ["SLATE", "ABOUT", "HEART", "LIGHT", "EARLY", "FIELD"]


def play(game, word):
    for char in word:
        game.type_char(char)
    return game.submit()


def test_new_game_state(game):
    state = game.state
    assert state.word == "CRANE"
    assert state.status is GameStatus.IN_PROGRESS
    assert state.attempts == 0
    assert state.input == ""
    assert state.alphabet_statuses == {}
    assert state.message is None


def test_typing_uppercases_and_stops_at_five(game):
    for char in "cranes":
        game.type_char(char)
    assert game.state.input == "CRANE"


def test_typing_ignores_non_letters(game):
    for char in "c1 r!":
        game.type_char(char)
    assert game.state.input == "CR"


def test_backspace(game):
    game.type_char("c")
    game.type_char("r")
    game.backspace()
    assert game.state.input == "C"
    game.backspace()
    game.backspace()
    assert game.state.input == ""


def test_short_guess_is_rejected(game):
    assert play(game, "CAT") is False
    assert game.state.message == INVALID_GUESS_MESSAGE
    assert game.state.guesses == []
    assert game.state.input == "CAT"
    assert game.state.status is GameStatus.IN_PROGRESS


def test_word_not_in_allow_list_is_rejected(make_game):
    game = make_game(allowed=frozenset({"CRANE", "SLATE"}))
    assert play(game, "ZZZZZ") is False
    assert game.state.message == INVALID_GUESS_MESSAGE
    assert game.state.attempts == 0


def test_allow_list_check_is_case_insensitive(make_game):
    game = make_game(allowed=frozenset({"CRANE", "SLATE"}))
    game.state.input = "slate"
    assert game.submit() is True
    assert game.state.guesses[0].word == "SLATE"


def test_valid_guess_clears_message_and_input(game):
    play(game, "CAT")
    game.state.input = ""
    assert play(game, "CRATE") is True
    assert game.state.message is None
    assert game.state.input == ""
    assert game.state.attempts == 1
    statuses = [spot.status for spot in game.state.guesses[0]]
    assert statuses[3] is LetterStatus.NOT_IN_WORD
    assert game.state.status is GameStatus.IN_PROGRESS


def test_alphabet_statuses_merge_monotonically(game):
    play(game, "TRACE")
    assert game.state.alphabet_statuses["C"] is LetterStatus.INCORRECT
    assert game.state.alphabet_statuses["T"] is LetterStatus.NOT_IN_WORD
    play(game, "CRATE")
    assert game.state.alphabet_statuses["C"] is LetterStatus.CORRECT
    play(game, "DANCE")
    # C is misplaced in DANCE but stays CORRECT
    assert game.state.alphabet_statuses["C"] is LetterStatus.CORRECT
    assert game.state.alphabet_statuses["D"] is LetterStatus.NOT_IN_WORD


def test_win_on_third_attempt(game):
    play(game, "SLATE")
    play(game, "CRATE")
    assert play(game, "CRANE") is True
    assert game.state.status is GameStatus.WON
    assert game.state.attempts == 3
    assert game.is_over


def test_winning_guess_updates_alphabet(game):
    play(game, "CRANE")
    assert all(game.state.alphabet_statuses[letter] is LetterStatus.CORRECT for letter in "CRANE")


def test_six_misses_lose_and_further_submits_are_ignored(game):
    for word in WRONG_GUESSES:
        assert play(game, word) is True
    assert game.state.status is GameStatus.LOST
    assert game.state.attempts == 6

    game.state.input = "CRANE"
    assert game.submit() is False
    assert game.state.attempts == 6
    assert game.state.status is GameStatus.LOST


def test_editing_is_ignored_once_over(game):
    play(game, "CRANE")
    game.type_char("a")
    game.backspace()
    assert game.state.input == ""


def test_apply_dispatches_commands(game):
    for char in "CRANE":
        assert game.apply(Command.type_char(char)) is True
    assert game.apply(BACKSPACE) is True
    assert game.state.input == "CRAN"
    game.apply(Command.type_char("e"))
    assert game.apply(SUBMIT) is True
    assert game.state.status is GameStatus.WON


@pytest.mark.parametrize("finish", [False, True])
def test_quit_ends_session_in_any_state(game, finish):
    if finish:
        play(game, "CRANE")
    assert game.apply(QUIT) is False


def test_copy_only_after_game_over(game, clipboard):
    assert game.copy_result() is False
    assert clipboard.copied == []

    play(game, "CRANE")
    assert game.apply(COPY) is True
    assert clipboard.copied == ["Wordle 1 1/6\n\n🟩🟩🟩🟩🟩\n"]
    assert game.state.message == COPIED_MESSAGE
    assert game.state.status is GameStatus.WON


def test_clipboard_failure_is_reported_not_fatal(make_game):
    game = make_game()
    game.clipboard = FakeClipboard(fail=True)
    play(game, "CRANE")
    assert game.copy_result() is False
    assert "clipboard" in game.state.message
    assert game.apply(COPY) is True
    assert game.state.status is GameStatus.WON


def test_copy_uses_injected_formatter(clipboard):
    game = GameService("CRANE", frozenset({"CRANE"}), 2, lambda state: f"{state.word} in {state.attempts}",
                       clipboard=clipboard)
    play(game, "CRANE")
    assert game.copy_result() is True
    assert clipboard.copied == ["CRANE in 1"]


def test_game_service_does_not_import_the_ui():
    import wordle_cli.services.game_service as module
    source = inspect.getsource(module)
    assert "from ..ui" not in source
    assert "wordle_cli.ui" not in source
