import pytest

from wordle_cli.services.game_service import GameService
from wordle_cli.ui.renderer import result_text
from wordle_cli.utils.errors import ClipboardError
from wordle_cli.utils.game_logger import shutdown_game_logger

ALLOWED = frozenset({
    "CRANE", "SLATE", "CRATE", "TRACE", "ABOUT", "HEART", "LIGHT", "EARLY", "FIELD", "DANCE",
})


class FakeClipboard:
    def __init__(self, fail=False):
        self.fail = fail
        self.copied = []

    def copy(self, text):
        if self.fail:
            raise ClipboardError("unable to access the clipboard: no display")
        self.copied.append(text)


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def make_game(clipboard):
    def _make(word="CRANE", allowed=ALLOWED, index=0):
        return GameService(word, allowed, index, result_text, clipboard=clipboard)
    return _make


@pytest.fixture
def game(make_game):
    return make_game()


@pytest.fixture(autouse=True)
def no_global_logger():
    yield
    shutdown_game_logger()
