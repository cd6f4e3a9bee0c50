import json

import pytest

from wordle_cli.config import game_settings
from wordle_cli.config.game_settings import (
    build_allowed_guesses,
    load_allowed_guesses,
    load_word_list,
    select_word,
    validate_word_list_integrity,
)
from wordle_cli.utils.errors import WordListError


def write_json(path, data):
    path.write_text(json.dumps(data), encoding='utf-8')
    return str(path)


def test_bundled_lists_load_and_validate():
    words = load_word_list()
    assert validate_word_list_integrity(words)
    allowed = load_allowed_guesses()
    assert allowed
    assert all(len(word) == game_settings.WORD_LENGTH for word in allowed)


def test_bundled_lists_do_not_overlap():
    assert not set(load_word_list()) & load_allowed_guesses()


@pytest.mark.parametrize("guess", ["CRATE", "SLATE", "ADIEU", "AROSE", "TEARS", "CRANE"])
def test_default_lists_accept_common_guesses(guess):
    words = load_word_list()
    allowed = build_allowed_guesses(load_allowed_guesses(), words)
    assert guess in allowed


def test_default_secret_list_is_full_answer_list():
    assert len(load_word_list()) >= 2300


def test_load_from_path_keeps_order(tmp_path):
    path = write_json(tmp_path / "words.json", ["slate", "crane", "about"])
    assert load_word_list(path) == ["slate", "crane", "about"]


@pytest.mark.parametrize("content", ['{"words": []}', '["crane", 5]', 'not json'])
def test_malformed_lists_are_rejected(tmp_path, content):
    path = tmp_path / "words.json"
    path.write_text(content, encoding='utf-8')
    with pytest.raises(WordListError):
        load_word_list(str(path))


def test_missing_list_is_rejected(tmp_path):
    with pytest.raises(WordListError, match="not found"):
        load_allowed_guesses(str(tmp_path / "missing.json"))


@pytest.mark.parametrize("words,match", [
    ([], "empty"),
    (["crane", "cranes"], "not 5 characters"),
    (["crane", "cr4ne"], "non-alphabetic"),
    (["crane", "CRANE"], "Duplicate"),
])
def test_integrity_failures(words, match):
    with pytest.raises(WordListError, match=match):
        validate_word_list_integrity(words)


def test_allowed_guesses_include_every_word_uppercased():
    allowed = build_allowed_guesses({"slate"}, ["crane", "About"])
    assert allowed == frozenset({"SLATE", "CRANE", "ABOUT"})


def test_select_word():
    assert select_word(["crane", "slate"], 1) == "SLATE"
    with pytest.raises(WordListError, match="all available words have been used"):
        select_word(["crane", "slate"], 2)
