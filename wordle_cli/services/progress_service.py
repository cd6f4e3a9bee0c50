"""
Progress Service

Persists which word to play next and the optional word-list override
paths in a small JSON data file.
"""

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

from ..config.app_config import Config
from ..utils.errors import ProgressError


@dataclass
class ProgressData:
    """Contents of the data file; missing keys fall back to defaults."""
    index: int = 0
    words_path: Optional[str] = None
    allowed_guesses_path: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'ProgressData':
        if not isinstance(data, dict):
            raise ProgressError("data file must contain a JSON object")
        index = data.get('index', 0)
        if not isinstance(index, int) or index < 0:
            raise ProgressError(f"invalid word index in data file: {index!r}")
        return cls(
            index=index,
            words_path=data.get('words_path'),
            allowed_guesses_path=data.get('allowed_guesses_path'),
        )


def get_data_path() -> Path:
    """
    Returns the path to the persistent data file.

    ``WORDLE_CLI_DATA`` wins; otherwise the file lives under the XDG data
    directory (``~/.local/share`` when unset).
    """
    if Config.DATA_PATH:
        return Path(Config.DATA_PATH)

    data_home = os.getenv('XDG_DATA_HOME')
    if data_home:
        base = Path(data_home)
    else:
        base = Path.home() / '.local' / 'share'
    return base / 'wordle-cli' / 'data.json'


def load_progress(path: Path) -> ProgressData:
    """
    Loads the data file, creating it with defaults when it is missing
    or unreadable.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return ProgressData.from_dict(json.load(f))
    except (OSError, json.JSONDecodeError, ProgressError):
        return save_progress(ProgressData(), path)


def save_progress(data: ProgressData, path: Path) -> ProgressData:
    """Writes (or creates) the data file at ``path``."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(asdict(data), f, indent=2)
    except OSError as e:
        raise ProgressError(f"unable to write data file {path}: {e}") from e
    return data
