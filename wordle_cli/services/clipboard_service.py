"""
Clipboard Service

Writes the shareable result block to the system clipboard.
"""

import pyperclip

from ..utils.errors import ClipboardError


class ClipboardService:
    """Thin wrapper over pyperclip; the clipboard is only touched on copy."""

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"unable to access the clipboard: {e}") from e
