"""
Error Types

Exception hierarchy shared by the game, the terminal session and the
command-line entry point.
"""


class WordleError(Exception):
    """Base class for all errors reported to the player."""


class WordListError(WordleError, ValueError):
    """A word list could not be loaded, is malformed, or is exhausted."""


class ProgressError(WordleError):
    """The progress data file could not be read or written."""


class ResourceAcquisitionError(WordleError):
    """An exclusive resource (terminal mode, clipboard) was unavailable."""


class ClipboardError(ResourceAcquisitionError):
    """The system clipboard could not be written."""


class TerminalIOError(WordleError):
    """The terminal failed during setup or while reading/painting."""
