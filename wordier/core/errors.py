from __future__ import annotations

from pathlib import Path
from typing import Union


class WordierError(Exception):
    """Base class for every error raised by the game core."""


class LoadError(WordierError):
    """
    The dictionary asset could not be turned into a usable word set.

    Notes
    -----
    - Raised for missing/unreadable files and for files that contain no words.
    - Callers must treat this as fatal for starting a round; there is no
      fallback dictionary.
    """

    def __init__(self, source: Union[str, Path, None], reason: str) -> None:
        self.source = source
        self.reason = reason
        where = str(source) if source is not None else "<stream>"
        super().__init__(f"Could not load dictionary from {where}: {reason}")


class ValidationError(WordierError):
    """A submitted word was rejected. Recoverable; shown to the player."""

    def __init__(self, word: str, message: str) -> None:
        self.word = word
        self.message = message
        super().__init__(message)


class NotAWordError(ValidationError):
    def __init__(self, word: str) -> None:
        super().__init__(word, f"{word} is not a valid English word or is too short.")


class DuplicateWordError(ValidationError):
    def __init__(self, word: str) -> None:
        super().__init__(word, f"{word} has already been submitted.")
