from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, List, TextIO, Union

from .errors import LoadError

logger = logging.getLogger(__name__)

Dictionary = FrozenSet[str]
Source = Union[str, Path, TextIO]


def _read_text(source: Source) -> str:
    """
    Return the raw text of `source`, which is either a path or an open text stream.

    Raises
    ------
    LoadError
        If the file is missing, is not a regular file, or cannot be decoded.
    """
    if hasattr(source, "read"):
        try:
            return source.read()  # type: ignore[union-attr]
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(None, str(e)) from e

    path = Path(source)  # type: ignore[arg-type]
    if not path.exists() or not path.is_file():
        raise LoadError(path, "file not found")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(path, str(e)) from e


def _parse_lines(text: str) -> List[str]:
    """Split newline-delimited text into stripped, lowercase, non-empty tokens."""
    return [ln.strip().lower() for ln in text.splitlines() if ln.strip()]


def load(source: Source) -> Dictionary:
    """
    Load a newline-delimited word list into an immutable lookup set.

    Parameters
    ----------
    source : str | Path | TextIO
        Path to a UTF-8 text file (one word per line, any case) or an already
        opened text stream.

    Returns
    -------
    Dictionary
        A frozenset of lowercase words. Blank lines are ignored.

    Raises
    ------
    LoadError
        When the source is unreadable or yields no words at all. An empty
        dictionary would reject every submission, so it is never returned.
    """
    try:
        words = frozenset(_parse_lines(_read_text(source)))
    except LoadError as e:
        logger.error("%s", e)
        raise

    if not words:
        err = LoadError(None if hasattr(source, "read") else source, "no words found")
        logger.error("%s", err)
        raise err

    logger.info("Loaded %d dictionary words", len(words))
    return words


def contains(word: str, dictionary: Dictionary) -> bool:
    """Exact, case-insensitive membership check. No stemming or fuzzy matching."""
    if not isinstance(word, str) or not word:
        return False
    return word.lower() in dictionary
