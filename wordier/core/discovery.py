"""
Word discovery: every dictionary word that can be spelled with the round's tiles.

Tiles are identified by position, not by character. Two "A" tiles are two
distinct placements, so a letter set with repeated characters spells some
strings more than once; `discover` collapses those repeats before returning.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from .dictionary import Dictionary, contains

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 3


def word_order(word: str) -> Tuple[int, str]:
    """Sort key shared by discovery results and submitted words: length, then text."""
    return (len(word), word)


def permutations(letters: Sequence[str], length: int) -> List[str]:
    """
    Return every string built from `length` distinct positions of `letters`.

    Notes
    -----
    - Each recursive call receives its own tuple of remaining letters, so no
      list is shared between branches.
    - Repeated characters at different positions yield repeated strings.
    """
    remaining = tuple(letters)
    if length <= 0 or length > len(remaining):
        return []
    if length == 1:
        return list(remaining)

    result: List[str] = []
    for i, letter in enumerate(remaining):
        rest = remaining[:i] + remaining[i + 1:]
        result.extend(letter + tail for tail in permutations(rest, length - 1))
    return result


def generate_candidates(letters: Sequence[str], min_length: int = DEFAULT_MIN_LENGTH) -> List[str]:
    """All position-permutations of every length from `min_length` to `len(letters)`."""
    if min_length < 1:
        raise ValueError("`min_length` must be >= 1.")
    candidates: List[str] = []
    for length in range(min_length, len(letters) + 1):
        candidates.extend(permutations(letters, length))
    return candidates


def is_valid(word: str, dictionary: Dictionary, min_length: int = DEFAULT_MIN_LENGTH) -> bool:
    """True iff `word` is in the dictionary (case-insensitive) and long enough."""
    if not isinstance(word, str):
        return False
    return contains(word.lower(), dictionary) and len(word) >= min_length


def discover(
    letters: Sequence[str],
    dictionary: Dictionary,
    min_length: int = DEFAULT_MIN_LENGTH,
) -> List[str]:
    """
    List the discoverable words for a letter set.

    Parameters
    ----------
    letters : Sequence[str]
        The round's tiles, one character each. Order does not affect the result.
    dictionary : Dictionary
        Lowercase word set from `dictionary.load`.
    min_length : int, optional
        Shortest word that counts (default: 3).

    Returns
    -------
    List[str]
        Unique lowercase words ordered by length, then alphabetically.
    """
    candidates = generate_candidates(letters, min_length)
    found = {c.lower() for c in candidates if is_valid(c, dictionary, min_length)}
    words = sorted(found, key=word_order)
    logger.debug(
        "Checked %d candidates from %s, found %d words",
        len(candidates), "".join(letters), len(words),
    )
    return words
