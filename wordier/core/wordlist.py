from __future__ import annotations

import logging
import random
from typing import List, Tuple

from .dictionary import Dictionary
from .state import normalize_tile

logger = logging.getLogger(__name__)

# Starting tiles when no target word has been picked yet.
DEFAULT_LETTERS: Tuple[str, ...] = ("S", "A", "M", "P", "L", "E")

# Target word length by difficulty. You can change/extend these later.
DIFFICULTY_LENGTHS = {
    "easy": 5,
    "medium": 6,
    "hard": 7,
}


def _targets_of_length(dictionary: Dictionary, length: int) -> List[str]:
    """A–Z dictionary words of exactly `length` letters, sorted for reproducible picks."""
    return sorted(w for w in dictionary if len(w) == length and w.isascii() and w.isalpha())


def pick_target_word(dictionary: Dictionary, difficulty: str = "medium", seed: int | None = None) -> str:
    """
    Pick the hidden target word for a new round.

    Parameters
    ----------
    dictionary : Dictionary
        Loaded word set; targets are drawn from it so the target itself is
        always discoverable.
    difficulty : str
        "easy" | "medium" | "hard". Unknown keys fall back to "medium".
    seed : int | None
        Optional seed for reproducible picks during tests or demos.

    Returns
    -------
    str
        A lowercase word. Falls back to the default "sample" letters when the
        dictionary has no word of the requested length.
    """
    length = DIFFICULTY_LENGTHS.get(difficulty, DIFFICULTY_LENGTHS["medium"])
    words = _targets_of_length(dictionary, length)
    if not words:
        logger.warning("No %d-letter words in dictionary; using default letters", length)
        return "".join(DEFAULT_LETTERS).lower()
    rng = random.Random(seed)
    word = rng.choice(words)
    logger.debug("Picked target word for difficulty %s", difficulty)
    return word


def deal_letters(word: str, seed: int | None = None) -> Tuple[str, ...]:
    """Split `word` into uppercase tiles in shuffled order."""
    tiles = [normalize_tile(c) for c in (word or "").strip() if c.isalpha()]
    if not tiles:
        raise ValueError("`word` must contain at least one letter.")
    random.Random(seed).shuffle(tiles)
    return tuple(tiles)
