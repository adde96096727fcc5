from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple


RoundStatus = Literal["playing", "over"]


def normalize_tile(letter: str) -> str:
    """
    Return `letter` as one uppercase A–Z tile.

    Only ASCII letters are accepted: `str.upper()` can turn one character
    into two (e.g. 'ß' -> 'SS'), which would break one-character-per-tile.
    """
    c = str(letter).strip()
    if len(c) != 1 or not c.isascii() or not c.isalpha():
        raise ValueError(f"Tiles must be single letters A–Z; got {letter!r}.")
    return c.upper()


@dataclass(frozen=True)
class RoundState:
    """
    Immutable container for one round of play.

    Notes
    -----
    - Frozen so the engine can "return a new state" after each player action,
      which keeps a Streamlit session easy to reason about.
    - `used` is an ordered stack of tile indices in the order they were pressed.
      The typed text is derived from it, so the text box and the tile flags
      always agree, even with repeated letters.
    - All transitions (press, delete, submit, shuffle) live in `core.engine`;
      this file only defines the data structure and its normalization.
    """

    letters: Tuple[str, ...]
    used: Tuple[int, ...] = ()
    submitted: Tuple[str, ...] = ()
    possible: Tuple[str, ...] = ()
    min_length: int = 3
    status: RoundStatus = "playing"
    time_limit: Optional[float] = None
    started_at: float = 0.0
    last_word: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """
        Normalize and validate fields.

        Normalization
        -------------
        - `letters` become single uppercase A–Z characters.
        - `used`, `submitted` and `possible` are stored as tuples.

        Validation
        ----------
        - Every letter is exactly one ASCII letter (see `normalize_tile`).
        - `used` holds distinct, in-range indices.
        - `min_length` >= 1; `time_limit` is positive when set.
        """
        # Because dataclass is frozen, use object.__setattr__ for normalization.
        letters = tuple(normalize_tile(c) for c in self.letters)
        object.__setattr__(self, "letters", letters)

        used = tuple(int(i) for i in self.used)
        if len(set(used)) != len(used) or any(i < 0 or i >= len(letters) for i in used):
            raise ValueError("`used` must hold distinct tile indices within range.")
        object.__setattr__(self, "used", used)
        object.__setattr__(self, "submitted", tuple(self.submitted))
        object.__setattr__(self, "possible", tuple(self.possible))

        if self.min_length < 1:
            raise ValueError("`min_length` must be >= 1.")
        if self.time_limit is not None and self.time_limit <= 0:
            raise ValueError("`time_limit` must be positive or None.")
        if self.status not in ("playing", "over"):
            raise ValueError("`status` must be one of {'playing', 'over'}.")

    @property
    def typed(self) -> str:
        return "".join(self.letters[i] for i in self.used)

    def is_used(self, index: int) -> bool:
        return index in self.used
