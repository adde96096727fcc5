from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from wordier.core.state import RoundState


@dataclass(frozen=True)
class ProgressSummary:
    """How much of the round's possible-words list the player has found."""
    found: int      # possible words already submitted
    total: int      # size of the possible-words list
    percent: float  # 0.0–100.0


def placeholder(word: str) -> str:
    """Length-matched mask for an unfound word, e.g. 'cat' -> '_ _ _'."""
    return " ".join("_" for _ in word)


def word_ladder(possible: Iterable[str], submitted: Iterable[str]) -> List[str]:
    """
    Build the "possible words" panel.

    Notes
    -----
    - Keeps the order of `possible` (discovery order: length, then alphabetical).
    - Found words are shown as-is; the rest are replaced by placeholders.
    - Matching is case-insensitive, since submitted words keep the tiles'
      uppercase while discovery returns lowercase.
    """
    found = {w.lower() for w in submitted}
    return [w if w.lower() in found else placeholder(w) for w in possible]


def summarize(state: RoundState) -> ProgressSummary:
    """Count found vs. possible words for the progress bar."""
    possible = {w.lower() for w in state.possible}
    found = len(possible & {w.lower() for w in state.submitted})
    total = len(possible)
    percent = (found / total * 100.0) if total else 0.0
    return ProgressSummary(found=found, total=total, percent=percent)
