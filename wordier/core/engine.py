from __future__ import annotations

import logging
import random
import time
from dataclasses import replace
from typing import Optional, Sequence

from .dictionary import Dictionary
from .discovery import DEFAULT_MIN_LENGTH, discover, is_valid, word_order
from .errors import DuplicateWordError, NotAWordError
from .state import RoundState, normalize_tile

logger = logging.getLogger(__name__)


def new_round(
    letters: Sequence[str],
    dictionary: Dictionary,
    min_length: int = DEFAULT_MIN_LENGTH,
    time_limit: Optional[float] = None,
    now: Optional[float] = None,
) -> RoundState:
    """
    Start a round with the given tiles and precompute its possible words.

    Parameters
    ----------
    letters : Sequence[str]
        Tiles for the round, one letter A–Z each (any case). Anything else
        raises ValueError before discovery runs.
    dictionary : Dictionary
        Loaded word set; shared read-only across rounds.
    min_length : int, optional
        Shortest accepted word (default: 3).
    time_limit : float | None, optional
        Seconds allowed for a timed round, or None for an untimed round.
    now : float | None, optional
        Start timestamp; defaults to `time.time()`.

    Returns
    -------
    RoundState
        A fresh state in "playing" status with nothing typed or submitted.
    """
    tiles = tuple(normalize_tile(c) for c in letters)
    possible = discover(tiles, dictionary, min_length)
    logger.info("New round %s: %d possible words", "".join(tiles), len(possible))
    return RoundState(
        letters=tiles,
        possible=tuple(possible),
        min_length=min_length,
        time_limit=time_limit,
        started_at=time.time() if now is None else now,
    )


def typed_text(state: RoundState) -> str:
    """The word currently being built, in the order the tiles were pressed."""
    return state.typed


def time_left(state: RoundState, now: Optional[float] = None) -> Optional[float]:
    """Remaining seconds of a timed round (never negative), or None when untimed."""
    if state.time_limit is None:
        return None
    now = time.time() if now is None else now
    return max(0.0, state.started_at + state.time_limit - now)


def end_round(state: RoundState) -> RoundState:
    if state.status == "over":
        return state
    return replace(state, status="over", used=())


def _check_clock(state: RoundState, now: Optional[float]) -> RoundState:
    """End the round if its clock has run out."""
    if state.status == "playing" and time_left(state, now) == 0.0:
        logger.info("Round %s timed out", "".join(state.letters))
        return end_round(state)
    return state


def press_tile(state: RoundState, index: int, now: Optional[float] = None) -> RoundState:
    """
    Append the tile at `index` to the typed word.

    Behavior
    --------
    - Ignored if the round is over, the index is out of range, or the tile is
      already in use.
    """
    state = _check_clock(state, now)
    if state.status != "playing":
        return state
    if not isinstance(index, int) or not 0 <= index < len(state.letters):
        return state
    if state.is_used(index):
        return state
    return replace(state, used=state.used + (index,))


def delete_last(state: RoundState) -> RoundState:
    """
    Remove the last typed letter and reactivate exactly the tile that produced it.

    Pops the usage stack rather than looking the tile up by character, so with
    repeated letters the right tile comes back.
    """
    if not state.used:
        return state
    return replace(state, used=state.used[:-1])


def clear_typed(state: RoundState) -> RoundState:
    if not state.used:
        return state
    return replace(state, used=())


def submit(state: RoundState, dictionary: Dictionary, now: Optional[float] = None) -> RoundState:
    """
    Submit the typed word and return a new RoundState.

    Behavior
    --------
    - Empty input and finished rounds are no-ops.
    - Raises `NotAWordError` if the word is not in the dictionary or is too
      short. The state is left as it was, typed text included.
    - Raises `DuplicateWordError` if the word was already accepted this round.
      Checked only after the word is known to be valid.
    - On success the word is added, the list is re-sorted by (length, text),
      the typed text is cleared and every tile becomes available again.
    """
    state = _check_clock(state, now)
    if state.status != "playing":
        return state

    word = state.typed
    if not word:
        return state

    if not is_valid(word, dictionary, state.min_length):
        raise NotAWordError(word)

    if word.lower() in {w.lower() for w in state.submitted}:
        raise DuplicateWordError(word)

    submitted = tuple(sorted(state.submitted + (word,), key=word_order))
    return replace(state, submitted=submitted, used=(), last_word=word)


def shuffle(
    state: RoundState,
    rng: Optional[random.Random] = None,
    now: Optional[float] = None,
) -> RoundState:
    """
    Reorder the tiles and reset their used flags.

    The multiset of letters is unchanged, so the cached `possible` list and
    the submitted words carry over. Ignored once the round is over.
    """
    state = _check_clock(state, now)
    if state.status != "playing":
        return state
    rng = rng or random.Random()
    letters = list(state.letters)
    rng.shuffle(letters)
    return replace(state, letters=tuple(letters), used=())
