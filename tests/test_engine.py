import random

import pytest

from wordier.core.engine import (
    clear_typed, delete_last, end_round, new_round, press_tile, shuffle, submit,
    time_left, typed_text,
)
from wordier.core.errors import DuplicateWordError, NotAWordError, ValidationError
from wordier.core.state import RoundState, normalize_tile

DICTIONARY = frozenset({"cat", "act", "tac", "tact", "at", "ata"})


def _type(state, *indices, now=None):
    for i in indices:
        state = press_tile(state, i, now=now)
    return state


def test_new_round_normalizes_tiles_and_discovers():
    state = new_round(["c", "a", "t"], DICTIONARY)
    assert state.letters == ("C", "A", "T")
    assert state.possible == ("act", "cat", "tac")
    assert state.submitted == ()
    assert state.status == "playing"
    assert time_left(state) is None


def test_press_then_delete_restores_exact_tile():
    state = _type(new_round("CAT", DICTIONARY), 0, 1)
    assert typed_text(state) == "CA"
    state = delete_last(state)
    assert typed_text(state) == "C"
    assert state.is_used(0) and not state.is_used(1)


def test_delete_with_repeated_letters_restores_last_pressed_tile():
    state = _type(new_round("AAT", DICTIONARY), 1, 0)
    assert typed_text(state) == "AA"
    state = delete_last(state)
    assert state.used == (1,)
    assert not state.is_used(0)


def test_delete_and_clear_on_empty_are_noops():
    state = new_round("CAT", DICTIONARY)
    assert delete_last(state) is state
    assert clear_typed(state) is state
    assert clear_typed(_type(state, 2, 1)).used == ()


@pytest.mark.parametrize("index", [0, -1, 3, 99])
def test_press_ignores_used_or_out_of_range_tiles(index):
    state = _type(new_round("CAT", DICTIONARY), 0)
    assert press_tile(state, index) == state


def test_submit_accepts_valid_word_and_resets_tiles():
    state = submit(_type(new_round("CAT", DICTIONARY), 0, 1, 2), DICTIONARY)
    assert state.submitted == ("CAT",)
    assert state.used == ()
    assert state.last_word == "CAT"


def test_submit_duplicate_raises_and_keeps_list():
    state = submit(_type(new_round("CAT", DICTIONARY), 0, 1, 2), DICTIONARY)
    again = _type(state, 0, 1, 2)
    with pytest.raises(DuplicateWordError) as exc:
        submit(again, DICTIONARY)
    assert "already been submitted" in exc.value.message
    assert again.submitted == ("CAT",)


@pytest.mark.parametrize("indices", [(2, 0, 1), (1, 2)])
def test_submit_invalid_or_short_raises_not_a_word(indices):
    # "TCA" is not a word; "AT" is a word but shorter than 3
    state = _type(new_round("CAT", DICTIONARY), *indices)
    with pytest.raises(NotAWordError) as exc:
        submit(state, DICTIONARY)
    assert isinstance(exc.value, ValidationError)
    assert "not a valid English word" in exc.value.message
    assert state.typed == "".join("CAT"[i] for i in indices)


def test_submit_empty_is_noop():
    state = new_round("CAT", DICTIONARY)
    assert submit(state, DICTIONARY) is state


def test_submitted_words_sorted_by_length_then_text():
    state = new_round("CATT", DICTIONARY)
    state = submit(_type(state, 2, 1, 0, 3), DICTIONARY)   # TACT
    state = submit(_type(state, 2, 1, 0), DICTIONARY)      # TAC
    state = submit(_type(state, 1, 0, 3), DICTIONARY)      # ACT
    assert state.submitted == ("ACT", "TAC", "TACT")


def test_shuffle_keeps_letters_and_progress_but_resets_tiles():
    state = submit(_type(new_round("CAT", DICTIONARY), 0, 1, 2), DICTIONARY)
    state = _type(state, 0)
    shuffled = shuffle(state, random.Random(3))
    assert sorted(shuffled.letters) == sorted(state.letters)
    assert shuffled.used == ()
    assert shuffled.possible == state.possible
    assert shuffled.submitted == state.submitted


def test_timed_round_counts_down_and_ends():
    state = new_round("CAT", DICTIONARY, time_limit=10, now=100.0)
    assert time_left(state, now=105.0) == 5.0
    assert time_left(state, now=500.0) == 0.0

    expired = press_tile(state, 0, now=200.0)
    assert expired.status == "over"
    assert expired.used == ()
    assert press_tile(expired, 1) is expired


def test_submit_after_time_up_is_ignored():
    state = _type(new_round("CAT", DICTIONARY, time_limit=10, now=100.0), 0, 1, 2, now=105.0)
    assert state.typed == "CAT"
    after = submit(state, DICTIONARY, now=111.0)
    assert after.status == "over"
    assert after.submitted == ()


def test_shuffle_after_time_up_is_ignored():
    state = _type(new_round("CAT", DICTIONARY, time_limit=10, now=100.0), 0, now=105.0)
    after = shuffle(state, random.Random(3), now=111.0)
    assert after.status == "over"
    assert after.letters == state.letters
    assert shuffle(after, random.Random(3)) is after


@pytest.mark.parametrize("letters", [["ß", "A", "T"], ["é", "T", "E"], ["C", "A", "TT"]])
def test_new_round_rejects_non_ascii_or_multi_char_tiles(letters):
    with pytest.raises(ValueError) as exc:
        new_round(letters, DICTIONARY)
    assert "A–Z" in str(exc.value)


def test_normalize_tile_keeps_one_character():
    assert normalize_tile(" q ") == "Q"
    with pytest.raises(ValueError):
        normalize_tile("ß")


def test_end_round_is_idempotent():
    over = end_round(new_round("CAT", DICTIONARY))
    assert over.status == "over"
    assert end_round(over) is over


@pytest.mark.parametrize("kwargs", [
    {"letters": ("C", "AT")},
    {"letters": ("C", "1")},
    {"letters": ("ß", "A")},
    {"letters": ("C", "A"), "used": (0, 0)},
    {"letters": ("C", "A"), "used": (2,)},
    {"letters": ("C", "A"), "min_length": 0},
    {"letters": ("C", "A"), "time_limit": 0},
])
def test_round_state_rejects_malformed_fields(kwargs):
    with pytest.raises(ValueError):
        RoundState(**kwargs)
