from wordier.core.engine import new_round, press_tile, submit
from wordier.services.progress import placeholder, summarize, word_ladder

DICTIONARY = frozenset({"cat", "act", "tac"})


def test_placeholder_matches_length():
    assert placeholder("cat") == "_ _ _"
    assert placeholder("maple") == "_ _ _ _ _"


def test_word_ladder_reveals_found_words_in_order():
    ladder = word_ladder(["act", "cat", "tac"], ["CAT"])
    assert ladder == ["_ _ _", "cat", "_ _ _"]


def test_summarize_counts_found_words():
    state = new_round("CAT", DICTIONARY)
    assert summarize(state).found == 0

    for i in (0, 1, 2):
        state = press_tile(state, i)
    state = submit(state, DICTIONARY)

    s = summarize(state)
    assert (s.found, s.total) == (1, 3)
    assert round(s.percent, 1) == 33.3


def test_summarize_empty_round():
    s = summarize(new_round("XQZ", DICTIONARY))
    assert s.total == 0 and s.percent == 0.0
