from __future__ import annotations

import logging
import streamlit as st

from dotenv import load_dotenv
load_dotenv(override=False)  # Load .env into process env

# --- Core game imports ---
from wordier.core.config import Settings, load_settings
from wordier.core.dictionary import Dictionary, load
from wordier.core.engine import (
    clear_typed, delete_last, end_round, new_round, press_tile, shuffle, submit, time_left,
    typed_text,
)
from wordier.core.errors import LoadError, ValidationError
from wordier.core.state import RoundState
from wordier.core.wordlist import DEFAULT_LETTERS, deal_letters, pick_target_word

# --- Presentation helpers ---
from wordier.services.progress import summarize, word_ladder


# =======================================
# Settings & dictionary (loaded once)
# =======================================

@st.cache_resource
def _settings() -> Settings:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="[%(levelname)s] %(message)s")
    return settings


@st.cache_resource
def _dictionary(path: str) -> Dictionary:
    """Load the word list once per server process; raises LoadError on failure."""
    return load(path)


# =======================================
# Session-state helpers & round management
# =======================================

def _init_stats() -> None:
    """Ensure an in-memory stats dict exists in session state."""
    st.session_state.setdefault("stats", {"rounds": 0, "words": 0, "best": 0})


def _record_round(state: RoundState) -> None:
    """Fold a finished (or abandoned) round into the session stats, once."""
    if st.session_state.get("round_counted", True):
        return
    s = st.session_state["stats"]
    s["rounds"] += 1
    s["words"] += len(state.submitted)
    s["best"] = max(s["best"], len(state.submitted))
    st.session_state["round_counted"] = True


def _start_round(dictionary: Dictionary, settings: Settings, letters, timed: bool) -> None:
    """Replace the current round and reset per-round UI state."""
    if isinstance(st.session_state.get("round"), RoundState):
        _record_round(st.session_state["round"])
    st.session_state["round"] = new_round(
        letters,
        dictionary,
        min_length=settings.min_length,
        time_limit=settings.time_limit if timed else None,
    )
    st.session_state["round_counted"] = False
    st.session_state["error"] = None


def _new_word(dictionary: Dictionary, settings: Settings, difficulty: str, timed: bool) -> None:
    target = pick_target_word(dictionary, difficulty)
    _start_round(dictionary, settings, deal_letters(target), timed)


def _ensure_round(dictionary: Dictionary, settings: Settings, timed: bool) -> RoundState:
    """Ensure there is a RoundState in session state; start from the default letters if missing."""
    if "round" not in st.session_state or not isinstance(st.session_state["round"], RoundState):
        _start_round(dictionary, settings, DEFAULT_LETTERS, timed)
    st.session_state.setdefault("error", None)
    _init_stats()
    return st.session_state["round"]


def _apply(state: RoundState) -> None:
    st.session_state["round"] = state
    st.session_state["error"] = None


def _on_tile(index: int) -> None:
    _apply(press_tile(st.session_state["round"], index))


def _on_delete() -> None:
    _apply(delete_last(st.session_state["round"]))


def _on_clear() -> None:
    _apply(clear_typed(st.session_state["round"]))


def _on_shuffle() -> None:
    _apply(shuffle(st.session_state["round"]))


def _on_enter(dictionary: Dictionary) -> None:
    try:
        _apply(submit(st.session_state["round"], dictionary))
    except ValidationError as e:
        st.session_state["error"] = e.message


# =========
# The App
# =========

def main() -> None:
    st.set_page_config(page_title="Wordier", page_icon="🔤", layout="centered")
    st.title("🔤 Wordier")

    settings = _settings()
    try:
        dictionary = _dictionary(settings.dictionary_path)
    except LoadError as e:
        st.error(f"Cannot start a round: {e}")
        st.stop()

    # ---- Sidebar ----
    with st.sidebar:
        st.header("Settings")
        difficulty = st.selectbox("Difficulty", ["easy", "medium", "hard"], index=1)
        mode = st.radio("Mode", ["Untimed", "Timed"], horizontal=True)
        timed = mode == "Timed"
        if st.button("🔁 New Word", use_container_width=True):
            _new_word(dictionary, settings, difficulty, timed)
            st.rerun()

        _init_stats()
        with st.expander("📊 Stats", expanded=True):
            s = st.session_state["stats"]
            st.metric("Rounds", s["rounds"])
            c1, c2 = st.columns(2); c1.metric("Words found", s["words"]); c2.metric("Best round", s["best"])
            if st.button("♻️ Reset stats"):
                st.session_state["stats"] = {"rounds": 0, "words": 0, "best": 0}
                st.success("Stats reset.")

    state: RoundState = _ensure_round(dictionary, settings, timed)

    # ---- Clock ----
    remaining = time_left(state)
    if remaining is not None:
        if remaining == 0.0 and state.status == "playing":
            state = end_round(state)
            st.session_state["round"] = state
        st.caption(f"Time left: {int(remaining)}s (updates on each move)")

    # ---- Typed word ----
    st.subheader("Your word")
    c1, c2, c3 = st.columns([4, 1, 1])
    c1.markdown(f"### `{typed_text(state) or ' '}`")
    c2.button("Delete", on_click=_on_delete, disabled=not state.used)
    c3.button("Clear", on_click=_on_clear, disabled=not state.used)

    # ---- Tiles ----
    cols = st.columns(len(state.letters))
    for i, (col, letter) in enumerate(zip(cols, state.letters)):
        col.button(
            letter,
            key=f"tile-{i}",
            on_click=_on_tile,
            args=(i,),
            disabled=state.is_used(i) or state.status != "playing",
            use_container_width=True,
        )

    b1, b2 = st.columns(2)
    b1.button("Enter", on_click=_on_enter, args=(dictionary,), type="primary",
              disabled=state.status != "playing", use_container_width=True)
    b2.button("Shuffle Letters", on_click=_on_shuffle,
              disabled=state.status != "playing", use_container_width=True)

    if state.last_word:
        st.markdown(f"You made the word: **{state.last_word}**")
    if st.session_state.get("error"):
        st.error(st.session_state["error"])

    # ---- Progress ----
    summary = summarize(state)
    st.progress(summary.percent / 100.0)
    st.caption(f"Found {summary.found} of {summary.total} possible words")

    left, right = st.columns(2)
    with left:
        st.markdown("**Your words**")
        st.write(", ".join(state.submitted) or "(none yet)")
    with right:
        st.markdown("**Possible words**")
        with st.container(height=240):
            for entry in word_ladder(state.possible, state.submitted):
                st.text(entry)

    if state.status == "over":
        _record_round(state)
        st.warning(f"⏰ Time's up! You found {len(state.submitted)} words.")
        st.button("Play again", on_click=_new_word, args=(dictionary, settings, difficulty, timed))


if __name__ == "__main__":
    main()
