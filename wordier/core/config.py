from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_DEFAULT_DICTIONARY = "data/words.txt"
_DEFAULT_MIN_LENGTH = 3
_DEFAULT_TIME_LIMIT = 120
_DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Runtime settings, read from the environment (and `.env` via python-dotenv)."""
    dictionary_path: str = _DEFAULT_DICTIONARY
    min_length: int = _DEFAULT_MIN_LENGTH
    time_limit: int = _DEFAULT_TIME_LIMIT   # seconds, used by timed rounds only
    log_level: str = _DEFAULT_LOG_LEVEL


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer); using %d", name, raw, default)
        return default
    if value < 1:
        logger.warning("Ignoring %s=%r (must be >= 1); using %d", name, raw, default)
        return default
    return value


def load_settings() -> Settings:
    """
    Build Settings from environment variables.

    Variables
    ---------
    WORDIER_DICTIONARY  : path to the word list (default: data/words.txt)
    WORDIER_MIN_LENGTH  : shortest accepted word (default: 3)
    WORDIER_TIME_LIMIT  : seconds per timed round (default: 120)
    WORDIER_LOG_LEVEL   : logging level name (default: INFO)

    Call `dotenv.load_dotenv()` first if a `.env` file should be honored.
    """
    return Settings(
        dictionary_path=os.getenv("WORDIER_DICTIONARY", "").strip() or _DEFAULT_DICTIONARY,
        min_length=_int_env("WORDIER_MIN_LENGTH", _DEFAULT_MIN_LENGTH),
        time_limit=_int_env("WORDIER_TIME_LIMIT", _DEFAULT_TIME_LIMIT),
        log_level=(os.getenv("WORDIER_LOG_LEVEL", "").strip() or _DEFAULT_LOG_LEVEL).upper(),
    )
