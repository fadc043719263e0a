"""Runtime settings read from the environment."""
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from vocab_cards.db import DEFAULT_DB_PATH
from vocab_cards.storage import STORAGE_KEY

DEFAULT_LOG_LEVEL = "WARNING"
TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    db_path: str = DEFAULT_DB_PATH
    storage_key: str = STORAGE_KEY
    log_level: str = DEFAULT_LOG_LEVEL
    legacy_quotes: bool = False


def _log_level(value: str) -> str:
    level = value.strip().upper()
    # getLevelName maps known names to ints and anything else to "Level <name>"
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


def load_settings(env_file: str | None = None) -> Settings:
    """Build settings from ``VOCAB_CARDS_*`` variables, reading .env first."""
    load_dotenv(env_file or Path.cwd() / ".env")
    return Settings(
        db_path=os.environ.get("VOCAB_CARDS_DB", DEFAULT_DB_PATH),
        storage_key=os.environ.get("VOCAB_CARDS_KEY", STORAGE_KEY),
        log_level=_log_level(os.environ.get("VOCAB_CARDS_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
        legacy_quotes=os.environ.get("VOCAB_CARDS_LEGACY_QUOTES", "").strip().lower() in TRUE_VALUES,
    )
