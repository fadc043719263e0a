"""Key-value persistence for the card set.

Failures never propagate: writes report ``False`` and reads report nothing,
so a session keeps working without durable backing.
"""
import json
import logging
import sqlite3
from datetime import datetime

from vocab_cards.db import get_connection, init_db
from vocab_cards.models import CardRecord

logger = logging.getLogger(__name__)

STORAGE_KEY = "flashcards"


def save(db_path: str, key: str, payload: str) -> bool:
    try:
        init_db(db_path)
        conn = get_connection(db_path)
        try:
            conn.execute(
                "INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value=excluded.value, updated_at=excluded.updated_at",
                (key, payload, datetime.now().isoformat()),
            )
            conn.commit()
        finally:
            conn.close()
    except (sqlite3.Error, OSError):
        logger.exception("Error saving %r to %s", key, db_path)
        return False
    return True


def load(db_path: str, key: str) -> str | None:
    try:
        init_db(db_path)
        conn = get_connection(db_path)
        try:
            row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        finally:
            conn.close()
    except (sqlite3.Error, OSError):
        logger.exception("Error loading %r from %s", key, db_path)
        return None
    return row["value"] if row else None


def save_cards(db_path: str, cards: list, key: str = STORAGE_KEY) -> bool:
    payload = json.dumps([card.to_dict() for card in cards], ensure_ascii=False)
    return save(db_path, key, payload)


def load_cards(db_path: str, key: str = STORAGE_KEY) -> list[CardRecord]:
    payload = load(db_path, key)
    if not payload:
        return []
    try:
        data = json.loads(payload)
    except json.JSONDecodeError:
        logger.exception("Stored cards under %r are not valid JSON", key)
        return []
    if not isinstance(data, list):
        logger.error("Stored cards under %r are not a list", key)
        return []
    return [CardRecord.from_dict(item) for item in data if isinstance(item, dict)]
