"""SQLite access for the local card store."""
import sqlite3
from contextlib import closing
from pathlib import Path

DEFAULT_DB_PATH = str(Path.home() / ".vocab_cards" / "cards.db")

SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT,
    updated_at TEXT
);
"""


def get_connection(db_path: str = DEFAULT_DB_PATH) -> sqlite3.Connection:
    """Open the card store; rows come back as ``sqlite3.Row``."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path: str = DEFAULT_DB_PATH) -> None:
    """Create the store's directory and ``kv_store`` table when missing.

    Raises ``OSError`` or ``sqlite3.Error``; callers in ``storage`` absorb them.
    """
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    with closing(get_connection(db_path)) as conn:
        conn.executescript(SCHEMA)
        conn.commit()
