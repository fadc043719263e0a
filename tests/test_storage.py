# tests/test_storage.py
import logging
from vocab_cards.db import init_db, get_connection
from vocab_cards.models import CardRecord, UNDERSTOOD
from vocab_cards.storage import STORAGE_KEY, save, load, save_cards, load_cards


def _cards():
    return [
        CardRecord(word="cat", meaning="猫", phonetic="/kæt/", definition="a small pet",
                   example="The cat, asleep, purrs.", status=UNDERSTOOD),
        CardRecord(word="dog", meaning="犬"),
    ]


def test_storage_key():
    assert STORAGE_KEY == "flashcards"


def test_save_and_load_raw(tmp_db):
    assert save(tmp_db, "k", "payload") is True
    assert load(tmp_db, "k") == "payload"


def test_save_overwrites(tmp_db):
    save(tmp_db, "k", "one")
    save(tmp_db, "k", "two")
    assert load(tmp_db, "k") == "two"
    conn = get_connection(tmp_db)
    assert conn.execute("SELECT COUNT(*) FROM kv_store").fetchone()[0] == 1
    conn.close()


def test_load_missing_key(tmp_db):
    assert load(tmp_db, "nothing") is None


def test_cards_round_trip(tmp_db):
    cards = _cards()
    assert save_cards(tmp_db, cards) is True
    assert load_cards(tmp_db) == cards


def test_cards_stored_as_json_array(tmp_db):
    save_cards(tmp_db, _cards())
    payload = load(tmp_db, STORAGE_KEY)
    assert payload.startswith("[")
    assert '"status": "understood"' in payload


def test_load_cards_empty_store(tmp_db):
    assert load_cards(tmp_db) == []


def test_load_cards_custom_key(tmp_db):
    save_cards(tmp_db, _cards(), key="other")
    assert load_cards(tmp_db) == []
    assert len(load_cards(tmp_db, key="other")) == 2


def test_load_cards_invalid_json(tmp_db, caplog):
    save(tmp_db, STORAGE_KEY, "{not json")
    with caplog.at_level(logging.ERROR):
        assert load_cards(tmp_db) == []
    assert "not valid JSON" in caplog.text


def test_load_cards_not_a_list(tmp_db):
    save(tmp_db, STORAGE_KEY, '{"word": "cat"}')
    assert load_cards(tmp_db) == []


def test_load_cards_skips_non_objects(tmp_db):
    save(tmp_db, STORAGE_KEY, '[{"word": "cat"}, 3, "dog"]')
    assert load_cards(tmp_db) == [CardRecord(word="cat")]


def test_save_failure_returns_false(tmp_path, caplog):
    # A directory where the database file should be cannot be opened
    db_path = tmp_path / "cards.db"
    db_path.mkdir()
    with caplog.at_level(logging.ERROR):
        assert save(str(db_path), STORAGE_KEY, "[]") is False
    assert "Error saving" in caplog.text


def test_load_failure_returns_none(tmp_path):
    db_path = tmp_path / "cards.db"
    db_path.mkdir()
    assert load(str(db_path), STORAGE_KEY) is None
    assert load_cards(str(db_path)) == []


def test_load_corrupt_database_file(tmp_path):
    db_path = tmp_path / "cards.db"
    db_path.write_bytes(b"this is not a sqlite database" * 10)
    assert load_cards(str(db_path)) == []
