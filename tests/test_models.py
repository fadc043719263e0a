"""Tests for data model classes."""
from vocab_cards.models import CardRecord, CANONICAL_HEADERS, LEARNING, UNDERSTOOD


def test_card_defaults():
    c = CardRecord(word="cat")
    assert c.meaning == ""
    assert c.phonetic == ""
    assert c.definition == ""
    assert c.example == ""
    assert c.status == LEARNING


def test_canonical_headers():
    assert list(CANONICAL_HEADERS.values()) == [
        "Word", "Meaning (JP)", "Phonetic Symbol", "English Definition", "Example Sentence",
    ]


def test_to_dict_has_all_fields():
    c = CardRecord(word="cat", meaning="猫", status=UNDERSTOOD)
    assert c.to_dict() == {
        "word": "cat", "meaning": "猫", "phonetic": "", "definition": "",
        "example": "", "status": "understood",
    }


def test_from_dict_round_trip():
    c = CardRecord(word="cat", meaning="猫", phonetic="/kæt/", definition="a pet",
                   example="The cat sleeps.", status=UNDERSTOOD)
    assert CardRecord.from_dict(c.to_dict()) == c


def test_from_dict_missing_fields():
    c = CardRecord.from_dict({"word": "dog"})
    assert c == CardRecord(word="dog")


def test_from_dict_unknown_status_is_learning():
    c = CardRecord.from_dict({"word": "dog", "status": "mastered"})
    assert c.status == LEARNING


def test_from_dict_none_values():
    c = CardRecord.from_dict({"word": None, "meaning": None})
    assert c.word == ""
    assert c.meaning == ""
