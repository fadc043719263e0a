"""Data classes for vocabulary cards."""
from dataclasses import dataclass, asdict

LEARNING = "learning"
UNDERSTOOD = "understood"
STATUSES = (LEARNING, UNDERSTOOD)

# Card field -> CSV column header. Lookups are case-sensitive.
CANONICAL_HEADERS = {
    "word": "Word",
    "meaning": "Meaning (JP)",
    "phonetic": "Phonetic Symbol",
    "definition": "English Definition",
    "example": "Example Sentence",
}


@dataclass
class CardRecord:
    word: str
    meaning: str = ""
    phonetic: str = ""
    definition: str = ""
    example: str = ""
    status: str = LEARNING

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "CardRecord":
        """Build a card from a stored mapping, filling gaps with defaults."""
        fields = {name: str(data.get(name) or "") for name in CANONICAL_HEADERS}
        status = data.get("status")
        return cls(**fields, status=status if status in STATUSES else LEARNING)
