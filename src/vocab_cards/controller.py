"""Event surface between the review session and the user interface."""
import logging
import random

from vocab_cards import session as review
from vocab_cards.csv_parser import CardImportError, load_csv_file
from vocab_cards.db import DEFAULT_DB_PATH
from vocab_cards.models import CardRecord
from vocab_cards.storage import STORAGE_KEY, load_cards, save_cards

logger = logging.getLogger(__name__)

NAVIGATE_NEXT = "next"
NAVIGATE_PREVIOUS = "previous"


class ReviewController:
    """Owns one ``ReviewSession`` and writes it through to storage on import."""

    def __init__(self, db_path: str = DEFAULT_DB_PATH, storage_key: str = STORAGE_KEY,
                 rng: random.Random | None = None, legacy_quotes: bool = False):
        self.db_path = db_path
        self.storage_key = storage_key
        self.rng = rng or random.Random()
        self.legacy_quotes = legacy_quotes
        self.session = review.ReviewSession()

    def start(self) -> None:
        persisted = load_cards(self.db_path, self.storage_key)
        review.start_session(self.session, persisted, self.rng)
        logger.info("Loaded %d saved cards", len(persisted))

    def import_file(self, file_path: str) -> str | None:
        """Import a CSV file. Returns an error message, or None on success."""
        try:
            cards = load_csv_file(file_path, legacy_quotes=self.legacy_quotes)
        except CardImportError as e:
            return e.message
        if not save_cards(self.db_path, cards, self.storage_key):
            logger.warning("Imported cards were not saved; they will be lost on exit")
        self.on_import_complete(cards)
        return None

    def on_import_complete(self, cards: list) -> None:
        review.import_cards(self.session, cards, self.rng)

    def on_navigate(self, direction: str) -> None:
        if direction == NAVIGATE_NEXT:
            review.next_card(self.session)
        elif direction == NAVIGATE_PREVIOUS:
            review.previous_card(self.session)
        else:
            raise ValueError(f"Unknown direction: {direction!r}")

    def on_mark_status(self, status: str) -> None:
        review.mark_status(self.session, status)

    def on_reshuffle(self) -> None:
        review.reshuffle(self.session, self.rng)

    def on_reset(self) -> None:
        review.reset(self.session)

    @property
    def current_card(self) -> CardRecord | None:
        return review.current_card(self.session)

    @property
    def cursor(self) -> int:
        return self.session.cursor

    @property
    def total(self) -> int:
        return len(self.session.cards)

    @property
    def understood(self) -> int:
        return review.understood_count(self.session)

    @property
    def percentage(self) -> int:
        return review.progress_percentage(self.session)
