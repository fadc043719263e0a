"""Review session state and its transitions.

A session is either empty or reviewing. Every transition is a total
function over a ``ReviewSession``; none of them touch storage.
"""
import math
import random
from dataclasses import dataclass, field, replace

from vocab_cards.models import LEARNING, STATUSES, UNDERSTOOD, CardRecord


@dataclass
class ReviewSession:
    cards: list = field(default_factory=list)
    cursor: int = 0


def shuffle_cards(cards: list, rng: random.Random | None = None) -> list:
    """Return a uniformly shuffled copy (Fisher-Yates)."""
    rng = rng or random.Random()
    shuffled = list(cards)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def is_empty(session: ReviewSession) -> bool:
    return not session.cards


def current_card(session: ReviewSession) -> CardRecord | None:
    if is_empty(session):
        return None
    return session.cards[session.cursor]


def import_cards(session: ReviewSession, cards: list, rng: random.Random | None = None) -> None:
    """Replace the deck with fresh copies of ``cards``, all back to learning."""
    fresh = [replace(card, status=LEARNING) for card in cards]
    session.cards = shuffle_cards(fresh, rng)
    session.cursor = 0


def start_session(session: ReviewSession, persisted: list, rng: random.Random | None = None) -> None:
    """Resume from stored cards, keeping their statuses."""
    if not persisted:
        return
    session.cards = shuffle_cards(persisted, rng)
    session.cursor = 0


def reshuffle(session: ReviewSession, rng: random.Random | None = None) -> None:
    session.cards = shuffle_cards(session.cards, rng)
    session.cursor = 0


def next_card(session: ReviewSession) -> None:
    if is_empty(session):
        return
    session.cursor = min(session.cursor + 1, len(session.cards) - 1)


def previous_card(session: ReviewSession) -> None:
    if is_empty(session):
        return
    session.cursor = max(session.cursor - 1, 0)


def mark_status(session: ReviewSession, status: str) -> None:
    """Set the current card's status, then advance like ``next_card``."""
    if status not in STATUSES:
        raise ValueError(f"Unknown status: {status!r}")
    if is_empty(session):
        return
    session.cards[session.cursor] = replace(session.cards[session.cursor], status=status)
    next_card(session)


def reset(session: ReviewSession) -> None:
    session.cards = []
    session.cursor = 0


def understood_count(session: ReviewSession) -> int:
    return sum(1 for card in session.cards if card.status == UNDERSTOOD)


def progress_percentage(session: ReviewSession) -> int:
    total = len(session.cards)
    if total == 0:
        return 0
    # round half up
    return math.floor(100 * understood_count(session) / total + 0.5)
