from __future__ import annotations
from blackjack.models import Card, ACE

RANKS = [ACE, "2", "3", "4", "5", "6", "7", "8", "9", "10", "jack", "queen", "king"]
SUITS = ["clubs", "diamonds", "hearts", "spades"]
RED_SUITS = ("diamonds", "hearts")


def card_name(rank: str, suit: str) -> str:
    return f"{rank}_of_{suit}"


def create_card(name: str) -> Card:
    return Card(name=name)


def all_cards() -> list[Card]:
    """Create the 52 cards of a single deck, in rank order."""
    return [create_card(card_name(rank, suit)) for rank in RANKS for suit in SUITS]


def is_red(card: Card) -> bool:
    return card.suit in RED_SUITS
