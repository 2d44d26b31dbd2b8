from __future__ import annotations
import random
from dataclasses import dataclass, field
from typing import Callable

from blackjack.cards import all_cards
from blackjack.config import tweak
from blackjack.logging_utils import get_logger
from blackjack.models import Card, Flip_Animation_State, Move_State, Turn

logger = get_logger(__name__)

CARD_DEAL_SOUND = "card_deal"
CARD_FLIP_SOUND = "card_flip"


class Deck_Exhausted_Error(RuntimeError):
    """Raised when a card is dealt from an empty deck."""


class Deck:
    def __init__(self):
        self.cards: list[Card] = all_cards()
        random.shuffle(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def deal_card(self) -> Card:
        """Remove the top card and place it on the deck anchor."""
        if not self.cards:
            raise Deck_Exhausted_Error("No cards left in the deck")
        card = self.cards.pop()
        card.x, card.y = tweak["deck_position"]
        return card

    def get_top_card(self) -> Card:
        if not self.cards:
            raise Deck_Exhausted_Error("No cards left in the deck")
        return self.cards[-1]


def get_translating_vector(next_position: tuple[float, float]) -> tuple[float, float]:
    deck_x, deck_y = tweak["deck_position"]
    step = tweak["moving_card_step"]
    return ((next_position[0] - deck_x) * step, (next_position[1] - deck_y) * step)


@dataclass
class Board:
    deck: Deck = field(default_factory=Deck)
    turn: Turn = Turn.PLAYER
    player_cards: list[Card] = field(default_factory=list)
    dealer_cards: list[Card] = field(default_factory=list)
    calculate_result: bool = False  # a card just settled, scoring is due
    card_moving: bool = False       # a dealt card is still animating, no new deals
    next_position_player: tuple[float, float] = tweak["player_first_position"]
    next_position_dealer: tuple[float, float] = tweak["dealer_first_position"]
    translation: tuple[float, float] = get_translating_vector(tweak["player_first_position"])
    sound_callback: Callable[[str], None] | None = None

    def active_cards(self) -> list[Card]:
        return self.player_cards if self.turn == Turn.PLAYER else self.dealer_cards

    def set_card(self, card: Card) -> None:
        self.active_cards().append(card)

    def set_turn(self, turn: Turn) -> None:
        """Called by the session; re-aims the next deal at the new side's slot."""
        if turn == self.turn:
            return
        self.turn = turn
        self.change_translating_vector()

    def play_sound(self, name: str) -> None:
        if self.sound_callback is not None:
            self.sound_callback(name)

    def change_next_position(self) -> None:
        spacing = tweak["card_spacing"]
        if self.turn == Turn.PLAYER:
            x, y = self.next_position_player
            self.next_position_player = (x + spacing, y)
        else:
            x, y = self.next_position_dealer
            self.next_position_dealer = (x + spacing, y)

    def change_translating_vector(self) -> None:
        if self.turn == Turn.PLAYER:
            self.translation = get_translating_vector(self.next_position_player)
        else:
            self.translation = get_translating_vector(self.next_position_dealer)

    def update(self, time_delta: float) -> None:
        """Advance every dealt card and detect the frame a deal settles."""
        is_moving = False
        is_flipping = False

        for cards, destination in ((self.player_cards, self.next_position_player),
                                   (self.dealer_cards, self.next_position_dealer)):
            for card in cards:
                translation = (0.0, 0.0)
                if card.move_state == Move_State.MOVING:
                    is_moving = True
                    translation = self.translation
                if card.animation.state != Flip_Animation_State.STOPPED:
                    is_flipping = True
                card.update(time_delta, translation, destination)

        if is_moving and not self.card_moving:
            self.card_moving = True
        elif not is_moving and not is_flipping and self.card_moving:
            self.card_moving = False
            self.change_next_position()
            self.change_translating_vector()
            self.calculate_result = True
            logger.debug("Card settled for %s", self.turn.value)
            self.play_sound(CARD_FLIP_SOUND)
