import pytest

from blackjack.board import (
    CARD_FLIP_SOUND, Board, Deck, Deck_Exhausted_Error, get_translating_vector,
)
from blackjack.cards import create_card
from blackjack.config import tweak
from blackjack.models import Flip_State, Move_State, Turn

TIME_DELTA = 1 / 60


def settle(board: Board, max_ticks: int = 500) -> int:
    """Update the board until a dealt card settles; returns the tick count."""
    for tick in range(1, max_ticks + 1):
        board.update(TIME_DELTA)
        if board.calculate_result:
            return tick
    raise AssertionError("card never settled")


def test_new_deck_has_52_unique_cards():
    deck = Deck()
    assert len(deck) == 52
    assert len({card.name for card in deck.cards}) == 52


def test_deal_card_takes_top_card():
    deck = Deck()
    top = deck.get_top_card()
    assert len(deck) == 52

    card = deck.deal_card()
    assert card is top
    assert len(deck) == 51
    assert (card.x, card.y) == tweak["deck_position"]
    assert card.name not in {c.name for c in deck.cards}


def test_deal_from_empty_deck_fails():
    deck = Deck()
    for _ in range(52):
        deck.deal_card()
    with pytest.raises(Deck_Exhausted_Error):
        deck.deal_card()
    with pytest.raises(Deck_Exhausted_Error):
        deck.get_top_card()


def test_set_card_follows_turn():
    board = Board()
    board.set_card(create_card("2_of_clubs"))
    board.set_turn(Turn.DEALER)
    board.set_card(create_card("3_of_clubs"))
    assert [c.name for c in board.player_cards] == ["2_of_clubs"]
    assert [c.name for c in board.dealer_cards] == ["3_of_clubs"]


def test_idle_board_changes_nothing():
    board = Board()
    for _ in range(10):
        board.update(TIME_DELTA)
    assert not board.card_moving
    assert not board.calculate_result
    assert board.next_position_player == tweak["player_first_position"]


def test_dealt_card_settles_once():
    sounds = []
    board = Board(sound_callback=sounds.append)
    board.set_card(board.deck.deal_card())

    board.update(TIME_DELTA)
    assert board.card_moving
    assert not board.calculate_result

    settle(board)
    card = board.player_cards[0]
    assert (card.x, card.y) == tweak["player_first_position"]
    assert card.move_state == Move_State.STOPPED
    assert card.flip_state == Flip_State.FRONT
    assert not board.card_moving
    assert sounds == [CARD_FLIP_SOUND]

    # the next deal goes one slot to the right
    x, y = tweak["player_first_position"]
    assert board.next_position_player == (x + tweak["card_spacing"], y)
    assert board.translation == get_translating_vector(board.next_position_player)

    board.calculate_result = False
    for _ in range(100):
        board.update(TIME_DELTA)
    assert not board.calculate_result
    assert sounds == [CARD_FLIP_SOUND]


def test_dealer_cards_fan_out_from_dealer_slot():
    board = Board()
    board.set_turn(Turn.DEALER)
    assert board.translation == get_translating_vector(tweak["dealer_first_position"])

    for _ in range(2):
        board.set_card(board.deck.deal_card())
        settle(board)
        board.calculate_result = False

    x, y = tweak["dealer_first_position"]
    spacing = tweak["card_spacing"]
    positions = [(card.x, card.y) for card in board.dealer_cards]
    assert positions == [(x, y), (x + spacing, y)]
    assert board.player_cards == []
