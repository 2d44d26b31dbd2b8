from __future__ import annotations
from pyray import *

from blackjack.board import Board
from blackjack.cards import is_red
from blackjack.config import tweak
from blackjack.models import Card, Flip_State


def color_from_tuple(c: tuple) -> Color:
    """Convert RGBA tuple to raylib Color."""
    return Color(c[0], c[1], c[2], c[3])


def draw_background() -> None:
    clear_background(color_from_tuple(tweak["background_color"]))


def draw_card_back() -> None:
    """Draw a face-down card at the origin."""
    w = tweak["card_width"]
    h = tweak["card_height"]
    r = tweak["card_corner_radius"]

    draw_rectangle_rounded(
        Rectangle(0, 0, w, h), r / min(w, h), 8,
        color_from_tuple(tweak["card_back"])
    )

    # Simple pattern on back
    margin = 15
    draw_rectangle_rounded(
        Rectangle(margin, margin, w - 2*margin, h - 2*margin),
        r / min(w, h), 8, color_from_tuple(tweak["card_back_pattern"])
    )

    draw_rectangle_rounded_lines_ex(
        Rectangle(0, 0, w, h), r / min(w, h), 8, 2,
        color_from_tuple(tweak["card_border"])
    )


def draw_card_face(card: Card) -> None:
    """Draw rank and suit of a face-up card at the origin."""
    w = tweak["card_width"]
    h = tweak["card_height"]
    r = tweak["card_corner_radius"]
    padding = tweak["card_padding"]
    color = color_from_tuple(tweak["card_red_suit"] if is_red(card) else tweak["card_black_suit"])

    draw_rectangle_rounded(
        Rectangle(0, 0, w, h), r / min(w, h), 8,
        color_from_tuple(tweak["card_background"])
    )
    draw_rectangle_rounded_lines_ex(
        Rectangle(0, 0, w, h), r / min(w, h), 8, 2,
        color_from_tuple(tweak["card_border"])
    )

    rank_size = tweak["card_rank_font_size"]
    draw_text(card.short_rank, padding, padding, rank_size, color)

    suit_size = rank_size // 2
    draw_text(card.suit.upper(), padding, padding + rank_size + 4, suit_size, color)

    center_size = tweak["card_center_font_size"]
    center_width = measure_text(card.short_rank, center_size)
    draw_text(card.short_rank, (w - center_width) // 2, (h - center_size) // 2, center_size, color)


def draw_card(card: Card) -> None:
    """Draw a card centered on its position, squashed by its flip animation."""
    w = tweak["card_width"]
    h = tweak["card_height"]

    rl_push_matrix()
    rl_translatef(card.x, card.y, 0)
    rl_scalef(card.animation.scale_x, 1, 1)
    rl_translatef(-w / 2, -h / 2, 0)
    if card.flip_state == Flip_State.FRONT:
        draw_card_face(card)
    else:
        draw_card_back()
    rl_pop_matrix()


def draw_deck(board: Board) -> None:
    if not len(board.deck):
        return
    w = tweak["card_width"]
    h = tweak["card_height"]
    x, y = tweak["deck_position"]

    rl_push_matrix()
    rl_translatef(x - w / 2, y - h / 2, 0)
    draw_card_back()
    rl_pop_matrix()


def draw_board(board: Board) -> None:
    draw_deck(board)

    for card in board.player_cards:
        draw_card(card)

    for card in board.dealer_cards:
        draw_card(card)
