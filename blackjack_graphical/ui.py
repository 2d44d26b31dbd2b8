from __future__ import annotations
from pyray import *

from blackjack.config import tweak
from blackjack.layout import Button, back_button, help_button, play_button
from blackjack.models import Hint_Status, Outcome
from blackjack.session import Game_Status, Session
from blackjack_graphical.rendering import color_from_tuple, draw_background, draw_board

HELP_TEXT = """Standard blackjack rules.

hit = Left-Mouse-Click over deck
stand = Space
use hint = Key1
use handicap = Key2
exit = Escape

hint: gives approximation of next card's points
handicap: dealer's score is reduced with 1 point"""

OUTCOME_TEXT = {
    Outcome.WIN: ("YOU WIN!", "win_color"),
    Outcome.DRAW: ("YOU DRAW!", "draw_color"),
    Outcome.LOSE: ("YOU LOSE!", "lose_color"),
}


def draw_label(text: str, position: tuple[int, int], size: int, color_key: str = "text_color") -> None:
    draw_text(text, int(position[0]), int(position[1]), size, color_from_tuple(tweak[color_key]))


def draw_text_button(button: Button) -> None:
    margin = tweak["button_margin"]
    hovered = button.hovered(get_mouse_x(), get_mouse_y())
    color = color_from_tuple(tweak["button_hover_color" if hovered else "text_color"])
    draw_text(button.text, button.x + margin, button.y + margin, button.font_size, color)


def draw_menu() -> None:
    draw_label("MENU", tweak["menu_title_position"], tweak["menu_title_size"])
    draw_text_button(play_button())
    draw_text_button(help_button())


def draw_help() -> None:
    draw_label("HELP", tweak["help_title_position"], tweak["help_title_size"])
    size = tweak["help_description_size"]
    x, y = tweak["help_description_position"]
    for i, line in enumerate(HELP_TEXT.split("\n")):
        draw_text(line, x, y + i * (size + 6), size, color_from_tuple(tweak["text_color"]))
    draw_text_button(back_button())


def draw_score(session: Session) -> None:
    engine = session.engine
    dealer_color = "handicap_color" if engine.dealer_handicap_active else "text_color"

    draw_label("PLAYER SCORE:", tweak["player_score_label_position"], tweak["score_label_size"])
    draw_label("DEALER SCORE:", tweak["dealer_score_label_position"], tweak["score_label_size"])
    draw_label(str(engine.player_score), tweak["player_score_position"], tweak["score_size"])
    draw_label(str(engine.dealer_score), tweak["dealer_score_position"], tweak["score_size"], dealer_color)


def draw_power_ups(session: Session) -> None:
    size = tweak["power_ups_size"]
    x, y = tweak["power_ups_position"]
    lines = [
        "AVAILABLE POWER UPS:",
        f"1. Next card approximation x{session.stats.hint_charges}",
        f"2. Activate dealer handicap x{session.stats.handicap_charges}",
    ]
    for i, line in enumerate(lines):
        draw_text(line, x, y + i * (size + 4), size, color_from_tuple(tweak["text_color"]))


def draw_wins(session: Session) -> None:
    draw_label(f"WINS: {session.stats.wins}", tweak["wins_position"], tweak["wins_size"])


def draw_hint(session: Session) -> None:
    if session.engine.hint != Hint_Status.ACTIVE or session.hint_range is None:
        return
    low, high = session.hint_range
    draw_label(f"NEXT CARD GIVES BETWEEN: {low}-{high}", tweak["hint_position"], tweak["hint_size"])


def draw_game_over_text(session: Session) -> None:
    if session.engine.outcome not in OUTCOME_TEXT:
        return
    text, color_key = OUTCOME_TEXT[session.engine.outcome]
    draw_label(text, tweak["game_over_position"], tweak["game_over_size"], color_key)


def draw_play(session: Session) -> None:
    if session.showing_result:
        draw_game_over_text(session)
        return
    draw_board(session.board)
    draw_score(session)
    draw_power_ups(session)
    draw_wins(session)
    draw_hint(session)


def draw_session(session: Session) -> None:
    draw_background()
    if session.status == Game_Status.MENU:
        draw_menu()
    elif session.status == Game_Status.HELP:
        draw_help()
    elif session.status == Game_Status.PLAY:
        draw_play(session)
