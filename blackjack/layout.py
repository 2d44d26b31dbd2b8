from __future__ import annotations
from dataclasses import dataclass

from blackjack.config import tweak


def point_in_rect(mx: float, my: float, x: float, y: float, w: float, h: float) -> bool:
    return x <= mx <= x + w and y <= my <= y + h


@dataclass
class Button:
    x: int
    y: int
    width: int
    height: int
    text: str = ""
    font_size: int = 40

    def hovered(self, mx, my) -> bool:
        return point_in_rect(mx, my, self.x, self.y, self.width, self.height)

    def pressed(self, mx, my, click) -> bool:
        if not click:
            return False
        return self.hovered(mx, my)


def text_button(text: str, position: tuple[int, int], font_size: int) -> Button:
    """A clickable area around a line of text drawn at `position`."""
    margin = tweak["button_margin"]
    x, y = position
    return Button(x - margin, y - margin, tweak["button_width"] + margin,
                  tweak["button_height"] + margin, text, font_size)


def play_button() -> Button:
    return text_button("PLAY", tweak["menu_play_position"], tweak["menu_button_size"])


def help_button() -> Button:
    return text_button("HELP", tweak["menu_help_position"], tweak["menu_button_size"])


def back_button() -> Button:
    return text_button("BACK", tweak["help_back_position"], tweak["help_back_size"])


def point_over_deck(mx: float, my: float) -> bool:
    """The deck is drawn centered on its anchor."""
    x, y = tweak["deck_position"]
    w = tweak["card_hit_width"]
    h = tweak["card_hit_height"]
    return point_in_rect(mx, my, x - w / 2, y - h / 2, w, h)
