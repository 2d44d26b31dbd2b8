from __future__ import annotations
from pyray import *

from blackjack.session import Frame_Input


def poll_input() -> Frame_Input:
    """Main input processing - call each rendered frame."""
    return Frame_Input(
        mouse_x=get_mouse_x(),
        mouse_y=get_mouse_y(),
        clicked=is_mouse_button_pressed(MouseButton.MOUSE_BUTTON_LEFT),
        stand=is_key_pressed(KeyboardKey.KEY_SPACE),
        use_hint=is_key_pressed(KeyboardKey.KEY_ONE),
        use_handicap=is_key_pressed(KeyboardKey.KEY_TWO),
        quit=is_key_pressed(KeyboardKey.KEY_ESCAPE),
    )
