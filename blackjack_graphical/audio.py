from __future__ import annotations
import os

from pyray import *

from blackjack.board import CARD_DEAL_SOUND, CARD_FLIP_SOUND
from blackjack.logging_utils import get_logger

logger = get_logger(__name__)

RESOURCES_DIR = os.path.join(os.path.dirname(__file__), "resources")
SOUND_FILES = {
    CARD_DEAL_SOUND: os.path.join("sfx", "card_deal.wav"),
    CARD_FLIP_SOUND: os.path.join("sfx", "card_flip.wav"),
}


class Asset_Error(RuntimeError):
    """A sound file required by the game is missing."""


class Sound_Bank:
    def __init__(self, resources_dir: str = RESOURCES_DIR):
        self.sounds = {}
        for name, relative_path in SOUND_FILES.items():
            path = os.path.join(resources_dir, relative_path)
            if not os.path.exists(path):
                raise Asset_Error(f"Missing sound file: {path}")
            self.sounds[name] = load_sound(path)
            logger.debug("Loaded sound %s from %s", name, path)

    def play(self, name: str) -> None:
        play_sound(self.sounds[name])

    def unload(self) -> None:
        for sound in self.sounds.values():
            unload_sound(sound)
        self.sounds.clear()
