from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from blackjack.config import tweak


class Flip_State(Enum):
    FRONT = "front"
    BACK = "back"


class Move_State(Enum):
    MOVING = "moving"
    STOPPED = "stopped"


class Flip_Animation_State(Enum):
    STOPPED = "stopped"          # not playing
    STARTED = "started"          # shrinking towards the flip point
    BEFORE_FLIP = "before_flip"  # fully shrunk, the face should turn now
    AFTER_FLIP = "after_flip"    # face turned, growing back


class Turn(Enum):
    PLAYER = "player"
    DEALER = "dealer"


class Outcome(Enum):
    UNDECIDED = "undecided"
    WIN = "win"
    DRAW = "draw"
    LOSE = "lose"


class Hint_Status(Enum):
    UNUSED = "unused"
    ACTIVE = "active"
    EXHAUSTED = "exhausted"


ACE = "ace"

RANK_POINTS = {
    "2": 2, "3": 3, "4": 4, "5": 5, "6": 6, "7": 7, "8": 8, "9": 9,
    "10": 10, "jack": 10, "queen": 10, "king": 10,
    ACE: 11,
}

SHORT_RANKS = {"jack": "J", "queen": "Q", "king": "K", ACE: "A"}


class Card_Name_Error(ValueError):
    """Raised when a card name does not start with a known rank."""


@dataclass
class Flip_Animation:
    duration: float = tweak["flip_duration"]
    progress: float = 0.0   # 0 <= progress <= duration
    direction: float = 1.0  # +1.0 while shrinking, -1.0 while growing back
    scale_x: float = 1.0
    state: Flip_Animation_State = Flip_Animation_State.STOPPED

    def start(self) -> None:
        self.state = Flip_Animation_State.STARTED

    def update(self, time_delta: float) -> None:
        if self.state == Flip_Animation_State.STOPPED:
            return

        self.progress += self.direction * time_delta

        if self.progress >= self.duration:
            self.progress = self.duration
            self.direction = -1.0
            self.state = Flip_Animation_State.BEFORE_FLIP
        elif self.progress <= 0.0:
            self.progress = 0.0
            self.direction = 1.0
            self.state = Flip_Animation_State.STOPPED

        self.scale_x = 1.0 - self.progress / self.duration


@dataclass
class Card:
    name: str  # e.g. "ace_of_spades", "10_of_hearts"
    x: float = 0.0
    y: float = 0.0
    flip_state: Flip_State = Flip_State.BACK
    move_state: Move_State = Move_State.MOVING
    animation: Flip_Animation = field(default_factory=Flip_Animation)
    flipped: bool = False  # the flip animation has been triggered once

    @property
    def rank(self) -> str:
        return self.name.split("_")[0]

    @property
    def suit(self) -> str:
        return self.name.rsplit("_", 1)[-1]

    @property
    def short_rank(self) -> str:
        return SHORT_RANKS.get(self.rank, self.rank)

    def get_points(self) -> int:
        points = RANK_POINTS.get(self.rank)
        if points is None:
            raise Card_Name_Error(f"Invalid card name: {self.name!r}")
        return points

    def is_an_ace(self) -> bool:
        return self.rank == ACE

    def update(self, time_delta: float, translation: tuple[float, float],
               destination: tuple[float, float]) -> None:
        """Advance the flip animation and move towards destination.

        Each axis is clamped into [0, destination] so the card lands exactly
        on its slot regardless of frame timing.
        """
        self.animation.update(time_delta)

        if self.move_state == Move_State.MOVING:
            dest_x, dest_y = destination
            self.x = min(max(self.x + translation[0], 0.0), dest_x)
            self.y = min(max(self.y + translation[1], 0.0), dest_y)

            if self.x == dest_x and self.y == dest_y:
                self.move_state = Move_State.STOPPED
                if not self.flipped:
                    self.animation.start()
                    self.flipped = True

        if self.animation.state == Flip_Animation_State.BEFORE_FLIP:
            self.flip_state = Flip_State.FRONT
            self.animation.state = Flip_Animation_State.AFTER_FLIP
