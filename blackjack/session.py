from __future__ import annotations
import random
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable

from blackjack.board import Board, CARD_DEAL_SOUND
from blackjack.config import tweak
from blackjack.game import Game_Engine, hint_range, increase_stats
from blackjack.layout import back_button, help_button, play_button, point_over_deck
from blackjack.logging_utils import get_logger
from blackjack.models import Hint_Status, Outcome, Turn
from blackjack.stats import Stats, save_stats

logger = get_logger(__name__)

FIXED_TIME_DELTA = 1.0 / tweak["target_fps"]
MAX_FRAME_TIME = 0.25


class Game_Status(Enum):
    MENU = "menu"
    HELP = "help"
    PLAY = "play"


@dataclass
class Frame_Input:
    """Everything the player did since the last tick."""
    mouse_x: float = 0.0
    mouse_y: float = 0.0
    clicked: bool = False
    stand: bool = False
    use_hint: bool = False
    use_handicap: bool = False
    quit: bool = False

    def merge(self, newer: Frame_Input) -> Frame_Input:
        # a pending click is hit-tested where it happened
        source = self if self.clicked else newer
        return Frame_Input(
            mouse_x=source.mouse_x,
            mouse_y=source.mouse_y,
            clicked=self.clicked or newer.clicked,
            stand=self.stand or newer.stand,
            use_hint=self.use_hint or newer.use_hint,
            use_handicap=self.use_handicap or newer.use_handicap,
            quit=self.quit or newer.quit,
        )


class Session:
    def __init__(self, stats: Stats, stats_path: str | Path,
                 sound_callback: Callable[[str], None] | None = None):
        self.stats = stats
        self.stats_path = stats_path
        self.sound_callback = sound_callback
        self.status = Game_Status.MENU
        self.quit_requested = False
        self.pending_input = Frame_Input()
        self.new_round()

    def new_round(self) -> None:
        self.board = Board(sound_callback=self.sound_callback)
        self.engine = Game_Engine()
        self.hint_range: tuple[int, int] | None = None
        self.time_till_game_over = tweak["seconds_till_game_over"]
        self.time_till_menu = tweak["seconds_till_menu"]

    @property
    def showing_result(self) -> bool:
        return self.time_till_game_over <= 0.0

    def play_sound(self, name: str) -> None:
        if self.sound_callback is not None:
            self.sound_callback(name)

    def save(self) -> None:
        save_stats(self.stats, self.stats_path)

    def reset(self) -> None:
        """Close the round: count the win, persist, and go back to the menu."""
        if self.engine.outcome == Outcome.WIN:
            increase_stats(self.stats)
        self.save()
        self.new_round()
        self.status = Game_Status.MENU
        logger.info("Round reset, wins: %d", self.stats.wins)

    def request_quit(self) -> None:
        self.save()
        self.quit_requested = True

    # --- Player actions ---

    def can_deal(self) -> bool:
        return (not self.engine.game_over
                and not self.board.card_moving
                and len(self.board.deck) > 0)

    def deal_card(self) -> None:
        card = self.board.deck.deal_card()
        self.board.set_card(card)
        logger.debug("Dealt %s to %s", card.name, self.board.turn.value)
        self.play_sound(CARD_DEAL_SOUND)

    def stand(self) -> None:
        if (self.board.turn != Turn.PLAYER or self.engine.game_over
                or self.board.card_moving):
            return
        self.board.set_turn(Turn.DEALER)
        logger.info("Player stands on %d", self.engine.player_score)

    def use_hint(self) -> None:
        if self.stats.hint_charges == 0 or self.engine.hint != Hint_Status.UNUSED:
            return
        if self.engine.game_over or self.board.turn != Turn.PLAYER or not len(self.board.deck):
            return

        self.engine.hint = Hint_Status.ACTIVE
        self.stats.hint_charges -= 1

        size = tweak["hint_range_size"]
        top_points = self.board.deck.get_top_card().get_points()
        self.hint_range = hint_range(top_points, random.randrange(size), size)
        logger.info("Hint used, next card gives %d-%d", *self.hint_range)

    def use_handicap(self) -> None:
        if self.stats.handicap_charges == 0 or self.engine.dealer_handicap_active:
            return
        if self.engine.game_over:
            return

        self.engine.dealer_handicap_active = True
        self.stats.handicap_charges -= 1
        logger.info("Dealer handicap activated")

    # --- Per-tick update ---

    def update_score(self) -> None:
        if not self.board.calculate_result:
            return
        turn = self.board.turn
        self.engine.score(self.board.active_cards(), turn)
        self.board.set_turn(self.engine.check_outcome(turn))
        self.board.calculate_result = False

    def update_menu(self, frame_input: Frame_Input) -> None:
        mx, my, click = frame_input.mouse_x, frame_input.mouse_y, frame_input.clicked
        if play_button().pressed(mx, my, click):
            self.status = Game_Status.PLAY
        elif help_button().pressed(mx, my, click):
            self.status = Game_Status.HELP

    def update_help(self, frame_input: Frame_Input) -> None:
        if back_button().pressed(frame_input.mouse_x, frame_input.mouse_y, frame_input.clicked):
            self.status = Game_Status.MENU

    def update_game(self, frame_input: Frame_Input, time_delta: float) -> None:
        if self.showing_result:
            if self.time_till_menu > 0.0:
                self.time_till_menu -= time_delta
            else:
                self.reset()
                return
        elif self.engine.game_over:
            self.time_till_game_over -= time_delta

        if frame_input.stand:
            self.stand()
        if frame_input.use_hint:
            self.use_hint()
        if frame_input.use_handicap:
            self.use_handicap()

        if self.board.turn == Turn.DEALER:
            if self.can_deal():
                self.deal_card()
        elif frame_input.clicked and point_over_deck(frame_input.mouse_x, frame_input.mouse_y):
            if self.can_deal():
                self.deal_card()
                if self.engine.hint == Hint_Status.ACTIVE:
                    self.engine.hint = Hint_Status.EXHAUSTED

        # cards move first, then the settled hand is scored and judged
        self.board.update(time_delta)
        self.update_score()

    def queue_input(self, frame_input: Frame_Input) -> None:
        self.pending_input = self.pending_input.merge(frame_input)

    def update(self, frame_input: Frame_Input, time_delta: float) -> None:
        """One fixed tick of the whole game."""
        if frame_input.quit:
            self.request_quit()
            return

        if self.status == Game_Status.MENU:
            self.update_menu(frame_input)
        elif self.status == Game_Status.HELP:
            self.update_help(frame_input)
        elif self.status == Game_Status.PLAY:
            self.update_game(frame_input, time_delta)

    def tick(self, time_delta: float = FIXED_TIME_DELTA) -> None:
        frame_input = self.pending_input
        self.pending_input = Frame_Input(mouse_x=frame_input.mouse_x, mouse_y=frame_input.mouse_y)
        self.update(frame_input, time_delta)


def run_frame(session: Session, frame_input: Frame_Input, frame_time: float,
              accumulator: float) -> float:
    """Run as many fixed ticks as `frame_time` allows; returns the leftover time.

    Input is held until the next tick so clicks between ticks are not lost.
    """
    if frame_input.quit:
        session.request_quit()
        return accumulator

    session.queue_input(frame_input)
    accumulator += min(frame_time, MAX_FRAME_TIME)
    while accumulator >= FIXED_TIME_DELTA and not session.quit_requested:
        session.tick(FIXED_TIME_DELTA)
        accumulator -= FIXED_TIME_DELTA
    return accumulator
