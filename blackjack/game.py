from __future__ import annotations
from dataclasses import dataclass

from blackjack.logging_utils import get_logger
from blackjack.models import Card, Hint_Status, Outcome, Turn
from blackjack.stats import Stats

logger = get_logger(__name__)

BUST_LIMIT = 21
DEALER_STAND_SCORE = 17
HANDICAP_POINTS = 1
HINT_LOW_RANGE = (2, 6)
HINT_HIGH_RANGE = (7, 11)


@dataclass
class Game_Engine:
    player_score: int = 0
    dealer_score: int = 0
    hint: Hint_Status = Hint_Status.UNUSED
    dealer_handicap_active: bool = False
    game_over: bool = False
    outcome: Outcome = Outcome.UNDECIDED

    def score(self, cards: list[Card], turn: Turn) -> int:
        """Recompute the score of a whole hand and store it for `turn`.

        Aces count 11 + 1 for each extra ace while that stays within 21,
        otherwise every ace counts 1.
        """
        score = 0
        aces = 0
        for card in cards:
            if card.is_an_ace():
                aces += 1
            else:
                score += card.get_points()

        if aces > 0 and score + 11 + (aces - 1) <= BUST_LIMIT:
            score += 11 + (aces - 1)
        else:
            score += aces

        if turn == Turn.PLAYER:
            self.player_score = score
        else:
            self.dealer_score = score
        logger.debug("Scored %d cards for %s: %d", len(cards), turn.value, score)
        return score

    def finish(self, outcome: Outcome) -> None:
        self.game_over = True
        self.outcome = outcome
        logger.info("Round over: %s (player %d, dealer %d)",
                    outcome.value, self.player_score, self.dealer_score)

    def check_outcome(self, turn: Turn) -> Turn:
        """Decide the round if possible; returns the turn to continue with."""
        handicap = HANDICAP_POINTS if self.dealer_handicap_active else 0

        if self.player_score > BUST_LIMIT:
            self.finish(Outcome.LOSE)
        elif self.dealer_score > BUST_LIMIT:
            self.finish(Outcome.WIN)
        elif turn == Turn.DEALER and self.dealer_score >= DEALER_STAND_SCORE:
            effective_dealer_score = self.dealer_score - handicap
            if self.player_score > effective_dealer_score:
                self.finish(Outcome.WIN)
            elif self.player_score < effective_dealer_score:
                self.finish(Outcome.LOSE)
            else:
                self.finish(Outcome.DRAW)
        elif turn == Turn.PLAYER and self.player_score == BUST_LIMIT:
            # blackjack, the dealer has to play now
            logger.info("Player reached %d, dealer's turn", BUST_LIMIT)
            return Turn.DEALER
        return turn


def increase_stats(stats: Stats) -> None:
    """Count a win; every 2nd win earns a hint, every 3rd a dealer handicap."""
    stats.wins += 1
    if stats.wins % 2 == 0:
        stats.hint_charges += 1
    if stats.wins % 3 == 0:
        stats.handicap_charges += 1


def hint_range(top_points: int, offset: int, size: int) -> tuple[int, int]:
    """Point range shown by the hint for a card worth `top_points`.

    `offset` is the random shift in [0, size) that keeps the range vague.
    """
    low = top_points - offset
    if low + size > HINT_HIGH_RANGE[1]:
        return HINT_HIGH_RANGE
    if low < HINT_LOW_RANGE[0]:
        return HINT_LOW_RANGE
    return (low, low + size)
