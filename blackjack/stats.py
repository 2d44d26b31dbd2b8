"""Win count and power-up charges, persisted as a single line of text:

    <wins> <hint_charges> <handicap_charges>
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

from blackjack.logging_utils import get_logger

logger = get_logger(__name__)

DEFAULT_STATS_FILE = "stats.txt"


class Stats_Error(ValueError):
    """The stats file could not be parsed."""


@dataclass
class Stats:
    wins: int = 0
    hint_charges: int = 0
    handicap_charges: int = 0


def format_stats(stats: Stats) -> str:
    return f"{stats.wins} {stats.hint_charges} {stats.handicap_charges}"


def parse_stats(line: str) -> Stats:
    tokens = line.strip().split(" ")
    if len(tokens) < 3:
        raise Stats_Error(f"Expected 3 numbers in stats line, got {line!r}")

    values = []
    for token in tokens:
        if not (token.isascii() and token.isdigit()):
            raise Stats_Error(f"Invalid number {token!r} in stats line {line!r}")
        values.append(int(token))
    return Stats(wins=values[0], hint_charges=values[1], handicap_charges=values[2])


def save_stats(stats: Stats, path: str | Path) -> None:
    Path(path).write_text(format_stats(stats), encoding="ascii")
    logger.info("Saved stats to %s: %s", path, format_stats(stats))


def load_stats(path: str | Path) -> Stats:
    """Read the stats file, creating it with "0 0 0" on first run."""
    path = Path(path)
    if not path.exists():
        logger.info("No stats file at %s, creating one", path)
        save_stats(Stats(), path)

    try:
        text = path.read_text(encoding="ascii")
    except UnicodeDecodeError as e:
        raise Stats_Error(f"Stats file {path} is not plain ASCII") from e
    lines = text.splitlines()
    stats = parse_stats(lines[0] if lines else "")
    logger.info("Loaded stats from %s: %s", path, format_stats(stats))
    return stats
