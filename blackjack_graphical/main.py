from __future__ import annotations

import random
from typing import Annotated

import typer
from pyray import *

from blackjack.config import tweak
from blackjack.logging_utils import LOG_LEVEL, get_logger, setup_logging
from blackjack.session import Session, run_frame
from blackjack.stats import DEFAULT_STATS_FILE, Stats_Error, format_stats, load_stats
from blackjack_graphical.audio import Asset_Error, Sound_Bank
from blackjack_graphical.input import poll_input
from blackjack_graphical.ui import draw_session

logger = get_logger(__name__)

app = typer.Typer()

StatsFileOption = Annotated[str, typer.Option("-s", "--stats-file", help="File holding wins and power-up charges")]


def fail(message: str) -> None:
    logger.error(message)
    typer.echo(message, err=True)
    raise typer.Exit(1)


def open_stats(stats_file: str):
    try:
        return load_stats(stats_file)
    except Stats_Error as e:
        fail(f"Could not read stats: {e}")


def run(session: Session) -> None:
    accumulator = 0.0
    while not window_should_close() and not session.quit_requested:
        accumulator = run_frame(session, poll_input(), get_frame_time(), accumulator)

        begin_drawing()
        draw_session(session)
        end_drawing()

    # closing the window saves as well
    if not session.quit_requested:
        session.request_quit()


@app.command()
def play(
    stats_file: StatsFileOption = DEFAULT_STATS_FILE,
    seed: Annotated[int | None, typer.Option("--seed", help="Seed for shuffling and hints")] = None,
    log_level: Annotated[str, typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = LOG_LEVEL,
):
    setup_logging(log_level)
    if seed is not None:
        random.seed(seed)

    stats = open_stats(stats_file)

    init_window(tweak["window_width"], tweak["window_height"], tweak["window_title"])
    set_target_fps(tweak["target_fps"])
    # ESC goes through the save-and-quit path instead of closing the window
    set_exit_key(KeyboardKey.KEY_NULL)
    init_audio_device()

    try:
        sounds = Sound_Bank()
    except Asset_Error as e:
        close_audio_device()
        close_window()
        fail(str(e))

    session = Session(stats, stats_file, sound_callback=sounds.play)
    try:
        run(session)
    finally:
        sounds.unload()
        close_audio_device()
        close_window()


@app.command()
def stats(stats_file: StatsFileOption = DEFAULT_STATS_FILE):
    """Print wins and remaining power-ups."""
    setup_logging("WARNING")
    current = open_stats(stats_file)
    typer.echo(f"{stats_file}: {format_stats(current)}")
    typer.echo(f"Wins: {current.wins}")
    typer.echo(f"Hints: {current.hint_charges}")
    typer.echo(f"Dealer handicaps: {current.handicap_charges}")


if __name__ == "__main__":
    app()
