#!/usr/bin/env python3
"""Picture Slide Puzzle.

Usage::

    python main.py                      # interactive menu
    python main.py -d 4x4               # start a 4×4 game right away
    python main.py -d 3x3 --slide-limit 80 --no-time-limit
    python main.py --scores             # view results

Every option can also be set through a ``SLIDE_PUZZLE_*`` environment
variable (e.g. ``SLIDE_PUZZLE_DIFFICULTY=5x5``).
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
DATA_DIR = PROJECT_ROOT / "data"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import (  # noqa: E402
    DEFAULT_SHUFFLE_STEPS,
    MIN_HOMED_STEPS,
)
from backend.models.settings import (  # noqa: E402
    DEFAULT_IMAGE_URL,
    Difficulty,
    PuzzleSettings,
)

ENV_PREFIX = "SLIDE_PUZZLE_"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _print_highscores(data_dir: Path) -> None:
    from backend.models.highscore import HighScoreManager

    manager = HighScoreManager(data_dir / "highscores.json")
    difficulties = manager.get_all_difficulties()

    print("\n  === RESULTS ===")
    if not difficulties:
        print("  No finished games yet.\n")
        return
    for difficulty in difficulties:
        print(f"\n  --- {difficulty.value} ---")
        for i, e in enumerate(manager.get_scores(difficulty)[:10], 1):
            print(f"  {i:>2}. {e.slides:>4} slides  {e.time:>7.1f}s  ({e.date})")
    print()


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    difficulty: Optional[Difficulty] = typer.Option(
        None, "-d", "--difficulty",
        envvar=f"{ENV_PREFIX}DIFFICULTY",
        help="Grid to play. Omit for interactive menu.",
    ),
    time_limit: bool = typer.Option(
        True, "--time-limit/--no-time-limit",
        envvar=f"{ENV_PREFIX}TIME_LIMIT",
        help="Use the difficulty's default time limit.",
    ),
    slide_limit: Optional[int] = typer.Option(
        None, "--slide-limit",
        min=1,
        envvar=f"{ENV_PREFIX}SLIDE_LIMIT",
        help="Maximum number of slides (default: unlimited).",
    ),
    image_url: str = typer.Option(
        DEFAULT_IMAGE_URL, "--image-url",
        envvar=f"{ENV_PREFIX}IMAGE_URL",
        help="Picture recorded in exported layouts.",
    ),
    home_blank: bool = typer.Option(
        False, "--home-blank",
        envvar=f"{ENV_PREFIX}HOME_BLANK",
        help="Return the blank to the bottom-right corner after shuffling.",
    ),
    steps: int = typer.Option(
        DEFAULT_SHUFFLE_STEPS, "--steps",
        min=1,
        envvar=f"{ENV_PREFIX}STEPS",
        help="Random moves used to shuffle.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar=f"{ENV_PREFIX}SEED",
        help="Seed for reproducible shuffles.",
    ),
    data_dir: Path = typer.Option(
        DATA_DIR, "--data-dir",
        envvar=f"{ENV_PREFIX}DATA_DIR",
        help="Where results and exported layouts are written.",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        envvar=f"{ENV_PREFIX}LOG_LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    ),
    scores: bool = typer.Option(
        False, "--scores",
        help="Show results and exit.",
    ),
) -> None:
    """Picture Slide Puzzle."""
    try:
        _configure_logging(log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc

    if scores:
        _print_highscores(data_dir)
        return

    if home_blank and steps < MIN_HOMED_STEPS:
        raise typer.BadParameter(
            f"--home-blank needs at least {MIN_HOMED_STEPS} steps.",
            param_hint="--steps",
        )

    try:
        settings = PuzzleSettings.create(
            difficulty or Difficulty.EASY,
            timed=time_limit,
            slide_limit=slide_limit,
            image_url=image_url,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    from frontend.cli.rich.app import run

    run(
        data_dir,
        settings,
        play_now=difficulty is not None,
        home_blank=home_blank,
        seed=seed,
        steps=steps,
    )


if __name__ == "__main__":
    app()
