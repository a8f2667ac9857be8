"""Rich terminal frontend — tables, colours, and panels.

Draws the grid as numbered tiles (the picture itself is left to graphical
renderers, which can be fed the layout exported with ``P``). Includes a
menu for difficulty and time limit, play, and the results table.
"""

from __future__ import annotations

import json
import logging
import random
import sys
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamegenerator import DEFAULT_SHUFFLE_STEPS
from backend.engine.gameplay import GamePlay, GameResult, is_tile_correct
from backend.engine.tilemap import export_layout
from backend.models.highscore import HighScoreEntry, HighScoreManager
from backend.models.puzzle import Direction, PuzzleState
from backend.models.settings import DEFAULT_TIME_LIMITS, Difficulty, PuzzleSettings
from frontend.cli.input_handler import get_key, get_key_timeout

logger = logging.getLogger(__name__)

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m}:{s:02d}"


def _export(game: GamePlay, data_dir: Path) -> str:
    """Write the current layout for an external renderer."""
    path = data_dir / "layout.json"
    layout = export_layout(game.puzzle, game.settings.image_url)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(layout, indent=2) + "\n")
    logger.info("Exported layout to %s", path)
    return f"[cyan]Layout written to[/cyan] {path}"


# -- board rendering ----------------------------------------------------------


def _render_board(puzzle: PuzzleState) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(puzzle.size * puzzle.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(puzzle.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(puzzle.grid):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif is_tile_correct(puzzle, r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Slides: ", style="dim")
    stats.append(str(game.state.slides), style="bold yellow")
    if game.remaining_slides is not None:
        stats.append(f" / {game.settings.slide_limit}", style="dim")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.elapsed_time), style="bold yellow")
    if game.remaining_time is not None:
        stats.append("    Left: ", style="dim")
        style = "bold red" if game.remaining_time <= 30 else "bold yellow"
        stats.append(_format_time(game.remaining_time), style=style)
    return stats


# -- menu screen --------------------------------------------------------------


def _draw_menu(difficulty: Difficulty, timed: bool) -> None:
    console.clear()

    levels = Text()
    for i, d in enumerate(Difficulty):
        if i:
            levels.append("  ")
        if d == difficulty:
            levels.append(f" {d.value} ", style="bold green on #313244")
        else:
            levels.append(f" {d.value} ", style="dim")

    nav = Text("  ← →  change difficulty", style="dim")

    timer = Text()
    timer.append("  T", style="bold cyan")
    if timed:
        timer.append(
            f"  time limit {_format_time(DEFAULT_TIME_LIMITS[difficulty])}",
            style="yellow",
        )
    else:
        timer.append("  no time limit", style="dim")

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Play    ")
    opts.append("2", style="dim bold")
    opts.append("  Results    ", style="dim")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(levels),
        Align.center(nav),
        Text(""),
        Align.center(timer),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]P I C T U R E   S L I D E[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


# -- game screens -------------------------------------------------------------


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("P", style="bold cyan")
    controls.append("  export   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    panel = Panel(
        Align.center(_render_board(game.puzzle)),
        title=f"[bold cyan]Picture Slide  {game.settings.difficulty.value}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    # Save the cursor so _update_stats() can repaint just this line.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(_stats(game)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _update_stats(game: GamePlay) -> None:
    """Overwrite the stats line in place, without a full redraw."""
    with console.capture() as capture:
        console.print(Align.center(_stats(game)), end="")
    sys.stdout.write(f"\033[u\033[K{capture.get()}")
    sys.stdout.flush()


def _draw_result(game: GamePlay, result: GameResult) -> None:
    console.clear()

    banner = Text()
    if result.won:
        banner.append("\n  ★ ", style="bold yellow")
        banner.append("PUZZLE COMPLETE!", style="bold green")
        banner.append(" ★\n", style="bold yellow")
        border = "bold green"
    elif game.time_expired:
        banner.append("\n  Time's up!\n", style="bold red")
        border = "red"
    else:
        banner.append("\n  Out of slides!\n", style="bold red")
        border = "red"

    stats = Text()
    stats.append("  Slides: ", style="dim")
    stats.append(str(result.slides), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(result.time), style="bold yellow")

    panel = Panel(
        Group(
            Align.center(_render_board(game.puzzle)),
            Align.center(banner),
            Align.center(stats),
        ),
        title=f"[bold]Picture Slide  {game.settings.difficulty.value}[/bold]",
        border_style=border,
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))


def _draw_highscores(manager: HighScoreManager) -> None:
    """Full-screen results view (used from the menu)."""
    console.clear()

    parts: list[Align] = []
    for difficulty in manager.get_all_difficulties():
        hs_table = Table(
            title=difficulty.value,
            title_style="bold cyan",
            box=rich.box.ROUNDED,
            border_style="dim",
            show_lines=False,
        )
        hs_table.add_column("#", justify="right", style="dim", width=3)
        hs_table.add_column("Slides", justify="right", style="yellow")
        hs_table.add_column("Time", justify="right", style="yellow")
        hs_table.add_column("Date", style="dim")

        for i, e in enumerate(manager.get_scores(difficulty)[:10], 1):
            hs_table.add_row(str(i), str(e.slides), _format_time(e.time), e.date)
        parts.append(Align.center(hs_table))

    if not parts:
        parts.append(Align.center(Text("  No finished games yet.", style="dim")))

    panel = Panel(
        Group(*parts),
        title="[bold]R E S U L T S[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


# -- game loop ----------------------------------------------------------------


def _play_game(game: GamePlay, manager: HighScoreManager, data_dir: Path) -> None:
    while True:
        status = ""

        while not game.is_over:
            _draw_game(game, status)
            status = ""

            # Poll so the clock keeps ticking between keypresses.
            while True:
                key = get_key_timeout(0.5)
                if key is not None or game.is_over:
                    break
                _update_stats(game)

            if key in _DIRECTIONS:
                game.move(_DIRECTIONS[key])
            elif key == "export":
                status = _export(game, data_dir)
            elif key == "restart":
                game.restart()
            elif key == "quit":
                game.finish()
                return

        # -- game over ---------------------------------------------------------
        result = game.finish()
        _draw_result(game, result)

        if result.won:
            manager.add_score(
                game.settings.difficulty,
                HighScoreEntry(
                    slides=result.slides,
                    time=round(result.time, 2),
                    date=datetime.now().strftime("%Y-%m-%d %H:%M"),
                ),
            )

        console.print(
            Align.center(
                Text("\n  Press R to play again, Q to go back.\n", style="dim")
            )
        )

        while True:
            key = get_key()
            if key == "restart":
                game.restart()
                break
            if key == "quit":
                return


# -- menu loop ----------------------------------------------------------------


def _menu_loop(
    defaults: PuzzleSettings,
    manager: HighScoreManager,
    data_dir: Path,
    new_game: Callable[[PuzzleSettings], GamePlay],
) -> None:
    levels = list(Difficulty)
    difficulty = defaults.difficulty
    timed = defaults.time_limit is not None

    while True:
        _draw_menu(difficulty, timed)
        key = get_key()
        index = levels.index(difficulty)

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key == "left":
            difficulty = levels[max(0, index - 1)]
        elif key == "right":
            difficulty = levels[min(len(levels) - 1, index + 1)]
        elif key == "timer":
            timed = not timed
        elif key in ("1", "enter"):
            settings = replace(
                defaults,
                difficulty=difficulty,
                time_limit=DEFAULT_TIME_LIMITS[difficulty] if timed else None,
            )
            _play_game(new_game(settings), manager, data_dir)
        elif key in ("2", "scores"):
            _draw_highscores(manager)


# -- public entry point -------------------------------------------------------


def run(
    data_dir: Path,
    settings: PuzzleSettings,
    *,
    play_now: bool = False,
    home_blank: bool = False,
    seed: int | None = None,
    steps: int = DEFAULT_SHUFFLE_STEPS,
) -> None:
    """Launch the Rich frontend.

    With *play_now* a game with *settings* starts at once; otherwise the
    menu opens with *settings* preselected.
    """
    manager = HighScoreManager(data_dir / "highscores.json")
    rng = random.Random(seed)

    def new_game(game_settings: PuzzleSettings) -> GamePlay:
        return GamePlay(game_settings, rng=rng, steps=steps, home_blank=home_blank)

    if play_now:
        _play_game(new_game(settings), manager, data_dir)
        return
    _menu_loop(settings, manager, data_dir, new_game)
