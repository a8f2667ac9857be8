"""Core gameplay session — applies moves and enforces the game's limits."""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable
from dataclasses import dataclass

from backend.engine.gamegenerator import (
    DEFAULT_SHUFFLE_STEPS,
    MIN_HOMED_STEPS,
    RandomSource,
    generate,
)
from backend.engine.gameplay.rules import apply_move, is_solved, move_in_direction
from backend.engine.gamestate import GameState
from backend.models.puzzle import Direction, PuzzleState
from backend.models.settings import PuzzleSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameResult:
    won: bool
    slides: int
    time: float


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(
        self,
        settings: PuzzleSettings,
        *,
        rng: RandomSource | None = None,
        steps: int = DEFAULT_SHUFFLE_STEPS,
        home_blank: bool = False,
        clock: Callable[[], float] | None = None,
    ) -> None:
        # A game with no shuffle steps would start already won.
        if steps < 1:
            raise ValueError(f"A game needs at least 1 shuffle step, got {steps}.")
        if home_blank and steps < MIN_HOMED_STEPS:
            raise ValueError(
                f"Homing the blank needs at least {MIN_HOMED_STEPS} shuffle steps, "
                f"got {steps}."
            )
        self.settings = settings
        self._rng = rng if rng is not None else random.Random()
        self._steps = steps
        self._home_blank = home_blank
        self._clock = clock or time.monotonic
        self.state = GameState(self._scramble(), self._clock)
        logger.info("Started %s game", settings.difficulty.value)

    @classmethod
    def from_state(
        cls,
        settings: PuzzleSettings,
        puzzle: PuzzleState,
        *,
        clock: Callable[[], float] | None = None,
    ) -> "GamePlay":
        """Create a session on an existing puzzle (e.g. a fixed test layout)."""
        if puzzle.size != settings.size:
            raise ValueError(
                f"A {puzzle.size}×{puzzle.size} puzzle does not match "
                f"difficulty {settings.difficulty.value}."
            )
        obj = object.__new__(cls)
        obj.settings = settings
        obj._rng = random.Random()
        obj._steps = DEFAULT_SHUFFLE_STEPS
        obj._home_blank = False
        obj._clock = clock or time.monotonic
        obj.state = GameState(puzzle, obj._clock)
        return obj

    @property
    def size(self) -> int:
        return self.settings.size

    @property
    def puzzle(self) -> PuzzleState:
        return self.state.puzzle

    # -- movement -------------------------------------------------------------

    def move_tile(self, row: int, col: int) -> bool:
        """Slide the tile at (row, col) into the blank.

        Returns True if the tile was adjacent to the blank, the game was
        still running, and the move was applied.
        """
        if self.is_over:
            self.finish()
            return False
        return self._accept(apply_move(self.puzzle, row, col))

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        if self.is_over:
            self.finish()
            return False
        return self._accept(move_in_direction(self.puzzle, direction))

    def restart(self) -> None:
        """Deal a fresh shuffle with the same settings."""
        self.state = GameState(self._scramble(), self._clock)
        logger.info("Restarted %s game", self.settings.difficulty.value)

    def finish(self) -> GameResult:
        """Stop the clock and report how the game went."""
        if self.state.running:
            self.state.pause()
            logger.info(
                "Game over: won=%s slides=%d time=%.1fs",
                self.is_won, self.state.slides, self.elapsed_time,
            )
        return GameResult(
            won=self.is_won,
            slides=self.state.slides,
            time=self.elapsed_time,
        )

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return is_solved(self.puzzle)

    @property
    def time_expired(self) -> bool:
        limit = self.settings.time_limit
        return limit is not None and self.state.elapsed_time >= limit

    @property
    def slides_exhausted(self) -> bool:
        limit = self.settings.slide_limit
        return limit is not None and self.state.slides >= limit and not self.is_won

    @property
    def is_over(self) -> bool:
        return self.is_won or self.time_expired or self.slides_exhausted

    @property
    def elapsed_time(self) -> float:
        elapsed = self.state.elapsed_time
        limit = self.settings.time_limit
        if limit is not None and elapsed >= limit:
            return float(limit)
        return elapsed

    @property
    def remaining_time(self) -> float | None:
        limit = self.settings.time_limit
        if limit is None:
            return None
        return max(0.0, limit - self.state.elapsed_time)

    @property
    def remaining_slides(self) -> int | None:
        limit = self.settings.slide_limit
        if limit is None:
            return None
        return max(0, limit - self.state.slides)

    # -- helpers --------------------------------------------------------------

    def _scramble(self) -> PuzzleState:
        return generate(
            self.size, self._steps, self._rng, home_blank=self._home_blank
        )

    def _accept(self, puzzle: PuzzleState | None) -> bool:
        if puzzle is None:
            return False
        self.state.advance(puzzle)
        if self.is_over:
            self.finish()
        return True
