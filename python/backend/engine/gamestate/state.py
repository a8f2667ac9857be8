"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time
from collections.abc import Callable

from backend.models.puzzle import PuzzleState


class GameState:
    """Holds the current puzzle snapshot, slide counter, and elapsed time.

    The puzzle itself is immutable; each accepted move replaces it.
    """

    def __init__(
        self,
        puzzle: PuzzleState,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.puzzle = puzzle
        self.slides: int = 0
        self._clock = clock
        self._start_time: float = clock()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (self._clock() - self._start_time)
        return self._elapsed_banked

    @property
    def running(self) -> bool:
        return self._running

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += self._clock() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = self._clock()
            self._running = True

    # -- moves ----------------------------------------------------------------

    def advance(self, puzzle: PuzzleState) -> None:
        """Replace the snapshot after an accepted move."""
        self.puzzle = puzzle
        self.slides += 1
