"""Builds solved puzzles and shuffles them into solvable starting states."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import Protocol, TypeVar

from backend.models.puzzle import PuzzleState, check_size

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_SHUFFLE_STEPS = 1000

# One step is always walked straight back by homing.
MIN_HOMED_STEPS = 2
MAX_GENERATE_ATTEMPTS = 100

# Blank offsets in the order candidates are offered to the random source.
_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class RandomSource(Protocol):
    """Anything that can pick one item uniformly, e.g. ``random.Random``."""

    def choice(self, seq: Sequence[T]) -> T: ...


def create_solved(size: int) -> PuzzleState:
    """Return the goal state (tiles in order, blank bottom-right)."""
    check_size(size)
    tiles = list(range(1, size * size)) + [0]
    return PuzzleState.from_flat(size, tiles)


def shuffle(
    state: PuzzleState,
    steps: int,
    rng: RandomSource,
    *,
    home_blank: bool = False,
) -> PuzzleState:
    """Return *state* after a random walk of *steps* blank moves.

    Each step slides a random neighbour of the blank into it, so the
    result stays in the solvable class of the input. With *home_blank*
    the blank is then walked down and right into the bottom-right corner.
    """
    tiles = state.rows()
    blank = state.blank_pos
    taken = 0

    for _ in range(max(steps, 0)):
        neighbors = _neighbors(blank, state.size)
        if not neighbors:
            break
        target = rng.choice(neighbors)
        blank = _swap(tiles, blank, target)
        taken += 1

    if home_blank:
        last = state.size - 1
        while blank[0] < last:
            blank = _swap(tiles, blank, (blank[0] + 1, blank[1]))
        while blank[1] < last:
            blank = _swap(tiles, blank, (blank[0], blank[1] + 1))

    logger.debug(
        "Shuffled %d×%d grid with %d steps, blank at %s",
        state.size, state.size, taken, blank,
    )
    return PuzzleState(
        grid=tiles, empty_row=blank[0], empty_col=blank[1], size=state.size
    )


def generate(
    size: int,
    steps: int = DEFAULT_SHUFFLE_STEPS,
    rng: RandomSource | None = None,
    *,
    home_blank: bool = False,
) -> PuzzleState:
    """Return a shuffled, solvable state that is not already solved.

    Raises ``ValueError`` when *steps* is too short to leave the solved
    grid (a single step is always undone by homing) or when
    ``MAX_GENERATE_ATTEMPTS`` walks in a row cancel out.
    """
    if rng is None:
        rng = random.Random()
    solved = create_solved(size)
    if steps <= 0:
        return solved
    if home_blank and steps < MIN_HOMED_STEPS:
        raise ValueError(
            f"Homing the blank needs at least {MIN_HOMED_STEPS} shuffle steps, got {steps}."
        )

    for _ in range(MAX_GENERATE_ATTEMPTS):
        state = shuffle(solved, steps, rng, home_blank=home_blank)
        if state != solved:
            return state
        logger.debug("Shuffle landed on the solved grid, retrying")
    raise ValueError(
        f"{MAX_GENERATE_ATTEMPTS} shuffles of {steps} steps all ended solved."
    )


# -- helpers --------------------------------------------------------------


def _neighbors(blank: tuple[int, int], size: int) -> list[tuple[int, int]]:
    br, bc = blank
    neighbors: list[tuple[int, int]] = []
    for dr, dc in _OFFSETS:
        nr, nc = br + dr, bc + dc
        if 0 <= nr < size and 0 <= nc < size:
            neighbors.append((nr, nc))
    return neighbors


def _swap(
    tiles: list[list[int]], blank: tuple[int, int], target: tuple[int, int]
) -> tuple[int, int]:
    br, bc = blank
    tr, tc = target
    tiles[br][bc], tiles[tr][tc] = tiles[tr][tc], tiles[br][bc]
    return target
