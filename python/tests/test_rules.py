"""Move legality, move application, and the completion check."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import create_solved, shuffle
from backend.engine.gameplay.rules import (
    apply_move,
    can_move,
    is_solved,
    is_tile_correct,
    misplaced_count,
    movable_cells,
    move_in_direction,
)
from backend.models.puzzle import Direction, PuzzleState


@pytest.fixture
def solved3() -> PuzzleState:
    return create_solved(3)


# -- concrete scenarios -------------------------------------------------------


def test_adjacent_move(solved3: PuzzleState) -> None:
    state = apply_move(solved3, 2, 1)
    assert state is not None
    assert state.grid == ((1, 2, 3), (4, 5, 6), (7, 0, 8))
    assert (state.empty_row, state.empty_col) == (2, 1)


def test_distant_move_rejected(solved3: PuzzleState) -> None:
    assert apply_move(solved3, 0, 0) is None


def test_completion_check(solved3: PuzzleState) -> None:
    moved = apply_move(solved3, 2, 1)
    assert is_solved(solved3)
    assert moved is not None and not is_solved(moved)


def test_move_then_undo_is_solved(solved3: PuzzleState) -> None:
    moved = apply_move(solved3, 1, 2)
    assert moved is not None
    undone = apply_move(moved, 2, 2)
    assert undone is not None
    assert is_solved(undone)
    assert undone == solved3


# -- can_move -----------------------------------------------------------------


@pytest.mark.parametrize(
    "row,col,expected",
    [
        (0, 1, True),   # up
        (2, 1, True),   # down
        (1, 0, True),   # left
        (1, 2, True),   # right
        (0, 0, False),  # diagonal
        (2, 2, False),  # diagonal
        (1, 1, False),  # the blank itself
        (1, 3, False),  # off the grid
        (-1, 1, False),
    ],
)
def test_can_move_orthogonal_only(row: int, col: int, expected: bool) -> None:
    state = PuzzleState.from_flat(3, [1, 2, 3, 4, 0, 5, 6, 7, 8])
    assert can_move(state, row, col) is expected


def test_edge_blank_cannot_reach_outside() -> None:
    state = PuzzleState.from_flat(3, [1, 2, 3, 0, 4, 5, 6, 7, 8])
    assert not can_move(state, 1, -1)
    assert movable_cells(state) == [(0, 0), (2, 0), (1, 1)]


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_apply_move_agrees_with_can_move(seed: int) -> None:
    state = shuffle(create_solved(4), 300, random.Random(seed))
    for r in range(-1, 5):
        for c in range(-1, 5):
            result = apply_move(state, r, c)
            assert (result is not None) is can_move(state, r, c)
            if result is None:
                continue

            assert result.tile(state.empty_row, state.empty_col) == state.tile(r, c)
            assert result.tile(r, c) == 0
            changed = [
                (i, j)
                for i in range(4)
                for j in range(4)
                if result.tile(i, j) != state.tile(i, j)
            ]
            assert sorted(changed) == sorted([(r, c), state.blank_pos])


def test_apply_move_does_not_touch_input(solved3: PuzzleState) -> None:
    snapshot = solved3.flat()
    apply_move(solved3, 2, 1)
    assert solved3.flat() == snapshot
    assert solved3.blank_pos == (2, 2)


# -- directions ---------------------------------------------------------------


def test_move_in_direction(solved3: PuzzleState) -> None:
    # Blank bottom-right: the tile above can come down, the one to the left
    # can slide right.
    down = move_in_direction(solved3, Direction.DOWN)
    assert down is not None and down.blank_pos == (1, 2)

    right = move_in_direction(solved3, Direction.RIGHT)
    assert right is not None and right.blank_pos == (2, 1)

    assert move_in_direction(solved3, Direction.UP) is None
    assert move_in_direction(solved3, Direction.LEFT) is None


def test_move_in_direction_accepts_value(solved3: PuzzleState) -> None:
    assert move_in_direction(solved3, "down") == move_in_direction(
        solved3, Direction.DOWN
    )


def test_movable_cells_in_corner(solved3: PuzzleState) -> None:
    assert movable_cells(solved3) == [(1, 2), (2, 1)]


# -- tile correctness ---------------------------------------------------------


def test_tile_correctness() -> None:
    state = PuzzleState.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert is_tile_correct(state, 0, 0)
    assert not is_tile_correct(state, 2, 2)
    assert not is_tile_correct(state, 2, 1)  # blank belongs bottom-right
    assert misplaced_count(state) == 1


def test_solved_has_nothing_misplaced(solved3: PuzzleState) -> None:
    assert misplaced_count(solved3) == 0


def test_is_solved_checks_every_cell() -> None:
    # Blank in its home cell but two tiles swapped.
    state = PuzzleState.from_flat(3, [2, 1, 3, 4, 5, 6, 7, 8, 0])
    assert state.blank_pos == (2, 2)
    assert not is_solved(state)
