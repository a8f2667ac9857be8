"""Game session: slide counting, limits, and the clock."""

from __future__ import annotations

import random

import pytest

from backend.engine.gameplay import GamePlay
from backend.engine.gameplay.rules import is_solved
from backend.models.puzzle import Direction, PuzzleState
from backend.models.settings import Difficulty, PuzzleSettings
from doubles import FakeClock

ONE_AWAY = [1, 2, 3, 4, 5, 6, 7, 0, 8]


def _session(
    clock: FakeClock,
    *,
    time_limit: int | None = None,
    slide_limit: int | None = None,
) -> GamePlay:
    settings = PuzzleSettings(
        difficulty=Difficulty.EASY,
        time_limit=time_limit,
        slide_limit=slide_limit,
    )
    return GamePlay.from_state(
        settings, PuzzleState.from_flat(3, ONE_AWAY), clock=clock
    )


# -- setup --------------------------------------------------------------------


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_new_game_is_shuffled(difficulty: Difficulty, clock: FakeClock) -> None:
    settings = PuzzleSettings.create(difficulty)
    game = GamePlay(settings, rng=random.Random(1), steps=100, clock=clock)
    assert game.size == settings.size
    assert game.puzzle.size == settings.size
    assert not is_solved(game.puzzle)
    assert game.state.slides == 0
    assert not game.is_over


def test_home_blank_option(clock: FakeClock) -> None:
    settings = PuzzleSettings.create("4x4")
    game = GamePlay(
        settings, rng=random.Random(2), steps=100, home_blank=True, clock=clock
    )
    assert game.puzzle.blank_pos == (3, 3)


def test_from_state_size_mismatch(clock: FakeClock) -> None:
    settings = PuzzleSettings.create("4x4")
    with pytest.raises(ValueError):
        GamePlay.from_state(settings, PuzzleState.from_flat(3, ONE_AWAY), clock=clock)


# -- moves --------------------------------------------------------------------


def test_winning_move(clock: FakeClock) -> None:
    game = _session(clock)
    assert game.move_tile(2, 2)
    assert game.is_won
    assert game.is_over
    assert game.state.slides == 1


def test_move_by_direction(clock: FakeClock) -> None:
    game = _session(clock)
    assert game.move(Direction.LEFT)
    assert game.is_won


def test_illegal_moves_are_not_counted(clock: FakeClock) -> None:
    game = _session(clock)
    assert not game.move_tile(0, 0)
    assert not game.move_tile(2, 1)  # the blank
    assert not game.move(Direction.UP)  # nothing below the blank
    assert game.state.slides == 0
    assert game.puzzle == PuzzleState.from_flat(3, ONE_AWAY)


def test_no_moves_after_win(clock: FakeClock) -> None:
    game = _session(clock)
    game.move_tile(2, 2)
    assert not game.move_tile(2, 1)
    assert game.state.slides == 1


def test_clock_stops_on_win(clock: FakeClock) -> None:
    game = _session(clock)
    clock.advance(12)
    game.move_tile(2, 2)
    clock.advance(100)

    result = game.finish()
    assert result.won
    assert result.slides == 1
    assert result.time == pytest.approx(12)


def test_restart_resets_counters(clock: FakeClock) -> None:
    settings = PuzzleSettings.create("3x3")
    game = GamePlay(settings, rng=random.Random(4), steps=50, clock=clock)
    first = game.puzzle
    r, c = first.empty_row, first.empty_col
    target = (r - 1, c) if r > 0 else (r + 1, c)
    assert game.move_tile(*target)
    clock.advance(30)

    game.restart()
    assert game.state.slides == 0
    assert game.elapsed_time == 0
    assert not is_solved(game.puzzle)


# -- limits -------------------------------------------------------------------


def test_unlimited_game_reports_none(clock: FakeClock) -> None:
    game = _session(clock)
    assert game.remaining_time is None
    assert game.remaining_slides is None


def test_slide_limit(clock: FakeClock) -> None:
    game = _session(clock, slide_limit=2)
    assert game.remaining_slides == 2

    assert game.move_tile(1, 1)  # blank (2, 1) -> (1, 1)
    assert game.remaining_slides == 1
    assert game.move_tile(1, 0)  # blank (1, 1) -> (1, 0)

    assert game.slides_exhausted
    assert game.is_over
    assert game.remaining_slides == 0
    assert not game.move_tile(0, 0)
    assert game.state.slides == 2
    assert not game.finish().won


def test_winning_on_last_slide_is_a_win(clock: FakeClock) -> None:
    game = _session(clock, slide_limit=1)
    assert game.move_tile(2, 2)
    assert game.is_won
    assert not game.slides_exhausted


def test_time_limit(clock: FakeClock) -> None:
    game = _session(clock, time_limit=60)
    clock.advance(45)
    assert game.remaining_time == pytest.approx(15)
    assert not game.time_expired

    clock.advance(16)
    assert game.time_expired
    assert game.is_over
    assert game.remaining_time == 0.0
    assert game.elapsed_time == 60.0

    assert not game.move_tile(2, 2)
    result = game.finish()
    assert not result.won
    assert result.time == 60.0
    assert result.slides == 0


@pytest.mark.parametrize("steps", [0, -1])
def test_game_needs_shuffle_steps(steps: int, clock: FakeClock) -> None:
    with pytest.raises(ValueError):
        GamePlay(PuzzleSettings.create("3x3"), steps=steps, clock=clock)


@pytest.mark.timeout(3)
def test_homed_game_needs_two_steps(clock: FakeClock) -> None:
    with pytest.raises(ValueError):
        GamePlay(
            PuzzleSettings.create("3x3"), steps=1, home_blank=True, clock=clock
        )


def test_single_step_game_is_not_won(clock: FakeClock) -> None:
    game = GamePlay(
        PuzzleSettings.create("3x3"), rng=random.Random(0), steps=1, clock=clock
    )
    assert not game.is_over
