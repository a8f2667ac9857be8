"""Move rules and the completion check.

Every function here is pure: states go in, new states come out, and an
illegal move is reported as ``None`` rather than raised.
"""

from __future__ import annotations

from backend.engine.gamegenerator import create_solved
from backend.engine.tilemap import piece_goal_position
from backend.models.puzzle import Direction, PuzzleState

# The offset from the blank to the tile that slides in *direction*.
# UP    → tile at (br+1, bc) moves up
# DOWN  → tile at (br-1, bc) moves down
# LEFT  → tile at (br, bc+1) moves left
# RIGHT → tile at (br, bc-1) moves right
_DIRECTION_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


# -- moves ----------------------------------------------------------------


def can_move(state: PuzzleState, row: int, col: int) -> bool:
    """Return True if the tile at (row, col) is orthogonally next to the blank."""
    if not (0 <= row < state.size and 0 <= col < state.size):
        return False
    return abs(row - state.empty_row) + abs(col - state.empty_col) == 1


def apply_move(state: PuzzleState, row: int, col: int) -> PuzzleState | None:
    """Slide the tile at (row, col) into the blank.

    Returns the new state, or ``None`` if the tile is not adjacent to the
    blank. *state* itself is never modified.
    """
    if not can_move(state, row, col):
        return None

    tiles = state.rows()
    tiles[state.empty_row][state.empty_col] = tiles[row][col]
    tiles[row][col] = 0
    return PuzzleState(grid=tiles, empty_row=row, empty_col=col, size=state.size)


def move_in_direction(state: PuzzleState, direction: Direction) -> PuzzleState | None:
    """Slide the tile that can travel in *direction* into the blank.

    E.g. ``Direction.UP`` moves the tile **below** the blank upward.
    """
    dr, dc = _DIRECTION_OFFSETS[Direction(direction)]
    return apply_move(state, state.empty_row + dr, state.empty_col + dc)


def movable_cells(state: PuzzleState) -> list[tuple[int, int]]:
    """Return the cells whose tile may slide, in up/down/left/right order."""
    br, bc = state.blank_pos
    candidates = [(br - 1, bc), (br + 1, bc), (br, bc - 1), (br, bc + 1)]
    return [(r, c) for r, c in candidates if can_move(state, r, c)]


# -- completion -----------------------------------------------------------


def is_solved(state: PuzzleState) -> bool:
    """Check every cell against the solved layout for the state's size."""
    return state.grid == create_solved(state.size).grid


def is_tile_correct(state: PuzzleState, row: int, col: int) -> bool:
    """Check if the tile at (row, col) sits on its goal cell."""
    return piece_goal_position(state.tile(row, col), state.size) == (row, col)


def misplaced_count(state: PuzzleState) -> int:
    return sum(
        1
        for r in range(state.size)
        for c in range(state.size)
        if state.tile(r, c) != 0 and not is_tile_correct(state, r, c)
    )
