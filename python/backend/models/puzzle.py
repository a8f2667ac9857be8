"""Puzzle state model for the sliding picture puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

Grid = tuple[tuple[int, ...], ...]


class InvalidSizeError(ValueError):
    """Raised when a grid side length is below the playable minimum."""


class InvalidStateError(ValueError):
    """Raised when a grid and its cached blank position disagree."""


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


MIN_SIZE = 2


def check_size(size: int) -> None:
    """Raise :class:`InvalidSizeError` unless *size* is a playable side length."""
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidSizeError(f"Grid size must be an int, got {size!r}.")
    if size < MIN_SIZE:
        raise InvalidSizeError(
            f"Grid size must be at least {MIN_SIZE}, got {size}."
        )


@dataclass(frozen=True)
class PuzzleState:
    """Immutable snapshot of a puzzle grid.

    ``grid`` is a tuple of row tuples. 0 represents the blank, and
    ``empty_row`` / ``empty_col`` always point at it.
    """

    grid: Grid
    empty_row: int
    empty_col: int
    size: int

    def __post_init__(self) -> None:
        # Accept any nested sequence but store tuples only.
        object.__setattr__(self, "grid", tuple(tuple(row) for row in self.grid))
        self._validate()

    def _validate(self) -> None:
        n = self.size
        if len(self.grid) != n or any(len(row) != n for row in self.grid):
            raise InvalidStateError(f"Grid is not {n}×{n}.")
        if sorted(self.flat()) != list(range(n * n)):
            raise InvalidStateError(
                f"Grid must hold each of 0..{n * n - 1} exactly once."
            )
        if not (0 <= self.empty_row < n and 0 <= self.empty_col < n):
            raise InvalidStateError(
                f"Blank position ({self.empty_row}, {self.empty_col}) is off the grid."
            )
        if self.grid[self.empty_row][self.empty_col] != 0:
            raise InvalidStateError(
                f"Cell ({self.empty_row}, {self.empty_col}) is not the blank."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> PuzzleState:
        """Create a state from a flat row-major tile list.

        Example::

            PuzzleState.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        check_size(size)
        if len(flat) != size * size:
            raise InvalidStateError(
                f"Expected {size * size} tiles for a {size}×{size} grid, "
                f"got {len(flat)}."
            )
        if 0 not in flat:
            raise InvalidStateError("Grid has no blank tile.")
        blank_row, blank_col = divmod(list(flat).index(0), size)
        grid = tuple(
            tuple(flat[r * size : (r + 1) * size]) for r in range(size)
        )
        return cls(grid=grid, empty_row=blank_row, empty_col=blank_col, size=size)

    # -- queries --------------------------------------------------------------

    @property
    def blank_pos(self) -> tuple[int, int]:
        return self.empty_row, self.empty_col

    def tile(self, row: int, col: int) -> int:
        return self.grid[row][col]

    def flat(self) -> tuple[int, ...]:
        return tuple(v for row in self.grid for v in row)

    def rows(self) -> list[list[int]]:
        """Return a mutable copy of the grid."""
        return [list(row) for row in self.grid]
