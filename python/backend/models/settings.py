"""Game settings chosen on the start screen."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Difficulty(StrEnum):
    EASY = "3x3"
    MEDIUM = "4x4"
    HARD = "5x5"
    EXPERT = "6x6"


GRID_SIZES: dict[Difficulty, int] = {
    Difficulty.EASY: 3,
    Difficulty.MEDIUM: 4,
    Difficulty.HARD: 5,
    Difficulty.EXPERT: 6,
}

# Seconds allowed when the time limit is switched on.
DEFAULT_TIME_LIMITS: dict[Difficulty, int] = {
    Difficulty.EASY: 180,
    Difficulty.MEDIUM: 300,
    Difficulty.HARD: 600,
    Difficulty.EXPERT: 900,
}

DEFAULT_IMAGE_URL = (
    "https://images.unsplash.com/photo-1506905925346-21bda4d32df4"
    "?w=800&h=800&fit=crop"
)


def to_difficulty(value: Difficulty | str) -> Difficulty:
    """Look *value* up among the known difficulties.

    Raises ``ValueError`` for anything that is not one of the listed labels.
    """
    try:
        return Difficulty(value)
    except ValueError:
        labels = ", ".join(d.value for d in Difficulty)
        raise ValueError(
            f"Unknown difficulty {value!r} (expected one of: {labels})."
        ) from None


def grid_size(difficulty: Difficulty | str) -> int:
    return GRID_SIZES[to_difficulty(difficulty)]


@dataclass(frozen=True)
class PuzzleSettings:
    """Difficulty and limits for one game.

    ``time_limit`` is in seconds and ``slide_limit`` counts moves; ``None``
    means unlimited. ``image_url`` is handed to the renderer untouched.
    """

    difficulty: Difficulty
    time_limit: int | None = None
    slide_limit: int | None = None
    image_url: str = DEFAULT_IMAGE_URL

    def __post_init__(self) -> None:
        object.__setattr__(self, "difficulty", to_difficulty(self.difficulty))
        for name in ("time_limit", "slide_limit"):
            limit = getattr(self, name)
            if limit is not None and limit <= 0:
                raise ValueError(f"{name} must be positive or None, got {limit}.")

    @classmethod
    def create(
        cls,
        difficulty: Difficulty | str,
        *,
        timed: bool = True,
        slide_limit: int | None = None,
        image_url: str = DEFAULT_IMAGE_URL,
    ) -> PuzzleSettings:
        """Build settings using the default time limit for *difficulty*."""
        difficulty = to_difficulty(difficulty)
        return cls(
            difficulty=difficulty,
            time_limit=DEFAULT_TIME_LIMITS[difficulty] if timed else None,
            slide_limit=slide_limit,
            image_url=image_url,
        )

    @property
    def size(self) -> int:
        return GRID_SIZES[self.difficulty]
