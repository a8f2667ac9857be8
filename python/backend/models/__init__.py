from backend.models.highscore import HighScoreEntry, HighScoreManager
from backend.models.puzzle import (
    Direction,
    InvalidSizeError,
    InvalidStateError,
    PuzzleState,
)
from backend.models.settings import Difficulty, PuzzleSettings

__all__ = [
    "Difficulty",
    "Direction",
    "HighScoreEntry",
    "HighScoreManager",
    "InvalidSizeError",
    "InvalidStateError",
    "PuzzleSettings",
    "PuzzleState",
]
