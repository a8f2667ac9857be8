from backend.engine.gameplay.game import GamePlay, GameResult
from backend.engine.gameplay.rules import (
    apply_move,
    can_move,
    is_solved,
    is_tile_correct,
    misplaced_count,
    movable_cells,
    move_in_direction,
)

__all__ = [
    "GamePlay",
    "GameResult",
    "apply_move",
    "can_move",
    "is_solved",
    "is_tile_correct",
    "misplaced_count",
    "movable_cells",
    "move_in_direction",
]
