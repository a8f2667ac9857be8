"""Maps tiles to the part of the picture they show.

Rendering contract: every tile uses the whole picture as its background,
scaled to ``size * 100%`` in both axes, and shifts it with a
``background-position`` percentage. A percentage position is a fraction
of the remaining travel (picture size minus tile size), so the last
column sits at 100% and each step is ``100 / (size - 1)``.
"""

from __future__ import annotations

from typing import Any

from backend.models.puzzle import PuzzleState


def piece_goal_position(tile_value: int, size: int) -> tuple[int, int]:
    """Return the (row, col) where *tile_value* belongs in the solved grid."""
    if not 0 <= tile_value < size * size:
        raise ValueError(
            f"Tile {tile_value} does not exist on a {size}×{size} grid."
        )
    if tile_value == 0:
        return size - 1, size - 1
    return divmod(tile_value - 1, size)


def image_offset(row: int, col: int, size: int) -> tuple[float, float]:
    """Return the (x, y) background position, in percent, for a goal cell."""
    if size <= 1:
        return 0.0, 0.0
    step = 100 / (size - 1)
    return col * step, row * step


def background_style(tile_value: int, size: int) -> dict[str, str]:
    """Return the CSS background properties that paint *tile_value*."""
    row, col = piece_goal_position(tile_value, size)
    x, y = image_offset(row, col, size)
    return {
        "background-size": f"{size * 100}%",
        "background-position-x": f"{x:g}%",
        "background-position-y": f"{y:g}%",
    }


def export_layout(state: PuzzleState, image_url: str) -> dict[str, Any]:
    """Describe the current grid for an external renderer.

    The blank cell carries no style because it is drawn empty.
    """
    cells: list[dict[str, Any]] = []
    for r, row in enumerate(state.grid):
        for c, value in enumerate(row):
            goal_row, goal_col = piece_goal_position(value, state.size)
            cells.append(
                {
                    "row": r,
                    "col": c,
                    "tile": value,
                    "goal": [goal_row, goal_col],
                    "style": background_style(value, state.size) if value else None,
                }
            )
    return {
        "size": state.size,
        "image_url": image_url,
        "blank": [state.empty_row, state.empty_col],
        "cells": cells,
    }
