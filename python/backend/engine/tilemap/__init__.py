from backend.engine.tilemap.mapper import (
    background_style,
    export_layout,
    image_offset,
    piece_goal_position,
)

__all__ = [
    "background_style",
    "export_layout",
    "image_offset",
    "piece_goal_position",
]
