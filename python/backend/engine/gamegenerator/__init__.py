from backend.engine.gamegenerator.generator import (
    DEFAULT_SHUFFLE_STEPS,
    MAX_GENERATE_ATTEMPTS,
    MIN_HOMED_STEPS,
    RandomSource,
    create_solved,
    generate,
    shuffle,
)

__all__ = [
    "DEFAULT_SHUFFLE_STEPS",
    "MAX_GENERATE_ATTEMPTS",
    "MIN_HOMED_STEPS",
    "RandomSource",
    "create_solved",
    "generate",
    "shuffle",
]
