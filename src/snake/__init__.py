"""Snake: a grid game engine with a pygame front end."""

from .game import (
    SnakeEngine,
    GameState,
    Phase,
    Transition,
    InvalidDirection,
    place_food,
)

__all__ = [
    "SnakeEngine",
    "GameState",
    "Phase",
    "Transition",
    "InvalidDirection",
    "place_food",
]
