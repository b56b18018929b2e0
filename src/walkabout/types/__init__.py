"""Type definitions for Walkabout."""

from .entities import (
    ActorState,
    Direction,
    Position,
)
from .sprites import (
    Clip,
    Rect,
)

__all__ = [
    # Entities
    "ActorState",
    "Direction",
    "Position",
    # Sprites
    "Clip",
    "Rect",
]
