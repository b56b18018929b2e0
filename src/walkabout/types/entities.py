"""Actor-related value types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Direction(IntEnum):
    """Facing direction of a sprite.

    Values are sheet row indices, not compass order: row 0 of every
    clip is South, row 1 Southwest, and so on.
    """

    SOUTH = 0
    SOUTHWEST = 1
    EAST = 2
    NORTHWEST = 3
    NORTH = 4
    NORTHEAST = 5
    WEST = 6
    SOUTHEAST = 7

    @property
    def label(self) -> str:
        """Human readable name, e.g. ``Northeast``."""
        return self.name.capitalize()


class ActorState(Enum):
    """States an actor can be in.

    NONE is a pre-initialization sentinel and never has a variant.
    """

    NONE = 0
    STAND = 1
    WALK = 2

    @property
    def label(self) -> str:
        """Human readable name, e.g. ``Walk``."""
        return self.name.capitalize()

    @classmethod
    def from_name(cls, name: str) -> "ActorState":
        """Look up a state by case-insensitive name.

        Raises:
            ValueError: If no state has that name.
        """
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown actor state: {name}") from None


@dataclass
class Position:
    """2D position in the world."""

    x: float
    y: float

    def copy(self) -> "Position":
        """Create a copy of this position."""
        return Position(self.x, self.y)

    def as_tuple(self) -> tuple[float, float]:
        """Return (x, y)."""
        return (self.x, self.y)
