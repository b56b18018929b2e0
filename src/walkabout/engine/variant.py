"""Animation variants: one playable clip with its own frame clock."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from walkabout.constants import DEFAULT_FRAME_INTERVAL_MS, DIAGONAL_STEP, WALK_SPEED
from walkabout.types import ActorState, Clip, Direction, Position

if TYPE_CHECKING:
    from walkabout.renderer.canvas import Surface
    from walkabout.types import Rect


# Per-tick walk displacement (dx, dy) at speed 1. The diagonal signs follow
# the sheet's row naming, not compass geometry.
WALK_DISPLACEMENT: dict[Direction, tuple[float, float]] = {
    Direction.SOUTH: (0.0, 2.0),
    Direction.NORTH: (0.0, -2.0),
    Direction.EAST: (2.0, 0.0),
    Direction.WEST: (-2.0, 0.0),
    Direction.NORTHEAST: (-DIAGONAL_STEP, -DIAGONAL_STEP),
    Direction.NORTHWEST: (DIAGONAL_STEP, -DIAGONAL_STEP),
    Direction.SOUTHEAST: (-DIAGONAL_STEP, DIAGONAL_STEP),
    Direction.SOUTHWEST: (DIAGONAL_STEP, DIAGONAL_STEP),
}


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass
class AnimationVariant:
    """A single playable animation bound to a sheet clip.

    ``kind`` selects the movement policy; the clip is fixed at
    construction while frame, timer, facing and position change every tick.
    """

    kind: ActorState
    clip: Clip
    interval: float = DEFAULT_FRAME_INTERVAL_MS
    frame: int = 0
    timer: float = 0.0
    facing: Direction = Direction.SOUTH
    world_position: Position = field(default_factory=lambda: Position(0.0, 0.0))
    speed: float = WALK_SPEED

    def __post_init__(self):
        if self.kind is ActorState.NONE:
            raise ValueError("A variant cannot be bound to the NONE state")
        if not 0 <= self.frame < self.clip.frame_count:
            raise ValueError(
                f"frame {self.frame} out of range for {self.clip.frame_count} frames"
            )

    @property
    def frame_count(self) -> int:
        return self.clip.frame_count

    def advance_frame(self, delta: float) -> None:
        """Advance the frame clock.

        The timer is checked before it accumulates, and only a timer
        strictly greater than the interval moves to the next frame.

        Args:
            delta: Elapsed time in milliseconds.
        """
        if self.timer > self.interval:
            self.timer = 0.0
            self.frame = (self.frame + 1) % self.clip.frame_count
        else:
            self.timer += delta

    def apply_movement(self) -> None:
        """Move the variant by one tick according to its kind."""
        if self.kind is ActorState.WALK:
            dx, dy = WALK_DISPLACEMENT[self.facing]
            self.world_position.x += dx * self.speed
            self.world_position.y += dy * self.speed
        # STAND holds position

    def update(self, delta: float) -> Position:
        """Advance one tick.

        Args:
            delta: Elapsed time in milliseconds.

        Returns:
            A copy of the world position after moving.
        """
        self.advance_frame(delta)
        self.apply_movement()
        return self.world_position.copy()

    def source_rect(self) -> Rect:
        """Sheet region for the current frame (column) and facing (row)."""
        return self.clip.frame_region(self.frame, int(self.facing))

    def dest_rect(self) -> Rect:
        """Canvas region at the world position, rounded to whole pixels."""
        return (
            round_half_away(self.world_position.x),
            round_half_away(self.world_position.y),
            self.clip.width,
            self.clip.height,
        )

    def draw(self, surface: Surface) -> None:
        """Blit the current frame onto ``surface``."""
        surface.blit(self.clip.sheet, self.source_rect(), self.dest_rect())
