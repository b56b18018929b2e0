"""Sprite sheet clip types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from walkabout.renderer.sprite_sheet import SpriteSheetResource

# x, y, w, h in pixels
Rect = tuple[int, int, int, int]


@dataclass(frozen=True)
class Clip:
    """Immutable description of one frame strip on a sprite sheet.

    The strip holds ``frame_count`` columns starting at ``region_origin``,
    with one row per facing direction below it.
    """

    sheet: SpriteSheetResource
    region_origin: tuple[int, int]
    frame_size: tuple[int, int]
    frame_count: int

    def __post_init__(self):
        if self.frame_count < 1:
            raise ValueError(f"frame_count must be >= 1, got {self.frame_count}")
        width, height = self.frame_size
        if width <= 0 or height <= 0:
            raise ValueError(f"frame_size must be positive, got {self.frame_size}")

    @property
    def width(self) -> int:
        return self.frame_size[0]

    @property
    def height(self) -> int:
        return self.frame_size[1]

    def frame_region(self, frame: int, row: int) -> Rect:
        """Region of the sheet holding ``frame`` for the given row."""
        x, y = self.region_origin
        return (x + self.width * frame, y + self.height * row, self.width, self.height)
