"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest
from PIL import Image

from walkabout.engine import Actor, AnimationVariant
from walkabout.renderer import SpriteSheetResource
from walkabout.types import ActorState, Clip, Position

# Test sheet geometry: 4x4 cells, 6 columns, 16 rows (stand rows 0-7, walk rows 8-15)
CELL = 4
COLUMNS = 6
ROWS = 16
WALK_ORIGIN_Y = CELL * 8


def cell_color(col: int, row: int) -> tuple[int, int, int, int]:
    """Solid colour of a sheet cell, unique per cell."""
    return (col * 40 + 10, row * 15 + 5, 200, 255)


class RecordingSurface:
    """Surface that records blits instead of drawing."""

    def __init__(self):
        self.blits: list[tuple] = []

    def blit(self, sheet, source, dest) -> None:
        self.blits.append((sheet, source, dest))


@pytest.fixture
def sheet_image() -> Image.Image:
    """Create a sheet where every cell has its own colour."""
    img = Image.new("RGBA", (CELL * COLUMNS, CELL * ROWS), (0, 0, 0, 0))
    for row in range(ROWS):
        for col in range(COLUMNS):
            x, y = col * CELL, row * CELL
            img.paste(cell_color(col, row), (x, y, x + CELL, y + CELL))
    return img


@pytest.fixture
def sheet(sheet_image) -> SpriteSheetResource:
    """Create a ready sprite sheet resource."""
    return SpriteSheetResource.from_image(sheet_image)


@pytest.fixture
def stand_variant(sheet) -> AnimationVariant:
    """Create a 4-frame stand variant."""
    clip = Clip(sheet=sheet, region_origin=(0, 0), frame_size=(CELL, CELL), frame_count=4)
    return AnimationVariant(kind=ActorState.STAND, clip=clip, world_position=Position(50.0, 60.0))


@pytest.fixture
def walk_variant(sheet) -> AnimationVariant:
    """Create a 6-frame walk variant."""
    clip = Clip(
        sheet=sheet,
        region_origin=(0, WALK_ORIGIN_Y),
        frame_size=(CELL, CELL),
        frame_count=6,
    )
    return AnimationVariant(kind=ActorState.WALK, clip=clip, interval=66)


@pytest.fixture
def actor(stand_variant, walk_variant) -> Actor:
    """Create an actor with stand and walk registered."""
    actor = Actor()
    actor.add(stand_variant)
    actor.add(walk_variant)
    return actor


@pytest.fixture
def recording_surface() -> RecordingSurface:
    """Create a surface that records blits."""
    return RecordingSurface()
