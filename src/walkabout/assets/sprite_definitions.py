"""Sheet layout for the default character."""

from __future__ import annotations

from typing import Optional

from walkabout.constants import (
    DEFAULT_FRAME_HEIGHT,
    DEFAULT_FRAME_INTERVAL_MS,
    DEFAULT_FRAME_WIDTH,
)
from walkabout.engine.variant import AnimationVariant
from walkabout.renderer.sprite_sheet import SpriteSheetResource
from walkabout.types import ActorState, Clip, Direction

# Rows per clip: one per facing direction
ROWS_PER_CLIP = len(Direction)

# Clip layout on the default sheet; each clip is a strip of frames with
# one row per direction, stacked vertically.
VARIANT_DEFINITIONS: dict[str, dict] = {
    "stand": {
        "origin": (0, 0),
        "frame_size": (DEFAULT_FRAME_WIDTH, DEFAULT_FRAME_HEIGHT),
        "frame_count": 4,
        "interval": DEFAULT_FRAME_INTERVAL_MS * 3,
    },
    "walk": {
        "origin": (0, DEFAULT_FRAME_HEIGHT * ROWS_PER_CLIP),
        "frame_size": (DEFAULT_FRAME_WIDTH, DEFAULT_FRAME_HEIGHT),
        "frame_count": 6,
        "interval": DEFAULT_FRAME_INTERVAL_MS,
    },
}


def get_variant_definition(name: str) -> Optional[dict]:
    """Get a clip definition by state name.

    Args:
        name: State name, e.g. ``"walk"``.

    Returns:
        The definition dict or None if not found.
    """
    return VARIANT_DEFINITIONS.get(name.lower())


def sheet_size(definitions: dict[str, dict]) -> tuple[int, int]:
    """Smallest sheet that fits every clip in ``definitions``."""
    width = height = 0
    for definition in definitions.values():
        x, y = definition["origin"]
        w, h = definition["frame_size"]
        width = max(width, x + w * definition["frame_count"])
        height = max(height, y + h * ROWS_PER_CLIP)
    return (width, height)


def create_variant(
    name: str,
    sheet: SpriteSheetResource,
    definition: Optional[dict] = None,
) -> AnimationVariant:
    """Create a variant from a definition.

    Args:
        name: State name the variant plays for.
        sheet: Sheet the clip reads from.
        definition: Clip definition; looked up by name when omitted.

    Returns:
        A fresh AnimationVariant.

    Raises:
        ValueError: If the state or definition is unknown.
    """
    kind = ActorState.from_name(name)
    if definition is None:
        definition = get_variant_definition(name)
    if definition is None:
        raise ValueError(f"No clip definition for state: {name}")

    clip = Clip(
        sheet=sheet,
        region_origin=tuple(definition["origin"]),
        frame_size=tuple(definition["frame_size"]),
        frame_count=definition["frame_count"],
    )
    return AnimationVariant(
        kind=kind,
        clip=clip,
        interval=definition.get("interval", DEFAULT_FRAME_INTERVAL_MS),
    )


def create_all_variants(
    sheet: SpriteSheetResource,
    definitions: Optional[dict[str, dict]] = None,
) -> list[AnimationVariant]:
    """Create one variant per definition, all sharing ``sheet``."""
    definitions = definitions if definitions is not None else VARIANT_DEFINITIONS
    return [create_variant(name, sheet, d) for name, d in definitions.items()]
