"""Asset management for Walkabout."""

from __future__ import annotations

from .sprite_definitions import (
    VARIANT_DEFINITIONS,
    ROWS_PER_CLIP,
    create_all_variants,
    create_variant,
    get_variant_definition,
    sheet_size,
)
from .placeholder_generator import PlaceholderGenerator, generate_placeholder_sheet

__all__ = [
    "VARIANT_DEFINITIONS",
    "ROWS_PER_CLIP",
    "create_all_variants",
    "create_variant",
    "get_variant_definition",
    "sheet_size",
    "PlaceholderGenerator",
    "generate_placeholder_sheet",
]
