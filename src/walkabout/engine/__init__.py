"""Animation engine for Walkabout."""

from __future__ import annotations

from .variant import AnimationVariant, WALK_DISPLACEMENT
from .actor import Actor, MissingVariantError, resolve_direction
from .input import KeyboardSampler, DEFAULT_KEY_MAP
from .scene import Scene

__all__ = [
    "AnimationVariant",
    "WALK_DISPLACEMENT",
    "Actor",
    "MissingVariantError",
    "resolve_direction",
    "KeyboardSampler",
    "DEFAULT_KEY_MAP",
    "Scene",
]
