"""Renderer package for Walkabout."""

from __future__ import annotations

from .sprite_sheet import SpriteSheetResource
from .canvas import Canvas, Surface
from .headless import HeadlessRenderer
from .window import PygameWindow

__all__ = [
    "SpriteSheetResource",
    "Canvas",
    "Surface",
    "HeadlessRenderer",
    "PygameWindow",
]
