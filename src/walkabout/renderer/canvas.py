"""Pillow-backed drawing surface."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

import numpy as np
from PIL import Image

from walkabout.constants import (
    DEFAULT_BG_COLOR,
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
)

if TYPE_CHECKING:
    from walkabout.renderer.sprite_sheet import SpriteSheetResource
    from walkabout.types import Rect

logger = logging.getLogger(__name__)


class Surface(Protocol):
    """Anything a variant can draw onto."""

    def blit(self, sheet: SpriteSheetResource, source: Rect, dest: Rect) -> None:
        ...


class Canvas:
    """Fixed-size RGBA canvas that sprites are blitted onto."""

    def __init__(
        self,
        width: int = DEFAULT_CANVAS_WIDTH,
        height: int = DEFAULT_CANVAS_HEIGHT,
        background: tuple[int, int, int, int] = DEFAULT_BG_COLOR,
    ):
        """Initialize the canvas.

        Args:
            width: Canvas width in pixels.
            height: Canvas height in pixels.
            background: RGBA colour used by ``clear``.
        """
        self.width = width
        self.height = height
        self.background = background
        self.frame = Image.new("RGBA", (width, height), background)
        self.blit_count = 0

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def clear(self) -> None:
        """Reset the whole canvas to the background colour."""
        self.frame.paste(self.background, (0, 0, self.width, self.height))
        self.blit_count = 0

    def blit(self, sheet: SpriteSheetResource, source: Rect, dest: Rect) -> None:
        """Copy a sheet region onto the canvas.

        Source and destination have the same size; no scaling is done.
        Sheets that are not decoded yet are skipped.

        Args:
            sheet: The sprite sheet to read from.
            source: (x, y, w, h) region of the sheet.
            dest: (x, y, w, h) region of the canvas.
        """
        if not sheet.is_ready:
            logger.debug("Skipping blit from unready sheet %r", sheet)
            return

        sx, sy, w, h = source
        dx, dy = dest[0], dest[1]
        tile = sheet.image.crop((sx, sy, sx + w, sy + h))

        # alpha_composite needs a destination origin inside the canvas, so
        # trim the tile when it hangs off the top or left edge.
        if dx < 0 or dy < 0:
            cut_x, cut_y = max(0, -dx), max(0, -dy)
            if cut_x >= w or cut_y >= h:
                return
            tile = tile.crop((cut_x, cut_y, w, h))
            dx, dy = dx + cut_x, dy + cut_y
        if dx >= self.width or dy >= self.height:
            return

        self.frame.alpha_composite(tile, dest=(dx, dy))
        self.blit_count += 1

    def to_array(self) -> np.ndarray:
        """Return the canvas pixels as an (height, width, 4) uint8 array."""
        return np.asarray(self.frame)

    def to_bytes(self) -> bytes:
        """Raw RGBA bytes, row-major."""
        return self.frame.tobytes()

    def save(self, path: Path | str) -> Path:
        """Save the canvas as a PNG.

        Returns:
            The path written.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.frame.save(path, format="PNG")
        return path
