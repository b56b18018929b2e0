"""Sprite sheet loading."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

from PIL import Image

logger = logging.getLogger(__name__)


class SpriteSheetResource:
    """Decoded sprite sheet image shared by one or more clips.

    The image is published once decoding finishes and is never modified
    after that, so clips may read it without coordination.
    """

    def __init__(self, path: Optional[Path | str] = None):
        """Initialize the resource.

        Args:
            path: Location of the sheet image. Nothing is decoded until
                ``load`` or ``load_async`` is called.
        """
        self.path = Path(path) if path is not None else None
        self._image: Optional[Image.Image] = None

    @classmethod
    def from_image(cls, image: Image.Image) -> "SpriteSheetResource":
        """Wrap an already decoded image.

        Args:
            image: A Pillow image in any mode; it is converted to RGBA.

        Returns:
            A ready resource.
        """
        resource = cls()
        resource._image = image.convert("RGBA")
        return resource

    @property
    def is_ready(self) -> bool:
        """Check if the image has been decoded."""
        return self._image is not None

    @property
    def image(self) -> Optional[Image.Image]:
        """The decoded RGBA image, or None before loading completes."""
        return self._image

    @property
    def size(self) -> tuple[int, int]:
        """Sheet size in pixels, (0, 0) before loading completes."""
        if self._image is None:
            return (0, 0)
        return self._image.size

    def load(self) -> "SpriteSheetResource":
        """Decode the sheet from disk.

        Returns:
            This resource, for chaining.

        Raises:
            ValueError: If the resource has no path.
            OSError: If the file is missing or cannot be decoded.
        """
        if self._image is not None:
            return self
        if self.path is None:
            raise ValueError("Sprite sheet has no path to load from")

        with Image.open(self.path) as img:
            decoded = img.convert("RGBA")
        self._image = decoded
        logger.info("Loaded sprite sheet %s (%dx%d)", self.path, *decoded.size)
        return self

    async def load_async(self) -> "SpriteSheetResource":
        """Decode the sheet in a worker thread.

        Returns:
            This resource, for chaining.
        """
        await asyncio.to_thread(self.load)
        return self

    def __repr__(self) -> str:
        state = "ready" if self.is_ready else "pending"
        return f"SpriteSheetResource(path={self.path!s}, {state})"
