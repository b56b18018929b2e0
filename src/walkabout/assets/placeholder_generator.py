"""Generate a placeholder character sheet."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image, ImageDraw

from walkabout.types import Direction

from .sprite_definitions import ROWS_PER_CLIP, VARIANT_DEFINITIONS, sheet_size

logger = logging.getLogger(__name__)


# Body colour per clip
CLIP_COLORS: dict[str, Tuple[int, int, int]] = {
    "stand": (100, 180, 180),  # Teal
    "walk": (200, 150, 100),  # Tan
}

OUTLINE = (40, 30, 20)
EYE = (40, 40, 45)

# Unit vector the character looks toward in each row, in screen space.
# Drawn so the row a direction selects is visually recognisable.
ROW_HEADINGS: dict[Direction, Tuple[float, float]] = {
    Direction.SOUTH: (0.0, 1.0),
    Direction.SOUTHWEST: (-0.7, 0.7),
    Direction.EAST: (1.0, 0.0),
    Direction.NORTHWEST: (-0.7, -0.7),
    Direction.NORTH: (0.0, -1.0),
    Direction.NORTHEAST: (0.7, -0.7),
    Direction.WEST: (-1.0, 0.0),
    Direction.SOUTHEAST: (0.7, 0.7),
}


class PlaceholderGenerator:
    """Draws a sheet that follows the clip layout, one cell per frame."""

    def __init__(self, definitions: Optional[dict[str, dict]] = None):
        """Initialize the generator.

        Args:
            definitions: Clip layout; defaults to the built-in layout.
        """
        self.definitions = definitions if definitions is not None else VARIANT_DEFINITIONS

    def generate_image(self) -> Image.Image:
        """Draw the whole sheet.

        Returns:
            An RGBA image sized to fit every clip.
        """
        img = Image.new("RGBA", sheet_size(self.definitions), (0, 0, 0, 0))
        draw = ImageDraw.Draw(img)

        for name, definition in self.definitions.items():
            color = CLIP_COLORS.get(name, (200, 200, 200))
            ox, oy = definition["origin"]
            w, h = definition["frame_size"]
            frame_count = definition["frame_count"]
            for row in range(ROWS_PER_CLIP):
                for frame in range(frame_count):
                    self._draw_frame(
                        draw,
                        ox + w * frame,
                        oy + h * row,
                        w,
                        h,
                        color,
                        Direction(row),
                        frame / frame_count,
                    )
        return img

    def generate(self, output_path: Path) -> Path:
        """Draw the sheet and save it as a PNG.

        Args:
            output_path: Destination file.

        Returns:
            The path written.
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        self.generate_image().save(output_path)
        logger.info("Wrote placeholder sheet %s", output_path)
        return output_path

    def _draw_frame(
        self,
        draw: "ImageDraw.ImageDraw",
        x: int,
        y: int,
        w: int,
        h: int,
        color: Tuple[int, int, int],
        direction: Direction,
        phase: float,
    ) -> None:
        """Draw one character frame.

        Args:
            draw: ImageDraw instance.
            x: Cell left.
            y: Cell top.
            w: Cell width.
            h: Cell height.
            color: Body colour.
            direction: Row direction, sets where the eyes look.
            phase: Position in the cycle, 0 to 1, sets the bob.
        """
        bob = int(round(math.sin(phase * 2 * math.pi) * (h // 16)))

        # Body
        margin = w // 6
        draw.ellipse(
            [x + margin, y + h // 3 + bob, x + w - margin, y + h - 2 + bob],
            fill=color,
            outline=OUTLINE,
        )
        # Head
        head = w // 2
        hx = x + w // 2 - head // 2
        hy = y + 1 + bob
        draw.ellipse([hx, hy, hx + head, hy + head], fill=color, outline=OUTLINE)

        # Eyes shifted toward the heading; hidden when facing away
        dx, dy = ROW_HEADINGS[direction]
        if dy < 0 and dx == 0:
            return
        cx = hx + head // 2 + int(dx * head // 4)
        cy = hy + head // 2 + int(dy * head // 6)
        spread = max(1, head // 5) if abs(dx) < 0.9 else 0
        for ex in {cx - spread, cx + spread}:
            draw.rectangle([ex, cy, ex + 1, cy + 1], fill=EYE)


def generate_placeholder_sheet(output_path: Path) -> Path:
    """Convenience function to write the default placeholder sheet.

    Args:
        output_path: Destination file.

    Returns:
        The path written.
    """
    return PlaceholderGenerator().generate(output_path)
