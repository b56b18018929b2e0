"""Headless renderer for testing and frame capture."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Optional

from walkabout.constants import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH

from .canvas import Canvas

if TYPE_CHECKING:
    from walkabout.engine.scene import Scene


class HeadlessRenderer:
    """Renders a scene into an off-screen canvas.

    Used for tests, scripted demos and saving frames.
    """

    def __init__(
        self,
        width: int = DEFAULT_CANVAS_WIDTH,
        height: int = DEFAULT_CANVAS_HEIGHT,
        canvas: Optional[Canvas] = None,
    ):
        """Initialize the headless renderer.

        Args:
            width: Canvas width in pixels.
            height: Canvas height in pixels.
            canvas: Existing canvas to draw into; overrides width/height.
        """
        self.canvas = canvas or Canvas(width=width, height=height)
        self.width, self.height = self.canvas.size
        self.last_render_time: float = 0.0
        self.rendered_actor: dict = {}
        self._render_count = 0

    @property
    def render_count(self) -> int:
        return self._render_count

    def render_frame(self, scene: Scene) -> None:
        """Render a complete frame.

        Args:
            scene: The scene to render.
        """
        start_time = time.perf_counter()

        scene.draw(self.canvas)

        variant = scene.actor.current_variant
        self.rendered_actor = {
            "state": scene.actor.state,
            "facing": variant.facing,
            "frame": variant.frame,
            "source": variant.source_rect(),
            "dest": variant.dest_rect(),
        }

        # Track timing
        self.last_render_time = time.perf_counter() - start_time
        self._render_count += 1

    def present(self) -> None:
        """Nothing to show; frames stay in the canvas."""

    def close(self) -> None:
        """Nothing to release."""
