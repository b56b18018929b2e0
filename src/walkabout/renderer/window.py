"""pygame window that shows the canvas and collects keyboard input."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Optional

import pygame

from walkabout.constants import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_WINDOW_TITLE,
)

from .canvas import Canvas

if TYPE_CHECKING:
    from walkabout.engine.input import KeyboardSampler
    from walkabout.engine.scene import Scene

logger = logging.getLogger(__name__)


class PygameWindow:
    """Presents the canvas in a pygame window.

    The window also owns the event pump: key events go to the sampler,
    closing the window or pressing Escape requests a quit.
    """

    def __init__(
        self,
        sampler: KeyboardSampler,
        width: int = DEFAULT_CANVAS_WIDTH,
        height: int = DEFAULT_CANVAS_HEIGHT,
        title: str = DEFAULT_WINDOW_TITLE,
        canvas: Optional[Canvas] = None,
    ):
        """Initialize the window. Nothing is opened until ``open``.

        Args:
            sampler: Receives key events.
            width: Window width in pixels.
            height: Window height in pixels.
            title: Window caption.
            canvas: Existing canvas to present; overrides width/height.
        """
        self.sampler = sampler
        self.canvas = canvas or Canvas(width=width, height=height)
        self.width, self.height = self.canvas.size
        self.title = title
        self.quit_requested = False
        self.last_render_time: float = 0.0
        self._screen: Optional[pygame.Surface] = None

    @property
    def is_open(self) -> bool:
        return self._screen is not None

    def open(self) -> None:
        """Create the display surface."""
        if self._screen is not None:
            return
        pygame.init()
        self._screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(self.title)
        logger.info("Opened %dx%d window", self.width, self.height)

    def pump_events(self) -> None:
        """Drain pending pygame events into the sampler."""
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event) -> None:
        """Handle one pygame event."""
        if event.type == pygame.QUIT:
            self.quit_requested = True
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.quit_requested = True
        elif event.type == pygame.WINDOWFOCUSLOST:
            # Key-ups are not delivered while unfocused
            self.sampler.clear()
        else:
            self.sampler.handle_event(event)

    def render_frame(self, scene: Scene) -> None:
        """Draw the scene into the canvas and show it."""
        start_time = time.perf_counter()
        scene.draw(self.canvas)
        self.present()
        self.last_render_time = time.perf_counter() - start_time

    def present(self) -> None:
        """Copy the canvas to the window."""
        if self._screen is None:
            return
        surface = pygame.image.frombuffer(self.canvas.to_bytes(), self.canvas.size, "RGBA")
        self._screen.fill((0, 0, 0))
        self._screen.blit(surface, (0, 0))
        pygame.display.flip()

    def close(self) -> None:
        """Close the window and shut pygame down."""
        if self._screen is None:
            return
        pygame.display.quit()
        pygame.quit()
        self._screen = None
        logger.info("Window closed")
