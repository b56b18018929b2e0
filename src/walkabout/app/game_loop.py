"""Game loop for coordinating the scene, input and renderer."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Iterable, Optional, Protocol, Union

if TYPE_CHECKING:
    from walkabout.engine.input import KeyboardSampler
    from walkabout.engine.scene import Scene
    from walkabout.renderer.headless import HeadlessRenderer
    from walkabout.renderer.window import PygameWindow

logger = logging.getLogger(__name__)


class Clock(Protocol):
    def __call__(self) -> float:
        ...


def monotonic_ms() -> float:
    """Monotonic timestamp in milliseconds."""
    return time.perf_counter() * 1000.0


class GameLoop:
    """Main loop: one update and one draw per tick."""

    def __init__(
        self,
        scene: Scene,
        renderer: Union[HeadlessRenderer, PygameWindow],
        sampler: Optional[KeyboardSampler] = None,
        target_fps: int = 60,
        clock: Clock = monotonic_ms,
    ):
        """Initialize the game loop.

        Args:
            scene: The scene to drive.
            renderer: Draws and presents frames.
            sampler: Source of held keys; none means no input.
            target_fps: Target frames per second.
            clock: Monotonic millisecond clock.
        """
        self.scene = scene
        self.renderer = renderer
        self.sampler = sampler
        self.target_fps = target_fps
        self.target_frame_time = 1.0 / target_fps
        self.clock = clock

        self._running = False
        self._frame_count = 0
        self._fps = 0.0
        self._fps_frames = 0
        self._fps_update_time = 0.0

    @property
    def held_keys(self) -> frozenset[str]:
        if self.sampler is None:
            return frozenset()
        return self.sampler.held

    def tick(self, now: float, held_keys: Optional[Iterable[str]] = None) -> float:
        """Process a single tick.

        Args:
            now: Timestamp in milliseconds.
            held_keys: Keys to use instead of the sampler's.

        Returns:
            The delta applied, in milliseconds.
        """
        keys = self.held_keys if held_keys is None else held_keys
        delta = self.scene.update(now, keys)
        self.renderer.render_frame(self.scene)
        self._frame_count += 1

        # Track FPS
        self._fps_frames += 1
        self._fps_update_time += delta / 1000.0
        if self._fps_update_time >= 1.0:
            self._fps = self._fps_frames / self._fps_update_time
            self._fps_frames = 0
            self._fps_update_time = 0.0

        return delta

    def process_frame(self) -> float:
        """Pump input and run one tick at the current clock time.

        Returns:
            The delta applied, in milliseconds.
        """
        pump = getattr(self.renderer, "pump_events", None)
        if pump is not None:
            pump()
            if getattr(self.renderer, "quit_requested", False):
                self.stop()
                return 0.0
        return self.tick(self.clock())

    def start(self) -> None:
        """Start the game loop."""
        self._running = True

    def stop(self) -> None:
        """Stop the game loop."""
        self._running = False

    @property
    def is_running(self) -> bool:
        """Check if loop is running.

        Returns:
            True if running.
        """
        return self._running

    @property
    def fps(self) -> float:
        """Get current FPS.

        Returns:
            Current frames per second.
        """
        return self._fps

    @property
    def frame_count(self) -> int:
        return self._frame_count

    async def run_async(self, max_frames: Optional[int] = None) -> None:
        """Run the game loop until stopped.

        Args:
            max_frames: Stop after this many frames; runs until ``stop``
                when omitted.
        """
        self.start()
        logger.info("Game loop started at %d fps", self.target_fps)
        try:
            while self._running:
                frame_start = time.perf_counter()

                self.process_frame()
                if max_frames is not None and self._frame_count >= max_frames:
                    break

                # Calculate sleep time to maintain target FPS
                frame_time = time.perf_counter() - frame_start
                sleep_time = max(0, self.target_frame_time - frame_time)
                await asyncio.sleep(sleep_time)
        finally:
            self._running = False
            logger.info("Game loop stopped after %d frames", self._frame_count)
