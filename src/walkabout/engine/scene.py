"""Scene: owns the actor and turns timestamps into frame deltas."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from walkabout.engine.actor import Actor
    from walkabout.renderer.canvas import Canvas


class Scene:
    """Holds the actor for one session and drives it from timestamps."""

    def __init__(self, actor: Actor):
        """Initialize the scene.

        Args:
            actor: The actor to animate. It must have every state it will
                enter registered before the first tick.
        """
        self.actor = actor
        self.last_time = 0.0
        self.tick_count = 0

    def delta_for(self, now: float) -> float:
        """Compute the delta for a timestamp and remember it.

        The first tick has no previous timestamp and yields 0, so the actor
        does not jump on startup. Timestamps going backwards yield 0.

        Args:
            now: Monotonic timestamp in milliseconds.

        Returns:
            Elapsed milliseconds since the previous tick.
        """
        delta = 0.0 if self.last_time < 0.001 else max(0.0, now - self.last_time)
        self.last_time = now
        return delta

    def update(self, now: float, held_keys: Iterable[str]) -> float:
        """Advance the actor to ``now``.

        Returns:
            The delta that was applied.
        """
        delta = self.delta_for(now)
        self.actor.update(delta, held_keys)
        self.tick_count += 1
        return delta

    def draw(self, canvas: Canvas) -> None:
        """Clear the canvas and draw the actor."""
        canvas.clear()
        self.actor.draw(canvas)

    def tick(self, now: float, held_keys: Iterable[str], canvas: Canvas) -> float:
        """Run one update and draw.

        Returns:
            The delta that was applied.
        """
        delta = self.update(now, held_keys)
        self.draw(canvas)
        return delta
