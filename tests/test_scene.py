"""Tests for the scene tick."""

from __future__ import annotations

from walkabout.engine import Scene
from walkabout.renderer import Canvas
from walkabout.types import ActorState


class TestDelta:
    """Tests for timestamp deltas."""

    def test_first_tick_is_zero(self, actor):
        """Test the first tick yields a zero delta."""
        scene = Scene(actor)
        assert scene.delta_for(5000.0) == 0.0
        assert scene.last_time == 5000.0

    def test_delta_between_ticks(self, actor):
        """Test the delta is the time between ticks."""
        scene = Scene(actor)
        scene.delta_for(1000.0)
        assert scene.delta_for(1016.5) == 16.5

    def test_backwards_time_clamps(self, actor):
        """Test timestamps going backwards yield zero."""
        scene = Scene(actor)
        scene.delta_for(2000.0)
        assert scene.delta_for(1990.0) == 0.0
        assert scene.last_time == 1990.0

    def test_zero_timestamp_counts_as_unset(self, actor):
        """Test a tick at time zero leaves the next delta at zero."""
        scene = Scene(actor)
        scene.delta_for(0.0)
        assert scene.delta_for(16.0) == 0.0


class TestUpdate:
    """Tests for driving the actor."""

    def test_update_drives_actor(self, actor):
        """Test update feeds the delta and keys to the actor."""
        scene = Scene(actor)
        scene.update(1000.0, set())
        delta = scene.update(1030.0, {"ArrowDown"})

        assert delta == 30.0
        assert actor.state is ActorState.WALK
        assert actor.get(ActorState.WALK).timer == 30.0
        assert scene.tick_count == 2

    def test_tick_draws(self, actor):
        """Test tick clears and draws onto the canvas."""
        scene = Scene(actor)
        canvas = Canvas(width=64, height=64)
        scene.tick(1000.0, set(), canvas)
        assert canvas.blit_count == 1

        scene.tick(1016.0, set(), canvas)
        assert canvas.blit_count == 1
