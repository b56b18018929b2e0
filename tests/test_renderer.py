"""Tests for the sheet loader, canvas and renderers."""

from __future__ import annotations

from types import SimpleNamespace

import numpy as np
import pygame
import pytest
from PIL import Image

from walkabout.engine import KeyboardSampler, Scene
from walkabout.renderer import Canvas, HeadlessRenderer, PygameWindow, SpriteSheetResource
from walkabout.types import ActorState, Direction, Position

from conftest import CELL, WALK_ORIGIN_Y, cell_color


class TestSpriteSheetResource:
    """Tests for sheet loading."""

    def test_pending_until_loaded(self, tmp_path):
        """Test a new resource is not ready."""
        sheet = SpriteSheetResource(tmp_path / "sheet.png")
        assert not sheet.is_ready
        assert sheet.image is None
        assert sheet.size == (0, 0)
        assert "pending" in repr(sheet)

    def test_load_from_disk(self, tmp_path, sheet_image):
        """Test decoding a PNG."""
        path = tmp_path / "sheet.png"
        sheet_image.save(path)

        sheet = SpriteSheetResource(path).load()
        assert sheet.is_ready
        assert sheet.size == sheet_image.size
        assert sheet.image.mode == "RGBA"

    def test_from_image_converts_to_rgba(self):
        """Test wrapping a decoded image."""
        sheet = SpriteSheetResource.from_image(Image.new("RGB", (8, 8)))
        assert sheet.is_ready
        assert sheet.image.mode == "RGBA"

    def test_missing_file(self, tmp_path):
        """Test a missing file raises."""
        with pytest.raises(FileNotFoundError):
            SpriteSheetResource(tmp_path / "nope.png").load()

    def test_no_path(self):
        """Test loading without a path raises ValueError."""
        with pytest.raises(ValueError):
            SpriteSheetResource().load()

    @pytest.mark.asyncio
    async def test_load_async(self, tmp_path, sheet_image):
        """Test decoding in a worker thread."""
        path = tmp_path / "sheet.png"
        sheet_image.save(path)

        sheet = await SpriteSheetResource(path).load_async()
        assert sheet.is_ready


class TestCanvas:
    """Tests for the drawing surface."""

    def test_blit_copies_region(self, sheet):
        """Test the source cell lands at the destination."""
        canvas = Canvas(width=32, height=32)
        canvas.blit(sheet, (CELL, WALK_ORIGIN_Y + 2 * CELL, CELL, CELL), (10, 21, CELL, CELL))

        pixels = canvas.to_array()
        assert pixels.shape == (32, 32, 4)
        expected = np.array(cell_color(1, 10), dtype=np.uint8)
        assert (pixels[21:25, 10:14] == expected).all()
        assert pixels[20, 10, 3] == 0
        assert canvas.blit_count == 1

    def test_unready_sheet_skipped(self, tmp_path):
        """Test blitting from a pending sheet draws nothing."""
        canvas = Canvas(width=16, height=16)
        canvas.blit(SpriteSheetResource(tmp_path / "x.png"), (0, 0, 4, 4), (0, 0, 4, 4))
        assert canvas.blit_count == 0
        assert not canvas.to_array().any()

    def test_negative_destination_clipped(self, sheet):
        """Test a tile hanging off the top-left is trimmed."""
        canvas = Canvas(width=16, height=16)
        canvas.blit(sheet, (0, 0, CELL, CELL), (-2, -2, CELL, CELL))

        pixels = canvas.to_array()
        assert tuple(pixels[0, 0]) == cell_color(0, 0)
        assert tuple(pixels[1, 1]) == cell_color(0, 0)
        assert pixels[2, 2, 3] == 0

    def test_offscreen_destination_skipped(self, sheet):
        """Test a tile fully outside the canvas draws nothing."""
        canvas = Canvas(width=16, height=16)
        canvas.blit(sheet, (0, 0, CELL, CELL), (40, 0, CELL, CELL))
        canvas.blit(sheet, (0, 0, CELL, CELL), (-10, 0, CELL, CELL))
        assert canvas.blit_count == 0

    def test_clear(self, sheet):
        """Test clear restores the background."""
        canvas = Canvas(width=16, height=16, background=(1, 2, 3, 255))
        canvas.blit(sheet, (0, 0, CELL, CELL), (0, 0, CELL, CELL))
        canvas.clear()

        assert canvas.blit_count == 0
        assert (canvas.to_array() == np.array([1, 2, 3, 255], dtype=np.uint8)).all()

    def test_save(self, tmp_path):
        """Test writing a PNG."""
        canvas = Canvas(width=8, height=8)
        path = canvas.save(tmp_path / "out" / "frame.png")
        assert path.exists()
        with Image.open(path) as img:
            assert img.size == (8, 8)

    def test_to_bytes(self):
        """Test raw bytes are RGBA row-major."""
        assert len(Canvas(width=3, height=2).to_bytes()) == 3 * 2 * 4


class TestHeadlessRenderer:
    """Tests for off-screen rendering."""

    def test_render_frame_records_actor(self, actor):
        """Test the renderer draws and records what it drew."""
        scene = Scene(actor)
        scene.update(1000.0, {"ArrowLeft"})
        renderer = HeadlessRenderer(width=64, height=64)
        renderer.render_frame(scene)

        walk = actor.get(ActorState.WALK)
        assert renderer.render_count == 1
        assert renderer.rendered_actor["state"] is ActorState.WALK
        assert renderer.rendered_actor["facing"] is Direction.WEST
        assert renderer.rendered_actor["source"] == walk.source_rect()
        assert renderer.rendered_actor["dest"] == walk.dest_rect()
        assert renderer.canvas.blit_count == 1
        assert renderer.last_render_time >= 0

    def test_pixels_match_variant(self, actor):
        """Test the drawn pixels come from the selected cell."""
        actor.update(0, set())
        actor.get(ActorState.STAND).world_position = Position(3.0, 4.0)
        renderer = HeadlessRenderer(width=32, height=32)
        renderer.render_frame(Scene(actor))

        assert tuple(renderer.canvas.to_array()[4, 3]) == cell_color(0, 0)

    def test_uses_given_canvas(self):
        """Test an existing canvas overrides the size."""
        canvas = Canvas(width=10, height=20)
        renderer = HeadlessRenderer(canvas=canvas)
        assert renderer.canvas is canvas
        assert (renderer.width, renderer.height) == (10, 20)


class TestPygameWindowEvents:
    """Tests for window event routing. No display is opened."""

    def test_quit_event(self):
        """Test closing the window requests a quit."""
        window = PygameWindow(KeyboardSampler())
        window.handle_event(SimpleNamespace(type=pygame.QUIT))
        assert window.quit_requested

    def test_escape_requests_quit(self):
        """Test Escape requests a quit."""
        window = PygameWindow(KeyboardSampler())
        window.handle_event(SimpleNamespace(type=pygame.KEYDOWN, key=pygame.K_ESCAPE))
        assert window.quit_requested

    def test_keys_go_to_sampler(self):
        """Test key events reach the sampler."""
        sampler = KeyboardSampler()
        window = PygameWindow(sampler)
        window.handle_event(SimpleNamespace(type=pygame.KEYDOWN, key=pygame.K_DOWN))
        assert sampler.held == {"ArrowDown"}
        assert not window.quit_requested

    def test_focus_loss_releases_keys(self):
        """Test losing focus clears the held set."""
        sampler = KeyboardSampler()
        sampler.press("ArrowUp")
        window = PygameWindow(sampler)
        window.handle_event(SimpleNamespace(type=pygame.WINDOWFOCUSLOST))
        assert sampler.held == frozenset()

    def test_present_without_window(self):
        """Test presenting before open does nothing."""
        window = PygameWindow(KeyboardSampler(), width=8, height=8)
        assert not window.is_open
        window.present()
        window.close()
