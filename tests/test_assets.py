"""Tests for the default sheet layout and placeholder generation."""

from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

from walkabout.assets import (
    VARIANT_DEFINITIONS,
    PlaceholderGenerator,
    create_all_variants,
    create_variant,
    get_variant_definition,
    sheet_size,
)
from walkabout.assets.placeholder_generator import generate_placeholder_sheet
from walkabout.types import ActorState


class TestVariantDefinitions:
    """Tests for the built-in clip layout."""

    def test_has_stand_and_walk(self):
        """Test both playable states are defined."""
        assert set(VARIANT_DEFINITIONS) == {"stand", "walk"}

    def test_lookup_is_case_insensitive(self):
        """Test looking up a definition by name."""
        assert get_variant_definition("WALK") is VARIANT_DEFINITIONS["walk"]
        assert get_variant_definition("run") is None

    def test_clips_do_not_overlap(self):
        """Test walk rows start below the stand rows."""
        stand, walk = VARIANT_DEFINITIONS["stand"], VARIANT_DEFINITIONS["walk"]
        assert walk["origin"][1] >= stand["origin"][1] + stand["frame_size"][1] * 8

    def test_sheet_size(self):
        """Test the sheet fits the widest clip and all rows."""
        assert sheet_size(VARIANT_DEFINITIONS) == (192, 512)


class TestCreateVariant:
    """Tests for building variants from definitions."""

    def test_create_walk(self, sheet):
        """Test a walk variant gets the walk clip."""
        variant = create_variant("walk", sheet)
        assert variant.kind is ActorState.WALK
        assert variant.frame_count == 6
        assert variant.interval == 66
        assert variant.clip.region_origin == (0, 256)
        assert variant.clip.sheet is sheet

    def test_custom_definition(self, sheet):
        """Test an explicit definition wins over the default."""
        variant = create_variant(
            "stand",
            sheet,
            {"origin": [4, 8], "frame_size": [4, 4], "frame_count": 2},
        )
        assert variant.clip.region_origin == (4, 8)
        assert variant.interval == 66

    def test_unknown_state(self, sheet):
        """Test an unknown state name raises."""
        with pytest.raises(ValueError):
            create_variant("run", sheet)

    def test_create_all_shares_sheet(self, sheet):
        """Test every variant reads from the same sheet."""
        variants = create_all_variants(sheet)
        assert {v.kind for v in variants} == {ActorState.STAND, ActorState.WALK}
        assert all(v.clip.sheet is sheet for v in variants)


class TestPlaceholderGenerator:
    """Tests for the placeholder sheet."""

    def test_image_size_and_mode(self):
        """Test the sheet is sized by the layout."""
        img = PlaceholderGenerator().generate_image()
        assert img.mode == "RGBA"
        assert img.size == (192, 512)

    def test_every_cell_is_drawn(self):
        """Test each frame cell has visible pixels."""
        pixels = np.asarray(PlaceholderGenerator().generate_image())
        for definition in VARIANT_DEFINITIONS.values():
            ox, oy = definition["origin"]
            w, h = definition["frame_size"]
            for row in range(8):
                for frame in range(definition["frame_count"]):
                    cell = pixels[oy + h * row:oy + h * (row + 1), ox + w * frame:ox + w * (frame + 1)]
                    assert cell[..., 3].any()

    def test_custom_layout(self):
        """Test a custom layout changes the sheet size."""
        definitions = {"walk": {"origin": (0, 0), "frame_size": (16, 16), "frame_count": 3}}
        assert PlaceholderGenerator(definitions).generate_image().size == (48, 128)

    def test_generate_writes_png(self, tmp_path):
        """Test saving the sheet creates parent directories."""
        path = generate_placeholder_sheet(tmp_path / "sprites" / "character.png")
        assert path.exists()
        with Image.open(path) as img:
            assert img.size == (192, 512)
