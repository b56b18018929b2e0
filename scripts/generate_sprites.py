#!/usr/bin/env python3
"""Generate the placeholder character sheet for Walkabout."""

from pathlib import Path
import sys

# Add src to path for running directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from walkabout.assets import VARIANT_DEFINITIONS, sheet_size
from walkabout.assets.placeholder_generator import generate_placeholder_sheet


def main():
    """Generate the placeholder sheet."""
    output = Path(__file__).parent.parent / "assets" / "sprites" / "character.png"
    print(f"Generating placeholder sheet at {output}")

    path = generate_placeholder_sheet(output)

    width, height = sheet_size(VARIANT_DEFINITIONS)
    print(f"Wrote {width}x{height} sheet to {path}:")
    for name, definition in VARIANT_DEFINITIONS.items():
        print(f"  - {name}: {definition['frame_count']} frames at {definition['origin']}")


if __name__ == "__main__":
    main()
