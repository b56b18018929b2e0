#!/usr/bin/env python3
"""Walk the character through a scripted path and save the last frame."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from walkabout.assets import PlaceholderGenerator, create_all_variants
from walkabout.engine import Actor, Scene
from walkabout.renderer import HeadlessRenderer, SpriteSheetResource
from walkabout.types import Position

# (held keys, ticks)
SCRIPT = [
    ((), 10),
    (("ArrowRight",), 60),
    (("ArrowDown", "ArrowRight"), 40),
    (("ArrowDown",), 30),
    ((), 20),
]

FRAME_MS = 1000 / 60


def main():
    sheet = SpriteSheetResource.from_image(PlaceholderGenerator().generate_image())
    actor = Actor()
    for variant in create_all_variants(sheet):
        variant.world_position = Position(200.0, 150.0)
        actor.add(variant)

    scene = Scene(actor)
    renderer = HeadlessRenderer(width=640, height=480)

    now = 1000.0
    for keys, ticks in SCRIPT:
        for _ in range(ticks):
            scene.update(now, keys)
            renderer.render_frame(scene)
            now += FRAME_MS

    output = Path(__file__).parent.parent / "frame.png"
    renderer.canvas.save(output)
    print(f"Saved frame to {output}")
    print(f"Actor: {renderer.rendered_actor}")
    print(f"Render time: {renderer.last_render_time*1000:.1f}ms")


if __name__ == "__main__":
    main()
