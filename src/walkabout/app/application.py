"""Main application entry point."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional, Union

from walkabout.assets import PlaceholderGenerator, create_all_variants
from walkabout.config import AppConfig, ConfigError
from walkabout.engine import Actor, KeyboardSampler, MissingVariantError, Scene
from walkabout.engine.input import key_map_from_names
from walkabout.renderer import Canvas, HeadlessRenderer, PygameWindow, SpriteSheetResource
from walkabout.types import ActorState, Position

from .game_loop import GameLoop

logger = logging.getLogger(__name__)


class Application:
    """Main Walkabout application."""

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        headless: bool = False,
    ):
        """Initialize the application.

        Args:
            config: Application configuration; defaults are used if omitted.
            headless: Render off-screen without opening a window.
        """
        self.config = config or AppConfig()
        self.headless = headless

        # Components (created in initialize)
        self.sheet: Optional[SpriteSheetResource] = None
        self.actor: Optional[Actor] = None
        self.scene: Optional[Scene] = None
        self.sampler: Optional[KeyboardSampler] = None
        self.canvas: Optional[Canvas] = None
        self.renderer: Optional[Union[HeadlessRenderer, PygameWindow]] = None
        self.game_loop: Optional[GameLoop] = None

        self._initialized = False

    async def initialize(self) -> None:
        """Load the sheet and build the scene, input and renderer.

        Raises:
            ConfigError: If the key bindings name unknown keys.
            OSError: If the sheet cannot be read or decoded.
        """
        if self._initialized:
            return

        sheet_path = Path(self.config.sheet.path)
        if not sheet_path.exists() and self.config.sheet.generate_placeholder:
            logger.info("Sheet %s not found, generating a placeholder", sheet_path)
            PlaceholderGenerator(self.config.variant_definitions).generate(sheet_path)

        self.sheet = SpriteSheetResource(sheet_path)
        await self.sheet.load_async()

        self.actor = self.build_actor(self.sheet)
        self.scene = Scene(self.actor)

        try:
            key_map = key_map_from_names(self.config.keys)
        except ValueError as e:
            raise ConfigError(f"keys: {e}") from e
        self.sampler = KeyboardSampler(key_map)

        canvas_config = self.config.canvas
        self.canvas = Canvas(
            width=canvas_config.width,
            height=canvas_config.height,
            background=canvas_config.background,
        )
        if self.headless:
            self.renderer = HeadlessRenderer(canvas=self.canvas)
        else:
            self.renderer = PygameWindow(
                self.sampler,
                title=canvas_config.title,
                canvas=self.canvas,
            )

        self.game_loop = GameLoop(
            scene=self.scene,
            renderer=self.renderer,
            sampler=self.sampler,
            target_fps=self.config.general.fps,
        )

        self._initialized = True

    def build_actor(self, sheet: SpriteSheetResource) -> Actor:
        """Create the actor with one variant per configured state.

        Every variant starts at the configured start position; whichever
        becomes active first carries it from there.

        Raises:
            ConfigError: If a configured clip is invalid.
            MissingVariantError: If a state the actor can enter has no
                configured variant.
        """
        actor = Actor()
        x, y = self.config.sheet.start_position
        try:
            variants = create_all_variants(sheet, self.config.variant_definitions)
        except ValueError as e:
            raise ConfigError(f"variants: {e}") from e
        for variant in variants:
            variant.world_position = Position(x, y)
            actor.add(variant)
        for state in ActorState:
            if state is not ActorState.NONE and actor.get(state) is None:
                raise MissingVariantError(state, actor.states)
        logger.debug("Actor states: %s", ", ".join(s.label for s in actor.states))
        return actor

    async def run(self, max_frames: Optional[int] = None) -> None:
        """Run the main application loop.

        Args:
            max_frames: Stop after this many frames.
        """
        await self.initialize()

        if isinstance(self.renderer, PygameWindow):
            self.renderer.open()
        try:
            await self.game_loop.run_async(max_frames=max_frames)
        finally:
            self.renderer.close()

    def stop(self) -> None:
        """Stop the application."""
        if self.game_loop is not None:
            self.game_loop.stop()


def parse_args(argv: Optional[list[str]] = None):
    """Parse command-line arguments."""
    import argparse

    from walkabout import __version__

    parser = argparse.ArgumentParser(
        prog="walkabout",
        description="Walk a sprite-sheet character around with the arrow keys",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a TOML config file",
    )
    parser.add_argument(
        "--sheet",
        default=None,
        help="Sprite sheet image to use",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=None,
        help="Target FPS",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Canvas width in pixels",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Canvas height in pixels",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Render off-screen without a window",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help="Stop after this many frames",
    )
    parser.add_argument(
        "--save-frame",
        type=Path,
        default=None,
        help="Save the last rendered frame as a PNG",
    )
    parser.add_argument(
        "--write-config",
        type=Path,
        default=None,
        help="Write the effective config to this path and exit",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def build_config(args) -> AppConfig:
    """Load the config file (if any) and apply command-line overrides."""
    config = AppConfig.from_toml(args.config) if args.config else AppConfig()
    if args.sheet is not None:
        config.sheet.path = args.sheet
    if args.fps is not None:
        if args.fps <= 0:
            raise ConfigError(f"--fps must be positive, got {args.fps}")
        config.general.fps = args.fps
    for name in ("width", "height"):
        value = getattr(args, name)
        if value is not None:
            if value <= 0:
                raise ConfigError(f"--{name} must be positive, got {value}")
            setattr(config.canvas, name, value)
    return config


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point.

    Returns:
        Process exit code.
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    app = None
    try:
        config = build_config(args)
        if args.write_config is not None:
            config.to_toml(args.write_config)
            logger.info("Wrote config to %s", args.write_config)
            return 0

        app = Application(config=config, headless=args.headless)
        asyncio.run(app.run(max_frames=args.frames))
    except (ConfigError, MissingVariantError, OSError) as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")

    if args.save_frame is not None and app is not None and app.canvas is not None:
        app.canvas.save(args.save_frame)
        logger.info("Saved frame to %s", args.save_frame)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
