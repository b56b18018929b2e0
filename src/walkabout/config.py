"""TOML configuration loading and saving."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from walkabout.assets.sprite_definitions import VARIANT_DEFINITIONS
from walkabout.constants import (
    DEFAULT_BG_COLOR,
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_FPS,
    DEFAULT_FRAME_INTERVAL_MS,
    DEFAULT_SHEET_PATH,
    DEFAULT_WINDOW_TITLE,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
)
from walkabout.types import ActorState

logger = logging.getLogger(__name__)

KEY_IDS = (KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT)


class ConfigError(ValueError):
    """Raised when a configuration file holds an invalid value."""


@dataclass
class GeneralConfig:
    """General application settings."""

    fps: int = DEFAULT_FPS


@dataclass
class CanvasConfig:
    """Canvas/window settings."""

    width: int = DEFAULT_CANVAS_WIDTH
    height: int = DEFAULT_CANVAS_HEIGHT
    title: str = DEFAULT_WINDOW_TITLE
    background: tuple[int, int, int, int] = DEFAULT_BG_COLOR


@dataclass
class SheetConfig:
    """Sprite sheet source."""

    path: str = DEFAULT_SHEET_PATH
    generate_placeholder: bool = True  # write a placeholder sheet if missing
    start_position: tuple[float, float] = (0.0, 0.0)


@dataclass
class VariantConfig:
    """Clip layout for one actor state."""

    state: str
    origin: tuple[int, int]
    frame_size: tuple[int, int]
    frame_count: int
    interval: float = DEFAULT_FRAME_INTERVAL_MS

    def to_definition(self) -> dict[str, Any]:
        """Convert to the dict shape used by the asset helpers."""
        return {
            "origin": self.origin,
            "frame_size": self.frame_size,
            "frame_count": self.frame_count,
            "interval": self.interval,
        }


def _default_variants() -> list[VariantConfig]:
    return [
        VariantConfig(
            state=name,
            origin=tuple(d["origin"]),
            frame_size=tuple(d["frame_size"]),
            frame_count=d["frame_count"],
            interval=d["interval"],
        )
        for name, d in VARIANT_DEFINITIONS.items()
    ]


def _default_keys() -> dict[str, str]:
    return {
        "up": KEY_UP,
        "down": KEY_DOWN,
        "left": KEY_LEFT,
        "right": KEY_RIGHT,
    }


@dataclass
class AppConfig:
    """Top-level application configuration."""

    general: GeneralConfig = field(default_factory=GeneralConfig)
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    sheet: SheetConfig = field(default_factory=SheetConfig)
    variants: list[VariantConfig] = field(default_factory=_default_variants)
    keys: dict[str, str] = field(default_factory=_default_keys)
    config_path: Path | None = None

    @property
    def variant_definitions(self) -> dict[str, dict[str, Any]]:
        """Variant layout keyed by state name."""
        return {v.state: v.to_definition() for v in self.variants}

    @classmethod
    def from_toml(cls, path: Path) -> AppConfig:
        """Load configuration from a TOML file.

        Raises:
            ConfigError: If the file holds invalid values.
            OSError: If the file cannot be read.
        """
        with open(path, "rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"{path}: {e}") from e
        logger.info("Loaded config %s", path)
        return cls._from_dict(data, config_path=Path(path))

    @classmethod
    def _from_dict(cls, data: dict[str, Any], config_path: Path | None = None) -> AppConfig:
        """Build config from a parsed TOML dict."""
        general_data = data.get("general", {})
        general = GeneralConfig(
            fps=_check_int(general_data.get("fps", DEFAULT_FPS), "general.fps"),
        )

        canvas_data = data.get("canvas", {})
        background = canvas_data.get("background", DEFAULT_BG_COLOR)
        if not isinstance(background, (list, tuple)) or len(background) != 4:
            raise ConfigError("canvas.background must be [r, g, b, a]")
        canvas = CanvasConfig(
            width=_check_int(canvas_data.get("width", DEFAULT_CANVAS_WIDTH), "canvas.width"),
            height=_check_int(canvas_data.get("height", DEFAULT_CANVAS_HEIGHT), "canvas.height"),
            title=canvas_data.get("title", DEFAULT_WINDOW_TITLE),
            background=tuple(
                _check_int(c, f"canvas.background[{i}]", minimum=0, maximum=255)
                for i, c in enumerate(background)
            ),
        )

        sheet_data = data.get("sheet", {})
        start = sheet_data.get("start_position", [0.0, 0.0])
        try:
            start_position = (float(start[0]), float(start[1]))
        except (IndexError, TypeError, ValueError) as e:
            raise ConfigError(f"sheet.start_position must be [x, y]: {e}") from e
        sheet = SheetConfig(
            path=sheet_data.get("path", DEFAULT_SHEET_PATH),
            generate_placeholder=sheet_data.get("generate_placeholder", True),
            start_position=start_position,
        )

        if "variants" in data:
            variants = []
            for i, v in enumerate(data["variants"]):
                where = f"variants[{i}]"
                try:
                    variant = VariantConfig(
                        state=v["state"],
                        origin=(v["origin"][0], v["origin"][1]),
                        frame_size=(v["frame_size"][0], v["frame_size"][1]),
                        frame_count=v["frame_count"],
                        interval=v.get("interval", DEFAULT_FRAME_INTERVAL_MS),
                    )
                except (KeyError, IndexError, TypeError) as e:
                    raise ConfigError(f"{where} is incomplete: {e}") from e
                _check_state(variant.state, f"{where}.state")
                for axis, value in zip("xy", variant.origin):
                    _check_int(value, f"{where}.origin.{axis}", minimum=0)
                for axis, value in zip(("width", "height"), variant.frame_size):
                    _check_int(value, f"{where}.frame_size.{axis}")
                _check_int(variant.frame_count, f"{where}.frame_count")
                if isinstance(variant.interval, bool) or not isinstance(
                    variant.interval, (int, float)
                ) or variant.interval < 0:
                    raise ConfigError(
                        f"{where}.interval must be a non-negative number, "
                        f"got {variant.interval!r}"
                    )
                variants.append(variant)
        else:
            variants = _default_variants()

        keys = dict(data.get("keys", _default_keys()))
        for name, key_id in keys.items():
            if key_id not in KEY_IDS:
                raise ConfigError(
                    f"keys.{name}: unknown key id {key_id!r} "
                    f"(expected one of {', '.join(KEY_IDS)})"
                )

        return cls(
            general=general,
            canvas=canvas,
            sheet=sheet,
            variants=variants,
            keys=keys,
            config_path=config_path,
        )

    def to_toml(self, path: Path) -> None:
        """Save configuration to a TOML file."""
        data = self._to_dict()
        with open(path, "wb") as f:
            tomli_w.dump(data, f)

    def _to_dict(self) -> dict[str, Any]:
        """Convert config to a TOML-compatible dict."""
        return {
            "general": {
                "fps": self.general.fps,
            },
            "canvas": {
                "width": self.canvas.width,
                "height": self.canvas.height,
                "title": self.canvas.title,
                "background": list(self.canvas.background),
            },
            "sheet": {
                "path": self.sheet.path,
                "generate_placeholder": self.sheet.generate_placeholder,
                "start_position": list(self.sheet.start_position),
            },
            "variants": [
                {
                    "state": v.state,
                    "origin": list(v.origin),
                    "frame_size": list(v.frame_size),
                    "frame_count": v.frame_count,
                    "interval": v.interval,
                }
                for v in self.variants
            ],
            "keys": dict(self.keys),
        }


def _check_int(value: Any, where: str, minimum: int = 1, maximum: int | None = None) -> int:
    """Require an integer within range.

    Raises:
        ConfigError: Naming ``where`` if the value is not an int (bools are
            rejected) or is out of range.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{where} must be an integer, got {value!r}")
    if value < minimum:
        raise ConfigError(f"{where} must be >= {minimum}, got {value}")
    if maximum is not None and value > maximum:
        raise ConfigError(f"{where} must be <= {maximum}, got {value}")
    return value


def _check_state(name: str, where: str) -> None:
    if not isinstance(name, str):
        raise ConfigError(f"{where} must be a string, got {name!r}")
    try:
        state = ActorState.from_name(name)
    except ValueError:
        raise ConfigError(f"{where}: unknown actor state {name!r}") from None
    if state is ActorState.NONE:
        raise ConfigError(f"{where}: NONE cannot be used as a state")


def get_default_config() -> AppConfig:
    """Return a default configuration."""
    return AppConfig()
