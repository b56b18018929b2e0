"""Keyboard sampling: turns key events into a set of held keys."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import pygame

from walkabout.constants import KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP

logger = logging.getLogger(__name__)


DEFAULT_KEY_MAP: dict[int, str] = {
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
}


def key_code(name: str) -> int:
    """Look up a pygame key constant by name (``"w"``, ``"up"``, ``"K_UP"``).

    Raises:
        ValueError: If pygame has no key by that name.
    """
    bare = name[2:] if name.startswith("K_") else name
    for candidate in (bare, bare.lower(), bare.upper()):
        code = getattr(pygame, f"K_{candidate}", None)
        if code is not None:
            return code
    raise ValueError(f"Unknown key name: {name}")


def key_map_from_names(bindings: Mapping[str, str]) -> dict[int, str]:
    """Build a key map from pygame key names.

    Args:
        bindings: Mapping of key name (``"w"``, ``"up"``) to key id.

    Returns:
        Mapping of pygame key code to key id.

    Raises:
        ValueError: If a key name is not known to pygame.
    """
    return {key_code(name): key_id for name, key_id in bindings.items()}


class KeyboardSampler:
    """Tracks which logical keys are held down.

    Each physical key counts once from key-down until its key-up, so
    auto-repeat never produces duplicate entries. Two physical keys bound
    to the same id (arrow and WASD) keep the id held until both are up.
    """

    def __init__(self, key_map: Optional[Mapping[int, str]] = None):
        """Initialize the sampler.

        Args:
            key_map: Mapping of pygame key code to key id. Defaults to
                the arrow keys.
        """
        self.key_map = dict(key_map) if key_map is not None else dict(DEFAULT_KEY_MAP)
        self._pressed: dict[Any, str] = {}

    @property
    def held(self) -> frozenset[str]:
        """Snapshot of the key ids currently held."""
        return frozenset(self._pressed.values())

    def press(self, key_id: str, source: Any = None) -> None:
        """Record a key as held.

        Args:
            key_id: Logical key id, e.g. ``"ArrowUp"``.
            source: Physical key that produced it; defaults to the id.
        """
        self._pressed[source if source is not None else key_id] = key_id

    def release(self, key_id: str, source: Any = None) -> None:
        """Record a key as released. Releasing an unheld key is a no-op."""
        self._pressed.pop(source if source is not None else key_id, None)

    def clear(self) -> None:
        """Release every key, e.g. when the window loses focus."""
        if self._pressed:
            logger.debug("Releasing %d held keys", len(self._pressed))
        self._pressed.clear()

    def handle_event(self, event: Any) -> bool:
        """Feed a pygame event.

        Args:
            event: A pygame event (anything with ``type`` and, for key
                events, ``key``).

        Returns:
            True if the event changed the held set.
        """
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return False

        key_id = self.key_map.get(event.key)
        if key_id is None:
            return False

        before = self.held
        if event.type == pygame.KEYDOWN:
            self.press(key_id, source=event.key)
        else:
            self.release(key_id, source=event.key)
        return self.held != before
