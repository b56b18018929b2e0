"""Actor state machine: picks the active animation variant from held keys."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from walkabout.constants import KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP
from walkabout.types import ActorState, Direction, Position

if TYPE_CHECKING:
    from walkabout.engine.variant import AnimationVariant
    from walkabout.renderer.canvas import Surface

logger = logging.getLogger(__name__)


class MissingVariantError(ValueError):
    """Raised when the actor needs a state that has no registered variant."""

    def __init__(self, state: ActorState, registered: Iterable[ActorState]):
        self.state = state
        self.registered = tuple(registered)
        names = ", ".join(s.label for s in self.registered) or "none"
        super().__init__(
            f"No animation variant registered for state {state.label} "
            f"(registered: {names})"
        )


def resolve_direction(
    up: bool, down: bool, left: bool, right: bool
) -> Optional[Direction]:
    """Resolve arrow flags to a facing direction.

    Diagonals win over cardinals, checked in a fixed order. Up+Left maps
    to NORTHEAST (and so on) because the names follow sheet rows.

    Returns:
        The direction, or None if no flag is set.
    """
    if up and left:
        return Direction.NORTHEAST
    if up and right:
        return Direction.NORTHWEST
    if down and left:
        return Direction.SOUTHEAST
    if down and right:
        return Direction.SOUTHWEST
    if up:
        return Direction.NORTH
    if down:
        return Direction.SOUTH
    if left:
        return Direction.WEST
    if right:
        return Direction.EAST
    return None


class Actor:
    """A character made of several animation variants, one active at a time."""

    def __init__(self):
        self._variants: dict[ActorState, AnimationVariant] = {}
        self.state = ActorState.NONE
        self.facing = Direction.SOUTH

    def add(self, variant: AnimationVariant) -> None:
        """Register a variant under its kind, replacing any previous one."""
        self._variants[variant.kind] = variant

    def get(self, state: ActorState) -> Optional[AnimationVariant]:
        """Look up the variant for a state."""
        return self._variants.get(state)

    @property
    def states(self) -> list[ActorState]:
        """States that have a registered variant."""
        return list(self._variants.keys())

    @property
    def current_variant(self) -> AnimationVariant:
        """The variant for the active state.

        Raises:
            MissingVariantError: If the active state has no variant.
        """
        return self._require(self.state)

    @property
    def world_position(self) -> Optional[Position]:
        """Position of the active variant, or None before the first update."""
        variant = self._variants.get(self.state)
        return variant.world_position.copy() if variant is not None else None

    def _require(self, state: ActorState) -> AnimationVariant:
        variant = self._variants.get(state)
        if variant is None:
            raise MissingVariantError(state, self._variants)
        return variant

    def update(self, delta: float, held_keys: Iterable[str]) -> None:
        """Run one tick of the transition policy and the active variant.

        Args:
            delta: Elapsed time in milliseconds.
            held_keys: Key identifiers currently held down.

        Raises:
            MissingVariantError: If the target state has no variant.
        """
        held = set(held_keys)
        target_state = self.state
        target_facing = self.facing

        if not held:
            target_state = ActorState.STAND
        else:
            direction = resolve_direction(
                KEY_UP in held,
                KEY_DOWN in held,
                KEY_LEFT in held,
                KEY_RIGHT in held,
            )
            if direction is not None:
                target_state = ActorState.WALK
                target_facing = direction

        # NONE is never shown, so input that resolves nothing starts idle
        if target_state is ActorState.NONE:
            target_state = ActorState.STAND

        outgoing = self._variants.get(self.state)
        if target_state is not self.state or outgoing is None:
            incoming = self._require(target_state)
            if outgoing is not None and outgoing is not incoming:
                incoming.world_position = outgoing.world_position.copy()
            logger.debug(
                "Actor: %s -> %s (%s)",
                self.state.label,
                target_state.label,
                target_facing.label,
            )
            self.state = target_state

        self.facing = target_facing
        variant = self._variants[self.state]
        variant.facing = self.facing
        variant.update(delta)

    def draw(self, surface: Surface) -> None:
        """Draw the active variant.

        Raises:
            MissingVariantError: If the active state has no variant.
        """
        self.current_variant.draw(surface)
