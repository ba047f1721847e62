"""World package: re-export common symbols for simpler imports.

Callers can import public types from `world` directly, e.g.:

    from world import Player, EntityRegistry, Spawner

The pygame scene (`world.runnerscene`) is imported directly by the engine
because it depends on `core.driver`, which itself imports from this package.
"""

from .entities import (
    Crater,
    Meteor,
    Crow,
    ShieldPowerUp,
    DoubleJumpPowerUp,
    OBSTACLE_TYPES,
    POWER_UP_TYPES,
)
from .player import Player, Grounded, Airborne
from .world_registry import EntityRegistry
from .world_scroller import EnvironmentScroller
from .world_spawner import Spawner, difficulty_multiplier
from .world_collision import CollisionResolver, TickOutcome, rects_overlap
from .world_shade_overlay import WorldShadeOverlay

__all__ = [
    "Crater",
    "Meteor",
    "Crow",
    "ShieldPowerUp",
    "DoubleJumpPowerUp",
    "OBSTACLE_TYPES",
    "POWER_UP_TYPES",
    "Player",
    "Grounded",
    "Airborne",
    "EntityRegistry",
    "EnvironmentScroller",
    "Spawner",
    "difficulty_multiplier",
    "CollisionResolver",
    "TickOutcome",
    "rects_overlap",
    "WorldShadeOverlay",
]
