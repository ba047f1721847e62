"""Obstacle and power-up variants.

Each variant carries its own fixed geometry; placement (x/y) is decided by the
spawner. Collections dispatch on the concrete type rather than a string tag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from config import CROW_FLAP_INTERVAL_MS, TICK_MS


@dataclass
class Crater:
    x: float
    y: float
    width: float = 60.0
    height: float = 20.0

    kind = "crater"


@dataclass
class Meteor:
    x: float
    y: float
    width: float = 40.0
    height: float = 40.0

    kind = "meteor"


@dataclass
class Crow:
    x: float
    y: float
    width: float = 50.0
    height: float = 30.0
    frame: int = 0
    _frame_timer: float = field(default=0.0, repr=False)

    kind = "crow"

    def animate(self, tick_ms: float = TICK_MS) -> None:
        """Flap wings: two frames, swapped every CROW_FLAP_INTERVAL_MS."""
        self._frame_timer += tick_ms
        if self._frame_timer > CROW_FLAP_INTERVAL_MS:
            self._frame_timer = 0.0
            self.frame = (self.frame + 1) % 2


@dataclass
class ShieldPowerUp:
    x: float
    y: float
    width: float = 30.0
    height: float = 30.0

    kind = "shield"


@dataclass
class DoubleJumpPowerUp:
    x: float
    y: float
    width: float = 30.0
    height: float = 30.0

    kind = "doubleJump"


Obstacle = Union[Crater, Meteor, Crow]
PowerUp = Union[ShieldPowerUp, DoubleJumpPowerUp]

OBSTACLE_TYPES: tuple[type, ...] = (Crater, Meteor, Crow)
POWER_UP_TYPES: tuple[type, ...] = (ShieldPowerUp, DoubleJumpPowerUp)


__all__ = [
    "Crater",
    "Meteor",
    "Crow",
    "ShieldPowerUp",
    "DoubleJumpPowerUp",
    "Obstacle",
    "PowerUp",
    "OBSTACLE_TYPES",
    "POWER_UP_TYPES",
]
