"""Player controller: vertical kinematics, posture and run-cycle animation.

Motion is an explicit tagged state (`Grounded` / `Airborne`) so a grounded
player can never hold an armed double jump. Ducking is an orthogonal flag that
only changes the hitbox height; it is allowed mid-air.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pygame.math import Vector2

from config import (
    GROUND_Y,
    GRAVITY,
    JUMP_POWER,
    DOUBLE_JUMP_FACTOR,
    PLAYER_X,
    PLAYER_WIDTH,
    PLAYER_HEIGHT,
    PLAYER_DUCK_HEIGHT,
    PLAYER_FRAME_COUNT,
    PLAYER_FRAME_INTERVAL_MS,
    TICK_MS,
)


@dataclass(frozen=True)
class Grounded:
    pass


@dataclass(frozen=True)
class Airborne:
    can_double_jump: bool = False


Motion = Union[Grounded, Airborne]


class Player:
    def __init__(
        self,
        *,
        ground_y: float = GROUND_Y,
        gravity: float = GRAVITY,
        jump_power: float = JUMP_POWER,
        double_jump_factor: float = DOUBLE_JUMP_FACTOR,
        tick_ms: float = TICK_MS,
        frame_count: int = PLAYER_FRAME_COUNT,
        frame_interval_ms: float = PLAYER_FRAME_INTERVAL_MS,
    ) -> None:
        if tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {tick_ms}")
        if frame_count < 1:
            raise ValueError(f"frame_count must be >= 1, got {frame_count}")
        self.ground_y = float(ground_y)
        self.gravity = float(gravity)
        self.jump_power = float(jump_power)
        self.double_jump_factor = float(double_jump_factor)
        self.tick_ms = float(tick_ms)
        self.frame_count = int(frame_count)
        self.frame_interval_ms = float(frame_interval_ms)

        self.width = float(PLAYER_WIDTH)
        self.height = float(PLAYER_HEIGHT)
        self.position = Vector2(PLAYER_X, self.ground_y - self.height)
        self.vy = 0.0
        self.motion: Motion = Grounded()
        self.is_ducking = False
        self.has_double_jump = False

        self.frame = 0
        self._frame_timer = 0.0

    # Convenience accessors used by collision and snapshots
    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    @y.setter
    def y(self, value: float) -> None:
        self.position.y = value

    @property
    def is_airborne(self) -> bool:
        return isinstance(self.motion, Airborne)

    @property
    def can_double_jump(self) -> bool:
        return isinstance(self.motion, Airborne) and self.motion.can_double_jump

    def bounds(self) -> tuple[float, float, float, float]:
        return self.position.x, self.position.y, self.width, self.height

    # ------------------------------------------------------------------
    def _clamp_to_ground(self) -> bool:
        """Snap onto the ground if the feet went below it. Returns True on landing."""
        floor = self.ground_y - self.height
        if self.position.y > floor:
            self.position.y = floor
            self.vy = 0.0
            # Landing ends the airborne episode and any unused double jump
            self.motion = Grounded()
            return True
        return False

    def update(self) -> None:
        self.vy += self.gravity
        self.position.y += self.vy
        self._clamp_to_ground()

        self._frame_timer += self.tick_ms
        if self._frame_timer > self.frame_interval_ms:
            self._frame_timer = 0.0
            self.frame = (self.frame + 1) % self.frame_count

    def jump(self) -> bool:
        if not isinstance(self.motion, Grounded):
            return False
        self.vy = self.jump_power
        self.motion = Airborne(can_double_jump=self.has_double_jump)
        return True

    def double_jump(self) -> bool:
        if not self.can_double_jump:
            return False
        self.vy = self.jump_power * self.double_jump_factor
        self.motion = Airborne(can_double_jump=False)
        return True

    def duck(self, pressed: bool) -> None:
        pressed = bool(pressed)
        if pressed == self.is_ducking:
            return
        self.is_ducking = pressed
        self.height = float(PLAYER_DUCK_HEIGHT if pressed else PLAYER_HEIGHT)
        if isinstance(self.motion, Grounded):
            # Keep the feet planted; only the top edge moves
            self.position.y = self.ground_y - self.height
        else:
            # Mid-air the top edge stays put; standing up may hit the floor
            self._clamp_to_ground()

    def grant_double_jump(self) -> None:
        """Permanent upgrade for the run; arms immediately when caught mid-air."""
        self.has_double_jump = True
        if isinstance(self.motion, Airborne):
            self.motion = Airborne(can_double_jump=True)


__all__ = ["Player", "Grounded", "Airborne", "Motion"]
