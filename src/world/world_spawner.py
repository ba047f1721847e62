"""Time-gated procedural spawning of obstacles and power-ups.

Two independent gates compare "simulated ms since my last spawn" against a
freshly drawn threshold every tick:

- obstacles: 1000 ms plus a random span of up to 2000 ms, the span shrinking
  with score (see `difficulty_multiplier`)
- power-ups: 10000..15000 ms, unscaled

Baselines are absolute timestamps stored on the World so a reset wipes them.
"""

from __future__ import annotations

import random
from typing import Optional

from config import (
    WIDTH,
    GROUND_Y,
    VERBOSE,
    OBSTACLE_SPAWN_MIN_MS,
    OBSTACLE_SPAWN_MAX_MS,
    POWER_UP_SPAWN_MIN_MS,
    POWER_UP_SPAWN_MAX_MS,
    DIFFICULTY_SCORE_SPAN,
    DIFFICULTY_FLOOR,
    SAFE_BAND_TOP,
    SAFE_BAND_BOTTOM_MARGIN,
)
from world.entities import (
    Crater,
    Meteor,
    Crow,
    ShieldPowerUp,
    DoubleJumpPowerUp,
    Obstacle,
    PowerUp,
    OBSTACLE_TYPES,
    POWER_UP_TYPES,
)


def difficulty_multiplier(
    score: int,
    *,
    span: float = DIFFICULTY_SCORE_SPAN,
    floor: float = DIFFICULTY_FLOOR,
) -> float:
    """Non-increasing in score, never below `floor`."""
    return max(floor, 1.0 - score / span)


def obstacle_spawn_threshold(score: int, rng: random.Random) -> float:
    span = OBSTACLE_SPAWN_MAX_MS - OBSTACLE_SPAWN_MIN_MS
    return rng.random() * span * difficulty_multiplier(score) + OBSTACLE_SPAWN_MIN_MS


def power_up_spawn_threshold(rng: random.Random) -> float:
    span = POWER_UP_SPAWN_MAX_MS - POWER_UP_SPAWN_MIN_MS
    return rng.random() * span + POWER_UP_SPAWN_MIN_MS


class Spawner:
    """Builds entities at the right edge of the visible world.

    Parameters
    ----------
    rng: random.Random | None
        Source of randomness; pass a seeded instance for reproducible runs.
    width: float
        Spawn x coordinate (right edge of the screen).
    ground_y: float
        Top of the ground strip.
    """

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        width: float = WIDTH,
        ground_y: float = GROUND_Y,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.width = float(width)
        self.ground_y = float(ground_y)
        # Safe altitude band: below the sky edge, above the ground strip
        self.band_top = float(SAFE_BAND_TOP)
        self.band_bottom = self.ground_y - SAFE_BAND_BOTTOM_MARGIN

    def _safe_altitude(self) -> float:
        return self.rng.random() * (self.band_bottom - self.band_top) + self.band_top

    def make_obstacle(self, kind: Optional[type] = None) -> Obstacle:
        kind = kind or self.rng.choice(OBSTACLE_TYPES)
        if kind is Crater:
            # Sits on the ground strip: low and wide, must be jumped
            return Crater(x=self.width, y=self.ground_y - 20.0)
        if kind is Meteor:
            return Meteor(x=self.width, y=self.ground_y - 40.0)
        if kind is Crow:
            return Crow(x=self.width, y=self._safe_altitude())
        raise ValueError(f"Unknown obstacle type: {kind!r}")

    def make_power_up(self, kind: Optional[type] = None) -> PowerUp:
        kind = kind or self.rng.choice(POWER_UP_TYPES)
        if kind is ShieldPowerUp:
            return ShieldPowerUp(x=self.width, y=self._safe_altitude())
        if kind is DoubleJumpPowerUp:
            return DoubleJumpPowerUp(x=self.width, y=self._safe_altitude())
        raise ValueError(f"Unknown power-up type: {kind!r}")

    def update(self, world, registry, now_ms: float) -> tuple[Optional[Obstacle], Optional[PowerUp]]:
        """Run both gates once. Returns whatever was spawned (or None, None)."""
        obstacle = power_up = None

        if now_ms - world.last_obstacle_spawn_time > obstacle_spawn_threshold(
            world.score, self.rng
        ):
            obstacle = self.make_obstacle()
            registry.add_obstacle(obstacle)
            world.last_obstacle_spawn_time = now_ms
            if VERBOSE:
                print(f"[Spawner] {obstacle.kind} at t={now_ms:.0f}ms")

        if now_ms - world.last_power_up_spawn_time > power_up_spawn_threshold(self.rng):
            power_up = self.make_power_up()
            registry.add_power_up(power_up)
            world.last_power_up_spawn_time = now_ms
            if VERBOSE:
                print(f"[Spawner] {power_up.kind} power-up at t={now_ms:.0f}ms")

        return obstacle, power_up


__all__ = [
    "Spawner",
    "difficulty_multiplier",
    "obstacle_spawn_threshold",
    "power_up_spawn_threshold",
]
