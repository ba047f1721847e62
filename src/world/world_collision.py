"""Collision and effects resolution, run once per tick after movement.

Order within a tick:

1. score and pacing (score events, speed steps, day/night cycle)
2. shield decay
3. obstacles: first overlap only; a shield absorbs it, otherwise the run ends
4. power-ups: every overlap is collected
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from config import (
    SCORE_NOTIFY_EVERY,
    SPEED_STEP,
    SPEED_STEP_EVERY,
    NIGHT_MODE_EVERY,
    NIGHT_MODE_DURATION,
    SHIELD_DURATION_TICKS,
)
from world.entities import DoubleJumpPowerUp, Obstacle, PowerUp, ShieldPowerUp


def rects_overlap(
    a: tuple[float, float, float, float], b: tuple[float, float, float, float]
) -> bool:
    """Strict axis-aligned overlap of two (x, y, w, h) boxes; touching edges miss."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def entity_bounds(entity) -> tuple[float, float, float, float]:
    return entity.x, entity.y, entity.width, entity.height


@dataclass
class TickOutcome:
    score_changed: bool = False
    game_over: bool = False
    absorbed: Optional[Obstacle] = None
    collected: List[PowerUp] = field(default_factory=list)


class CollisionResolver:
    def __init__(
        self,
        *,
        score_notify_every: int = SCORE_NOTIFY_EVERY,
        speed_step: float = SPEED_STEP,
        speed_step_every: int = SPEED_STEP_EVERY,
        night_mode_every: int = NIGHT_MODE_EVERY,
        night_mode_duration: int = NIGHT_MODE_DURATION,
        shield_duration: int = SHIELD_DURATION_TICKS,
    ) -> None:
        for name, value in (
            ("score_notify_every", score_notify_every),
            ("speed_step_every", speed_step_every),
            ("night_mode_every", night_mode_every),
        ):
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if night_mode_duration < 0 or shield_duration < 0:
            raise ValueError("durations must be >= 0")
        self.score_notify_every = int(score_notify_every)
        self.speed_step = float(speed_step)
        self.speed_step_every = int(speed_step_every)
        self.night_mode_every = int(night_mode_every)
        self.night_mode_duration = int(night_mode_duration)
        self.shield_duration = int(shield_duration)

    # ------------------------------------------------------------------
    def advance_score(self, world) -> bool:
        """Score and pacing. Returns True when a score notification is due."""
        world.score += 1
        score = world.score

        if score % self.speed_step_every == 0:
            world.scroll_speed += self.speed_step

        if score % self.night_mode_every == 0:
            # Re-arming resets the countdown, it never stacks
            world.night_mode = not world.night_mode
            world.night_mode_ticks_remaining = self.night_mode_duration
        elif world.night_mode_ticks_remaining > 0:
            world.night_mode_ticks_remaining -= 1
            if world.night_mode_ticks_remaining == 0:
                world.night_mode = False

        return score % self.score_notify_every == 0

    def decay_shield(self, world) -> None:
        if world.has_shield and world.shield_ticks_remaining > 0:
            world.shield_ticks_remaining -= 1
            if world.shield_ticks_remaining == 0:
                world.has_shield = False

    def apply_power_up(self, world, player, power_up: PowerUp) -> None:
        if isinstance(power_up, ShieldPowerUp):
            world.has_shield = True
            world.shield_ticks_remaining = self.shield_duration
        elif isinstance(power_up, DoubleJumpPowerUp):
            player.grant_double_jump()
        else:
            raise TypeError(f"Unknown power-up: {power_up!r}")

    def resolve(self, world, player, registry) -> TickOutcome:
        outcome = TickOutcome()
        outcome.score_changed = self.advance_score(world)
        self.decay_shield(world)

        player_box = player.bounds()
        for obstacle in registry.obstacles:
            if not rects_overlap(player_box, entity_bounds(obstacle)):
                continue
            if world.has_shield:
                # Shield takes exactly one hit
                world.has_shield = False
                world.shield_ticks_remaining = 0
                registry.remove_obstacle(obstacle)
                outcome.absorbed = obstacle
                break
            outcome.game_over = True
            return outcome

        for power_up in list(registry.power_ups):
            if rects_overlap(player_box, entity_bounds(power_up)):
                self.apply_power_up(world, player, power_up)
                registry.remove_power_up(power_up)
                outcome.collected.append(power_up)

        return outcome


__all__ = ["CollisionResolver", "TickOutcome", "rects_overlap", "entity_bounds"]
