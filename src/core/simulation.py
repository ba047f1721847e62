"""Simulation aggregate: one run's worth of mutable state plus the tick pipeline.

The driver owns exactly one Simulation at a time and replaces it on start or
stop, so there are no module-level singletons to reset.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

import numpy as np

from config import INITIAL_SCROLL_SPEED, TICK_MS
from core.snapshot import (
    BackgroundView,
    ObstacleView,
    PlayerView,
    PowerUpView,
    Snapshot,
    WorldView,
)
from world.player import Player
from world.world_collision import CollisionResolver, TickOutcome
from world.world_registry import EntityRegistry
from world.world_scroller import EnvironmentScroller
from world.world_spawner import Spawner


@dataclass
class World:
    score: int = 0
    scroll_speed: float = INITIAL_SCROLL_SPEED
    night_mode: bool = False
    night_mode_ticks_remaining: int = 0
    last_obstacle_spawn_time: float = 0.0
    last_power_up_spawn_time: float = 0.0
    has_shield: bool = False
    shield_ticks_remaining: int = 0


class Simulation:
    def __init__(
        self,
        *,
        seed: Optional[int] = None,
        tick_ms: float = TICK_MS,
        resolver: Optional[CollisionResolver] = None,
    ) -> None:
        self.seed = seed
        self.world = World()
        self.player = Player(tick_ms=tick_ms)
        self.registry = EntityRegistry(tick_ms=tick_ms)
        self.scroller = EnvironmentScroller(rng=np.random.default_rng(seed))
        self.spawner = Spawner(rng=random.Random(seed))
        self.resolver = resolver or CollisionResolver()

    # Shorthands kept for callers that think in terms of the two collections
    @property
    def obstacles(self):
        return self.registry.obstacles

    @property
    def power_ups(self):
        return self.registry.power_ups

    def step(self, now_ms: float) -> TickOutcome:
        """Advance one tick at simulated time `now_ms`."""
        self.player.update()
        self.scroller.update(self.world.scroll_speed)
        self.spawner.update(self.world, self.registry, now_ms)
        self.registry.update(self.world.scroll_speed)
        return self.resolver.resolve(self.world, self.player, self.registry)

    def snapshot(self, state) -> Snapshot:
        w = self.world
        p = self.player
        return Snapshot(
            state=state,
            world=WorldView(
                score=w.score,
                scroll_speed=w.scroll_speed,
                night_mode=w.night_mode,
                night_mode_ticks_remaining=w.night_mode_ticks_remaining,
                has_shield=w.has_shield,
                shield_ticks_remaining=w.shield_ticks_remaining,
            ),
            player=PlayerView(
                x=p.x,
                y=p.y,
                width=p.width,
                height=p.height,
                vy=p.vy,
                is_jumping=p.is_airborne,
                is_ducking=p.is_ducking,
                has_double_jump=p.has_double_jump,
                can_double_jump=p.can_double_jump,
                frame=p.frame,
            ),
            obstacles=tuple(
                ObstacleView(
                    kind=o.kind,
                    x=o.x,
                    y=o.y,
                    width=o.width,
                    height=o.height,
                    frame=getattr(o, "frame", 0),
                )
                for o in self.registry.obstacles
            ),
            power_ups=tuple(
                PowerUpView(kind=pu.kind, x=pu.x, y=pu.y, width=pu.width, height=pu.height)
                for pu in self.registry.power_ups
            ),
            background=BackgroundView(
                ground_offset=self.scroller.ground_offset,
                stars=self.scroller.stars(),
                planets=self.scroller.planets(),
            ),
        )


__all__ = ["World", "Simulation"]
