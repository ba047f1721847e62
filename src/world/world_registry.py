"""Live obstacle and power-up collections.

Both lists keep spawn order. Removal is a stable compaction so collision
checks always walk the survivors in the same order they were spawned.
"""

from __future__ import annotations

from typing import List

from config import TICK_MS
from world.entities import Crow, Obstacle, PowerUp


def _scroll_and_evict(items: list, scroll_speed: float) -> list:
    survivors = []
    for item in items:
        item.x -= scroll_speed
        # Only evict once the trailing edge has left the screen
        if item.x + item.width >= 0:
            survivors.append(item)
    return survivors


class EntityRegistry:
    def __init__(self, *, tick_ms: float = TICK_MS) -> None:
        self.tick_ms = tick_ms
        self.obstacles: List[Obstacle] = []
        self.power_ups: List[PowerUp] = []

    def add_obstacle(self, obstacle: Obstacle) -> None:
        self.obstacles.append(obstacle)

    def add_power_up(self, power_up: PowerUp) -> None:
        self.power_ups.append(power_up)

    def update(self, scroll_speed: float) -> int:
        """Advance every entity left by `scroll_speed` and drop off-screen ones.

        Returns the number of entities evicted this tick.
        """
        before = len(self.obstacles) + len(self.power_ups)
        for obstacle in self.obstacles:
            if isinstance(obstacle, Crow):
                obstacle.animate(self.tick_ms)
        self.obstacles = _scroll_and_evict(self.obstacles, scroll_speed)
        self.power_ups = _scroll_and_evict(self.power_ups, scroll_speed)
        return before - len(self.obstacles) - len(self.power_ups)

    def remove_obstacle(self, obstacle: Obstacle) -> None:
        # Identity match: two craters at the same spot are still distinct
        self.obstacles = [o for o in self.obstacles if o is not obstacle]

    def remove_power_up(self, power_up: PowerUp) -> None:
        self.power_ups = [p for p in self.power_ups if p is not power_up]

    def clear(self) -> None:
        self.obstacles.clear()
        self.power_ups.clear()

    def __len__(self) -> int:
        return len(self.obstacles) + len(self.power_ups)


__all__ = ["EntityRegistry"]
