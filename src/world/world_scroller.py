"""Environment scroller: ground offset and cosmetic parallax layers.

Stars and planets are stored as numpy arrays (one row per body) so the whole
layer advances and wraps in a couple of vectorized operations. Nothing here is
collidable.
"""

from __future__ import annotations

import numpy as np

from config import WIDTH, GROUND_Y, STAR_COUNT, PLANET_COUNT


class EnvironmentScroller:
    def __init__(
        self,
        *,
        width: float = WIDTH,
        ground_y: float = GROUND_Y,
        star_count: int = STAR_COUNT,
        planet_count: int = PLANET_COUNT,
        rng: np.random.Generator | None = None,
    ) -> None:
        if width <= 0:
            raise ValueError(f"width must be positive, got {width}")
        self.width = float(width)
        self.ground_y = float(ground_y)
        self._rng = rng if rng is not None else np.random.default_rng()
        self.ground_offset = 0.0

        n = int(star_count)
        self.star_x = self._rng.uniform(0.0, self.width, n)
        self.star_y = self._rng.uniform(0.0, self.ground_y, n)
        self.star_size = self._rng.uniform(1.0, 4.0, n)
        self.star_speed = self._rng.uniform(0.1, 0.6, n)

        m = int(planet_count)
        self.planet_x = self._rng.uniform(0.0, self.width, m)
        self.planet_y = self._rng.uniform(0.0, self.ground_y / 2.0, m)
        self.planet_size = self._rng.uniform(20.0, 60.0, m)
        self.planet_speed = self._rng.uniform(0.05, 0.25, m)
        self.planet_hue = self._rng.uniform(0.0, 360.0, m)

    def update(self, scroll_speed: float) -> None:
        # Ground decoration tiles every `width` pixels
        self.ground_offset = (self.ground_offset + scroll_speed) % self.width

        self.star_x -= self.star_speed
        wrapped = self.star_x < 0.0
        count = int(wrapped.sum())
        if count:
            self.star_x[wrapped] = self.width
            self.star_y[wrapped] = self._rng.uniform(0.0, self.ground_y, count)

        self.planet_x -= self.planet_speed
        gone = (self.planet_x + self.planet_size) < 0.0
        count = int(gone.sum())
        if count:
            self.planet_x[gone] = self.width + self.planet_size[gone]
            self.planet_y[gone] = self._rng.uniform(0.0, self.ground_y / 2.0, count)
            self.planet_hue[gone] = self._rng.uniform(0.0, 360.0, count)

    def stars(self) -> tuple[tuple[float, float, float], ...]:
        return tuple(
            (float(x), float(y), float(s))
            for x, y, s in zip(self.star_x, self.star_y, self.star_size)
        )

    def planets(self) -> tuple[tuple[float, float, float, float], ...]:
        return tuple(
            (float(x), float(y), float(s), float(h))
            for x, y, s, h in zip(
                self.planet_x, self.planet_y, self.planet_size, self.planet_hue
            )
        )


__all__ = ["EnvironmentScroller"]
