"""2D full-screen shading overlay drawn after the world and before the HUD.

Night mode tints the whole scene instead of recolouring every element.
"""

from __future__ import annotations

import pygame

from config import WIDTH, HEIGHT


class WorldShadeOverlay:
    """Simple full-screen shade to darken/tint the world.

    The translucent surface is built once and re-blitted every frame.
    """

    def __init__(
        self,
        opacity: float = 0.3,
        color: tuple[int, int, int] = (0, 0, 40),
        size: tuple[int, int] = (WIDTH, HEIGHT),
    ):
        self.opacity = max(0.0, min(1.0, opacity))
        self.color = color
        self.size = size
        self._surface: pygame.Surface | None = None

    @property
    def alpha(self) -> int:
        return int(round(self.opacity * 255))

    def draw(self, target: pygame.Surface):  # pragma: no cover - visual
        if self._surface is None:
            self._surface = pygame.Surface(self.size, pygame.SRCALPHA)
            self._surface.fill((*self.color, self.alpha))
        target.blit(self._surface, (0, 0))
