"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up the window, pumps events, drives the frame loop.
- Scene: owns the game (driver, input mapping) and draws itself.

The engine never looks inside the simulation; it only forwards events and
asks the active scene to update and render once per frame.
"""

from __future__ import annotations

from typing import Optional

import pygame

from config import *
from world.runnerscene import RunnerScene


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(self, *, seed: Optional[int] = None, fullscreen: bool = FULLSCREEN):
        pygame.init()
        pygame.display.set_caption("Cosmo Runner")
        flags = pygame.SCALED
        if fullscreen:
            flags |= pygame.FULLSCREEN
        try:
            # vsync: 1 to enable, 0 to disable
            self.screen = pygame.display.set_mode(
                (WIDTH, HEIGHT), flags, vsync=(1 if VSYNC else 0)
            )
        except pygame.error:
            # vsync was requested but unavailable on this system/driver
            self.screen = pygame.display.set_mode((WIDTH, HEIGHT), flags)
        self.clock = pygame.time.Clock()

        # Active scene (owns driver & input)
        self.scene = RunnerScene(seed=seed)

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:  # pragma: no cover - visual
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            self.scene.handle_event(event)
        return True

    # ------------------------------------------------------------------
    def update(self, dt: float):
        # Scene owns all gameplay updates
        self.scene.update(dt)

    # ------------------------------------------------------------------
    def render(self):  # pragma: no cover - visual
        self.scene.render(self.screen, fps=self.clock.get_fps())
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        running = True
        while running:
            # The simulation is tick based; cap the frame rate so one frame
            # is roughly one tick.
            dt = self.clock.tick(FPS) / 1000.0
            running = self.handle_events()
            if not running:
                break
            self.update(dt)
            self.render()
        pygame.quit()
