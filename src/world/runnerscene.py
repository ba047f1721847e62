"""Runner scene: owns the driver, maps pygame input to intents, draws snapshots.

The scene never touches simulation state directly. Input becomes driver
intents, time becomes `on_tick` pulses, and drawing reads one frozen snapshot
per frame.
"""

from __future__ import annotations

import math
from typing import Callable, Optional

import pygame

from config import *
from core.driver import Driver, DriverState, IntentResult
from core.scene import Scene
from core.snapshot import Snapshot
from ui.text_renderer import TextRenderer
from world.world_shade_overlay import WorldShadeOverlay


JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP)
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


class RunnerScene(Scene):
    def __init__(
        self,
        driver: Optional[Driver] = None,
        *,
        seed: Optional[int] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        super().__init__()
        self.score_label = "Score: 0"
        self.final_label: Optional[str] = None
        self.driver = driver or Driver(seed=seed)
        self.driver.on_score_changed = self._on_score_changed
        self.driver.on_game_over = self._on_game_over
        # Millisecond clock; pygame's is only valid after pygame.init()
        self._clock = clock or pygame.time.get_ticks

        self._shade = WorldShadeOverlay(opacity=0.25, color=(0, 0, 60))
        self._text: Optional[TextRenderer] = None

    # Notifications ------------------------------------------------------
    def _on_score_changed(self, score: int) -> None:
        self.score_label = f"Score: {score}"

    def _on_game_over(self, final_score: int) -> None:
        self.final_label = f"Game over! Final score: {final_score}"

    # Input --------------------------------------------------------------
    def handle_event(self, event) -> IntentResult:
        d = self.driver
        if event.type == pygame.KEYDOWN:
            if event.key in JUMP_KEYS:
                return d.on_jump_pressed()
            if event.key == pygame.K_DOWN:
                return d.on_duck_pressed()
            if event.key == pygame.K_ESCAPE:
                return d.on_pause_toggle()
            if event.key in START_KEYS:
                result = d.on_start()
                if result is IntentResult.ACCEPTED:
                    self.final_label = None
                return result
        elif event.type == pygame.KEYUP and event.key == pygame.K_DOWN:
            return d.on_duck_released()
        return IntentResult.IGNORED

    def update(self, dt: float) -> None:
        self.driver.on_tick(self._clock())
        super().update(dt)

    # Drawing ------------------------------------------------------------
    def render(self, surface: pygame.Surface, *, fps: float | None = None):  # pragma: no cover - visual
        if self._text is None:
            self._text = TextRenderer(WIDTH, HEIGHT, size=28)
        snap = self.driver.snapshot()
        night = snap.world.night_mode

        surface.fill(SKY_NIGHT if night else SKY_DAY)
        self._draw_background(surface, snap)
        self._draw_ground(surface, snap)
        for view in snap.obstacles:
            self._draw_obstacle(surface, view)
        for view in snap.power_ups:
            self._draw_power_up(surface, view)
        self._draw_player(surface, snap)
        if night:
            self._shade.draw(surface)
        self._draw_hud(surface, snap, fps)

    def _draw_background(self, surface, snap: Snapshot) -> None:  # pragma: no cover - visual
        for x, y, size in snap.background.stars:
            pygame.draw.circle(surface, (255, 255, 255), (int(x), int(y)), max(1, int(size)))
        for x, y, size, hue in snap.background.planets:
            color = pygame.Color(0)
            color.hsla = (hue % 360.0, 70, 50, 100)
            pygame.draw.circle(surface, color, (int(x), int(y)), int(size))

    def _draw_ground(self, surface, snap: Snapshot) -> None:  # pragma: no cover - visual
        night = snap.world.night_mode
        pygame.draw.rect(
            surface, GROUND_NIGHT if night else GROUND_DAY, (0, GROUND_Y, WIDTH, GROUND_HEIGHT)
        )
        detail = GROUND_DETAIL_NIGHT if night else GROUND_DETAIL_DAY
        offset = snap.background.ground_offset
        for i in range(20):
            x = (i * 100 - offset) % WIDTH
            h = math.sin(i * 0.5) * 10 + 15
            pygame.draw.rect(surface, detail, (int(x), int(GROUND_Y - h), 50, int(h)))

    def _draw_obstacle(self, surface, o) -> None:  # pragma: no cover - visual
        rect = pygame.Rect(int(o.x), int(o.y), int(o.width), int(o.height))
        if o.kind == "crater":
            pygame.draw.ellipse(surface, (34, 34, 34), rect)
        elif o.kind == "meteor":
            trail = [
                (rect.right, rect.top),
                (rect.right + 20, rect.top - 20),
                (rect.right, rect.bottom),
            ]
            pygame.draw.polygon(surface, (255, 100, 0), trail)
            pygame.draw.circle(surface, (170, 85, 34), rect.center, rect.width // 2)
        elif o.kind == "crow":
            pygame.draw.ellipse(surface, (51, 51, 153), rect)
            wing_dy = -20 if o.frame % 2 == 0 else 20
            for root, tip in (
                ((rect.left + 10, rect.top + 10), (rect.left - 10, rect.top + 10 + wing_dy)),
                ((rect.right - 10, rect.top + 10), (rect.right + 10, rect.top + 10 + wing_dy)),
            ):
                pygame.draw.polygon(surface, (51, 51, 153), [root, tip, (root[0], rect.top)])

    def _draw_power_up(self, surface, p) -> None:  # pragma: no cover - visual
        center = (int(p.x + p.width / 2), int(p.y + p.height / 2))
        radius = int(p.width / 2)
        if p.kind == "shield":
            pygame.draw.circle(surface, (0, 255, 255), center, radius)
            pygame.draw.circle(surface, (0, 0, 0), center, int(p.width / 3), 2)
        else:
            pygame.draw.circle(surface, (255, 0, 255), center, radius)
            pygame.draw.polygon(
                surface,
                (0, 0, 0),
                [
                    (center[0], int(p.y + 5)),
                    (int(p.x + p.width - 5), int(p.y + p.height - 5)),
                    (int(p.x + 5), int(p.y + p.height - 5)),
                ],
            )

    def _draw_player(self, surface, snap: Snapshot) -> None:  # pragma: no cover - visual
        p = snap.player
        shielded = snap.world.has_shield
        body = pygame.Rect(int(p.x), int(p.y), int(p.width), int(p.height))
        pygame.draw.rect(surface, (0, 255, 255) if shielded else (255, 255, 255), body)
        pygame.draw.rect(surface, (170, 170, 255), (body.x + 5, body.y - 10, body.width - 10, 15))
        pygame.draw.rect(surface, (0, 0, 0), (body.x + 10, body.y - 5, body.width - 20, 5))
        legs = (170, 170, 170)
        if p.is_jumping:
            pygame.draw.rect(surface, legs, (body.x + 5, body.bottom, 10, 10))
            pygame.draw.rect(surface, legs, (body.right - 15, body.bottom, 10, 10))
        elif p.is_ducking:
            pygame.draw.rect(surface, legs, (body.x + 5, body.bottom, 30, 5))
        elif p.frame < PLAYER_FRAME_COUNT // 2:
            pygame.draw.rect(surface, legs, (body.x + 5, body.bottom, 10, 15))
            pygame.draw.rect(surface, legs, (body.right - 15, body.bottom - 10, 10, 10))
        else:
            pygame.draw.rect(surface, legs, (body.x + 5, body.bottom - 10, 10, 10))
            pygame.draw.rect(surface, legs, (body.right - 15, body.bottom, 10, 15))
        if shielded:
            radius = int(max(p.width, p.height) * 0.7)
            pygame.draw.circle(surface, (0, 255, 255), body.center, radius, 2)

    def _draw_hud(self, surface, snap: Snapshot, fps) -> None:  # pragma: no cover - visual
        text = self._text
        text.draw_text(surface, self.score_label, WIDTH - 12, 10, key="score", align="topright")
        if fps is not None:
            text.draw_text(surface, f"FPS: {fps:5.1f}", 12, 10, (255, 0, 0), key="fps")
        state = snap.state
        if state is DriverState.IDLE:
            msg = "COSMO RUNNER\nSpace/Up: jump   Down: duck   Esc: pause\nPress Enter to start"
        elif state is DriverState.PAUSED:
            msg = "Paused\nPress Esc to resume"
        elif state is DriverState.GAME_OVER:
            msg = f"{self.final_label}\nPress Enter to play again"
        else:
            return
        text.draw_text_multiline(surface, msg, WIDTH / 2, HEIGHT / 2, align="center")


__all__ = ["RunnerScene"]
