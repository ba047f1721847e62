"""Read-only views handed to the presentation layer once per frame."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WorldView:
    score: int
    scroll_speed: float
    night_mode: bool
    night_mode_ticks_remaining: int
    has_shield: bool
    shield_ticks_remaining: int


@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    width: float
    height: float
    vy: float
    is_jumping: bool
    is_ducking: bool
    has_double_jump: bool
    can_double_jump: bool
    frame: int


@dataclass(frozen=True)
class ObstacleView:
    kind: str
    x: float
    y: float
    width: float
    height: float
    frame: int = 0


@dataclass(frozen=True)
class PowerUpView:
    kind: str
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class BackgroundView:
    ground_offset: float
    # (x, y, size)
    stars: tuple[tuple[float, float, float], ...]
    # (x, y, size, hue)
    planets: tuple[tuple[float, float, float, float], ...]


@dataclass(frozen=True)
class Snapshot:
    state: object
    world: WorldView
    player: PlayerView
    obstacles: tuple[ObstacleView, ...]
    power_ups: tuple[PowerUpView, ...]
    background: BackgroundView
