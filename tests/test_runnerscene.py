import pygame
import pytest

from core.driver import Driver, DriverState, IntentResult
from core.scene import Scene
from ui.text_renderer import aligned_topleft
from world.runnerscene import RunnerScene


def key(kind, k):
    return pygame.event.Event(kind, key=k)


@pytest.fixture
def scene():
    now = {"ms": 0}

    def clock():
        now["ms"] += 16
        return now["ms"]

    s = RunnerScene(Driver(seed=5), clock=clock)
    s.driver.simulation.spawner.update = lambda *a, **k: (None, None)
    return s


def test_enter_starts_and_escape_pauses(scene):
    assert scene.handle_event(key(pygame.KEYDOWN, pygame.K_RETURN)) is IntentResult.ACCEPTED
    assert scene.driver.state is DriverState.RUNNING
    assert scene.handle_event(key(pygame.KEYDOWN, pygame.K_ESCAPE)) is IntentResult.ACCEPTED
    assert scene.driver.state is DriverState.PAUSED
    scene.handle_event(key(pygame.KEYDOWN, pygame.K_ESCAPE))
    assert scene.driver.state is DriverState.RUNNING


def test_space_jumps_and_down_ducks(scene):
    scene.handle_event(key(pygame.KEYDOWN, pygame.K_RETURN))
    assert scene.handle_event(key(pygame.KEYDOWN, pygame.K_SPACE)) is IntentResult.ACCEPTED
    assert scene.driver.simulation.player.is_airborne
    scene.handle_event(key(pygame.KEYDOWN, pygame.K_DOWN))
    assert scene.driver.simulation.player.is_ducking
    scene.handle_event(key(pygame.KEYUP, pygame.K_DOWN))
    assert not scene.driver.simulation.player.is_ducking


def test_unmapped_keys_are_ignored(scene):
    scene.handle_event(key(pygame.KEYDOWN, pygame.K_RETURN))
    assert scene.handle_event(key(pygame.KEYDOWN, pygame.K_a)) is IntentResult.IGNORED
    assert scene.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1)) is IntentResult.IGNORED


def test_update_pulses_driver_and_tracks_score_label(scene):
    scene.handle_event(key(pygame.KEYDOWN, pygame.K_RETURN))
    scene.driver.simulation.spawner.update = lambda *a, **k: (None, None)
    ran = []
    scene.updaters.append(ran.append)
    for _ in range(200):
        scene.update(0.016)
    assert scene.driver.simulation.world.score == 200
    assert scene.score_label == "Score: 200"
    assert len(ran) == 200


def test_scene_base_runs_updaters():
    calls = []
    s = Scene(updaters=[calls.append])
    s.update(0.5)
    assert calls == [0.5]


@pytest.mark.parametrize(
    "align, expected",
    [
        ("topleft", (100, 50)),
        ("topright", (80, 50)),
        ("bottomleft", (100, 40)),
        ("bottomright", (80, 40)),
        ("center", (90, 45)),
    ],
)
def test_text_alignment(align, expected):
    assert aligned_topleft(100, 50, 20, 10, align) == expected


def test_shade_overlay_clamps_opacity():
    from world.world_shade_overlay import WorldShadeOverlay

    assert WorldShadeOverlay(opacity=2.0).alpha == 255
    assert WorldShadeOverlay(opacity=-1.0).alpha == 0
    assert WorldShadeOverlay(opacity=0.25).alpha == 64
