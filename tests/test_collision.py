import pytest

from config import GROUND_Y, INITIAL_SCROLL_SPEED
from core.simulation import World
from world.entities import Crater, Meteor, Crow, ShieldPowerUp, DoubleJumpPowerUp
from world.player import Player
from world.world_collision import CollisionResolver, rects_overlap
from world.world_registry import EntityRegistry


@pytest.fixture
def setup():
    return World(), Player(), EntityRegistry(), CollisionResolver()


def meteor_on_player(player):
    # Standing player occupies x 50..90, y 300..350
    return Meteor(x=player.x + 10, y=GROUND_Y - 40)


def test_rects_overlap_is_strict():
    assert rects_overlap((0, 0, 10, 10), (5, 5, 10, 10))
    assert not rects_overlap((0, 0, 10, 10), (10, 0, 10, 10))  # touching edge
    assert not rects_overlap((0, 0, 10, 10), (0, 10, 10, 10))
    assert not rects_overlap((0, 0, 10, 10), (20, 20, 5, 5))


def test_collision_without_shield_ends_run(setup):
    world, player, reg, resolver = setup
    reg.add_obstacle(meteor_on_player(player))
    outcome = resolver.resolve(world, player, reg)
    assert outcome.game_over
    assert len(reg.obstacles) == 1


def test_shield_absorbs_exactly_one_obstacle(setup):
    world, player, reg, resolver = setup
    world.has_shield = True
    world.shield_ticks_remaining = 300
    first = meteor_on_player(player)
    second = Crater(x=player.x, y=GROUND_Y - 20)
    reg.add_obstacle(first)
    reg.add_obstacle(second)

    outcome = resolver.resolve(world, player, reg)

    assert not outcome.game_over
    assert outcome.absorbed is first
    assert reg.obstacles == [second]
    assert world.has_shield is False
    assert world.shield_ticks_remaining == 0

    # Identical collision next tick without a shield ends the run
    outcome = resolver.resolve(world, player, reg)
    assert outcome.game_over


def test_game_over_skips_power_up_pass(setup):
    world, player, reg, resolver = setup
    reg.add_obstacle(meteor_on_player(player))
    reg.add_power_up(ShieldPowerUp(x=player.x, y=player.y))
    outcome = resolver.resolve(world, player, reg)
    assert outcome.game_over
    assert outcome.collected == []
    assert len(reg.power_ups) == 1


def test_ducking_slips_under_high_crow(setup):
    world, player, reg, resolver = setup
    # Crow covers y 290..320: hits a standing player, misses a ducking one
    reg.add_obstacle(Crow(x=player.x, y=290))
    player.duck(True)
    assert not resolver.resolve(world, player, reg).game_over
    player.duck(False)
    assert resolver.resolve(world, player, reg).game_over


def test_double_jump_pickup_on_ground(setup):
    world, player, reg, resolver = setup
    assert player.x == 50 and player.y + player.height == GROUND_Y
    pu = DoubleJumpPowerUp(x=player.x - 5, y=player.y + 10)
    reg.add_power_up(pu)
    outcome = resolver.resolve(world, player, reg)
    assert player.has_double_jump is True
    assert reg.power_ups == []
    assert outcome.collected == [pu]


def test_double_jump_pickup_mid_air_arms_immediately(setup):
    world, player, reg, resolver = setup
    player.jump()
    player.update()
    reg.add_power_up(DoubleJumpPowerUp(x=player.x, y=player.y))
    resolver.resolve(world, player, reg)
    assert player.can_double_jump


def test_every_overlapping_power_up_is_collected(setup):
    world, player, reg, resolver = setup
    far = ShieldPowerUp(x=600, y=100)
    reg.add_power_up(ShieldPowerUp(x=player.x, y=player.y))
    reg.add_power_up(far)
    reg.add_power_up(DoubleJumpPowerUp(x=player.x + 5, y=player.y + 5))
    outcome = resolver.resolve(world, player, reg)
    assert len(outcome.collected) == 2
    assert reg.power_ups == [far]
    assert world.has_shield and world.shield_ticks_remaining == 500
    assert player.has_double_jump


def test_shield_decays_to_zero():
    world, player, reg = World(), Player(), EntityRegistry()
    resolver = CollisionResolver(shield_duration=3)
    world.has_shield = True
    world.shield_ticks_remaining = 3
    resolver.resolve(world, player, reg)
    resolver.resolve(world, player, reg)
    assert world.has_shield
    resolver.resolve(world, player, reg)
    assert not world.has_shield
    assert world.shield_ticks_remaining == 0


def test_score_increments_and_notifies_every_hundred(setup):
    world, player, reg, resolver = setup
    notified = []
    for _ in range(300):
        if resolver.resolve(world, player, reg).score_changed:
            notified.append(world.score)
    assert world.score == 300
    assert notified == [100, 200, 300]


def test_speed_steps_once_at_exact_multiple(setup):
    world, player, reg, resolver = setup
    world.score = 998
    resolver.resolve(world, player, reg)
    assert world.scroll_speed == INITIAL_SCROLL_SPEED
    resolver.resolve(world, player, reg)  # score 1000
    assert world.score == 1000
    assert world.scroll_speed == INITIAL_SCROLL_SPEED + 0.5
    resolver.resolve(world, player, reg)  # 1001
    assert world.scroll_speed == INITIAL_SCROLL_SPEED + 0.5


def test_night_mode_toggles_and_reverts_after_duration():
    world, player, reg = World(), Player(), EntityRegistry()
    resolver = CollisionResolver(night_mode_every=50, night_mode_duration=20)
    world.score = 49
    resolver.resolve(world, player, reg)  # 50
    assert world.night_mode
    assert world.night_mode_ticks_remaining == 20
    for _ in range(19):
        resolver.resolve(world, player, reg)
    assert world.night_mode
    resolver.resolve(world, player, reg)  # 20 ticks after the toggle
    assert not world.night_mode
    assert world.score == 70


def test_night_mode_default_cycle_reset_not_stacked(setup):
    world, player, reg, resolver = setup
    world.score = 4999
    resolver.resolve(world, player, reg)  # 5000
    assert world.night_mode
    world.score = 9999
    world.night_mode_ticks_remaining = 1
    resolver.resolve(world, player, reg)  # 10000: boundary toggles back, re-arms
    assert not world.night_mode
    assert world.night_mode_ticks_remaining == 5000


def test_invalid_resolver_config():
    with pytest.raises(ValueError):
        CollisionResolver(speed_step_every=0)
    with pytest.raises(ValueError):
        CollisionResolver(shield_duration=-1)
