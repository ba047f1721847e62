from world.entities import Crater, Meteor, Crow, ShieldPowerUp, DoubleJumpPowerUp
from world.world_registry import EntityRegistry


def test_advance_moves_everything_left_by_speed():
    reg = EntityRegistry()
    reg.add_obstacle(Meteor(x=500, y=310))
    reg.add_power_up(ShieldPowerUp(x=700, y=100))
    reg.update(6.0)
    assert reg.obstacles[0].x == 494
    assert reg.power_ups[0].x == 694


def test_eviction_only_when_trailing_edge_is_past_left_boundary():
    reg = EntityRegistry()
    crater = Crater(x=-54, y=330)  # width 60
    reg.add_obstacle(crater)
    reg.update(6.0)  # x=-60, x + w == 0 -> still visible
    assert reg.obstacles == [crater]
    reg.update(0.5)  # x + w < 0
    assert reg.obstacles == []


def test_eviction_preserves_survivor_order():
    reg = EntityRegistry()
    a = Meteor(x=-31, y=310)  # goes away
    b = Crater(x=100, y=330)
    c = Crow(x=-45, y=200)  # goes away
    d = Meteor(x=300, y=310)
    e = Crow(x=600, y=120)
    for o in (a, b, c, d, e):
        reg.add_obstacle(o)
    p1 = ShieldPowerUp(x=-25, y=100)
    p2 = DoubleJumpPowerUp(x=50, y=100)
    p3 = ShieldPowerUp(x=80, y=100)
    for p in (p1, p2, p3):
        reg.add_power_up(p)

    evicted = reg.update(10.0)

    assert evicted == 3
    assert reg.obstacles == [b, d, e]
    assert [o is x for o, x in zip(reg.obstacles, (b, d, e))] == [True] * 3
    assert reg.power_ups[0] is p2 and reg.power_ups[1] is p3


def test_remove_is_by_identity_and_stable():
    reg = EntityRegistry()
    first = Crater(x=200, y=330)
    twin = Crater(x=200, y=330)
    last = Meteor(x=400, y=310)
    for o in (first, twin, last):
        reg.add_obstacle(o)
    reg.remove_obstacle(twin)
    assert len(reg.obstacles) == 2
    assert reg.obstacles[0] is first
    assert reg.obstacles[1] is last


def test_crow_wings_flap_while_scrolling():
    reg = EntityRegistry(tick_ms=16)
    crow = Crow(x=700, y=150)
    reg.add_obstacle(crow)
    frames = []
    for _ in range(26):
        reg.update(1.0)
        frames.append(crow.frame)
    # 16ms ticks pass the 200ms flap interval on the 13th tick
    assert frames[11] == 0
    assert frames[12] == 1
    assert frames[25] == 0


def test_clear_and_len():
    reg = EntityRegistry()
    reg.add_obstacle(Meteor(x=1, y=1))
    reg.add_power_up(ShieldPowerUp(x=1, y=1))
    assert len(reg) == 2
    reg.clear()
    assert len(reg) == 0
