"""Entry point kept minimal by delegating to Engine.

`--headless TICKS` skips the window entirely and pulses the driver directly,
which is handy for smoke-testing balance changes from a terminal.
"""

from __future__ import annotations

import argparse
from typing import Optional

from config import TICK_MS
from core.driver import Driver, DriverState


def _autopilot(driver: Driver) -> None:
    """Jump at anything low that is about to reach the player."""
    snap = driver.snapshot()
    p = snap.player
    reach = p.x + p.width + snap.world.scroll_speed * 6
    for o in snap.obstacles:
        if o.x + o.width < p.x:
            continue
        if o.x <= reach and o.y + o.height > p.y:
            driver.on_jump_pressed()
        break


def run_headless(ticks: int, *, seed: Optional[int] = None, autopilot: bool = True) -> Driver:
    driver = Driver(seed=seed)
    driver.start()
    for i in range(ticks):
        if driver.state is not DriverState.RUNNING:
            break
        if autopilot:
            _autopilot(driver)
        driver.on_tick(i * TICK_MS)
    return driver


def main(argv: Optional[list[str]] = None):  # small wrapper for clarity / debuggers
    ap = argparse.ArgumentParser(description="Cosmo Runner")
    ap.add_argument("--seed", type=int, default=None, help="RNG seed for reproducible runs")
    ap.add_argument("--fullscreen", action="store_true", help="Open a fullscreen window")
    ap.add_argument(
        "--headless",
        type=int,
        metavar="TICKS",
        default=None,
        help="Run TICKS simulation steps without a window and print the result",
    )
    args = ap.parse_args(argv)

    if args.headless is not None:
        driver = run_headless(args.headless, seed=args.seed)
        snap = driver.snapshot()
        print(
            f"state={driver.state.value} score={snap.world.score} "
            f"speed={snap.world.scroll_speed:.1f} obstacles={len(snap.obstacles)}"
        )
        return 0

    from core.engine import Engine  # noqa: E402 (needs a display)

    Engine(seed=args.seed, fullscreen=args.fullscreen).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
