"""Clock/driver: run state machine and the only entry point that advances time.

    IDLE -> RUNNING <-> PAUSED
    RUNNING -> GAME_OVER -> RUNNING (start)
    any -> IDLE (stop)

Each pulse carries an absolute wall-clock timestamp. The driver turns those
into a simulated clock (sum of non-negative deltas) so spawn gates keep working
with irregular pulses, and so real time spent paused never reaches the game.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from config import TICK_MS, VERBOSE
from core.simulation import Simulation
from core.snapshot import Snapshot
from world.world_collision import CollisionResolver, TickOutcome


class DriverState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class IntentResult(Enum):
    ACCEPTED = "accepted"
    IGNORED = "ignored"


class Driver:
    def __init__(
        self,
        *,
        seed: Optional[int] = None,
        tick_ms: float = TICK_MS,
        resolver_factory: Optional[Callable[[], CollisionResolver]] = None,
        on_score_changed: Optional[Callable[[int], None]] = None,
        on_game_over: Optional[Callable[[int], None]] = None,
    ) -> None:
        if tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {tick_ms}")
        self.seed = seed
        self.tick_ms = tick_ms
        self._resolver_factory = resolver_factory or CollisionResolver
        self.on_score_changed = on_score_changed
        self.on_game_over = on_game_over

        self.state = DriverState.IDLE
        self._runs = 0
        self.simulation = self._new_simulation()
        self.final_score: Optional[int] = None
        self.sim_time_ms = 0.0
        self._last_timestamp: Optional[float] = None
        self._stepping = False

    def _new_simulation(self) -> Simulation:
        # Seeded drivers still vary between runs, but reproducibly
        seed = None if self.seed is None else self.seed + self._runs
        return Simulation(
            seed=seed, tick_ms=self.tick_ms, resolver=self._resolver_factory()
        )

    def _log(self, message: str) -> None:
        if VERBOSE:
            print(f"[Driver] {message}")

    def _emit(self, hook: Optional[Callable[[int], None]], value: int, name: str) -> None:
        if hook is None:
            return
        try:
            hook(value)
        except Exception as e:
            # Keep the loop alive; a broken display hook must not end the run
            print(f"[Driver] {name} hook failed: {e}")

    # ------------------------------------------------------------------
    @property
    def running(self) -> bool:
        return self.state in (DriverState.RUNNING, DriverState.PAUSED)

    @property
    def paused(self) -> bool:
        return self.state is DriverState.PAUSED

    def start(self) -> IntentResult:
        if self.state not in (DriverState.IDLE, DriverState.GAME_OVER):
            return IntentResult.IGNORED
        self.simulation = self._new_simulation()
        self._runs += 1
        self.final_score = None
        self.sim_time_ms = 0.0
        self._last_timestamp = None
        self.state = DriverState.RUNNING
        self._log("run started")
        self._emit(self.on_score_changed, 0, "score_changed")
        return IntentResult.ACCEPTED

    def stop(self) -> IntentResult:
        self.simulation = self._new_simulation()
        self.final_score = None
        self.sim_time_ms = 0.0
        self._last_timestamp = None
        self.state = DriverState.IDLE
        self._log("stopped")
        return IntentResult.ACCEPTED

    def pause(self) -> IntentResult:
        if self.state is not DriverState.RUNNING:
            return IntentResult.IGNORED
        self.state = DriverState.PAUSED
        self._log(f"paused at score {self.simulation.world.score}")
        return IntentResult.ACCEPTED

    def resume(self) -> IntentResult:
        if self.state is not DriverState.PAUSED:
            return IntentResult.IGNORED
        # Forget the last pulse so the paused interval is never replayed
        self._last_timestamp = None
        self.state = DriverState.RUNNING
        self._log("resumed")
        return IntentResult.ACCEPTED

    def toggle_pause(self) -> IntentResult:
        if self.state is DriverState.RUNNING:
            return self.pause()
        if self.state is DriverState.PAUSED:
            return self.resume()
        return IntentResult.IGNORED

    def _game_over(self) -> None:
        self.state = DriverState.GAME_OVER
        self.final_score = self.simulation.world.score
        self._log(f"game over, final score {self.final_score}")

    # ------------------------------------------------------------------
    def on_tick(self, timestamp_ms: float) -> IntentResult:
        if self.state is not DriverState.RUNNING or self._stepping:
            return IntentResult.IGNORED

        if self._last_timestamp is None:
            delta = 0.0
        else:
            delta = max(0.0, float(timestamp_ms) - self._last_timestamp)
        self._last_timestamp = float(timestamp_ms)
        self.sim_time_ms += delta

        self._stepping = True
        try:
            outcome: TickOutcome = self.simulation.step(self.sim_time_ms)
        finally:
            self._stepping = False

        if outcome.game_over:
            self._game_over()
        # Hooks run after the step so they may call start()/stop() safely
        if outcome.score_changed:
            self._emit(self.on_score_changed, self.simulation.world.score, "score_changed")
        if outcome.game_over:
            self._emit(self.on_game_over, self.final_score, "game_over")
        return IntentResult.ACCEPTED

    # Control intents ----------------------------------------------------
    def _accepting_input(self) -> bool:
        return self.state is DriverState.RUNNING

    def on_jump_pressed(self) -> IntentResult:
        if not self._accepting_input():
            return IntentResult.IGNORED
        player = self.simulation.player
        if player.jump() or player.double_jump():
            return IntentResult.ACCEPTED
        return IntentResult.IGNORED

    def on_duck_pressed(self) -> IntentResult:
        if not self._accepting_input():
            return IntentResult.IGNORED
        self.simulation.player.duck(True)
        return IntentResult.ACCEPTED

    def on_duck_released(self) -> IntentResult:
        if not self._accepting_input():
            return IntentResult.IGNORED
        self.simulation.player.duck(False)
        return IntentResult.ACCEPTED

    def on_pause_toggle(self) -> IntentResult:
        return self.toggle_pause()

    def on_start(self) -> IntentResult:
        return self.start()

    def snapshot(self) -> Snapshot:
        return self.simulation.snapshot(self.state)


__all__ = ["Driver", "DriverState", "IntentResult"]
