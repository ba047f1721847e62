from typing import List, Callable
from dataclasses import dataclass, field

# Per-frame callback taking the frame delta in seconds
UpdateFn = Callable[[float], None]


@dataclass
class Scene:
    # Extra per-frame hooks (e.g. HUD animations) run after the scene's own update
    updaters: List[UpdateFn] = field(default_factory=list)

    def update(self, dt: float):
        for fn in self.updaters:
            fn(dt)

    # Optional per-event handler (scenes can override)
    def handle_event(self, event) -> None:
        pass

    # Scenes own their full draw pipeline onto the given surface
    def render(self, surface, **kwargs):  # pragma: no cover - visual
        # By default, do nothing; concrete scenes should override
        pass
