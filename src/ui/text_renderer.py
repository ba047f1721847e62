"""Simple screen-space text rendering with pygame fonts.

Blits cached text surfaces onto a target surface. Dynamic labels (score)
reuse a keyed slot and only re-render when their text changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple, Optional

import pygame


@dataclass
class _TextSlot:
    surface: Optional[pygame.Surface] = None
    last_text: str | None = None
    last_color: Tuple[int, int, int] | None = None


def aligned_topleft(
    x: float, y: float, w: int, h: int, align: str = "topleft"
) -> Tuple[float, float]:
    """Translate an anchor point + alignment into the blit's top-left corner.

    align: 'topleft' | 'topright' | 'bottomleft' | 'bottomright' | 'center'
    """
    if align == "topright":
        return x - w, y
    if align == "bottomleft":
        return x, y - h
    if align == "bottomright":
        return x - w, y - h
    if align == "center":
        return x - w / 2, y - h / 2
    return x, y


class TextRenderer:
    """2D text renderer using pygame.font.

    - draw_text() can take a `key` to reuse a slot for dynamic text (score).
    - Without a key, content is cached by (text, color) and reused.
    """

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        font: Optional[pygame.font.Font] = None,
        size: int = 24,
    ) -> None:
        self.width = screen_width
        self.height = screen_height
        if font is None:
            pygame.font.init()
            font = pygame.font.Font(None, size)
        self.font = font
        self._cache: Dict[Tuple[str, Tuple[int, int, int]], pygame.Surface] = {}
        self._slots: Dict[str, _TextSlot] = {}

    def _surface_for(
        self, text: str, color: Tuple[int, int, int], key: Optional[str]
    ) -> pygame.Surface:
        if key is not None:
            slot = self._slots.setdefault(key, _TextSlot())
            if slot.surface is None or slot.last_text != text or slot.last_color != color:
                slot.surface = self.font.render(text, True, color)
                slot.last_text = text
                slot.last_color = color
            return slot.surface
        cache_key = (text, color)
        surf = self._cache.get(cache_key)
        if surf is None:
            surf = self.font.render(text, True, color)
            self._cache[cache_key] = surf
        return surf

    def draw_text(
        self,
        target: pygame.Surface,
        text: str,
        x: float,
        y: float,
        color: Tuple[int, int, int] = (255, 255, 255),
        *,
        key: Optional[str] = None,
        align: str = "topleft",
    ) -> Tuple[int, int]:  # returns (w, h)
        surf = self._surface_for(text, tuple(color), key)
        w, h = surf.get_size()
        target.blit(surf, aligned_topleft(x, y, w, h, align))
        return w, h

    def draw_text_multiline(
        self,
        target: pygame.Surface,
        text: str,
        x: float,
        y: float,
        color: Tuple[int, int, int] = (255, 255, 255),
        *,
        align: str = "topleft",
        line_spacing: float = 1.2,
    ) -> Tuple[int, int]:
        """Draw multi-line text as a block; returns (total_w, total_h)."""
        lines = text.splitlines() or [text]
        line_h = self.font.get_height()
        max_w = max(self.font.size(line)[0] for line in lines)
        n = len(lines)
        total_h = int(line_h if n == 1 else line_h + (n - 1) * line_h * line_spacing)

        start_x, start_y = aligned_topleft(x, y, max_w, total_h, align)
        for i, line in enumerate(lines):
            line_y = start_y + int(i * line_h * line_spacing)
            line_w = self.font.size(line)[0]
            # Centre each line inside a centred block
            line_x = start_x + (max_w - line_w) / 2 if align == "center" else start_x
            self.draw_text(target, line, line_x, line_y, color)
        return int(max_w), int(total_h)


__all__ = ["TextRenderer", "aligned_topleft"]
