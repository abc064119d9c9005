from __future__ import annotations
import pygame
from typing import List, Tuple

from whack.api.config import EngineConfig
from whack.api.frame_data import Point


class PointerInput:
    """
    Click collector:
    - Every MOUSEBUTTONDOWN becomes one Point for the next frame.
    - Respects --mirror by converting window coords -> logical coords.
    - Presses are delivered once; `drain` hands them out and forgets them.
    """

    def __init__(self, cfg: EngineConfig):
        self.mirror = cfg.mirror
        self._clicks: List[Point] = []

    def _to_logical(self, x: int, y: int, w: int, h: int) -> Tuple[float, float]:
        if self.mirror:
            x = (w - 1) - x
        return float(x), float(y)

    def handle_pygame_event(self, event: pygame.event.Event, screen_size: Tuple[int, int]) -> None:
        w, h = screen_size

        if event.type == pygame.MOUSEBUTTONDOWN:
            # wheel "buttons" are not clicks
            if event.button not in (1, 2, 3):
                return
            lx, ly = self._to_logical(*event.pos, w, h)
            self._clicks.append(Point(lx, ly, event.button))

        elif event.type == pygame.WINDOWFOCUSLOST:
            self._clicks.clear()

    def drain(self) -> List[Point]:
        clicks, self._clicks = self._clicks, []
        return clicks
