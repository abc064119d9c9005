"""
Tests for turning mouse events into per-frame clicks.
"""

import pygame

from whack.api import EngineConfig
from whack.input.pointer_input import PointerInput

SCREEN = (640, 480)


def press(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)


class TestPointerInput:

    def test_clicks_are_drained_once(self):
        pi = PointerInput(EngineConfig(screen_size=SCREEN))
        pi.handle_pygame_event(press((10, 20)), SCREEN)
        pi.handle_pygame_event(press((30, 40), button=3), SCREEN)

        clicks = pi.drain()
        assert [(p.x, p.y, p.button) for p in clicks] == [(10.0, 20.0, 1), (30.0, 40.0, 3)]
        assert pi.drain() == []

    def test_mirror_flips_x(self):
        pi = PointerInput(EngineConfig(screen_size=SCREEN, mirror=True))
        pi.handle_pygame_event(press((10, 20)), SCREEN)
        (p,) = pi.drain()
        assert (p.x, p.y) == (629.0, 20.0)

    def test_wheel_and_release_ignored(self):
        pi = PointerInput(EngineConfig(screen_size=SCREEN))
        pi.handle_pygame_event(press((10, 20), button=4), SCREEN)
        pi.handle_pygame_event(
            pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(10, 20), button=1), SCREEN)
        assert pi.drain() == []

    def test_focus_loss_clears_pending(self):
        pi = PointerInput(EngineConfig(screen_size=SCREEN))
        pi.handle_pygame_event(press((10, 20)), SCREEN)
        pi.handle_pygame_event(pygame.event.Event(pygame.WINDOWFOCUSLOST), SCREEN)
        assert pi.drain() == []
