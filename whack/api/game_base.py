from __future__ import annotations

import pygame

from whack.app.context import Context

from .frame_data import FrameData


class Game:
    """
    Interface a game folder's get_game() must return. run_game calls the
    hooks in this order: on_load once, then on_event per pygame event and
    on_update/on_draw per frame, and on_unload when the window closes.
    """

    def on_load(self, ctx: Context, manifest: dict) -> None:
        """Build state from the manifest's options and ctx.resources."""
        ...

    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        """Advance timers by dt_ms and apply frame.clicks."""
        ...

    def on_draw(self, surface: pygame.Surface) -> None:
        """Render the current screen; the surface is cleared beforehand."""
        ...

    def on_event(self, event: pygame.event.Event) -> None:
        """Raw pygame events (keys); clicks arrive through FrameData instead."""
        ...

    def on_unload(self) -> None:
        """Release subscriptions and timers."""
        ...
