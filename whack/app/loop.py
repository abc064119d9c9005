from __future__ import annotations
import logging
import time
from typing import Any, Dict, Optional
import pygame

from whack.api.config import EngineConfig
from whack.api.frame_data import FrameData
from whack.app.context import Context
from whack.app.loader import load_game_manifest, load_game_module, resolve_game_root
from whack.input.pointer_input import PointerInput

log = logging.getLogger(__name__)

BACKGROUND = (12, 14, 18)
BORDER_COLOR = (220, 220, 220)


def run_game(
    game_id: str,
    screen_size: tuple[int, int],
    fps: int = 60,
    mirror: bool = False,
    resources: Optional[Dict[str, Any]] = None,
):
    # load game before opening the window so a bad id fails fast
    game_root = resolve_game_root(game_id)
    manifest = load_game_manifest(game_root)
    module = load_game_module(game_root)
    game = module.get_game()

    pygame.init()
    pygame.display.set_caption(manifest.get("name", game_id))
    screen = pygame.display.set_mode(screen_size)
    clock = pygame.time.Clock()

    cfg = EngineConfig(
        screen_size=screen_size,
        fps=fps,
        mirror=mirror,
    )
    input_layer = PointerInput(cfg)

    # Render target: draw to off-screen if mirroring, otherwise draw directly to screen
    render_surface = screen if not mirror else pygame.Surface(
        screen_size).convert()

    ctx = Context(
        screen=render_surface,
        clock=clock,
        cfg=cfg,
        screen_size=screen_size,
        resources=dict(resources or {}),
    )

    game.on_load(ctx, manifest)
    log.info("Running %s at %dx%d", game_id, *screen_size)

    running = True
    try:
        while running:
            dt = clock.tick(fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                input_layer.handle_pygame_event(event, screen_size)
                game.on_event(event)

            frame_data = FrameData(timestamp=time.time(),
                                   clicks=input_layer.drain())

            # ---- draw to render_surface ----
            render_surface.fill(BACKGROUND)
            game.on_update(dt, frame_data)
            game.on_draw(render_surface)
            pygame.draw.rect(render_surface, BORDER_COLOR,
                             (8, 8, screen_size[0] - 16, screen_size[1] - 16), 1)

            # ---- present to window ----
            if mirror:
                flipped = pygame.transform.flip(render_surface, True, False)
                screen.blit(flipped, (0, 0))

            pygame.display.flip()

    finally:
        game.on_unload()
        pygame.quit()
        log.info("Stopped %s", game_id)
