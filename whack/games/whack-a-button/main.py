from __future__ import annotations
import logging
import pygame

from whack.api import Game, FrameData
from whack.binding import PropertyChanged
from whack.render.shapes import draw_text, draw_button
from whack.round import Phase, RoundConfig, RoundEngine, TargetKind

log = logging.getLogger(__name__)

# Layout
PLAY_TOP = 110                     # px from the top of the window to the play area
MENU_BUTTON_SIZE = (180, 56)
MENU_BUTTON_GAP = 24

# Colours
HUD_COLOR = (230, 230, 230)
SUBTLE_COLOR = (170, 170, 170)
PLAY_AREA_COLOR = (40, 44, 52)
NORMAL_COLOR = (255, 215, 0)       # gold
BONUS_COLOR = (0, 160, 60)         # green
MENU_BUTTON_COLOR = (70, 180, 110)
EXIT_BUTTON_COLOR = (190, 70, 70)
BUTTON_TEXT_COLOR = (20, 20, 20)


class WhackAButton(Game):
    def on_load(self, ctx, manifest):
        self.ctx = ctx
        self.manifest = manifest

        config = RoundConfig.from_options(manifest.get("options", {}))
        self.engine = RoundEngine(config)
        if "duration" in ctx.resources:
            self.engine.set_configured_duration(ctx.resources["duration"])
        self.engine.subscribe(self._on_engine_changed)

        w, h = ctx.screen_size
        pw, ph = config.play_area
        self.button_size = config.exclusion_size
        # play area rect also holds a button drawn at its far edge
        self.play_rect = pygame.Rect(
            (w - pw - self.button_size) // 2, PLAY_TOP, pw + self.button_size, ph + self.button_size)

        bw, bh = MENU_BUTTON_SIZE
        self.start_rect = pygame.Rect((w - bw) // 2, h // 2, bw, bh)
        self.retry_rect = pygame.Rect(w // 2 - bw - MENU_BUTTON_GAP // 2, h - bh - 60, bw, bh)
        self.exit_rect = pygame.Rect(w // 2 + MENU_BUTTON_GAP // 2, h - bh - 60, bw, bh)

    # ------------- helpers -------------
    def _to_screen_rect(self, pos: tuple[int, int]) -> pygame.Rect:
        x, y = pos
        return pygame.Rect(self.play_rect.x + x, self.play_rect.y + y,
                           self.button_size, self.button_size)

    def target_rect(self) -> pygame.Rect:
        return self._to_screen_rect(self.engine.target_position)

    def decoy_rect(self) -> pygame.Rect:
        return self._to_screen_rect(self.engine.decoy_position)

    def _on_engine_changed(self, sender: RoundEngine, args: PropertyChanged) -> None:
        if args.name == "phase":
            log.info("Phase -> %s", sender.phase.name)
        elif args.name == "exit_requested" and sender.exit_requested:
            pygame.event.post(pygame.event.Event(pygame.QUIT))

    def _handle_click(self, x: float, y: float) -> None:
        phase = self.engine.phase
        if phase == Phase.Idle:
            if self.start_rect.collidepoint(x, y):
                self.engine.start()
        elif phase == Phase.Running:
            # target wins when the two buttons overlap under the pointer
            if self.target_rect().collidepoint(x, y):
                self.engine.hit()
            elif self.decoy_rect().collidepoint(x, y):
                self.engine.miss()
        elif phase == Phase.Ended:
            if self.retry_rect.collidepoint(x, y):
                self.engine.retry()
            elif self.exit_rect.collidepoint(x, y):
                self.engine.exit()

    # ------------- loop hooks -------------
    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        # clicks made during this frame count before the timer can run out
        for p in frame.clicks:
            if p.button == 1:
                self._handle_click(p.x, p.y)
        self.engine.tick(dt_ms)

    def on_draw(self, surface: pygame.Surface) -> None:
        e = self.engine
        if e.start_visible:
            self._draw_start_screen(surface)
        if e.play_visible:
            self._draw_play_screen(surface)
        if e.end_visible:
            self._draw_end_screen(surface)

    def _draw_start_screen(self, surface: pygame.Surface) -> None:
        w, _ = self.ctx.screen_size
        draw_text(surface, self.manifest.get("name", "Whack-a-Button"), (20, 20), HUD_COLOR, size=40)
        draw_text(surface, "Click the button before time runs out. Green buttons are worth 2.",
                  (20, 70), SUBTLE_COLOR, size=22)
        draw_text(surface, "Clicking the decoy costs a point.", (20, 94), SUBTLE_COLOR, size=22)
        draw_text(surface, f"Round length: {self.engine.configured_duration} s  (Up/Down to change)",
                  (self.start_rect.x - 110, self.start_rect.y - 50), HUD_COLOR, size=26)
        draw_button(surface, self.start_rect, "Start", MENU_BUTTON_COLOR, BUTTON_TEXT_COLOR, size=32)

    def _draw_play_screen(self, surface: pygame.Surface) -> None:
        e = self.engine
        draw_text(surface, f"Score: {e.score} | Time: {e.remaining_duration}", (20, 16), HUD_COLOR, size=30)
        pygame.draw.rect(surface, PLAY_AREA_COLOR, self.play_rect)

        # decoy first so the real target is on top where they overlap
        draw_button(surface, self.decoy_rect(), fill=NORMAL_COLOR)
        fill = BONUS_COLOR if e.target_kind == TargetKind.Bonus else NORMAL_COLOR
        draw_button(surface, self.target_rect(), fill=fill)

    def _draw_end_screen(self, surface: pygame.Surface) -> None:
        e = self.engine
        draw_text(surface, "Time's up!", (20, 20), HUD_COLOR, size=40)
        y = 110
        for line in (e.points_text, e.final_time_text, e.points_per_sec_text):
            draw_text(surface, line, (40, y), HUD_COLOR, size=32)
            y += 44
        draw_button(surface, self.retry_rect, "Retry", MENU_BUTTON_COLOR, BUTTON_TEXT_COLOR, size=32)
        draw_button(surface, self.exit_rect, "Exit", EXIT_BUTTON_COLOR, BUTTON_TEXT_COLOR, size=32)

    def on_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        phase = self.engine.phase
        if phase == Phase.Idle:
            if event.key in (pygame.K_UP, pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                self.engine.adjust_duration(+1)
            elif event.key in (pygame.K_DOWN, pygame.K_MINUS, pygame.K_KP_MINUS):
                self.engine.adjust_duration(-1)
            elif event.key in (pygame.K_SPACE, pygame.K_RETURN):
                self.engine.start()
        elif phase == Phase.Ended:
            if event.key in (pygame.K_r, pygame.K_RETURN):
                self.engine.retry()

    def on_unload(self) -> None:
        self.engine.unsubscribe(self._on_engine_changed)
        self.engine.dispose()


def get_game():
    return WhackAButton()
