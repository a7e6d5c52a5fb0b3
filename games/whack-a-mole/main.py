import math
import pygame

from engine.api import Game, FrameData
from engine.render.shapes import draw_text, draw_text_centered
from whack_a_mole import GridLayout, MoleConfig, MoleEngine, Snapshot


HUD_TOP = 20                       # px, top of the score board
GRID_TOP = 240                     # px, first row of holes
HUD_LABEL_COLOR = (180, 140, 90)
HUD_VALUE_COLOR = (240, 225, 200)
LOW_TIME_COLOR = (230, 60, 50)

BUTTON_SIZE = (220, 54)
BUTTON_COLOR = (60, 170, 90)
BUTTON_TEXT_COLOR = (245, 245, 245)

HOLE_COLOR = (70, 45, 25)
HOLE_RIM_COLOR = (120, 85, 50)
MOLE_COLOR = (150, 105, 70)
MOLE_WHACKED_COLOR = (95, 75, 60)
MOLE_NOSE_COLOR = (235, 130, 150)
MESSAGE_COLOR = (250, 200, 80)

INSTRUCTIONS = "Click or tap the moles as they pop up! You have {duration} seconds to score as many points as possible."


class WhackAMole(Game):
    def on_load(self, ctx, manifest):
        self.ctx = ctx
        self.manifest = manifest

        self.config = MoleConfig.from_options(manifest.get("options"))
        self.engine = MoleEngine(ctx.scheduler, self.config)
        self.layout = GridLayout(ctx.screen_size, self.config.board_size,
                                 columns=self.config.columns, top=GRID_TOP)

        w, _ = ctx.screen_size
        self.button = pygame.Rect(0, 0, *BUTTON_SIZE)
        self.button.center = (w // 2, HUD_TOP + 130)

        self.snapshot: Snapshot = self.engine.snapshot
        self._unsubscribe = self.engine.subscribe(self._on_snapshot)

    def _on_snapshot(self, snapshot: Snapshot) -> None:
        self.snapshot = snapshot

    # ------------- loop hooks -------------
    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        for p in frame.points:
            if p.button not in ("left", "touch"):
                continue
            if self.button.collidepoint(p.x, p.y):
                self.engine.on_start_requested()
                continue
            index = self.layout.cell_at(p.x, p.y)
            if index is not None:
                self.engine.on_cell_activated(index)

    def on_event(self, event: pygame.event.Event) -> None:
        # Keyboard fallback: space/enter starts or restarts
        if event.type == pygame.KEYDOWN and event.key in (pygame.K_SPACE, pygame.K_RETURN):
            self.engine.on_start_requested()

    def on_draw(self, surface: pygame.Surface) -> None:
        snap = self.snapshot
        self._draw_hud(surface, snap)
        self._draw_button(surface, snap)
        for index, cell in enumerate(snap.board):
            self._draw_hole(surface, index, cell.has_target, cell.hit)

        w, h = self.ctx.screen_size
        if snap.is_game_over:
            draw_text_centered(surface, f"Game Over! You scored {snap.score} points!",
                               (w // 2, self.button.bottom + 24), MESSAGE_COLOR, size=32)
        if snap.show_instructions:
            draw_text_centered(surface, INSTRUCTIONS.format(duration=snap.duration_sec),
                               (w // 2, h - 30), HUD_LABEL_COLOR, size=22)

    def _draw_hud(self, surface: pygame.Surface, snap: Snapshot) -> None:
        w, _ = self.ctx.screen_size
        time_color = LOW_TIME_COLOR if snap.is_time_low else HUD_VALUE_COLOR
        if snap.is_running and snap.is_time_low:
            # pulse the countdown while time is short
            pulse = 0.5 + 0.5 * math.sin(pygame.time.get_ticks() * 0.01)
            time_color = tuple(int(c * (0.6 + 0.4 * pulse)) for c in LOW_TIME_COLOR)
        columns = (
            ("Score", str(snap.score), HUD_VALUE_COLOR),
            ("Time", f"{snap.time_remaining}s", time_color),
            ("High Score", str(snap.high_score), HUD_VALUE_COLOR),
        )
        for i, (label, value, color) in enumerate(columns):
            cx = w // 2 + (i - 1) * 180
            draw_text_centered(surface, label, (cx, HUD_TOP + 10), HUD_LABEL_COLOR, size=22)
            draw_text_centered(surface, value, (cx, HUD_TOP + 50), color, size=48)

    def _draw_button(self, surface: pygame.Surface, snap: Snapshot) -> None:
        pygame.draw.rect(surface, BUTTON_COLOR, self.button, border_radius=self.button.height // 2)
        draw_text_centered(surface, snap.start_label, self.button.center, BUTTON_TEXT_COLOR, size=32)

    def _draw_hole(self, surface: pygame.Surface, index: int, has_target: bool, hit: bool) -> None:
        x, y, size, _ = self.layout.cell_rect(index)
        hole = pygame.Rect(x, y + size * 2 // 3, size, size // 3)

        if has_target:
            r = size // 3
            cx = x + size // 2
            if hit:
                # squashed: shorter, wider, dimmer
                body = pygame.Rect(0, 0, int(r * 2.2), int(r * 1.1))
                body.midbottom = (cx, hole.centery)
                pygame.draw.ellipse(surface, MOLE_WHACKED_COLOR, body)
                draw_text(surface, "x x", (cx - 14, body.top + 4), (30, 20, 15), size=22)
            else:
                body = pygame.Rect(0, 0, r * 2, int(r * 2.4))
                body.midbottom = (cx, hole.centery)
                pygame.draw.ellipse(surface, MOLE_COLOR, body)
                pygame.draw.circle(surface, MOLE_NOSE_COLOR, (cx, body.top + r), max(3, r // 5))

        pygame.draw.ellipse(surface, HOLE_COLOR, hole)
        pygame.draw.ellipse(surface, HOLE_RIM_COLOR, hole, width=3)

    def on_unload(self) -> None:
        self._unsubscribe()
        self.engine.shutdown()


def get_game():
    return WhackAMole()
