from __future__ import annotations
import logging
import sys
import time
import pygame

from engine.api.config import EngineConfig
from engine.api.frame_data import FrameData
from engine.app.context import Context
from engine.app.loader import games_root, load_game_manifest, load_game_module
from engine.input.pointer_input import PointerInput
from engine.timing.scheduler import Scheduler

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = (12, 14, 18)
BORDER_COLOR = (220, 220, 220)


def run_game(
    game_id: str,
    screen_size: tuple[int, int],
    fps: int = 60,
    mirror: bool = False,
    debug: bool = False,
):
    cfg = EngineConfig(
        screen_size=screen_size,
        fps=fps,
        mirror=mirror,
        debug=debug,
    )

    # load game
    game_root = games_root() / game_id
    try:
        manifest = load_game_manifest(game_root)
        module = load_game_module(game_root)
    except (FileNotFoundError, AttributeError, ValueError) as e:
        print(f"ERROR: could not load game '{game_id}': {e}", file=sys.stderr)
        return
    game = module.get_game()

    pygame.init()
    pygame.display.set_caption(manifest.get("name", game_id))
    screen = pygame.display.set_mode(screen_size)
    clock = pygame.time.Clock()

    input_layer = PointerInput(cfg)

    # Render target: draw to off-screen if mirroring, otherwise draw directly to screen
    render_surface = screen if not mirror else pygame.Surface(
        screen_size).convert()

    ctx = Context(
        screen=render_surface,
        clock=clock,
        cfg=cfg,
        screen_size=screen_size,
        scheduler=Scheduler(),
    )

    try:
        game.on_load(ctx, manifest)
    except ValueError as e:
        print(f"ERROR: could not load game '{game_id}': {e}", file=sys.stderr)
        pygame.quit()
        return
    logger.info("Running %s at %dx%d", game_id, *screen_size)

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

            # timers first, so on_update sees the state as of this frame
            ctx.scheduler.advance(dt)
            frame_data = FrameData(timestamp=time.time(),
                                   points=input_layer.emit_points())

            # ---- draw to render_surface ----
            render_surface.fill(BACKGROUND_COLOR)
            game.on_update(dt, frame_data)
            game.on_draw(render_surface)
            pygame.draw.rect(render_surface, BORDER_COLOR,
                             (8, 8, screen_size[0] - 16, screen_size[1] - 16), 1)
            if debug:
                pygame.display.set_caption(
                    f"{manifest.get('name', game_id)} - {clock.get_fps():.0f} fps, "
                    f"{ctx.scheduler.pending} timers")

            # ---- present to window ----
            if mirror:
                flipped = pygame.transform.flip(render_surface, True, False)
                screen.blit(flipped, (0, 0))

            pygame.display.flip()

    finally:
        game.on_unload()
        ctx.scheduler.cancel_all()
        pygame.quit()
