from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pygame
import pytest

from engine.api import FrameData, Point
from engine.app.loader import games_root, load_game_manifest, load_game_module
from engine.timing.scheduler import Scheduler

SCREEN = (1280, 720)


@pytest.fixture
def game(mock_pygame):
    root = games_root() / "whack-a-mole"
    module = load_game_module(root)
    game = module.get_game()
    ctx = SimpleNamespace(screen_size=SCREEN, scheduler=Scheduler())
    game.on_load(ctx, load_game_manifest(root))
    yield game
    game.on_unload()


def _click(x, y, button="left"):
    return FrameData(timestamp=0.0, points=[Point(x, y, button)])


def _center(rect):
    x, y, w, h = rect
    return x + w / 2, y + h / 2


def test_space_starts_the_session(game):
    game.on_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    assert game.snapshot.is_running


def test_clicking_the_button_starts_the_session(game):
    game.on_update(16, _click(*game.button.center))
    assert game.snapshot.is_running
    assert game.snapshot.start_label == "Restart"


def test_clicking_a_mole_scores(game):
    game.engine.start()
    game.ctx.scheduler.advance(600)
    index = next(i for i, c in enumerate(game.snapshot.board) if c.has_target)

    game.on_update(16, _click(*_center(game.layout.cell_rect(index))))
    assert game.snapshot.score == 1
    assert game.snapshot.board[index].hit


def test_right_clicks_and_misses_do_nothing(game):
    game.engine.start()
    game.ctx.scheduler.advance(600)
    index = next(i for i, c in enumerate(game.snapshot.board) if c.has_target)
    center = _center(game.layout.cell_rect(index))

    game.on_update(16, _click(*center, button="right"))
    game.on_update(16, _click(5, 700))
    assert game.snapshot.score == 0


def test_unload_stops_timers(game):
    game.engine.start()
    game.on_unload()
    assert game.ctx.scheduler.pending == 0


def test_draw_covers_every_phase(game):
    surface = pygame.Surface(SCREEN)
    centered = MagicMock()
    # the plugin is loaded from a file path, so patch its globals directly
    plugin_globals = type(game).on_draw.__globals__
    with patch.dict(plugin_globals, {"draw_text": MagicMock(), "draw_text_centered": centered}):
        game.on_draw(surface)
        texts = [call.args[1] for call in centered.call_args_list]
        assert "Start Game!" in texts
        assert any(t.startswith("Click or tap the moles") for t in texts)

        game.engine.start()
        game.ctx.scheduler.advance(600)
        index = next(i for i, c in enumerate(game.snapshot.board) if c.has_target)
        game.engine.handle_hit(index)
        game.on_draw(surface)

        game.ctx.scheduler.advance(30000)
        centered.reset_mock()
        game.on_draw(surface)
        texts = [call.args[1] for call in centered.call_args_list]
        assert "Play Again!" in texts
        assert any(t.startswith("Game Over! You scored 1") for t in texts)
