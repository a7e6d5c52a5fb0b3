from __future__ import annotations
import pygame
from typing import Dict, List, Tuple

from engine.api.config import EngineConfig
from engine.api.frame_data import Point

_BTN_NAME = {1: "left", 2: "middle", 3: "right"}


class PointerInput:
    """
    Press-only pointer input:
    - Each mouse button press or touch-down yields exactly one Point for the next frame.
    - Holding or dragging does not repeat the press.
    - Respects --mirror by converting window coords -> logical coords.
    """

    def __init__(self, cfg: EngineConfig, buttons: Dict[int, str] | None = None):
        self.mirror = cfg.mirror
        self.buttons: Dict[int, str] = dict(buttons or _BTN_NAME)
        self._pending: List[Point] = []

    def _to_logical(self, x: float, y: float, w: int, h: int) -> Tuple[float, float]:
        if self.mirror:
            x = (w - 1) - x
        return float(x), float(y)

    def handle_pygame_event(self, event: pygame.event.Event, screen_size: Tuple[int, int]) -> None:
        w, h = screen_size

        if event.type == pygame.MOUSEBUTTONDOWN:
            # touch screens also synthesize mouse events; FINGERDOWN already covers those
            if getattr(event, "touch", False):
                return
            btn_name = self.buttons.get(event.button)
            if btn_name:
                lx, ly = self._to_logical(*event.pos, w, h)
                self._pending.append(Point(lx, ly, btn_name))

        elif event.type == pygame.FINGERDOWN:
            # finger coords are normalized to 0..1
            lx, ly = self._to_logical(event.x * w, event.y * h, w, h)
            self._pending.append(Point(lx, ly, "touch"))

        elif event.type == pygame.WINDOWFOCUSLOST:
            self._pending.clear()

    def emit_points(self) -> List[Point]:
        """
        Return the presses collected since the last call and forget them.
        """
        out, self._pending = self._pending, []
        return out
