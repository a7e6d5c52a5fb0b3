from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class SessionPhase(Enum):
    Idle = 1
    Running = 2
    Ended = 3


@dataclass(frozen=True)
class CellView:
    has_target: bool
    hit: bool


@dataclass(frozen=True)
class Snapshot:
    """What the renderer needs to draw one frame. Never mutated once emitted."""
    board: Tuple[CellView, ...]
    score: int
    time_remaining: int
    is_running: bool
    high_score: int
    phase: SessionPhase
    duration_sec: int
    low_time_warning_sec: int

    @property
    def is_game_over(self) -> bool:
        return not self.is_running and self.time_remaining == 0

    @property
    def start_label(self) -> str:
        if self.is_running:
            return "Restart"
        if self.time_remaining == 0:
            return "Play Again!"
        return "Start Game!"

    @property
    def show_instructions(self) -> bool:
        return not self.is_running and self.time_remaining == self.duration_sec

    @property
    def is_time_low(self) -> bool:
        return self.time_remaining <= self.low_time_warning_sec

    @property
    def visible_targets(self) -> int:
        return sum(1 for c in self.board if c.has_target)
