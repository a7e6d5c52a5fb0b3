from __future__ import annotations
from dataclasses import dataclass, field
import pygame
from typing import Any, Tuple
from engine.api.config import EngineConfig
from engine.timing.scheduler import Scheduler


@dataclass
class Context:
    screen: pygame.Surface
    clock: pygame.time.Clock
    cfg: EngineConfig
    screen_size: Tuple[int, int]
    # host clock; the loop advances it by the frame delta before on_update
    scheduler: Scheduler = field(default_factory=Scheduler)
    # engine internals exposed read-only for games if needed:
    resources: dict[str, Any] = field(default_factory=dict)
