from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from .const import (
    BOARD_SIZE,
    GAME_DURATION_SEC,
    HIT_DESPAWN_MS,
    LOW_TIME_WARNING_SEC,
    MOLE_SHOW_TIME_MS,
    MOLE_SPAWN_INTERVAL_MS,
)


@dataclass(frozen=True)
class MoleConfig:
    duration_sec: int = GAME_DURATION_SEC
    board_size: int = BOARD_SIZE
    spawn_interval_ms: int = MOLE_SPAWN_INTERVAL_MS
    show_time_ms: int = MOLE_SHOW_TIME_MS
    hit_despawn_ms: int = HIT_DESPAWN_MS
    low_time_warning_sec: int = LOW_TIME_WARNING_SEC
    # grid columns for the renderer; None means ceil(sqrt(board_size))
    columns: Optional[int] = None

    def __post_init__(self):
        for name in ("duration_sec", "board_size", "spawn_interval_ms", "show_time_ms", "hit_despawn_ms"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.low_time_warning_sec < 0:
            raise ValueError(f"low_time_warning_sec must not be negative, got {self.low_time_warning_sec}")
        if self.columns is not None and self.columns <= 0:
            raise ValueError(f"columns must be positive, got {self.columns}")

    @classmethod
    def from_options(cls, options: Optional[Dict[str, Any]]) -> "MoleConfig":
        """
        Build a config from a manifest `options:` block.
        Missing keys keep their defaults; unknown keys are rejected.
        """
        options = dict(options or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValueError(f"unknown option(s): {', '.join(unknown)}")
        kwargs: Dict[str, Any] = {}
        for key, value in options.items():
            if key == "columns" and value is None:
                kwargs[key] = None
                continue
            # int() would quietly turn True into 1 and 2.9 into 2
            if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
                raise ValueError(f"option {key} must be an integer, got {value!r}")
            try:
                kwargs[key] = int(value)
            except (TypeError, ValueError):
                raise ValueError(f"option {key} must be an integer, got {value!r}") from None
        return cls(**kwargs)
