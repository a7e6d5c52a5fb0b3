from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


@dataclass
class Point:
    x: float
    y: float
    # "left", "middle", "right" or "touch"
    button: str = "left"


@dataclass
class FrameData:
    timestamp: float
    # pointer presses since the previous frame, already in logical screen coords
    points: List[Point] = field(default_factory=list)

    def presses(self, button: str = "left") -> List[Point]:
        return [p for p in self.points if p.button == button]
