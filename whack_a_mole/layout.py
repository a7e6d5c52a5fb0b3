from __future__ import annotations
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

Rect = Tuple[int, int, int, int]  # x, y, w, h


@dataclass
class GridLayout:
    """
    Places board cells on screen in reading order and maps pointer positions
    back to cell indices. Purely presentational: the engine only sees indices.
    """
    screen_size: Tuple[int, int]
    cell_count: int
    columns: Optional[int] = None
    cell_size: int = 150
    gap: int = 16
    top: int = 200

    def __post_init__(self):
        if self.columns is None:
            self.columns = max(1, math.ceil(math.sqrt(self.cell_count)))
        self.rows = max(1, math.ceil(self.cell_count / self.columns))
        w, h = self.screen_size
        # shrink cells if the grid would not fit below the HUD
        span = self.cell_size * self.columns + self.gap * (self.columns - 1)
        max_span_w = w - 2 * self.gap
        max_span_h = h - self.top - self.gap
        fit = min(
            (max_span_w - self.gap * (self.columns - 1)) // self.columns,
            (max_span_h - self.gap * (self.rows - 1)) // self.rows,
        )
        if fit < self.cell_size:
            self.cell_size = max(8, fit)
            span = self.cell_size * self.columns + self.gap * (self.columns - 1)
        self.left = (w - span) // 2

    def cell_rect(self, index: int) -> Rect:
        if not 0 <= index < self.cell_count:
            raise IndexError(f"cell {index} out of range 0..{self.cell_count - 1}")
        row, col = divmod(index, self.columns)
        step = self.cell_size + self.gap
        return (self.left + col * step, self.top + row * step, self.cell_size, self.cell_size)

    def rects(self) -> List[Rect]:
        return [self.cell_rect(i) for i in range(self.cell_count)]

    def cell_at(self, x: float, y: float) -> Optional[int]:
        step = self.cell_size + self.gap
        dx = x - self.left
        dy = y - self.top
        if dx < 0 or dy < 0:
            return None
        col, ox = divmod(int(dx), step)
        row, oy = divmod(int(dy), step)
        # in the gap between holes
        if ox >= self.cell_size or oy >= self.cell_size:
            return None
        if col >= self.columns:
            return None
        index = row * self.columns + col
        return index if index < self.cell_count else None
