from __future__ import annotations
from typing import List, Tuple

from .snapshot import CellView


class Board:
    """
    Fixed-size row of holes. Each cell has two flags: has_target (a mole is up)
    and hit (that mole was whacked and is on its way down).

    hit is only ever set on an occupied cell and is always cleared together with
    has_target, so hit[i] implies has_target[i].
    """

    def __init__(self, size: int):
        if size <= 0:
            raise ValueError(f"board size must be positive, got {size}")
        self.size = size
        self.has_target: List[bool] = [False] * size
        self.hit: List[bool] = [False] * size

    def __len__(self) -> int:
        return self.size

    def in_bounds(self, index) -> bool:
        return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < self.size

    def reset(self) -> None:
        self.has_target = [False] * self.size
        self.hit = [False] * self.size

    def empty_cells(self) -> List[int]:
        return [i for i, occupied in enumerate(self.has_target) if not occupied]

    def is_full(self) -> bool:
        return all(self.has_target)

    def place(self, index: int) -> bool:
        if self.has_target[index]:
            return False
        self.has_target[index] = True
        self.hit[index] = False
        return True

    def strike(self, index: int) -> bool:
        if not self.has_target[index] or self.hit[index]:
            return False
        self.hit[index] = True
        return True

    def clear(self, index: int) -> bool:
        changed = self.has_target[index] or self.hit[index]
        self.has_target[index] = False
        self.hit[index] = False
        return changed

    def view(self) -> Tuple[CellView, ...]:
        return tuple(CellView(t, h) for t, h in zip(self.has_target, self.hit))
