from .config import MoleConfig
from .board import Board
from .snapshot import CellView, SessionPhase, Snapshot
from .core import MoleEngine
from .layout import GridLayout

__all__ = [
    "MoleConfig",
    "Board",
    "CellView",
    "SessionPhase",
    "Snapshot",
    "MoleEngine",
    "GridLayout",
]
