import os
import sys
import pytest
from unittest.mock import MagicMock, patch

# Ensure engine / whack_a_mole can be imported
sys.path.append(os.getcwd())

from engine.timing.scheduler import Scheduler
from whack_a_mole import MoleConfig, MoleEngine


class ScriptedRng:
    """Stand-in for random.Random that picks the requested cells in order."""

    def __init__(self, *picks):
        self.picks = list(picks)
        self.offered = []

    def choice(self, seq):
        self.offered.append(list(seq))
        if self.picks:
            pick = self.picks.pop(0)
            assert pick in seq, f"cell {pick} is not empty"
            return pick
        return seq[0]


@pytest.fixture
def mock_pygame():
    """
    Patch pygame's display-facing modules so game code can be exercised headless.
    """
    with patch('pygame.init'), \
         patch('pygame.display'), \
         patch('pygame.time'):
        import pygame
        pygame.time.get_ticks = MagicMock(return_value=0)
        yield pygame


@pytest.fixture
def scheduler():
    """Fresh virtual clock at t=0."""
    return Scheduler()


@pytest.fixture
def rng():
    return ScriptedRng()


@pytest.fixture
def make_engine(scheduler):
    """Factory for engines on the shared scheduler; options override MoleConfig defaults."""
    def _make(rng=None, **options):
        return MoleEngine(scheduler, MoleConfig(**options), rng=rng)
    return _make


@pytest.fixture
def engine(make_engine, rng):
    return make_engine(rng=rng)


@pytest.fixture
def snapshots(engine):
    """Every snapshot the engine emits, in order."""
    seen = []
    engine.subscribe(seen.append)
    return seen
