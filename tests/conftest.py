"""
Pytest configuration and shared fixtures.
"""
import itertools
import random
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mines import Cell, GameConfig, GameEngine, GameSession


# ============================================================================
# Random Sources
# ============================================================================

class ScriptedRandom:
    """Random source that replays a fixed sequence of draws, cycling."""

    def __init__(self, draws: Iterable[int]) -> None:
        self._draws = list(draws)
        self._cycle = itertools.cycle(self._draws)
        self.calls = 0

    def randrange(self, start, stop=None, step=1):
        self.calls += 1
        return next(self._cycle)


def draws_for(cols: int, mines: List[Tuple[int, int]]) -> List[int]:
    """Flat positions for the given (row, col) mines."""
    return [row * cols + col for row, col in mines]


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def make_session() -> Callable[..., GameSession]:
    """Factory building a session with mines at chosen positions."""
    def build(rows: int, cols: int, mines: List[Tuple[int, int]]) -> GameSession:
        rng = ScriptedRandom(draws_for(cols, mines) or [0])
        return GameSession(GameConfig(rows, cols, len(mines)), rng)
    return build


@pytest.fixture
def center_mine_session(make_session) -> GameSession:
    """3x3 session with a single mine in the middle."""
    return make_session(3, 3, [(1, 1)])


@pytest.fixture
def corner_mine_session(make_session) -> GameSession:
    """3x3 session with a single mine in the bottom-right corner."""
    return make_session(3, 3, [(2, 2)])


@pytest.fixture
def wall_session(make_session) -> GameSession:
    """5x5 session with a full row of mines splitting the board."""
    return make_session(5, 5, [(2, col) for col in range(5)])


@pytest.fixture
def seeded_session() -> GameSession:
    """Default-size session with reproducible deployment."""
    return GameSession(GameConfig(16, 16, 40), random.Random(1234))


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def status_messages() -> List[str]:
    """Collects text sent to an engine's status sink."""
    return []


@pytest.fixture
def make_engine(status_messages) -> Callable[..., GameEngine]:
    """Factory building an engine whose sessions use fixed mines."""
    def build(rows: int, cols: int, mines: List[Tuple[int, int]]) -> GameEngine:
        rng = ScriptedRandom(draws_for(cols, mines) or [0])
        return GameEngine(
            GameConfig(rows, cols, len(mines)),
            status_sink=status_messages.append,
            rng=rng,
        )
    return build


@pytest.fixture
def center_mine_engine(make_engine) -> GameEngine:
    """3x3 engine with a single mine in the middle."""
    return make_engine(3, 3, [(1, 1)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def covered_cell() -> Cell:
    """Create a covered safe cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a covered cell containing a mine."""
    return Cell(is_mine=True)
