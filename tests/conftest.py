"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path
from typing import List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, GameStats


# Mine layout for the 5x5 scenario board. Adjacency counts:
#
#   0 0 0 2 *
#   0 0 0 3 *
#   0 0 0 2 *
#   2 2 1 1 1
#   * * 1 0 0
SCENARIO_MINES = [(0, 4), (1, 4), (2, 4), (4, 0), (4, 1)]


class FixedRandom(random.Random):
    """Random source whose sample() always returns the given indices."""

    def __init__(self, indices: List[int]) -> None:
        super().__init__(0)
        self.indices = list(indices)

    def sample(self, population, k, **kwargs):
        return self.indices[:k]


class FakeClock:
    """Manually advanced clock for timing tests."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def make_board(rows: int, cols: int, mines, stats: GameStats = None) -> Board:
    """Build an initialized board with an explicit mine layout."""
    board = Board(BoardConfig(rows, cols, len(mines)), stats=stats)
    board.initialize(mines)
    return board


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def scenario_board() -> Board:
    """5x5 board with 5 mines at SCENARIO_MINES."""
    return make_board(5, 5, SCENARIO_MINES)


@pytest.fixture
def tiny_board() -> Board:
    """2x2 board with its single mine in the top-left corner."""
    return make_board(2, 2, [(0, 0)])


@pytest.fixture
def seeded_board() -> Board:
    """Randomly placed 9x9 board with 10 mines and a fixed seed."""
    return Board.create(9, 9, 10, rng=random.Random(1234))


@pytest.fixture
def uninitialized_board() -> Board:
    """Allocated 5x5 board whose mines have not been placed yet."""
    return Board(BoardConfig(5, 5, 5))


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell(0, 0)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(0, 0, is_mine=True)
