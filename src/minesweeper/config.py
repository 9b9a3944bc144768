"""
Configuration for Minesweeper games.

Holds the game-wide constants, the input validation used by front-ends,
difficulty presets and the structural board configuration.
"""
import math
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidDimensionError, InvalidMineCountError


# ============================================================================
# Constants
# ============================================================================

MIN_GRID_DIMENSION = 2
MAX_GRID_DIMENSION = 10
DEFAULT_MAX_MINE_PERCENTAGE = 0.35


# ============================================================================
# Input Validation
# ============================================================================

def is_valid_grid_dimension(dimension: int) -> bool:
    """Check if a grid dimension is within the allowed range."""
    return MIN_GRID_DIMENSION <= dimension <= MAX_GRID_DIMENSION


def max_mines_for_grid(rows: int, cols: int) -> int:
    """Largest mine count a player may request for a grid."""
    return math.floor(DEFAULT_MAX_MINE_PERCENTAGE * rows * cols)


def is_valid_mine_count(rows: int, cols: int, mine_count: int) -> bool:
    """Check if a mine count is within the allowed range for the grid."""
    return 1 <= mine_count <= max_mines_for_grid(rows, cols)


def validate_game_settings(rows: int, cols: int, mine_count: int) -> None:
    """
    Validate player-supplied game settings.

    Args:
        rows: Number of rows requested.
        cols: Number of columns requested.
        mine_count: Number of mines requested.

    Raises:
        InvalidDimensionError: If rows or cols are out of range.
        InvalidMineCountError: If the mine count is out of range.
    """
    for name, value in (("rows", rows), ("cols", cols)):
        if not is_valid_grid_dimension(value):
            raise InvalidDimensionError(
                f"Grid {name} must be between {MIN_GRID_DIMENSION} "
                f"and {MAX_GRID_DIMENSION}, got {value}"
            )
    if not is_valid_mine_count(rows, cols, mine_count):
        raise InvalidMineCountError(
            f"Number of mines must be between 1 and "
            f"{max_mines_for_grid(rows, cols)}, got {mine_count}"
        )


# ============================================================================
# Difficulty Presets
# ============================================================================

class Difficulty(Enum):
    """Difficulty levels expressed as the fraction of cells holding mines."""

    EASY = 0.15
    MEDIUM = 0.25
    HARD = 0.35

    @property
    def mine_factor(self) -> float:
        return self.value

    def mines_for(self, rows: int, cols: int) -> int:
        """Mine count for a grid at this difficulty (at least one)."""
        count = math.floor(self.mine_factor * rows * cols)
        return max(1, min(count, max_mines_for_grid(rows, cols)))

    def __str__(self) -> str:
        return f"{self.name} ({int(self.mine_factor * 100)}% mines)"


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Only the engine's structural invariants are enforced here; the
    player-facing limits live in validate_game_settings().

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mine_count: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidDimensionError("Board dimensions must be positive")
        if self.mine_count < 1:
            raise InvalidMineCountError("Board needs at least one mine")
        max_mines = self.total_cells - 1
        if self.mine_count > max_mines:
            raise InvalidMineCountError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        """Number of cells that do not hold a mine."""
        return self.total_cells - self.mine_count
