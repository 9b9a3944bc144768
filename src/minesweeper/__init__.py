"""
Minesweeper game package.

Provides the board engine plus text and Gymnasium front-ends.
"""
from .cell import Cell, CellState, CellView
from .config import (
    BoardConfig,
    Difficulty,
    DEFAULT_MAX_MINE_PERCENTAGE,
    MAX_GRID_DIMENSION,
    MIN_GRID_DIMENSION,
    is_valid_grid_dimension,
    is_valid_mine_count,
    max_mines_for_grid,
    validate_game_settings,
)
from .errors import (
    BoardStateError,
    InvalidDimensionError,
    InvalidMineCountError,
    MinesweeperError,
)
from .stats import GameResult, GameStats
from .board import Board
from .environment import MinesweeperEnv
from .random_player import RandomPlayer

__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "BoardConfig",
    "Difficulty",
    "DEFAULT_MAX_MINE_PERCENTAGE",
    "MAX_GRID_DIMENSION",
    "MIN_GRID_DIMENSION",
    "is_valid_grid_dimension",
    "is_valid_mine_count",
    "max_mines_for_grid",
    "validate_game_settings",
    "BoardStateError",
    "InvalidDimensionError",
    "InvalidMineCountError",
    "MinesweeperError",
    "GameResult",
    "GameStats",
    "Board",
    "MinesweeperEnv",
    "RandomPlayer",
]
