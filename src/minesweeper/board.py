"""
Board module for Minesweeper game.

Implements the game board with mine placement, adjacency counts,
cascading reveal and win/lose detection.
"""
import logging
import random
from collections import deque
from typing import Deque, Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellView
from .config import BoardConfig
from .errors import BoardStateError, InvalidDimensionError, InvalidMineCountError
from .stats import GameResult, GameStats

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, revealing logic,
    and win/lose conditions. Cells live in a dense row-major list
    indexed by row * cols + col.

    A board serves exactly one game: construct it, call initialize(),
    then drive it with reveal_cell() and toggle_flag() until result
    is terminal.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        stats: Optional[GameStats] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Allocate an empty grid.

        Args:
            config: Board dimensions and mine count (default: 9x9, 10 mines).
            stats: Statistics collaborator notified of mines and game end.
            rng: Random source for mine placement.
        """
        self.config = config or BoardConfig()
        self.stats = stats or GameStats()
        self._rng = rng or random.Random()
        self._cells: List[Cell] = [
            Cell(row, col)
            for row in range(self.config.rows)
            for col in range(self.config.cols)
        ]
        self._result = GameResult.IN_PROGRESS
        self._revealed_non_mine = 0
        self._initialized = False

    @classmethod
    def create(
        cls,
        rows: int,
        cols: int,
        mine_count: int,
        rng: Optional[random.Random] = None,
        stats: Optional[GameStats] = None,
    ) -> "Board":
        """Build and initialize a board in one step."""
        board = cls(BoardConfig(rows, cols, mine_count), stats=stats, rng=rng)
        board.initialize()
        return board

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def initialize(self, mine_positions: Optional[Iterable[Position]] = None) -> None:
        """
        Place mines and compute adjacency counts.

        Args:
            mine_positions: Explicit mine layout. When omitted, positions
                are sampled uniformly without replacement.

        Raises:
            BoardStateError: If the board was already initialized.
            InvalidMineCountError: If the layout has the wrong size or
                repeats a position.
            InvalidDimensionError: If a layout position is off the grid.
        """
        if self._initialized:
            raise BoardStateError("Board is already initialized")

        if mine_positions is None:
            indices = self._sample_mine_indices()
        else:
            indices = self._layout_to_indices(mine_positions)

        # All mines must exist before any count is incremented.
        for index in indices:
            self._cells[index].is_mine = True
        for index in indices:
            mine = self._cells[index]
            for neighbor in self._neighbors(mine.row, mine.col):
                neighbor.adjacent_mines += 1

        self._initialized = True
        logger.debug(
            "Initialized %dx%d board with %d mines",
            self.config.rows, self.config.cols, self.config.mine_count,
        )

    def _sample_mine_indices(self) -> List[int]:
        """Pick mine cell indices at random."""
        return self._rng.sample(range(len(self._cells)), self.config.mine_count)

    def _layout_to_indices(self, mine_positions: Iterable[Position]) -> List[int]:
        """Validate an explicit mine layout and convert it to indices."""
        indices = []
        for row, col in mine_positions:
            if not self._is_valid_position(row, col):
                raise InvalidDimensionError(
                    f"Mine position ({row}, {col}) is outside the board"
                )
            indices.append(self._index(row, col))
        if len(set(indices)) != len(indices):
            raise InvalidMineCountError("Mine layout repeats a position")
        if len(indices) != self.config.mine_count:
            raise InvalidMineCountError(
                f"Mine layout has {len(indices)} mines, "
                f"expected {self.config.mine_count}"
            )
        return indices

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _index(self, row: int, col: int) -> int:
        return row * self.config.cols + col

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    def _neighbors(self, row: int, col: int) -> List[Cell]:
        """
        Get the up-to-8 in-bounds cells around a position.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            Neighboring cells, clipped at the grid boundary.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append(self._cells[self._index(new_row, new_col)])
        return neighbors

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal_cell(self, row: int, col: int) -> None:
        """
        Reveal a cell, cascading through zero-count regions.

        Out-of-range and already revealed cells are ignored. Revealing a
        mine loses the game; revealing the last safe cell wins it. Either
        way every cell is revealed afterwards.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Raises:
            BoardStateError: If initialize() has not been called.
        """
        if not self._initialized:
            raise BoardStateError("Board must be initialized before revealing")
        if not self._is_valid_position(row, col):
            return
        target = self._cells[self._index(row, col)]
        if target.is_revealed:
            return

        queue: Deque[Cell] = deque([target])
        while queue:
            cell = queue.popleft()
            if not cell.reveal():
                # Enqueued by more than one neighbor.
                continue

            if cell.is_mine:
                self.stats.increment_mines_uncovered()
                self._finish(GameResult.LOST)
                return

            self._revealed_non_mine += 1
            if cell.adjacent_mines == 0:
                queue.extend(
                    neighbor
                    for neighbor in self._neighbors(cell.row, cell.col)
                    if not neighbor.is_revealed
                )

        if self._revealed_non_mine == self.config.safe_cells:
            self._finish(GameResult.WON)

    def _finish(self, result: GameResult) -> None:
        """Enter a terminal state and expose the whole board."""
        self._result = result
        self.stats.end_game(result)
        for cell in self._cells:
            cell.reveal()
        logger.debug(
            "Game over: %s after %d safe reveals",
            result.name, self._revealed_non_mine,
        )

    def toggle_flag(self, row: int, col: int) -> None:
        """
        Toggle the flag on an unrevealed cell.

        Flags never block reveals; out-of-range and revealed cells
        are ignored.
        """
        if not self._is_valid_position(row, col):
            return
        self._cells[self._index(row, col)].toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def mine_count(self) -> int:
        return self.config.mine_count

    @property
    def safe_cell_count(self) -> int:
        return self.config.safe_cells

    @property
    def result(self) -> GameResult:
        """Get current game result."""
        return self._result

    @property
    def revealed_non_mine_count(self) -> int:
        return self._revealed_non_mine

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._result == GameResult.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._result == GameResult.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._result == GameResult.LOST

    @property
    def flag_count(self) -> int:
        return sum(1 for cell in self._cells if cell.is_flagged)

    def query_cell(self, row: int, col: int) -> Optional[CellView]:
        """Get a snapshot of the cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._cells[self._index(row, col)].snapshot()

    def hidden_positions(self) -> List[Position]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (row, col) positions that are not revealed.
        """
        return [(cell.row, cell.col) for cell in self._cells if cell.is_hidden]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for automated players.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        values = [cell.to_observation() for cell in self._cells]
        return np.array(values, dtype=np.int8).reshape(
            self.config.rows, self.config.cols
        )
