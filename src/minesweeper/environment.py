"""
Gymnasium environment wrapper for Minesweeper.

Exposes the board engine to automated players through a standard
observation/action interface.
"""
import logging
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board
from .config import BoardConfig

logger = logging.getLogger(__name__)

WIN_REWARD = 10.0
LOSS_REWARD = -10.0
SAFE_REWARD = 1.0
INVALID_REWARD = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine (only after the game ends)

    Actions:
        Discrete action space of size rows * cols.
        Action i reveals the cell at (i // cols, i % cols).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an action on an already revealed cell
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.board: Optional[Board] = None

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a fresh board.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        # Each episode is a new game, so it gets a new board.
        board_seed = int(self.np_random.integers(2**32))
        self.board = Board(self.config, rng=random.Random(board_seed))
        self.board.initialize()
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal one cell.

        Args:
            action: Cell index to reveal (row * cols + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._require_board("step")

        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        terminated = not self.board.is_playing
        if terminated:
            logger.debug(
                "Episode finished: %s in %d steps",
                self.board.result.name, self._steps,
            )

        return self.board.get_observation(), reward, terminated, False, self._get_info()

    def _require_board(self, method: str) -> None:
        """Fail clearly when no game has been started yet."""
        if self.board is None:
            raise RuntimeError(f"Call reset() before {method}()")

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(int(action), self.config.cols)

    def _calculate_reward(self, row: int, col: int) -> float:
        """Reveal a cell and score the outcome."""
        cell = self.board.query_cell(row, col)
        if cell is None or cell.is_revealed:
            return INVALID_REWARD

        self.board.reveal_cell(row, col)

        if self.board.is_won:
            return WIN_REWARD
        if self.board.is_lost:
            return LOSS_REWARD
        return SAFE_REWARD

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.revealed_non_mine_count,
            "total_safe": self.config.safe_cells,
            "game_state": self.board.result.name,
            "valid_actions": len(self.board.hidden_positions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        self._require_board("render")
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as ASCII string."""
        symbols = {-1: ".", -2: "F", 9: "*", 0: " "}
        lines = []
        for row in self.board.get_observation():
            lines.append(
                "".join(symbols.get(int(val), str(val)) + " " for val in row)
            )
        return "\n".join(lines)

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = cell can still be revealed.
        """
        self._require_board("get_action_mask")
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.board.hidden_positions():
            mask[row * self.config.cols + col] = True
        return mask
