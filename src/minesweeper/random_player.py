"""
Random player for Minesweeper.

Serves as a baseline by revealing random hidden cells.
"""
from typing import Optional, Tuple

import numpy as np


class RandomPlayer:
    """
    Player that selects actions uniformly at random.

    Works on MinesweeperEnv observations, where hidden cells read -1
    and flagged cells -2.
    """

    def __init__(
        self,
        rows: int = 9,
        cols: int = 9,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random player.

        Args:
            rows: Number of rows in the board.
            cols: Number of columns in the board.
            seed: Random seed for reproducibility.
        """
        self.rows = rows
        self.cols = cols
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random action index from valid actions, or 0 if none remain.
        """
        if valid_actions is None:
            valid_actions = observation.flatten() < 0

        valid_indices = np.flatnonzero(valid_actions)
        if len(valid_indices) == 0:
            return 0
        return int(self.rng.choice(valid_indices))

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(action, self.cols)
