"""
Game statistics for Minesweeper.

Tracks moves, uncovered mines, timing and the final result of one game.
"""
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional


class GameResult(Enum):
    """Possible outcomes of a game."""

    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_terminal(self) -> bool:
        return self is not GameResult.IN_PROGRESS


@dataclass
class GameStats:
    """
    Statistics collaborator observed by front-ends.

    The board signals mine uncovering and game end; front-ends count moves.

    Attributes:
        moves_made: Moves submitted by the player.
        mines_uncovered: Mines revealed by the player.
        result: Outcome recorded by end_game().
    """

    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    moves_made: int = 0
    mines_uncovered: int = 0
    result: GameResult = GameResult.IN_PROGRESS
    start_time: float = field(init=False)
    end_time: Optional[float] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.start_time = self.clock()

    def increment_moves_made(self) -> None:
        self.moves_made += 1

    def increment_mines_uncovered(self) -> None:
        self.mines_uncovered += 1

    def end_game(self, result: GameResult) -> None:
        """
        Record the end of the game.

        Only the first terminal result is kept.
        """
        if self.result.is_terminal:
            return
        self.end_time = self.clock()
        self.result = result

    @property
    def total_time(self) -> Optional[float]:
        """Seconds from start to end, or None while the game runs."""
        if self.end_time is None:
            return None
        return self.end_time - self.start_time

    def elapsed(self) -> float:
        """Seconds since the start, frozen once the game has ended."""
        if self.end_time is not None:
            return self.end_time - self.start_time
        return self.clock() - self.start_time
