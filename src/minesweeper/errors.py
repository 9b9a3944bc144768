"""
Exceptions raised by the Minesweeper engine.

Validation errors surface only when a board is configured or initialized;
gameplay operations on a well-formed board never raise.
"""


class MinesweeperError(Exception):
    """Base class for all Minesweeper errors."""


class InvalidDimensionError(MinesweeperError, ValueError):
    """Grid rows or columns outside the allowed range."""


class InvalidMineCountError(MinesweeperError, ValueError):
    """Mine count outside the allowed range for the grid."""


class BoardStateError(MinesweeperError, RuntimeError):
    """Board used out of lifecycle order (e.g. reveal before initialize)."""
