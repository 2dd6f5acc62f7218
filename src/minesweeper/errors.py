"""
Error types raised by the Minesweeper engine.

Errors are only raised for the coordinates or parameters the caller
passed in. Neighbor lookups at board edges never raise.
"""
from typing import Tuple


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class InvalidDimensions(MinesweeperError, ValueError):
    """Raised when a board is requested with a zero width or height."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(
            f"Board dimensions must be positive (got {width}x{height})"
        )
        self.width = width
        self.height = height


class MineCountOutOfRange(MinesweeperError, ValueError):
    """Raised when the mine count does not fit on the board."""

    def __init__(self, num_mines: int, max_mines: int) -> None:
        super().__init__(
            f"Mine count {num_mines} out of range (0 to {max_mines})"
        )
        self.num_mines = num_mines
        self.max_mines = max_mines


class OutOfRange(MinesweeperError, IndexError):
    """Raised when a coordinate falls outside the current grid."""

    def __init__(self, position: Tuple[int, ...], shape: Tuple[int, int]) -> None:
        super().__init__(
            f"Position {position} is outside the {shape[0]}x{shape[1]} board"
        )
        self.position = position
        self.shape = shape
