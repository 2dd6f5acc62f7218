"""
Pytest configuration and shared fixtures.
"""
import random
from typing import Callable, Iterable, List, Optional

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Tile


# ============================================================================
# Random Sources
# ============================================================================

class ScriptedRandom:
    """
    Random source that replays fixed positions.

    Once the script runs out it falls back to a seeded random.Random.
    """

    def __init__(self, positions: Iterable[int], seed: int = 0) -> None:
        self._positions: List[int] = list(positions)
        self._fallback = random.Random(seed)

    def randrange(self, stop: int) -> int:
        if self._positions:
            return self._positions.pop(0)
        return self._fallback.randrange(stop)


@pytest.fixture
def make_board() -> Callable[..., Board]:
    """
    Build a board whose mines are drawn from a script.

    Usage: make_board(width, height, [positions...], num_mines=None).
    num_mines defaults to the number of scripted positions.
    """
    def factory(
        width: int,
        height: int,
        positions: Iterable[int],
        num_mines: Optional[int] = None,
    ) -> Board:
        positions = list(positions)
        if num_mines is None:
            num_mines = len(positions)
        config = BoardConfig(width, height, num_mines)
        return Board(config, ScriptedRandom(positions))

    return factory


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a seeded 9x9 board with 10 mines."""
    return Board(rng=random.Random(1234))


@pytest.fixture
def corner_mine_board(make_board) -> Board:
    """
    3x3 board with a single mine in the top-left corner.

        * 1 .
        1 1 .
        . . .
    """
    return make_board(3, 3, [0])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


# ============================================================================
# Tile Fixtures
# ============================================================================

@pytest.fixture
def hidden_tile() -> Tile:
    """Create a hidden tile."""
    return Tile()


@pytest.fixture
def mine_tile() -> Tile:
    """Create a tile containing a mine."""
    return Tile(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
