"""
Minesweeper engine package.

Provides the board engine, tile state, a terminal front-end and a
gymnasium environment.
"""
from .errors import (
    MinesweeperError,
    InvalidDimensions,
    MineCountOutOfRange,
    OutOfRange,
)
from .tile import Tile, TileState, TileView, display_symbol
from .board import Board, BoardConfig, GameState
from .tui import TerminalSession, render_board
from .environment import MinesweeperEnv, play_random_episode

__all__ = [
    "MinesweeperError",
    "InvalidDimensions",
    "MineCountOutOfRange",
    "OutOfRange",
    "Tile",
    "TileState",
    "TileView",
    "display_symbol",
    "Board",
    "BoardConfig",
    "GameState",
    "TerminalSession",
    "render_board",
    "MinesweeperEnv",
    "play_random_episode",
]
