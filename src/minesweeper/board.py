"""
Board module for Minesweeper game.

Implements the game board with mine placement, flood-fill revealing,
flag tracking and win/lose queries.
"""
import logging
import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Deque, FrozenSet, Iterator, List, Optional, Set, Tuple

import numpy as np

from .errors import InvalidDimensions, MineCountOutOfRange, OutOfRange
from .tile import Tile, TileView


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidDimensions(self.width, self.height)
        if self.num_mines < 0 or self.num_mines > self.size:
            raise MineCountOutOfRange(self.num_mines, self.size)

    @property
    def size(self) -> int:
        """Total number of tiles."""
        return self.width * self.height


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of tiles, the mine and flag positions, and the
    first-reveal marker of the current generation. Each call to
    initialise() starts a new generation.

    Positions are either (row, col) pairs or linear indexes
    row * width + col.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _grid: List[List[Tile]] = field(default_factory=list, repr=False)
    _mines: Set[int] = field(default_factory=set, repr=False)
    _flags: Set[int] = field(default_factory=set, repr=False)
    _first_reveal: bool = True

    def __post_init__(self) -> None:
        """Lay out the first generation after dataclass creation."""
        self._generate(self.config)

    # ========================================================================
    # Initialization (Low-level)
    # ========================================================================

    def initialise(self, width: int, height: int, num_mines: int) -> None:
        """
        Start a new generation with the given parameters.

        The random source carries on from the previous generation.

        Args:
            width: Number of columns.
            height: Number of rows.
            num_mines: Exact number of mines to place.

        Raises:
            InvalidDimensions: If width or height is zero.
            MineCountOutOfRange: If num_mines exceeds width * height.
        """
        self._generate(BoardConfig(width, height, num_mines))

    def restart(self) -> None:
        """Start a new generation with the current configuration."""
        self._generate(self.config)

    def _generate(self, config: BoardConfig) -> None:
        """Replace all state with a freshly mined grid."""
        logger.debug(
            "New generation: %dx%d with %d mines",
            config.width, config.height, config.num_mines,
        )
        self.config = config
        self._grid = [
            [Tile() for _ in range(config.width)]
            for _ in range(config.height)
        ]
        self._mines = set()
        self._flags = set()
        self._first_reveal = True
        self._place_mines()
        self._calculate_adjacent_mines()

    def _place_mines(self) -> None:
        """Draw positions until exactly num_mines distinct ones are mined."""
        total = self.config.size
        while len(self._mines) < self.config.num_mines:
            position = self.rng.randrange(total)
            if position in self._mines:
                continue
            self._mines.add(position)
            row, col = self.coords_of(position)
            self._grid[row][col].is_mine = True

    def _calculate_adjacent_mines(self) -> None:
        """Add every mine to the counts of its neighbors."""
        for position in self._mines:
            row, col = self.coords_of(position)
            for neighbor_row, neighbor_col in self._get_neighbors(row, col):
                self._grid[neighbor_row][neighbor_col].adjacent_mines += 1

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """
        Get valid neighboring tile positions.

        Args:
            row: Row index of center tile.
            col: Column index of center tile.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    def _check_position(self, row: int, col: int) -> None:
        """Raise OutOfRange unless (row, col) is on the board."""
        if not self._is_valid_position(row, col):
            raise OutOfRange((row, col), (self.config.width, self.config.height))

    def position_of(self, row: int, col: int) -> int:
        """Convert (row, col) to a linear position."""
        self._check_position(row, col)
        return row * self.config.width + col

    def coords_of(self, position: int) -> Tuple[int, int]:
        """Convert a linear position to (row, col)."""
        if not 0 <= position < self.config.size:
            raise OutOfRange((position,), (self.config.width, self.config.height))
        return divmod(position, self.config.width)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> Set[Tuple[int, int]]:
        """
        Reveal the tile at the given position.

        Blank tiles flood out to their neighbors. Revealing an already
        open number whose flagged neighbors match its mine count reveals
        the remaining neighbors (chord). If the first reveal of a
        generation lands on a mine, the board is regenerated with the
        same parameters and the reveal is retried.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Set of (row, col) positions revealed by this call, including
            any revealed mine.

        Raises:
            OutOfRange: If (row, col) is outside the board.
        """
        self._check_position(row, col)
        while True:
            revealed = self._flood_reveal(row, col)
            if revealed is not None:
                return revealed
            logger.debug("First reveal hit a mine at (%d, %d), regenerating", row, col)
            self._generate(self.config)

    def reveal_position(self, position: int) -> Set[Tuple[int, int]]:
        """Reveal by linear position. See reveal()."""
        return self.reveal(*self.coords_of(position))

    def _flood_reveal(
        self, initial_row: int, initial_col: int
    ) -> Optional[Set[Tuple[int, int]]]:
        """
        Breadth-first reveal starting at one tile.

        Returns:
            Revealed positions, or None when the first reveal of the
            generation was a mine and the board must be regenerated.
        """
        initial = (initial_row, initial_col)
        revealed: Set[Tuple[int, int]] = set()
        visited: Set[Tuple[int, int]] = set()
        queue: Deque[Tuple[int, int]] = deque([initial])

        while queue:
            position = queue.popleft()
            if position in visited:
                continue
            visited.add(position)

            row, col = position
            tile = self._grid[row][col]
            if tile.is_flagged:
                continue

            was_hidden = tile.reveal()
            if was_hidden:
                if tile.is_mine and self._first_reveal and self._has_safe_tile():
                    return None
                self._first_reveal = False
                revealed.add(position)

            if self._should_propagate(tile, position == initial, was_hidden):
                queue.extend(self._get_neighbors(row, col))

        return revealed

    def _has_safe_tile(self) -> bool:
        # A fully mined board cannot be regenerated into a safe first reveal
        return self.config.num_mines < self.config.size

    @staticmethod
    def _should_propagate(tile: Tile, is_initial: bool, was_hidden: bool) -> bool:
        """Check whether a processed tile opens up its neighbors."""
        if tile.is_mine or tile.is_flagged:
            return False
        if tile.adjacent_mines == 0:
            return True
        # Chord on an already open number
        return (
            is_initial
            and not was_hidden
            and tile.adjacent_flags == tile.adjacent_mines
        )

    def flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a tile.

        Neighbor flag counts are kept in step with the toggle.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False if the tile is revealed.

        Raises:
            OutOfRange: If (row, col) is outside the board.
        """
        position = self.position_of(row, col)
        tile = self._grid[row][col]
        if not tile.toggle_flag():
            return False

        delta = 1 if tile.is_flagged else -1
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            self._grid[neighbor_row][neighbor_col].adjacent_flags += delta

        if tile.is_flagged:
            self._flags.add(position)
        else:
            self._flags.discard(position)
        return True

    def flag_position(self, position: int) -> bool:
        """Toggle flag by linear position. See flag()."""
        return self.flag(*self.coords_of(position))

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        """Get number of columns."""
        return self.config.width

    @property
    def height(self) -> int:
        """Get number of rows."""
        return self.config.height

    @property
    def mines(self) -> FrozenSet[int]:
        """Linear positions of all mines."""
        return frozenset(self._mines)

    @property
    def flags(self) -> FrozenSet[int]:
        """Linear positions of all flags."""
        return frozenset(self._flags)

    def mine_count(self) -> int:
        """Get number of mines on the board."""
        return len(self._mines)

    def flag_count(self) -> int:
        """Get number of flagged tiles."""
        return len(self._flags)

    def tile_at(self, row: int, col: int) -> TileView:
        """
        Get a read-only view of the tile at a position.

        Raises:
            OutOfRange: If (row, col) is outside the board.
        """
        self._check_position(row, col)
        return self._grid[row][col].view()

    def adjacent_flag_count(self, row: int, col: int) -> int:
        """Get the number of flagged neighbors of a tile."""
        self._check_position(row, col)
        return self._grid[row][col].adjacent_flags

    def tiles(self) -> Iterator[Tuple[int, int, TileView]]:
        """Iterate over (row, col, view) in row-major order."""
        for row, tiles in enumerate(self._grid):
            for col, tile in enumerate(tiles):
                yield row, col, tile.view()

    def is_mine_revealed(self) -> bool:
        """Check if any mine has been revealed (game lost)."""
        for position in self._mines:
            row, col = self.coords_of(position)
            if self._grid[row][col].is_revealed:
                return True
        return False

    def is_all_except_mines_revealed(self) -> bool:
        """Check if every safe tile is revealed and no mine is (game won)."""
        for tiles in self._grid:
            for tile in tiles:
                if not tile.is_mine and not tile.is_revealed:
                    return False
        return not self.is_mine_revealed()

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        if self.is_mine_revealed():
            return GameState.LOST
        if self.is_all_except_mines_revealed():
            return GameState.WON
        return GameState.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.game_state == GameState.LOST

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for an agent.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for row in range(self.config.height):
            for col in range(self.config.width):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of tiles that can still be revealed.

        Returns:
            List of (row, col) positions that are hidden and unflagged.
        """
        actions = []
        for row in range(self.config.height):
            for col in range(self.config.width):
                if self._grid[row][col].is_hidden:
                    actions.append((row, col))
        return actions
