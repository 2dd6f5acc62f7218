"""
Tile module for Minesweeper game.

Represents individual tiles on the game board with their state
(hidden/revealed/flagged), content (mine/number) and the running
count of flagged neighbors.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

FLAG_SYMBOL = "F"
MINE_SYMBOL = "*"
BLANK_SYMBOL = " "


class TileState(Enum):
    """Possible visual states of a tile."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Tile Data Class
# ============================================================================

@dataclass
class Tile:
    """
    A single tile in the Minesweeper grid.

    Tiles are owned by a Board and only mutated through it. Collaborators
    outside the engine receive a TileView instead.

    Attributes:
        is_mine: Whether this tile contains a mine.
        adjacent_mines: Count of mines in neighboring tiles (0-8).
        adjacent_flags: Count of currently flagged neighbors (0-8).
        state: Current visual state (hidden, revealed, or flagged).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    adjacent_flags: int = 0
    state: TileState = TileState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this tile.

        Returns:
            True if tile was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != TileState.HIDDEN:
            return False
        self.state = TileState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this tile.

        Returns:
            True if flag was toggled, False if tile is revealed.
        """
        if self.state == TileState.REVEALED:
            return False
        if self.state == TileState.HIDDEN:
            self.state = TileState.FLAGGED
        else:
            self.state = TileState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if tile is hidden."""
        return self.state == TileState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if tile is revealed."""
        return self.state == TileState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if tile is flagged."""
        return self.state == TileState.FLAGGED

    def view(self) -> "TileView":
        """Snapshot this tile as a read-only view."""
        return TileView(
            revealed=self.is_revealed,
            flagged=self.is_flagged,
            mined=self.is_mine,
            adjacent_mines=self.adjacent_mines,
        )

    def to_observation(self) -> int:
        """
        Convert tile to observation value for an agent.

        Returns:
            -1: Hidden tile
            -2: Flagged tile
            0-8: Revealed tile with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == TileState.HIDDEN:
            return -1
        if self.state == TileState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines


@dataclass(frozen=True)
class TileView:
    """Read-only snapshot of a tile handed to renderers."""

    revealed: bool
    flagged: bool
    mined: bool
    adjacent_mines: int

    @property
    def hidden(self) -> bool:
        """Check if tile is neither revealed nor flagged."""
        return not (self.revealed or self.flagged)


def display_symbol(view: TileView) -> str:
    """
    Get the single character used to draw a tile.

    Flags win over mines, mines win over the number. Whether the tile
    is revealed is not considered; the renderer decides when to show it.

    Args:
        view: Tile to draw.

    Returns:
        "F", "*", " " for a blank tile, or the adjacent mine count digit.
    """
    if view.flagged:
        return FLAG_SYMBOL
    if view.mined:
        return MINE_SYMBOL
    if view.adjacent_mines == 0:
        return BLANK_SYMBOL
    return str(view.adjacent_mines)
