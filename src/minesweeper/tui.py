"""
Terminal front-end for Minesweeper.

Draws a board as plain text and turns typed command strings into
cursor moves, reveals and flags.
"""
from typing import List, Optional, Tuple

from .board import Board
from .tile import TileView, display_symbol


# ============================================================================
# Constants
# ============================================================================

HIDDEN_SYMBOL = "#"
WRONG_FLAG_SYMBOL = "X"

QUIT = "quit"
RESTART = "restart"

HELP_TEXT = "> < v ^ move, r reveal, f flag, s new game, q quit"


# ============================================================================
# Rendering
# ============================================================================

def _tile_symbol(view: TileView, reveal_all: bool) -> str:
    """Pick the character shown for one tile."""
    if reveal_all:
        if view.flagged and not view.mined:
            return WRONG_FLAG_SYMBOL
        if view.hidden and not view.mined:
            return HIDDEN_SYMBOL
        return display_symbol(view)
    if view.hidden:
        return HIDDEN_SYMBOL
    return display_symbol(view)


def render_board(
    board: Board,
    cursor: Optional[Tuple[int, int]] = None,
    reveal_all: bool = False,
) -> str:
    """
    Render the board as text.

    Args:
        board: Board to draw.
        cursor: Optional (row, col) to highlight with brackets.
        reveal_all: Show every mine and mark misplaced flags, used once
            the game is over.

    Returns:
        Flag counter line followed by one line per row.
    """
    lines = [f"{board.flag_count()}/{board.mine_count()}"]
    row_str = ""
    current_row = 0
    for row, col, view in board.tiles():
        if row != current_row:
            lines.append(row_str)
            row_str = ""
            current_row = row
        symbol = _tile_symbol(view, reveal_all)
        if cursor == (row, col):
            row_str += f"[{symbol}]"
        else:
            row_str += f" {symbol} "
    lines.append(row_str)
    return "\n".join(lines)


# ============================================================================
# Terminal Session
# ============================================================================

class TerminalSession:
    """
    Cursor state and command handling for one terminal game.

    The cursor wraps around the board edges.
    """

    def __init__(self, board: Board) -> None:
        """Start with the cursor in the top-left corner."""
        self.board = board
        self.cursor_row = 0
        self.cursor_col = 0

    @property
    def cursor(self) -> Tuple[int, int]:
        """Get cursor position as (row, col)."""
        return self.cursor_row, self.cursor_col

    def move(self, delta_row: int, delta_col: int) -> None:
        """Move the cursor, wrapping at the edges."""
        self.cursor_row = (self.cursor_row + delta_row) % self.board.height
        self.cursor_col = (self.cursor_col + delta_col) % self.board.width

    def handle(self, commands: str) -> Optional[str]:
        """
        Apply a string of single-character commands.

        Processing stops early on quit, restart, or once the game ends.

        Args:
            commands: Characters typed by the player (case-insensitive).

        Returns:
            QUIT, RESTART, or None to keep playing.
        """
        for command in commands.lower():
            if command == ">":
                self.move(0, 1)
            elif command == "<":
                self.move(0, -1)
            elif command == "v":
                self.move(1, 0)
            elif command == "^":
                self.move(-1, 0)
            elif command == "r":
                self.board.reveal(*self.cursor)
            elif command == "f":
                self.board.flag(*self.cursor)
            elif command == "q":
                return QUIT
            elif command == "s":
                return RESTART

            if not self.board.is_playing:
                break
        return None

    def render(self) -> str:
        """Draw the board, fully revealed once the game is over."""
        if self.board.is_playing:
            return render_board(self.board, cursor=self.cursor)
        return render_board(self.board, reveal_all=True)

    def status_lines(self) -> List[str]:
        """Result banner for a finished game, empty while playing."""
        if self.board.is_lost:
            return ["You lose!"]
        if self.board.is_won:
            return ["You win!"]
        return []
