"""
Unit tests for the terminal front-end.

Tests text rendering and the single-character command loop.
"""
import pytest
from minesweeper import Board, TerminalSession, render_board
from minesweeper.tui import QUIT, RESTART


# ============================================================================
# Rendering Tests
# ============================================================================

class TestRenderBoard:
    """Test plain-text board rendering."""

    def test_new_board_shows_hidden_tiles(self, corner_mine_board: Board) -> None:
        """Hidden tiles draw as '#' under a flag counter."""
        lines = render_board(corner_mine_board).split("\n")
        assert lines[0] == "0/1"
        assert lines[1:] == [" #  #  # "] * 3

    def test_cursor_is_bracketed(self, corner_mine_board: Board) -> None:
        """The cursor tile is wrapped in brackets."""
        lines = render_board(corner_mine_board, cursor=(1, 2)).split("\n")
        assert lines[2] == " #  # [#]"

    def test_revealed_and_flagged_tiles(self, corner_mine_board: Board) -> None:
        """Open tiles show their symbol, flags show 'F'."""
        corner_mine_board.reveal(1, 1)
        corner_mine_board.flag(0, 0)
        lines = render_board(corner_mine_board).split("\n")

        assert lines[0] == "1/1"
        assert lines[1] == " F  #  # "
        assert lines[2] == " #  1  # "

    def test_reveal_all_shows_mines_and_wrong_flags(
        self, corner_mine_board: Board
    ) -> None:
        """End-of-game view exposes mines and marks bad flags."""
        corner_mine_board.flag(2, 2)
        lines = render_board(corner_mine_board, reveal_all=True).split("\n")

        assert lines[1] == " *  #  # "
        assert lines[3] == " #  #  X "

    def test_reveal_all_keeps_unopened_safe_tiles_hidden(
        self, corner_mine_board: Board
    ) -> None:
        """End-of-game view shows numbers only for opened tiles."""
        corner_mine_board.reveal(1, 1)
        corner_mine_board.reveal(0, 0)
        lines = render_board(corner_mine_board, reveal_all=True).split("\n")

        assert corner_mine_board.tile_at(0, 1).revealed is False
        assert lines[1] == " *  #  # "
        assert lines[2] == " #  1  # "


# ============================================================================
# Session Tests
# ============================================================================

class TestTerminalSession:
    """Test cursor movement and command handling."""

    def test_cursor_wraps_around(self, corner_mine_board: Board) -> None:
        """Moving past an edge wraps to the other side."""
        session = TerminalSession(corner_mine_board)
        session.handle("<^")
        assert session.cursor == (2, 2)
        session.handle(">v")
        assert session.cursor == (0, 0)

    def test_reveal_command(self, corner_mine_board: Board) -> None:
        """'r' reveals the tile under the cursor."""
        session = TerminalSession(corner_mine_board)
        session.handle("v>r")
        assert corner_mine_board.tile_at(1, 1).revealed is True

    def test_flag_command(self, corner_mine_board: Board) -> None:
        """'f' toggles the flag under the cursor."""
        session = TerminalSession(corner_mine_board)
        session.handle("F")
        assert corner_mine_board.tile_at(0, 0).flagged is True

    @pytest.mark.parametrize("commands,expected", [("q", QUIT), (">s", RESTART), ("x?", None)])
    def test_control_commands(
        self, corner_mine_board: Board, commands: str, expected
    ) -> None:
        """Quit and restart are reported; unknown input is ignored."""
        session = TerminalSession(corner_mine_board)
        assert session.handle(commands) == expected

    def test_commands_stop_after_game_ends(self, corner_mine_board: Board) -> None:
        """Nothing after the winning reveal is applied."""
        session = TerminalSession(corner_mine_board)
        session.handle("vvrvv>>r")
        assert session.handle("") is None
        session.handle("^^r>f")
        assert corner_mine_board.is_lost is False
        assert corner_mine_board.is_won is True
        assert session.status_lines() == ["You win!"]

    def test_loss_banner(self, corner_mine_board: Board) -> None:
        """Revealing the mine after a safe start loses."""
        session = TerminalSession(corner_mine_board)
        session.handle(">r<rf")
        assert corner_mine_board.is_lost is True
        assert corner_mine_board.flag_count() == 0
        assert session.status_lines() == ["You lose!"]
        assert "[" not in session.render()
