"""
Unit tests for text rendering.
"""
import numpy as np
import pytest
from minesweeper import Board, initialize, render_board, render_status
from minesweeper.render import cell_symbol, render_observation


class TestCellSymbol:
    """Test the character chosen for each observation value."""

    @pytest.mark.parametrize(
        "value,symbol",
        [(-1, "#"), (-2, "F"), (9, "*"), (0, " "), (1, "1"), (8, "8")],
    )
    def test_symbols(self, value: int, symbol: str) -> None:
        assert cell_symbol(value) == symbol


class TestRenderBoard:
    """Test the full grid layout."""

    def test_hidden_board_layout(self, center_mine_board: Board) -> None:
        assert render_board(center_mine_board).split("\n") == [
            "     0  1  2",
            "    ---------",
            " 0 | #  #  # ",
            " 1 | #  #  # ",
            " 2 | #  #  # ",
        ]

    def test_mixed_board_layout(self, center_mine_board: Board) -> None:
        center_mine_board.reveal(0, 0)
        center_mine_board.toggle_flag(2, 0)
        center_mine_board.reveal(1, 1)
        lines = render_board(center_mine_board).split("\n")
        assert lines[2] == " 0 | 1  #  F "
        assert lines[3] == " 1 | #  *  # "

    def test_zero_cells_render_blank(self) -> None:
        board = initialize(2, 1, 0)
        board.reveal(0, 0)
        assert render_board(board).split("\n")[2] == " 0 |" + " " * 6

    def test_two_digit_indices_stay_aligned(self) -> None:
        obs = np.full((11, 11), -1, dtype=np.int8)
        lines = render_observation(obs).split("\n")
        assert lines[0].endswith(" 9 10")
        assert lines[-1].startswith("10 |")
        assert len(lines) == 13
        assert len(lines[2]) == len(lines[-1])


class TestRenderStatus:
    """Test the status line."""

    def test_status_counts(self, center_mine_board: Board) -> None:
        center_mine_board.reveal(0, 0)
        center_mine_board.toggle_flag(1, 1)
        assert render_status(center_mine_board) == (
            "Mines: 1  Flags: 1  Left: 0  Revealed: 1/8"
        )

    def test_status_shows_negative_left_and_moves(
        self, center_mine_board: Board
    ) -> None:
        """Over-flagging drives the remaining count below zero."""
        center_mine_board.toggle_flag(0, 0)
        center_mine_board.toggle_flag(2, 2)
        assert render_status(center_mine_board, moves_made=2) == (
            "Mines: 1  Flags: 2  Left: -1  Revealed: 0/8  Moves: 2"
        )
