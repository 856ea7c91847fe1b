"""Tests for the 10x10 checkers board."""

from __future__ import annotations

import pytest

from arbiter.checkers.board import (
    CheckersBoard,
    create_initial_board,
    is_playable,
    promotion_row,
    square_number,
)
from arbiter.checkers.move import CheckersMove
from arbiter.checkers.piece import CheckerPiece
from arbiter.enums import Color
from arbiter.errors import InvalidBoardError


class TestGeometry:
    def test_playable_squares(self) -> None:
        assert is_playable((0, 1))
        assert not is_playable((0, 0))
        assert is_playable((9, 0))
        assert not is_playable((10, 1))

    def test_square_numbers(self) -> None:
        assert square_number((0, 1)) == 1
        assert square_number((0, 9)) == 5
        assert square_number((1, 0)) == 6
        assert square_number((9, 8)) == 50

    def test_promotion_rows(self) -> None:
        assert promotion_row(Color.WHITE) == 0
        assert promotion_row(Color.BLACK) == 9

    def test_move_notation(self) -> None:
        assert str(CheckersMove((6, 1), (5, 0))) == "31-26"
        assert str(CheckersMove((6, 1), (4, 3), ((5, 2),))) == "31x22"


class TestCheckersBoard:
    def test_initial_setup(self) -> None:
        board = create_initial_board()
        assert board.count(Color.WHITE) == 20
        assert board.count(Color.BLACK) == 20
        assert all(sq[0] <= 3 for sq in board.pieces(Color.BLACK))
        assert all(sq[0] >= 6 for sq in board.pieces(Color.WHITE))
        assert all(is_playable(sq) for sq, _ in board.occupied())
        assert board[4, 1] is None and board[5, 0] is None

    def test_pieces_only_on_playable_squares(self) -> None:
        board = CheckersBoard()
        with pytest.raises(InvalidBoardError):
            board[0, 0] = CheckerPiece(Color.WHITE)
        board[0, 0] = None

    def test_text_round_trip(self) -> None:
        board = CheckersBoard.initial()
        board[5, 0] = CheckerPiece(Color.WHITE, is_king=True)
        assert CheckersBoard.from_rows(board.to_rows()) == board
        assert board.to_rows()[5][0] == "W"

    def test_from_rows_rejects_bad_input(self) -> None:
        with pytest.raises(InvalidBoardError):
            CheckersBoard.from_rows(["." * 10] * 9)
        with pytest.raises(InvalidBoardError):
            CheckersBoard.from_rows(["w" + "." * 9] + ["." * 10] * 9)
        with pytest.raises(InvalidBoardError):
            CheckersBoard.from_rows([".x" + "." * 8] + ["." * 10] * 9)

    def test_get_off_board(self) -> None:
        assert CheckersBoard.initial().get((10, 1)) is None

    def test_copy_is_independent(self) -> None:
        board = CheckersBoard.initial()
        clone = board.copy()
        clone[6, 1] = None
        assert board[6, 1] == CheckerPiece(Color.WHITE)
        assert clone != board

    def test_crowned_piece(self) -> None:
        man = CheckerPiece(Color.BLACK)
        assert man.crowned() == CheckerPiece(Color.BLACK, is_king=True)
        assert str(man) == "b"
        assert str(man.crowned()) == "B"
