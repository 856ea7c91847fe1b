"""Tests for check, checkmate, stalemate and game results."""

from __future__ import annotations

import pytest

from arbiter.chess.board import Board
from arbiter.chess.rules import Rules, get_valid_moves, is_checkmate, is_stalemate
from arbiter.enums import Color, GameResult
from arbiter.errors import InvalidBoardError
from arbiter.options import ChessOptions
from arbiter.types import parse_square as sq

EMPTY = "........"

FOOLS_MATE = [
    "rnb.kbnr",
    "pppp.ppp",
    EMPTY,
    "....p...",
    "......Pq",
    ".....P..",
    "PPPPP..P",
    "RNBQKBNR",
]
BACK_RANK_MATE = ["R..k....", EMPTY, "...K....", EMPTY, EMPTY, EMPTY, EMPTY, EMPTY]
STALEMATE = [".......k", EMPTY, ".....KQ.", EMPTY, EMPTY, EMPTY, EMPTY, EMPTY]
ESCAPABLE_CHECK = ["....k...", EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, "r...K..."]


class TestCheckmate:
    def test_fools_mate(self) -> None:
        board = Board.from_rows(FOOLS_MATE)
        assert Rules.is_in_check(board, Color.WHITE)
        assert is_checkmate(board, Color.WHITE)
        assert not is_stalemate(board, Color.WHITE)
        assert Rules.game_result(board, Color.WHITE) == GameResult.BLACK_WINS

    def test_back_rank_mate(self) -> None:
        board = Board.from_rows(BACK_RANK_MATE)
        assert Rules.is_checkmate(board, Color.BLACK)
        assert Rules.game_result(board, Color.BLACK) == GameResult.WHITE_WINS

    def test_check_with_escape_is_not_mate(self) -> None:
        board = Board.from_rows(ESCAPABLE_CHECK)
        assert Rules.is_in_check(board, Color.WHITE)
        assert not Rules.is_checkmate(board, Color.WHITE)
        assert Rules.game_result(board, Color.WHITE) == GameResult.IN_PROGRESS

    @pytest.mark.parametrize("rows", [FOOLS_MATE, BACK_RANK_MATE, STALEMATE, ESCAPABLE_CHECK])
    def test_checkmate_implies_check(self, rows: list[str]) -> None:
        board = Board.from_rows(rows)
        for color in Color:
            if Rules.is_checkmate(board, color):
                assert Rules.is_in_check(board, color)


class TestStalemate:
    def test_cornered_king(self) -> None:
        board = Board.from_rows(STALEMATE)
        assert not Rules.is_in_check(board, Color.BLACK)
        assert is_stalemate(board, Color.BLACK)
        assert not is_checkmate(board, Color.BLACK)
        assert Rules.game_result(board, Color.BLACK) == GameResult.DRAW

    def test_side_with_moves_is_not_stalemated(self) -> None:
        board = Board.from_rows(STALEMATE)
        assert not Rules.is_stalemate(board, Color.WHITE)

    def test_mutually_exclusive(self) -> None:
        for rows in (FOOLS_MATE, BACK_RANK_MATE, STALEMATE):
            board = Board.from_rows(rows)
            for color in Color:
                assert not (
                    Rules.is_checkmate(board, color) and Rules.is_stalemate(board, color)
                )


class TestQueries:
    def test_start_position_in_progress(self) -> None:
        board = Board.initial()
        assert Rules.game_result(board, Color.WHITE) == GameResult.IN_PROGRESS
        assert Rules.has_legal_move(board, Color.BLACK)

    def test_get_valid_moves(self) -> None:
        moves = get_valid_moves(Board.initial(), sq("b1"))
        assert {m.to_sq for m in moves} == {sq("a3"), sq("c3")}

    def test_missing_king_raises(self) -> None:
        board = Board.from_rows(["....k...", EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, "P.......", EMPTY])
        with pytest.raises(InvalidBoardError):
            get_valid_moves(board, sq("a2"))

    def test_options_reach_every_query(self) -> None:
        options = ChessOptions(underpromotion=True)
        mate = Board.from_rows(BACK_RANK_MATE)
        assert Rules.is_checkmate(mate, Color.BLACK, options=options)
        assert is_checkmate(mate, Color.BLACK, None, options)
        assert not is_stalemate(mate, Color.BLACK, options=options)
        assert Rules.game_result(mate, Color.BLACK, options=options) == GameResult.WHITE_WINS

        stale = Board.from_rows(STALEMATE)
        assert Rules.is_stalemate(stale, Color.BLACK, options=options)
        assert Rules.game_result(stale, Color.BLACK, None, options) == GameResult.DRAW
