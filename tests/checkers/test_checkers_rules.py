"""Tests for checkers terminal detection."""

from __future__ import annotations

from collections.abc import Callable

from arbiter.checkers.board import CheckersBoard
from arbiter.checkers.rules import (
    CheckersRules,
    check_game_end,
    get_forced_captures,
    get_valid_moves,
)
from arbiter.enums import Color, GameResult

BoardFactory = Callable[..., CheckersBoard]


class TestCheckGameEnd:
    def test_start_is_in_progress(self) -> None:
        board = CheckersBoard.initial()
        assert check_game_end(board, Color.WHITE) is None
        assert check_game_end(board, Color.BLACK) is None

    def test_side_without_pieces_loses(self, make_checkers_board: BoardFactory) -> None:
        board = make_checkers_board(white=[(5, 4)])
        assert CheckersRules.check_game_end(board, Color.BLACK) == GameResult.WHITE_WINS

    def test_blocked_side_loses(self, make_checkers_board: BoardFactory) -> None:
        board = make_checkers_board(white=[(1, 0)], black=[(0, 1)])
        assert check_game_end(board, Color.WHITE) == GameResult.BLACK_WINS
        assert check_game_end(board, Color.BLACK) is None

    def test_capture_counts_as_a_move(self, make_checkers_board: BoardFactory) -> None:
        board = make_checkers_board(white=[(5, 4)], black=[(4, 5), (0, 1)])
        assert check_game_end(board, Color.WHITE) is None


class TestModuleHelpers:
    def test_get_valid_moves(self) -> None:
        moves = get_valid_moves(CheckersBoard.initial(), (6, 1))
        assert {m.to_sq for m in moves} == {(5, 0), (5, 2)}

    def test_get_forced_captures(self, make_checkers_board: BoardFactory) -> None:
        board = make_checkers_board(white=[(5, 4)], black=[(4, 5)])
        forced = get_forced_captures(board, Color.WHITE)
        assert forced.squares == ((5, 4),)
        assert get_forced_captures(board, Color.BLACK).squares == ((4, 5),)
