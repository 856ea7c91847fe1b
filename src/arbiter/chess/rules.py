"""High-level chess rules: check, checkmate, stalemate, game result."""

from __future__ import annotations

from arbiter.chess.board import Board
from arbiter.chess.move import Move
from arbiter.chess.move_generator import MoveGenerator, is_in_check
from arbiter.chess.position import GameState
from arbiter.enums import Color, GameResult
from arbiter.options import ChessOptions
from arbiter.types import Square


class Rules:
    """Static rule-checker over a board plus auxiliary :class:`GameState`."""

    # Draws by repetition, the fifty-move rule or insufficient material are
    # left to callers; only stalemate is detected here.

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return is_in_check(board, color)

    @staticmethod
    def has_legal_move(
        board: Board,
        color: Color,
        state: GameState | None = None,
        options: ChessOptions | None = None,
    ) -> bool:
        return MoveGenerator(board, state, options).has_any_move(color)

    @staticmethod
    def is_checkmate(
        board: Board,
        color: Color,
        state: GameState | None = None,
        options: ChessOptions | None = None,
    ) -> bool:
        if not is_in_check(board, color):
            return False
        return not Rules.has_legal_move(board, color, state, options)

    @staticmethod
    def is_stalemate(
        board: Board,
        color: Color,
        state: GameState | None = None,
        options: ChessOptions | None = None,
    ) -> bool:
        if is_in_check(board, color):
            return False
        return not Rules.has_legal_move(board, color, state, options)

    @staticmethod
    def game_result(
        board: Board,
        to_move: Color,
        state: GameState | None = None,
        options: ChessOptions | None = None,
    ) -> GameResult:
        """Result with *to_move* on turn: mate, stalemate draw, or in progress."""
        if Rules.has_legal_move(board, to_move, state, options):
            return GameResult.IN_PROGRESS
        if is_in_check(board, to_move):
            return GameResult.win_for(to_move.opposite)
        return GameResult.DRAW


def get_valid_moves(
    board: Board,
    sq: Square,
    state: GameState | None = None,
    options: ChessOptions | None = None,
) -> list[Move]:
    """Legal moves of the piece on *sq*."""
    return MoveGenerator(board, state, options).valid_moves(sq)


def is_checkmate(
    board: Board,
    color: Color,
    state: GameState | None = None,
    options: ChessOptions | None = None,
) -> bool:
    return Rules.is_checkmate(board, color, state, options)


def is_stalemate(
    board: Board,
    color: Color,
    state: GameState | None = None,
    options: ChessOptions | None = None,
) -> bool:
    return Rules.is_stalemate(board, color, state, options)
