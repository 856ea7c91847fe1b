"""High-level checkers rules: terminal detection."""

from __future__ import annotations

from arbiter.checkers.board import CheckersBoard
from arbiter.checkers.move import CheckersMove, ForcedCaptures
from arbiter.checkers.move_generator import CheckersMoveGenerator
from arbiter.enums import Color, GameResult
from arbiter.options import CheckersOptions
from arbiter.types import Square


class CheckersRules:
    """Static rule-checker over a :class:`CheckersBoard`."""

    @staticmethod
    def check_game_end(
        board: CheckersBoard,
        next_color: Color,
        options: CheckersOptions | None = None,
    ) -> GameResult | None:
        """The side to move loses with no pieces or no valid move, else ``None``."""
        if not board.pieces(next_color):
            return GameResult.win_for(next_color.opposite)
        if not CheckersMoveGenerator(board, options).has_any_move(next_color):
            return GameResult.win_for(next_color.opposite)
        return None


def get_valid_moves(
    board: CheckersBoard, sq: Square, options: CheckersOptions | None = None
) -> list[CheckersMove]:
    return CheckersMoveGenerator(board, options).valid_moves(sq)


def get_forced_captures(
    board: CheckersBoard, color: Color, options: CheckersOptions | None = None
) -> ForcedCaptures:
    return CheckersMoveGenerator(board, options).forced_captures(color)


def check_game_end(
    board: CheckersBoard, next_color: Color, options: CheckersOptions | None = None
) -> GameResult | None:
    return CheckersRules.check_game_end(board, next_color, options)
