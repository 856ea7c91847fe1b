"""Checkers rules engine for the 10x10 board with flying kings.

Quick start::

    from arbiter.checkers import CheckersMoveGenerator, create_initial_board
    from arbiter.enums import Color

    board = create_initial_board()
    forced = CheckersMoveGenerator(board).forced_captures(Color.WHITE)
"""

from arbiter.checkers.board import (
    CheckersBoard,
    create_initial_board,
    is_playable,
    promotion_row,
    square_number,
)
from arbiter.checkers.move import (
    CaptureSequence,
    CheckersMove,
    ForcedCaptures,
    ForcedPiece,
    PieceCaptures,
    capture_count,
)
from arbiter.checkers.move_generator import (
    CheckersMoveGenerator,
    apply_move,
    capture_moves,
    capture_sequences,
    regular_moves,
)
from arbiter.checkers.piece import CheckerPiece
from arbiter.checkers.rules import (
    CheckersRules,
    check_game_end,
    get_forced_captures,
    get_valid_moves,
)

__all__ = [
    # Domain objects
    "CaptureSequence",
    "CheckerPiece",
    "CheckersBoard",
    "CheckersMove",
    "CheckersMoveGenerator",
    "CheckersRules",
    "ForcedCaptures",
    "ForcedPiece",
    "PieceCaptures",
    # Functions
    "apply_move",
    "capture_count",
    "capture_moves",
    "capture_sequences",
    "check_game_end",
    "create_initial_board",
    "get_forced_captures",
    "get_valid_moves",
    "is_playable",
    "promotion_row",
    "regular_moves",
    "square_number",
]
