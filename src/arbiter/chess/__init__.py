"""Chess rules engine: pure functions over an 8x8 :class:`Board`.

Quick start::

    from arbiter.chess import GameState, MoveGenerator, create_initial_board
    from arbiter.enums import Color

    board = create_initial_board()
    gen = MoveGenerator(board, GameState())
    moves = gen.all_valid_moves(Color.WHITE)
"""

from arbiter.chess.board import Board, create_initial_board
from arbiter.chess.enums import CastlingRights, MoveFlag, PieceType
from arbiter.chess.move import Move
from arbiter.chess.move_generator import (
    MoveGenerator,
    can_piece_attack_square,
    is_in_check,
    is_path_clear,
)
from arbiter.chess.piece import Piece
from arbiter.chess.position import GameState, apply_move
from arbiter.chess.rules import Rules, get_valid_moves, is_checkmate, is_stalemate

__all__ = [
    # Enums / flags
    "CastlingRights",
    "MoveFlag",
    "PieceType",
    # Domain objects
    "Board",
    "GameState",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Functions
    "apply_move",
    "can_piece_attack_square",
    "create_initial_board",
    "get_valid_moves",
    "is_checkmate",
    "is_in_check",
    "is_path_clear",
    "is_stalemate",
]
