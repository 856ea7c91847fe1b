"""Auxiliary game state and pure move application."""

from __future__ import annotations

from dataclasses import dataclass

from arbiter.chess.board import Board
from arbiter.chess.enums import CastlingRights, MoveFlag, PieceType
from arbiter.chess.move import Move
from arbiter.chess.piece import Piece
from arbiter.enums import Color
from arbiter.errors import IllegalMoveError
from arbiter.types import Square, square_name

# Rook corner -> the castling right it carries.
_ROOK_HOMES: dict[Square, CastlingRights] = {
    (7, 7): CastlingRights.WHITE_KINGSIDE,
    (7, 0): CastlingRights.WHITE_QUEENSIDE,
    (0, 7): CastlingRights.BLACK_KINGSIDE,
    (0, 0): CastlingRights.BLACK_QUEENSIDE,
}


def home_row(color: Color) -> int:
    return 7 if color == Color.WHITE else 0


@dataclass(frozen=True, slots=True)
class GameState:
    """Caller-held state the board alone cannot express.

    ``last_move`` is needed for en passant, ``castling`` for castling.
    """

    last_move: Move | None = None
    castling: CastlingRights = CastlingRights.ALL

    def after(self, board: Board, move: Move) -> GameState:
        """State following *move*, where *board* is the position before it."""
        castling = self.castling
        piece = board[move.from_sq]
        if piece is not None and piece.kind == PieceType.KING:
            castling &= ~CastlingRights.both(piece.color)
        # A rook leaving its corner, or captured on it, loses that side.
        for sq in (move.from_sq, move.to_sq):
            right = _ROOK_HOMES.get(sq)
            if right is not None:
                castling &= ~right
        return GameState(last_move=move, castling=castling)


def apply_move(board: Board, move: Move) -> Board:
    """Return a new board with *move* played. *board* is left untouched.

    No legality check is made here; callers pick *move* from the
    generator's output.
    """
    new = board.copy()
    piece = new[move.from_sq]
    if piece is None:
        raise IllegalMoveError(f"No piece on {square_name(move.from_sq)}")

    new[move.from_sq] = None

    if move.flag == MoveFlag.EN_PASSANT:
        victim = move.en_passant_victim
        assert victim is not None
        new[victim] = None

    if move.flag == MoveFlag.PROMOTION:
        piece = Piece(piece.color, move.promotion or PieceType.QUEEN)
    new[move.to_sq] = piece

    if move.flag == MoveFlag.CASTLE_KINGSIDE:
        row = move.from_sq[0]
        new[row, 5] = new[row, 7]
        new[row, 7] = None
    elif move.flag == MoveFlag.CASTLE_QUEENSIDE:
        row = move.from_sq[0]
        new[row, 3] = new[row, 0]
        new[row, 0] = None

    return new
