"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from arbiter.chess.board import Board
from arbiter.chess.enums import CastlingRights, MoveFlag, PieceType
from arbiter.chess.move import Move
from arbiter.chess.piece import Piece
from arbiter.chess.position import GameState, apply_move, home_row
from arbiter.enums import Color
from arbiter.options import DEFAULT_CHESS_OPTIONS, ChessOptions
from arbiter.types import Square, in_bounds, offset

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

_PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# (flag, rook column, columns that must be empty, king transit column, king landing column)
_CASTLE_SIDES: tuple[tuple[MoveFlag, int, tuple[int, ...], int, int], ...] = (
    (MoveFlag.CASTLE_KINGSIDE, 7, (5, 6), 5, 6),
    (MoveFlag.CASTLE_QUEENSIDE, 0, (1, 2, 3), 3, 2),
)


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def pawn_direction(color: Color) -> int:
    """Row step of a pawn's forward move (white moves up the grid)."""
    return -1 if color == Color.WHITE else 1


# -- Attack detection -------------------------------------------------------


def is_path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Are all squares strictly between two aligned squares empty?

    Squares that share no rank, file or diagonal have no path: ``False``.
    """
    dr = to_sq[0] - from_sq[0]
    dc = to_sq[1] - from_sq[1]
    if dr and dc and abs(dr) != abs(dc):
        return False
    step_r, step_c = _sign(dr), _sign(dc)
    r, c = from_sq[0] + step_r, from_sq[1] + step_c
    while (r, c) != to_sq:
        if board.get((r, c)) is not None:
            return False
        r += step_r
        c += step_c
    return True


def can_piece_attack_square(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Could the piece on *from_sq* capture on *to_sq*?

    Attack semantics, not move semantics: a pawn attacks only its two
    forward diagonals. The colour of whatever stands on *to_sq* is ignored.
    """
    piece = board.get(from_sq)
    if piece is None or from_sq == to_sq or not in_bounds(to_sq):
        return False

    dr = to_sq[0] - from_sq[0]
    dc = to_sq[1] - from_sq[1]
    kind = piece.kind

    if kind == PieceType.PAWN:
        return dr == pawn_direction(piece.color) and abs(dc) == 1
    if kind == PieceType.KNIGHT:
        return (abs(dr), abs(dc)) in ((1, 2), (2, 1))
    if kind == PieceType.KING:
        return max(abs(dr), abs(dc)) <= 1

    diagonal = abs(dr) == abs(dc)
    straight = dr == 0 or dc == 0
    if kind == PieceType.BISHOP and not diagonal:
        return False
    if kind == PieceType.ROOK and not straight:
        return False
    if kind == PieceType.QUEEN and not (diagonal or straight):
        return False
    return is_path_clear(board, from_sq, to_sq)


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by any opposing piece?"""
    king_sq = board.king_square(color)
    for sq, piece in board.occupied():
        if piece.color != color and can_piece_attack_square(board, sq, king_sq):
            return True
    return False


# -- Move generation --------------------------------------------------------


class MoveGenerator:
    """Generates moves for single squares of a board.

    Legality is decided by simulation: every pseudo-legal candidate is
    played on a copy of the board and dropped if the mover's king is then
    attacked. The board passed in is never modified.
    """

    __slots__ = ("_board", "_state", "_options")

    def __init__(
        self,
        board: Board,
        state: GameState | None = None,
        options: ChessOptions | None = None,
    ) -> None:
        self._board = board
        self._state = state if state is not None else GameState()
        self._options = options if options is not None else DEFAULT_CHESS_OPTIONS

    # -- Public API ---------------------------------------------------------

    def valid_moves(self, sq: Square) -> list[Move]:
        """Strictly legal moves of the piece on *sq* (``[]`` if empty)."""
        piece = self._board.get(sq)
        if piece is None:
            return []
        return [
            move
            for move in self.pseudo_legal_moves(sq)
            if not is_in_check(apply_move(self._board, move), piece.color)
        ]

    def pseudo_legal_moves(self, sq: Square) -> list[Move]:
        """Moves of the piece on *sq* that may leave its own king in check."""
        piece = self._board.get(sq)
        if piece is None:
            return []

        moves: list[Move] = []
        kind = piece.kind
        if kind == PieceType.PAWN:
            self._gen_pawn(sq, piece, moves)
        elif kind == PieceType.KNIGHT:
            self._gen_stepper(sq, piece, KNIGHT_OFFSETS, moves)
        elif kind == PieceType.KING:
            self._gen_stepper(sq, piece, KING_OFFSETS, moves)
            self._gen_castling(sq, piece, moves)
        else:
            self._gen_sliding(sq, piece, _SLIDER_DIRS[kind], moves)
        return moves

    def all_valid_moves(self, color: Color) -> dict[Square, list[Move]]:
        """Legal moves of every *color* piece that has at least one."""
        result: dict[Square, list[Move]] = {}
        for sq in self._board.pieces(color):
            moves = self.valid_moves(sq)
            if moves:
                result[sq] = moves
        return result

    def has_any_move(self, color: Color) -> bool:
        """Stops at the first *color* piece with a legal move."""
        return any(self.valid_moves(sq) for sq in self._board.pieces(color))

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        direction = pawn_direction(piece.color)
        start_row = 6 if piece.color == Color.WHITE else 1

        one_step = offset(sq, direction, 0)
        if in_bounds(one_step) and board.is_empty(one_step):
            self._add_pawn_move(sq, one_step, moves)
            two_step = offset(sq, 2 * direction, 0)
            if sq[0] == start_row and board.is_empty(two_step):
                moves.append(Move(sq, two_step, MoveFlag.DOUBLE_PAWN))

        for dc in (-1, 1):
            cap_sq = offset(sq, direction, dc)
            if not in_bounds(cap_sq):
                continue
            target = board[cap_sq]
            if target is not None:
                if target.color != piece.color:
                    self._add_pawn_move(sq, cap_sq, moves)
            elif self._is_en_passant(sq, cap_sq, piece.color):
                moves.append(Move(sq, cap_sq, MoveFlag.EN_PASSANT))

    def _add_pawn_move(self, from_sq: Square, to_sq: Square, moves: list[Move]) -> None:
        if to_sq[0] not in (0, 7):
            moves.append(Move(from_sq, to_sq))
            return
        kinds = _PROMOTION_TYPES if self._options.underpromotion else _PROMOTION_TYPES[:1]
        for kind in kinds:
            moves.append(Move(from_sq, to_sq, MoveFlag.PROMOTION, kind))

    def _is_en_passant(self, sq: Square, cap_sq: Square, color: Color) -> bool:
        """Did an enemy pawn just double-move to the square beside *sq*?"""
        last = self._state.last_move
        if last is None or last.flag != MoveFlag.DOUBLE_PAWN:
            return False
        if last.to_sq != (sq[0], cap_sq[1]):
            return False
        victim = self._board.get(last.to_sq)
        return (
            victim is not None
            and victim.kind == PieceType.PAWN
            and victim.color != color
        )

    def _gen_stepper(
        self,
        sq: Square,
        piece: Piece,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for dr, dc in offsets:
            to_sq = offset(sq, dr, dc)
            if not in_bounds(to_sq):
                continue
            target = board[to_sq]
            if target is None or target.color != piece.color:
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        piece: Piece,
        directions: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for dr, dc in directions:
            for dist in range(1, 8):
                to_sq = offset(sq, dr * dist, dc * dist)
                if not in_bounds(to_sq):
                    break
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if target.color != piece.color:
                    moves.append(Move(sq, to_sq))
                break

    def _gen_castling(self, king_sq: Square, piece: Piece, moves: list[Move]) -> None:
        color = piece.color
        row = home_row(color)
        rights = self._state.castling & CastlingRights.both(color)
        if king_sq != (row, 4) or not rights:
            return
        if is_in_check(self._board, color):
            return

        board = self._board
        rook = Piece(color, PieceType.ROOK)
        for flag, rook_col, between, transit, landing in _CASTLE_SIDES:
            right = (
                CastlingRights.kingside(color)
                if flag == MoveFlag.CASTLE_KINGSIDE
                else CastlingRights.queenside(color)
            )
            if not rights & right:
                continue
            if board[row, rook_col] != rook:
                continue
            if any(board[row, col] is not None for col in between):
                continue
            if self._king_attacked_on(king_sq, (row, transit), color):
                continue
            if self._king_attacked_on(king_sq, (row, landing), color):
                continue
            moves.append(Move(king_sq, (row, landing), flag))

    def _king_attacked_on(self, king_sq: Square, to_sq: Square, color: Color) -> bool:
        board = self._board.copy()
        board[to_sq] = board[king_sq]
        board[king_sq] = None
        return is_in_check(board, color)
