"""Checkers move generation: regular steps, capture chains, forced captures."""

from __future__ import annotations

from arbiter.checkers.board import SIZE, CheckersBoard, promotion_row
from arbiter.checkers.move import (
    NO_FORCED_CAPTURES,
    CaptureSequence,
    CheckersMove,
    ForcedCaptures,
    ForcedPiece,
    PieceCaptures,
    capture_count,
)
from arbiter.checkers.piece import CheckerPiece
from arbiter.enums import Color
from arbiter.errors import IllegalMoveError
from arbiter.options import DEFAULT_CHECKERS_OPTIONS, CheckersOptions
from arbiter.types import Square, in_bounds, offset

DIAGONALS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
_FORWARD: dict[Color, tuple[tuple[int, int], ...]] = {
    Color.WHITE: ((-1, -1), (-1, 1)),
    Color.BLACK: ((1, -1), (1, 1)),
}


def _on_board(sq: Square) -> bool:
    return in_bounds(sq, SIZE)


def capture_moves(
    board: CheckersBoard,
    sq: Square,
    piece: CheckerPiece,
    options: CheckersOptions = DEFAULT_CHECKERS_OPTIONS,
) -> list[CheckersMove]:
    """Single capturing hops available to *piece* standing on *sq*."""
    moves: list[CheckersMove] = []

    if not piece.is_king:
        directions = DIAGONALS if options.men_capture_backward else _FORWARD[piece.color]
        for dr, dc in directions:
            mid = offset(sq, dr, dc)
            land = offset(sq, 2 * dr, 2 * dc)
            if not _on_board(land) or board[land] is not None:
                continue
            jumped = board[mid]
            if jumped is not None and jumped.color != piece.color:
                moves.append(CheckersMove(sq, land, (mid,)))
        return moves

    # Flying king: hurdle the first enemy on a diagonal, land on any empty
    # square behind it up to the next piece.
    for dr, dc in DIAGONALS:
        enemy: Square | None = None
        cur = offset(sq, dr, dc)
        while _on_board(cur):
            target = board[cur]
            if target is None:
                if enemy is not None:
                    moves.append(CheckersMove(sq, cur, (enemy,)))
            elif target.color != piece.color and enemy is None:
                enemy = cur
            else:
                break
            cur = offset(cur, dr, dc)
    return moves


def capture_sequences(
    board: CheckersBoard,
    sq: Square,
    piece: CheckerPiece,
    options: CheckersOptions = DEFAULT_CHECKERS_OPTIONS,
) -> list[CaptureSequence]:
    """Every maximal capture chain of *piece* from *sq*.

    Returns ``[()]`` when no capture is available. Each branch of the search
    works on its own board copy, with jumped pieces removed at once.
    """
    hops = capture_moves(board, sq, piece, options)
    if not hops:
        return [()]

    sequences: list[CaptureSequence] = []
    for hop in hops:
        branch = board.copy()
        for captured_sq in hop.captured:
            branch[captured_sq] = None
        branch[sq] = None
        branch[hop.to_sq] = piece
        for tail in capture_sequences(branch, hop.to_sq, piece, options):
            sequences.append((hop, *tail))
    return sequences


def regular_moves(board: CheckersBoard, sq: Square, piece: CheckerPiece) -> list[CheckersMove]:
    """Non-capturing moves: a forward step for men, any free diagonal run for kings."""
    moves: list[CheckersMove] = []
    if not piece.is_king:
        for dr, dc in _FORWARD[piece.color]:
            to_sq = offset(sq, dr, dc)
            if _on_board(to_sq) and board[to_sq] is None:
                moves.append(CheckersMove(sq, to_sq))
        return moves

    for dr, dc in DIAGONALS:
        to_sq = offset(sq, dr, dc)
        while _on_board(to_sq) and board[to_sq] is None:
            moves.append(CheckersMove(sq, to_sq))
            to_sq = offset(to_sq, dr, dc)
    return moves


def apply_move(
    board: CheckersBoard, move: CheckersMove, *, crown: bool = True
) -> CheckersBoard:
    """Return a new board with *move* played; *board* is left untouched.

    With *crown*, a man ending on its promotion row becomes a king. Pass
    ``crown=False`` for a hop that is not the last of its chain.
    """
    new = board.copy()
    piece = new[move.from_sq]
    if piece is None:
        raise IllegalMoveError(f"No piece on {move.from_sq!r}")
    for captured_sq in move.captured:
        new[captured_sq] = None
    new[move.from_sq] = None
    if crown and not piece.is_king and move.to_sq[0] == promotion_row(piece.color):
        piece = piece.crowned()
    new[move.to_sq] = piece
    return new


class CheckersMoveGenerator:
    """Move queries over one checkers board. The board is never modified."""

    __slots__ = ("_board", "_options")

    def __init__(
        self, board: CheckersBoard, options: CheckersOptions | None = None
    ) -> None:
        self._board = board
        self._options = options if options is not None else DEFAULT_CHECKERS_OPTIONS

    # -- Per-piece queries ----------------------------------------------------

    def capture_moves(self, sq: Square) -> list[CheckersMove]:
        piece = self._board.get(sq)
        if piece is None:
            return []
        return capture_moves(self._board, sq, piece, self._options)

    def capture_sequences(self, sq: Square) -> list[CaptureSequence]:
        piece = self._board.get(sq)
        if piece is None:
            return [()]
        return capture_sequences(self._board, sq, piece, self._options)

    def regular_moves(self, sq: Square) -> list[CheckersMove]:
        piece = self._board.get(sq)
        if piece is None:
            return []
        return regular_moves(self._board, sq, piece)

    def max_captures_for_piece(self, sq: Square) -> PieceCaptures:
        """Highest capture count from *sq* and the distinct first hops reaching it."""
        sequences = self.capture_sequences(sq)
        counts = [capture_count(seq) for seq in sequences]
        best = max(counts, default=0)
        if best == 0:
            return PieceCaptures()

        first_hops: dict[tuple[Square, frozenset[Square]], CheckersMove] = {}
        for seq, count in zip(sequences, counts):
            if count != best:
                continue
            hop = seq[0]
            first_hops.setdefault((hop.to_sq, frozenset(hop.captured)), hop)
        return PieceCaptures(best, tuple(first_hops.values()))

    # -- Side-wide queries ----------------------------------------------------

    def forced_captures(self, color: Color) -> ForcedCaptures:
        """Pieces of *color* that must capture, and with which first hops.

        Only pieces reaching the side-wide maximum are listed.
        """
        best = 0
        entries: list[ForcedPiece] = []
        for sq in self._board.pieces(color):
            result = self.max_captures_for_piece(sq)
            if result.max_captures == 0:
                continue
            if result.max_captures > best:
                best = result.max_captures
                entries = []
            if result.max_captures == best:
                entries.append(ForcedPiece(sq, result.moves))
        if not entries:
            return NO_FORCED_CAPTURES
        return ForcedCaptures(best, tuple(entries))

    def valid_moves(self, sq: Square) -> list[CheckersMove]:
        """Moves the piece on *sq* may play under the maximum-capture rule."""
        piece = self._board.get(sq)
        if piece is None:
            return []
        return self.valid_moves_for_color(sq, piece.color)

    def valid_moves_for_color(
        self,
        sq: Square,
        color: Color,
        forced: ForcedCaptures | None = None,
    ) -> list[CheckersMove]:
        """Like :meth:`valid_moves`, but ``[]`` unless *sq* holds a *color* piece.

        *forced* may carry a precomputed :meth:`forced_captures` for *color*.
        """
        piece = self._board.get(sq)
        if piece is None or piece.color != color:
            return []

        if forced is None:
            forced = self.forced_captures(color)
        if forced:
            return list(forced.moves_for(sq) or ())

        captures = self.capture_moves(sq)
        if captures:
            return captures
        return self.regular_moves(sq)

    def all_valid_moves(self, color: Color) -> dict[Square, list[CheckersMove]]:
        """Valid moves of every *color* piece that has at least one."""
        forced = self.forced_captures(color)
        result: dict[Square, list[CheckersMove]] = {}
        for sq in self._board.pieces(color):
            moves = self.valid_moves_for_color(sq, color, forced)
            if moves:
                result[sq] = moves
        return result

    def has_any_move(self, color: Color) -> bool:
        forced = self.forced_captures(color)
        if forced:
            return True
        return any(
            self.valid_moves_for_color(sq, color, forced)
            for sq in self._board.pieces(color)
        )
