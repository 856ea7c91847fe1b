"""Board - piece placement on an 8x8 chess board."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from arbiter.chess.enums import PieceType
from arbiter.chess.piece import Piece
from arbiter.enums import Color
from arbiter.errors import InvalidBoardError
from arbiter.types import Square, in_bounds

SIZE = 8

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of :class:`Piece` or ``None``.

    The rules engine only ever reads a caller's board; every simulation runs
    on a :meth:`copy`.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * (SIZE * SIZE)

    @staticmethod
    def _index(sq: Square) -> int:
        if not in_bounds(sq, SIZE):
            raise IndexError(f"Square off the board: {sq!r}")
        return sq[0] * SIZE + sq[1]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[self._index(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[self._index(sq)] = piece

    def get(self, sq: Square) -> Piece | None:
        """Piece on *sq*, or ``None`` when empty or off the board."""
        if not in_bounds(sq, SIZE):
            return None
        return self._squares[sq[0] * SIZE + sq[1]]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, row by row."""
        for idx, piece in enumerate(self._squares):
            if piece is not None:
                yield (idx // SIZE, idx % SIZE), piece

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def find(self, color: Color, kind: PieceType) -> list[Square]:
        """Squares occupied by *color*'s pieces of *kind*."""
        return [
            sq
            for sq, piece in self.occupied()
            if piece.color == color and piece.kind == kind
        ]

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        kings = self.find(color, PieceType.KING)
        if not kings:
            raise InvalidBoardError(f"No {color.name} king on board")
        if len(kings) > 1:
            raise InvalidBoardError(f"More than one {color.name} king on board")
        return kings[0]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    # -- Factories / text form ----------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, kind in enumerate(_BACK_RANK):
            b[0, col] = Piece(Color.BLACK, kind)
            b[1, col] = Piece(Color.BLACK, PieceType.PAWN)
            b[6, col] = Piece(Color.WHITE, PieceType.PAWN)
            b[7, col] = Piece(Color.WHITE, kind)
        return b

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Board:
        """Build a board from 8 strings of 8 characters, top row first.

        Letters follow :meth:`Piece.from_char`; ``.`` marks an empty square.
        """
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise InvalidBoardError("Expected 8 rows of 8 characters")
        b = cls()
        for r, row in enumerate(rows):
            for c, char in enumerate(row):
                if char == ".":
                    continue
                try:
                    b[r, c] = Piece.from_char(char)
                except ValueError as exc:
                    raise InvalidBoardError(str(exc)) from None
        return b

    def to_rows(self) -> list[str]:
        return [
            "".join(str(p) if p else "." for p in self._squares[r * SIZE : (r + 1) * SIZE])
            for r in range(SIZE)
        ]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows = [
            f"{SIZE - r} {' '.join(row)}" for r, row in enumerate(self.to_rows())
        ]
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def create_initial_board() -> Board:
    return Board.initial()
