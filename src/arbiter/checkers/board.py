"""CheckersBoard - piece placement on a 10x10 board."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from arbiter.checkers.piece import CheckerPiece
from arbiter.enums import Color
from arbiter.errors import InvalidBoardError
from arbiter.types import Square, in_bounds

SIZE = 10
# Black starts on rows 0-3, White on rows 6-9.
BLACK_HOME_ROWS = range(0, 4)
WHITE_HOME_ROWS = range(6, 10)


def is_playable(sq: Square) -> bool:
    """Dark squares, where ``row + col`` is odd."""
    return in_bounds(sq, SIZE) and (sq[0] + sq[1]) % 2 == 1


def square_number(sq: Square) -> int:
    """Standard 1-50 numbering of the playable squares."""
    return sq[0] * 5 + sq[1] // 2 + 1


def promotion_row(color: Color) -> int:
    """Row on which a man of *color* is crowned."""
    return 0 if color == Color.WHITE else SIZE - 1


class CheckersBoard:
    """Mutable 10x10 grid; only playable squares may hold a piece."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[CheckerPiece | None] = [None] * (SIZE * SIZE)

    @staticmethod
    def _index(sq: Square) -> int:
        if not in_bounds(sq, SIZE):
            raise IndexError(f"Square off the board: {sq!r}")
        return sq[0] * SIZE + sq[1]

    def __getitem__(self, sq: Square) -> CheckerPiece | None:
        return self._squares[self._index(sq)]

    def __setitem__(self, sq: Square, piece: CheckerPiece | None) -> None:
        idx = self._index(sq)
        if piece is not None and not is_playable(sq):
            raise InvalidBoardError(f"Square {sq!r} is not playable")
        self._squares[idx] = piece

    def get(self, sq: Square) -> CheckerPiece | None:
        """Piece on *sq*, or ``None`` when empty or off the board."""
        if not in_bounds(sq, SIZE):
            return None
        return self._squares[sq[0] * SIZE + sq[1]]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    def occupied(self) -> Iterator[tuple[Square, CheckerPiece]]:
        for idx, piece in enumerate(self._squares):
            if piece is not None:
                yield (idx // SIZE, idx % SIZE), piece

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*, row by row."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def count(self, color: Color) -> int:
        return len(self.pieces(color))

    def copy(self) -> CheckersBoard:
        b = CheckersBoard()
        b._squares = self._squares.copy()
        return b

    @classmethod
    def initial(cls) -> CheckersBoard:
        """20 black men on rows 0-3, 20 white men on rows 6-9."""
        b = cls()
        for row in range(SIZE):
            if row in BLACK_HOME_ROWS:
                color = Color.BLACK
            elif row in WHITE_HOME_ROWS:
                color = Color.WHITE
            else:
                continue
            for col in range(SIZE):
                if is_playable((row, col)):
                    b[row, col] = CheckerPiece(color)
        return b

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> CheckersBoard:
        """Build a board from 10 strings of 10 characters, top row first.

        ``w``/``b`` are men, ``W``/``B`` kings, ``.`` an empty square.
        """
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise InvalidBoardError("Expected 10 rows of 10 characters")
        b = cls()
        for r, row in enumerate(rows):
            for c, char in enumerate(row):
                if char == ".":
                    continue
                try:
                    piece = CheckerPiece.from_char(char)
                except ValueError as exc:
                    raise InvalidBoardError(str(exc)) from None
                b[r, c] = piece
        return b

    def to_rows(self) -> list[str]:
        return [
            "".join(str(p) if p else "." for p in self._squares[r * SIZE : (r + 1) * SIZE])
            for r in range(SIZE)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CheckersBoard):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        return "\n".join(self.to_rows())


def create_initial_board() -> CheckersBoard:
    return CheckersBoard.initial()
