"""Chess piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from arbiter.chess.enums import PieceType
from arbiter.enums import Color

# Board-text letter (uppercase = white, lowercase = black) per piece type.
_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_KINDS: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}

# White glyphs run U+2654..U+2659 (king first); black ones are 6 code points on.
_GLYPH_ORDER = (
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.PAWN,
)


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable chess piece: a colour and a kind."""

    color: Color
    kind: PieceType

    def __str__(self) -> str:
        letter = _LETTERS[self.kind]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create a piece from its board letter, e.g. 'N' -> white knight."""
        kind = _KINDS.get(char.lower())
        if kind is None or len(char) != 1:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, kind)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        base = 0x2654 if self.color == Color.WHITE else 0x265A
        return chr(base + _GLYPH_ORDER.index(self.kind))
