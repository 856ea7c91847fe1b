"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from arbiter.chess.enums import MoveFlag, PieceType
from arbiter.types import Square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable chess move.

    ``flag`` is the variant tag; ``promotion`` is only set on
    :attr:`MoveFlag.PROMOTION` moves.
    """

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NORMAL
    promotion: PieceType | None = None

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def is_castling(self) -> bool:
        return self.flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE)

    @property
    def en_passant_victim(self) -> Square | None:
        """Square of the pawn removed by an en-passant capture."""
        if self.flag != MoveFlag.EN_PASSANT:
            return None
        return (self.from_sq[0], self.to_sq[1])
