"""Checkers piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from arbiter.enums import Color


@dataclass(frozen=True, slots=True)
class CheckerPiece:
    """A man, or a king once ``is_king`` is set. Crowning is permanent."""

    color: Color
    is_king: bool = False

    def crowned(self) -> CheckerPiece:
        return CheckerPiece(self.color, True)

    def __str__(self) -> str:
        """Board letter: ``w``/``b`` for men, ``W``/``B`` for kings."""
        letter = "w" if self.color == Color.WHITE else "b"
        return letter.upper() if self.is_king else letter

    @classmethod
    def from_char(cls, char: str) -> CheckerPiece:
        if char not in ("w", "W", "b", "B"):
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.lower() == "w" else Color.BLACK
        return cls(color, char.isupper())
