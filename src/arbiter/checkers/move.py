"""Checkers move and capture-analysis value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from arbiter.checkers.board import square_number
from arbiter.types import Square


@dataclass(frozen=True, slots=True)
class CheckersMove:
    """One step or one capturing hop.

    A hop removes exactly one piece, so ``captured`` has at most one
    square; a multi-jump turn is a chain of hops (see :data:`CaptureSequence`).
    """

    from_sq: Square
    to_sq: Square
    captured: tuple[Square, ...] = ()

    @property
    def is_capture(self) -> bool:
        return bool(self.captured)

    def __str__(self) -> str:
        sep = "x" if self.captured else "-"
        return f"{square_number(self.from_sq)}{sep}{square_number(self.to_sq)}"


CaptureSequence: TypeAlias = tuple[CheckersMove, ...]


def capture_count(sequence: CaptureSequence) -> int:
    return sum(len(move.captured) for move in sequence)


@dataclass(frozen=True, slots=True)
class PieceCaptures:
    """Best capture count for one piece and the first hops achieving it."""

    max_captures: int = 0
    moves: tuple[CheckersMove, ...] = ()


@dataclass(frozen=True, slots=True)
class ForcedPiece:
    square: Square
    moves: tuple[CheckersMove, ...]


@dataclass(frozen=True, slots=True)
class ForcedCaptures:
    """Pieces of one side that realise the side-wide maximum capture count."""

    max_captures: int = 0
    captures: tuple[ForcedPiece, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.captures)

    def moves_for(self, sq: Square) -> tuple[CheckersMove, ...] | None:
        """Forced first hops from *sq*, or ``None`` if *sq* is not listed."""
        for entry in self.captures:
            if entry.square == sq:
                return entry.moves
        return None

    @property
    def squares(self) -> tuple[Square, ...]:
        return tuple(entry.square for entry in self.captures)


NO_FORCED_CAPTURES = ForcedCaptures()
