"""Square type alias and coordinate helpers.

Squares are ``(row, col)`` pairs. Row 0 is the top edge as seen by White:
rank 8 on a chess board, Black's home row on a checkers board.

    a8=(0, 0) ... h8=(0, 7)
    ...
    a1=(7, 0) ... h1=(7, 7)
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]

_FILES = "abcdefghij"


def in_bounds(sq: Square, size: int = 8) -> bool:
    """Whether *sq* lies on a *size* x *size* board."""
    row, col = sq
    return 0 <= row < size and 0 <= col < size


def offset(sq: Square, dr: int, dc: int) -> Square:
    return (sq[0] + dr, sq[1] + dc)


def square_name(sq: Square, size: int = 8) -> str:
    """Human-readable name, e.g. (6, 4) -> 'e2' on a chess board."""
    row, col = sq
    return f"{_FILES[col]}{size - row}"


def parse_square(name: str, size: int = 8) -> Square:
    """Parse a square name, e.g. 'e4' -> (4, 4) on a chess board."""
    files = _FILES[:size]
    if len(name) < 2 or name[0] not in files or not name[1:].isdigit():
        raise ValueError(f"Invalid square name: {name!r}")
    rank = int(name[1:])
    if not 1 <= rank <= size:
        raise ValueError(f"Invalid square name: {name!r}")
    return (size - rank, files.index(name[0]))
