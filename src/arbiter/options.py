"""Rule variant options for both engines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ChessOptions:
    """Chess move-generation switches.

    Args:
        underpromotion: Offer knight, bishop and rook promotions next to the
            queen. When off, each promoting pawn move is generated once, as a
            queen promotion.
    """

    underpromotion: bool = False


@dataclass(slots=True, frozen=True)
class CheckersOptions:
    """Checkers move-generation switches.

    Args:
        men_capture_backward: Let men capture along all four diagonals
            instead of only the two forward ones. Regular steps stay forward.
    """

    men_capture_backward: bool = False


DEFAULT_CHESS_OPTIONS = ChessOptions()
DEFAULT_CHECKERS_OPTIONS = CheckersOptions()
