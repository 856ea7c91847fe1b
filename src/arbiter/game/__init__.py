"""Game layer: by-value turn/selection state machines for both games.

Quick start::

    from arbiter.game import CheckersSession

    session = CheckersSession.new()
    outcome = session.play((6, 1), (5, 0))
    session = outcome.session
"""

from arbiter.game.checkers_session import CheckersOutcome, CheckersSession
from arbiter.game.chess_session import ChessOutcome, ChessSession
from arbiter.game.interfaces import GamePhase, MoveOutcome

__all__ = [
    "CheckersOutcome",
    "CheckersSession",
    "ChessOutcome",
    "ChessSession",
    "GamePhase",
    "MoveOutcome",
]
