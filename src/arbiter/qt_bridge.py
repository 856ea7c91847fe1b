"""Qt bridge exposing a game session to a board renderer via signals."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from arbiter.errors import IllegalMoveError
from arbiter.game.checkers_session import CheckersSession
from arbiter.game.chess_session import ChessSession
from arbiter.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)

Session = ChessSession | CheckersSession


class SessionBridge(QObject):
    """Holds the current session and turns clicks into session transitions.

    Sessions are immutable; every accepted transition replaces
    :attr:`session` and is announced through the signals below. Illegal
    input is reported via ``move_rejected`` and never raised into the event
    loop.
    """

    selection_changed = pyqtSignal(object, object)  # square | None, moves
    move_applied = pyqtSignal(object)  # MoveOutcome
    chain_continued = pyqtSignal(int, int)  # row, col of the locked piece
    turn_changed = pyqtSignal(object)  # Color
    game_over = pyqtSignal(object)  # GameResult
    move_rejected = pyqtSignal(str)

    def __init__(self, session: Session, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    @pyqtSlot(object)
    def reset(self, session: object) -> None:
        """Replace the session, e.g. with one rebuilt from a network update."""
        if not isinstance(session, (ChessSession, CheckersSession)):
            self.move_rejected.emit("Bridge received an invalid session")
            return
        self._session = session
        self.selection_changed.emit(session.selected, session.highlighted)
        self.turn_changed.emit(session.to_move)
        if session.is_game_over:
            self.game_over.emit(session.result)

    @pyqtSlot(int, int)
    def select_square(self, row: int, col: int) -> None:
        before = self._session
        after = before.select((row, col))
        if after is before:
            return
        self._session = after
        self.selection_changed.emit(after.selected, after.highlighted)

    @pyqtSlot(int, int, int, int)
    def play(self, from_row: int, from_col: int, to_row: int, to_col: int) -> None:
        """Play the move from one square to another for the side to move."""
        before = self._session
        try:
            outcome = before.play((from_row, from_col), (to_row, to_col))
        except IllegalMoveError as exc:
            _LOGGER.warning("Rejected move: %s", exc)
            self.move_rejected.emit(str(exc))
            return

        after = outcome.session
        self._session = after
        self.move_applied.emit(outcome)
        self.selection_changed.emit(after.selected, after.highlighted)

        if outcome.continues_chain:
            row, col = outcome.move.to_sq
            self.chain_continued.emit(row, col)
            return
        if after.to_move != before.to_move:
            self.turn_changed.emit(after.to_move)
        if after.phase == GamePhase.GAME_OVER:
            self.game_over.emit(after.result)
