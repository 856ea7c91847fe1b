"""Tests for the Qt session bridge."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from PyQt6.QtTest import QSignalSpy

from arbiter.checkers.board import CheckersBoard
from arbiter.enums import Color, GameResult
from arbiter.game import CheckersSession, ChessSession
from arbiter.qt_bridge import SessionBridge

BoardFactory = Callable[..., CheckersBoard]

pytestmark = pytest.mark.usefixtures("qapp")


class TestSessionBridge:
    def test_select_square_emits_selection(self) -> None:
        bridge = SessionBridge(CheckersSession.new())
        selection = QSignalSpy(bridge.selection_changed)

        bridge.select_square(6, 1)

        assert len(selection) == 1
        assert selection[0][0] == (6, 1)
        assert len(selection[0][1]) == 2
        assert bridge.session.selected == (6, 1)

    def test_ignored_selection_is_silent(self) -> None:
        bridge = SessionBridge(CheckersSession.new())
        selection = QSignalSpy(bridge.selection_changed)

        bridge.select_square(3, 2)

        assert len(selection) == 0

    def test_move_passes_turn(self) -> None:
        bridge = SessionBridge(ChessSession.new())
        applied = QSignalSpy(bridge.move_applied)
        turns = QSignalSpy(bridge.turn_changed)
        over = QSignalSpy(bridge.game_over)

        bridge.play(6, 4, 4, 4)

        assert len(applied) == 1
        assert len(turns) == 1
        assert turns[0][0] == Color.BLACK
        assert len(over) == 0

    def test_chain_capture_keeps_turn(self, make_checkers_board: BoardFactory) -> None:
        board = make_checkers_board(white=[(9, 0)], black=[(8, 1), (6, 3), (0, 9)])
        bridge = SessionBridge(CheckersSession.new(board))
        chains = QSignalSpy(bridge.chain_continued)
        turns = QSignalSpy(bridge.turn_changed)

        bridge.play(9, 0, 7, 2)

        assert len(chains) == 1
        assert (chains[0][0], chains[0][1]) == (7, 2)
        assert len(turns) == 0

        bridge.play(7, 2, 5, 4)

        assert len(chains) == 1
        assert len(turns) == 1
        assert turns[0][0] == Color.BLACK

    def test_game_over_signal(self, make_checkers_board: BoardFactory) -> None:
        board = make_checkers_board(white=[(5, 4)], black=[(4, 5)])
        bridge = SessionBridge(CheckersSession.new(board))
        over = QSignalSpy(bridge.game_over)

        bridge.play(5, 4, 3, 6)

        assert len(over) == 1
        assert over[0][0] == GameResult.WHITE_WINS

    def test_illegal_move_is_rejected(self) -> None:
        session = CheckersSession.new()
        bridge = SessionBridge(session)
        rejected = QSignalSpy(bridge.move_rejected)
        applied = QSignalSpy(bridge.move_applied)

        bridge.play(6, 1, 4, 1)

        assert len(rejected) == 1
        assert len(applied) == 0
        assert bridge.session is session

    def test_reset(self) -> None:
        bridge = SessionBridge(CheckersSession.new())
        turns = QSignalSpy(bridge.turn_changed)
        rejected = QSignalSpy(bridge.move_rejected)

        bridge.reset("not a session")
        assert len(rejected) == 1

        chess = ChessSession.new()
        bridge.reset(chess)
        assert bridge.session is chess
        assert len(turns) == 1
        assert turns[0][0] == Color.WHITE
