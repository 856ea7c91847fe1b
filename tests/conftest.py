"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable, Iterator

import pytest

from arbiter.checkers.board import CheckersBoard
from arbiter.checkers.piece import CheckerPiece
from arbiter.enums import Color
from arbiter.types import Square

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton core application for signal/slot tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


CheckersBoardFactory = Callable[..., CheckersBoard]


@pytest.fixture()
def make_checkers_board() -> CheckersBoardFactory:
    """Build a sparse checkers board from lists of squares."""

    def build(
        white: Iterable[Square] = (),
        black: Iterable[Square] = (),
        white_kings: Iterable[Square] = (),
        black_kings: Iterable[Square] = (),
    ) -> CheckersBoard:
        board = CheckersBoard()
        for sq in white:
            board[sq] = CheckerPiece(Color.WHITE)
        for sq in black:
            board[sq] = CheckerPiece(Color.BLACK)
        for sq in white_kings:
            board[sq] = CheckerPiece(Color.WHITE, is_king=True)
        for sq in black_kings:
            board[sq] = CheckerPiece(Color.BLACK, is_king=True)
        return board

    return build
