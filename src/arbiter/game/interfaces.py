"""Shared shapes of the turn/selection state machines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import Generic, TypeVar

SessionT = TypeVar("SessionT")
MoveT = TypeVar("MoveT")


class GamePhase(IntEnum):
    """Finite-state-machine states of a session."""

    IDLE = auto()  # nothing selected
    SELECTED = auto()  # a piece is selected, its moves highlighted
    CHAIN_CAPTURE = auto()  # checkers: the landed piece must keep capturing
    GAME_OVER = auto()


@dataclass(frozen=True)
class MoveOutcome(Generic[SessionT, MoveT]):
    """Session after a move, plus whether the same side must move again."""

    session: SessionT
    move: MoveT
    continues_chain: bool = False
