"""Checkers turn state machine: selection, capture chains, turn hand-over."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from arbiter.checkers.board import CheckersBoard, promotion_row
from arbiter.checkers.move import NO_FORCED_CAPTURES, CheckersMove, ForcedCaptures
from arbiter.checkers.move_generator import CheckersMoveGenerator, apply_move
from arbiter.checkers.rules import CheckersRules
from arbiter.enums import Color, GameResult
from arbiter.errors import IllegalMoveError
from arbiter.game.interfaces import GamePhase, MoveOutcome
from arbiter.options import DEFAULT_CHECKERS_OPTIONS, CheckersOptions
from arbiter.types import Square

_LOGGER = logging.getLogger(__name__)

CheckersOutcome = MoveOutcome["CheckersSession", CheckersMove]


@dataclass(frozen=True, slots=True)
class CheckersSession:
    """Immutable snapshot of a checkers game between two clicks.

    Every transition returns a new session; the board inside is owned by the
    session and must not be modified by callers.
    """

    board: CheckersBoard = field(default_factory=CheckersBoard.initial)
    to_move: Color = Color.WHITE
    phase: GamePhase = GamePhase.IDLE
    selected: Square | None = None
    highlighted: tuple[CheckersMove, ...] = ()
    forced: ForcedCaptures = NO_FORCED_CAPTURES
    result: GameResult = GameResult.IN_PROGRESS
    white_score: int = 0
    black_score: int = 0
    options: CheckersOptions = DEFAULT_CHECKERS_OPTIONS

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def new(
        cls,
        board: CheckersBoard | None = None,
        to_move: Color = Color.WHITE,
        options: CheckersOptions | None = None,
    ) -> CheckersSession:
        """Start from *board* (a copy is taken) with *to_move* on turn."""
        board = board.copy() if board is not None else CheckersBoard.initial()
        options = options if options is not None else DEFAULT_CHECKERS_OPTIONS
        forced = CheckersMoveGenerator(board, options).forced_captures(to_move)
        result = CheckersRules.check_game_end(board, to_move, options)
        return cls(
            board=board,
            to_move=to_move,
            phase=GamePhase.GAME_OVER if result is not None else GamePhase.IDLE,
            forced=forced,
            result=result if result is not None else GameResult.IN_PROGRESS,
            options=options,
        )

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def chain_square(self) -> Square | None:
        """Square of the piece locked into a capture chain."""
        return self.selected if self.phase == GamePhase.CHAIN_CAPTURE else None

    def score(self, color: Color) -> int:
        """Pieces captured so far by *color*."""
        return self.white_score if color == Color.WHITE else self.black_score

    def legal_moves(self) -> dict[Square, tuple[CheckersMove, ...]]:
        """Every move the side to move may play now, keyed by origin."""
        if self.is_game_over:
            return {}
        if self.phase == GamePhase.CHAIN_CAPTURE:
            assert self.selected is not None
            return {self.selected: self.highlighted}
        moves = self._generator().all_valid_moves(self.to_move)
        return {sq: tuple(ms) for sq, ms in moves.items()}

    def selectable_squares(self) -> tuple[Square, ...]:
        return tuple(self.legal_moves())

    # ── Transitions ──────────────────────────────────────────────────────

    def select(self, sq: Square) -> CheckersSession:
        """Select the piece on *sq*; anything unplayable clears the selection.

        Ignored while a capture chain is in progress or the game is over.
        """
        if self.phase in (GamePhase.CHAIN_CAPTURE, GamePhase.GAME_OVER):
            return self
        moves = self._generator().valid_moves_for_color(sq, self.to_move, self.forced)
        if not moves:
            return self.deselect()
        return replace(
            self,
            phase=GamePhase.SELECTED,
            selected=sq,
            highlighted=tuple(moves),
        )

    def deselect(self) -> CheckersSession:
        if self.phase != GamePhase.SELECTED:
            return self
        return replace(self, phase=GamePhase.IDLE, selected=None, highlighted=())

    def apply(self, move: CheckersMove) -> CheckersOutcome:
        """Play one of the highlighted moves.

        A capture that leaves the landed piece with more captures keeps the
        turn (``continues_chain``); otherwise the piece may be crowned and
        the turn passes.
        """
        if self.phase not in (GamePhase.SELECTED, GamePhase.CHAIN_CAPTURE):
            raise IllegalMoveError("No piece is selected")
        if move not in self.highlighted:
            raise IllegalMoveError(f"Move {move} is not available")

        _LOGGER.debug("%s played %s", self.to_move, move)
        board = apply_move(self.board, move, crown=False)
        scores = self._scores_after(move)

        if move.is_capture:
            follow_up = CheckersMoveGenerator(board, self.options).max_captures_for_piece(
                move.to_sq
            )
            if follow_up.max_captures > 0:
                _LOGGER.debug(
                    "%s continues capturing from %s", self.to_move, move.to_sq
                )
                chained = replace(
                    self,
                    board=board,
                    phase=GamePhase.CHAIN_CAPTURE,
                    selected=move.to_sq,
                    highlighted=follow_up.moves,
                    **scores,
                )
                return MoveOutcome(chained, move, continues_chain=True)

        self._crown_if_due(board, move.to_sq)
        return MoveOutcome(self._hand_over(board, scores), move)

    def play(self, from_sq: Square, to_sq: Square) -> CheckersOutcome:
        """Select *from_sq* and play the highlighted move landing on *to_sq*."""
        session = self if self.chain_square == from_sq else self.select(from_sq)
        if session.selected != from_sq:
            raise IllegalMoveError(f"No movable piece on {from_sq!r}")
        for move in session.highlighted:
            if move.to_sq == to_sq:
                return session.apply(move)
        raise IllegalMoveError(f"Piece on {from_sq!r} cannot move to {to_sq!r}")

    # ── Internal ─────────────────────────────────────────────────────────

    def _generator(self) -> CheckersMoveGenerator:
        return CheckersMoveGenerator(self.board, self.options)

    def _scores_after(self, move: CheckersMove) -> dict[str, int]:
        gained = len(move.captured)
        if self.to_move == Color.WHITE:
            return {"white_score": self.white_score + gained, "black_score": self.black_score}
        return {"white_score": self.white_score, "black_score": self.black_score + gained}

    @staticmethod
    def _crown_if_due(board: CheckersBoard, sq: Square) -> None:
        piece = board[sq]
        if piece is not None and not piece.is_king and sq[0] == promotion_row(piece.color):
            board[sq] = piece.crowned()

    def _hand_over(self, board: CheckersBoard, scores: dict[str, int]) -> CheckersSession:
        next_color = self.to_move.opposite
        forced = CheckersMoveGenerator(board, self.options).forced_captures(next_color)
        result = CheckersRules.check_game_end(board, next_color, self.options)
        if result is not None:
            _LOGGER.info("Checkers game over: %s", result.name)
        return CheckersSession(
            board=board,
            to_move=next_color,
            phase=GamePhase.GAME_OVER if result is not None else GamePhase.IDLE,
            forced=forced,
            result=result if result is not None else GameResult.IN_PROGRESS,
            options=self.options,
            **scores,
        )
