"""Chess turn state machine: selection, move application, game end."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from arbiter.chess.board import Board
from arbiter.chess.enums import MoveFlag, PieceType
from arbiter.chess.move import Move
from arbiter.chess.move_generator import MoveGenerator, is_in_check
from arbiter.chess.position import GameState, apply_move
from arbiter.chess.rules import Rules
from arbiter.enums import Color, GameResult
from arbiter.errors import IllegalMoveError
from arbiter.game.interfaces import GamePhase, MoveOutcome
from arbiter.options import DEFAULT_CHESS_OPTIONS, ChessOptions
from arbiter.types import Square, square_name

_LOGGER = logging.getLogger(__name__)

ChessOutcome = MoveOutcome["ChessSession", Move]


@dataclass(frozen=True, slots=True)
class ChessSession:
    """Immutable snapshot of a chess game: board, auxiliary state, turn."""

    board: Board = field(default_factory=Board.initial)
    state: GameState = GameState()
    to_move: Color = Color.WHITE
    phase: GamePhase = GamePhase.IDLE
    selected: Square | None = None
    highlighted: tuple[Move, ...] = ()
    result: GameResult = GameResult.IN_PROGRESS
    in_check: bool = False
    options: ChessOptions = DEFAULT_CHESS_OPTIONS

    @classmethod
    def new(
        cls,
        board: Board | None = None,
        to_move: Color = Color.WHITE,
        state: GameState | None = None,
        options: ChessOptions | None = None,
    ) -> ChessSession:
        """Start from *board* (a copy is taken) with *to_move* on turn."""
        board = board.copy() if board is not None else Board.initial()
        state = state if state is not None else GameState()
        options = options if options is not None else DEFAULT_CHESS_OPTIONS
        result = Rules.game_result(board, to_move, state, options)
        return cls(
            board=board,
            state=state,
            to_move=to_move,
            phase=GamePhase.GAME_OVER if result != GameResult.IN_PROGRESS else GamePhase.IDLE,
            result=result,
            in_check=is_in_check(board, to_move),
            options=options,
        )

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    def legal_moves(self) -> dict[Square, tuple[Move, ...]]:
        """Every legal move of the side to move, keyed by origin."""
        if self.is_game_over:
            return {}
        moves = self._generator().all_valid_moves(self.to_move)
        return {sq: tuple(ms) for sq, ms in moves.items()}

    # ── Transitions ──────────────────────────────────────────────────────

    def select(self, sq: Square) -> ChessSession:
        if self.is_game_over:
            return self
        piece = self.board.get(sq)
        if piece is None or piece.color != self.to_move:
            return self.deselect()
        moves = self._generator().valid_moves(sq)
        if not moves:
            return self.deselect()
        return replace(
            self,
            phase=GamePhase.SELECTED,
            selected=sq,
            highlighted=tuple(moves),
        )

    def deselect(self) -> ChessSession:
        if self.phase != GamePhase.SELECTED:
            return self
        return replace(self, phase=GamePhase.IDLE, selected=None, highlighted=())

    def apply(self, move: Move) -> ChessOutcome:
        """Play one of the highlighted moves and pass the turn."""
        if self.phase != GamePhase.SELECTED:
            raise IllegalMoveError("No piece is selected")
        if move not in self.highlighted:
            raise IllegalMoveError(f"Move {move} is not available")

        board = apply_move(self.board, move)
        state = self.state.after(self.board, move)
        next_color = self.to_move.opposite
        result = Rules.game_result(board, next_color, state, self.options)
        _LOGGER.debug("%s played %s", self.to_move, move)
        if result != GameResult.IN_PROGRESS:
            _LOGGER.info("Chess game over: %s", result.name)

        session = ChessSession(
            board=board,
            state=state,
            to_move=next_color,
            phase=GamePhase.GAME_OVER if result != GameResult.IN_PROGRESS else GamePhase.IDLE,
            result=result,
            in_check=is_in_check(board, next_color),
            options=self.options,
        )
        return MoveOutcome(session, move)

    def play(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType = PieceType.QUEEN,
    ) -> ChessOutcome:
        """Select *from_sq* and play the legal move to *to_sq*.

        *promotion* picks the piece when the move promotes.
        """
        session = self.select(from_sq)
        if session.selected != from_sq:
            raise IllegalMoveError(f"No movable piece on {square_name(from_sq)}")
        for move in session.highlighted:
            if move.to_sq != to_sq:
                continue
            if move.flag == MoveFlag.PROMOTION and move.promotion != promotion:
                continue
            return session.apply(move)
        raise IllegalMoveError(
            f"{square_name(from_sq)} cannot move to {square_name(to_sq)}"
        )

    def _generator(self) -> MoveGenerator:
        return MoveGenerator(self.board, self.state, self.options)
