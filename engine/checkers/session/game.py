"""
Game session: the board plus the turn cursor a caller drives it with.

The rules engine never tracks whose turn it is; this wrapper does, and it
enforces that a jump sequence continues from the square it landed on.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
import logging

from ..core.bitboard import Bitboard, sq_to_algebraic, sq_to_rowcol
from ..core.enums import Color
from ..core.moves import MoveGenerator
from ..core.notation import parse_move
from ..core.state import Checkerboard, MoveResult
from ..core.terminal import GameResult, game_over
from .config import SessionConfig

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """
    A single game in progress.

    Attributes:
        config: Session configuration
        board: The authoritative board
        on_move: Color whose turn it is
        result: Cached game result once the game is over
        selected: Square picked by select() and awaiting a destination
        pending_capture: Landing square a jump sequence must continue from
    """
    config: SessionConfig = field(default_factory=SessionConfig)
    board: Checkerboard = field(default_factory=Checkerboard.new_game)
    on_move: Optional[Color] = None
    result: Optional[GameResult] = None
    selected: Optional[int] = None
    pending_capture: Optional[int] = None

    def __post_init__(self) -> None:
        if self.on_move is None:
            self.on_move = self.config.first_to_move

    @classmethod
    def new_game(cls, config: Optional[SessionConfig] = None) -> GameSession:
        """Create a session in the starting position."""
        return cls(config=config or SessionConfig())

    @property
    def is_over(self) -> bool:
        return self.result is not None

    def play(self, start: int, end: int) -> MoveResult:
        """Attempt a single step or jump for the side to move."""
        if self.result is not None:
            return self._reject(start, end, "game is over")
        if self.pending_capture is not None and start != self.pending_capture:
            return self._reject(start, end, "capture sequence must continue")

        mover = self.on_move
        result = self.board.make_move(mover, Bitboard.square(start), Bitboard.square(end))
        if not result.is_valid:
            return self._reject(start, end, "illegal move")

        logger.debug(
            "%s played %s-%s, %s to move",
            mover, sq_to_algebraic(start), sq_to_algebraic(end), result.next_to_move,
        )

        if result.next_to_move == mover:
            self.pending_capture = end
        else:
            self.pending_capture = None
            self.on_move = result.next_to_move

        self.result = game_over(self.board, self.on_move)
        if self.result is not None:
            self.selected = None
            logger.info("Game over: %s", self.result)

        return result

    def select(self, square: int) -> Optional[MoveResult]:
        """
        Click-style input.

        Selecting one of the mover's pieces remembers it; selecting it again
        clears the selection; selecting any other square tries to move there.
        Returns the move result when a move was attempted, else None.
        """
        if self.result is not None:
            return None

        if self.selected is None:
            if self.board.owner(Bitboard.square(square)) == self.on_move:
                self.selected = square
            return None

        if square == self.selected:
            # A jump sequence can't be abandoned
            if self.pending_capture is None:
                self.selected = None
            return None

        result = self.play(self.selected, square)
        if result.is_valid and self.result is None:
            self.selected = self.pending_capture
        return result

    def play_text(self, text: str) -> MoveResult:
        """
        Play a move written as "c3-d4" or "c3xe5xc7".

        A jump chain is tried on a copy first so that an illegal later hop
        leaves the session unchanged. Raises ValueError on malformed text.
        """
        squares, capture = parse_move(text)
        hop_rows = 2 if capture else 1
        for a, b in zip(squares, squares[1:]):
            if abs(sq_to_rowcol(a)[0] - sq_to_rowcol(b)[0]) != hop_rows:
                return self._reject(a, b, f"not a {'jump' if capture else 'step'}")

        if len(squares) == 2:
            return self.play(squares[0], squares[1])

        trial = self._snapshot()
        result = MoveResult.invalid()
        hops = list(zip(squares, squares[1:]))
        for i, (a, b) in enumerate(hops):
            result = trial.play(a, b)
            if not result.is_valid:
                return self._reject(a, b, "illegal hop in chain")
            if i < len(hops) - 1 and trial.pending_capture is None:
                return self._reject(a, b, "chain continues after turn ended")

        self._restore(trial)
        return result

    def legal_moves(self) -> list[tuple[int, int]]:
        """Legal (start, end) pairs for the side to move."""
        if self.result is not None:
            return []
        return MoveGenerator.legal_moves(self.board, self.on_move, from_square=self.pending_capture)

    def _reject(self, start: int, end: int, reason: str) -> MoveResult:
        if self.config.log_rejected_moves:
            logger.debug(
                "Rejected %s %s-%s: %s",
                self.on_move, sq_to_algebraic(start), sq_to_algebraic(end), reason,
            )
        return MoveResult.invalid()

    def _snapshot(self) -> GameSession:
        return GameSession(
            config=self.config,
            board=self.board.copy(),
            on_move=self.on_move,
            result=self.result,
            selected=self.selected,
            pending_capture=self.pending_capture,
        )

    def _restore(self, other: GameSession) -> None:
        self.board = other.board
        self.on_move = other.on_move
        self.result = other.result
        self.selected = other.selected
        self.pending_capture = other.pending_capture
