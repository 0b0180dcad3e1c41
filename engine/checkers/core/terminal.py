"""
Game-over judgment.

Evaluated by the caller after each successful move from the board's read
accessors; nothing here is maintained incrementally.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .bitboard import PLAYABLE
from .enums import Color
from .moves import MoveGenerator
from .state import Checkerboard


@dataclass(frozen=True)
class GameResult:
    """Victory for a color, or a draw when winner is None."""
    winner: Optional[Color] = None

    @classmethod
    def victory(cls, color: Color) -> GameResult:
        return cls(color)

    @classmethod
    def draw(cls) -> GameResult:
        return cls(None)

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def __str__(self) -> str:
        if self.winner is None:
            return "It was a draw!"
        return str(self.winner) + " won!"


def is_board_full(board: Checkerboard) -> bool:
    """Every playable square holds a piece."""
    return board.empty().intersect(PLAYABLE).is_empty()


def has_any_move(board: Checkerboard, color: Color) -> bool:
    """Whether *color* has any step or capture available."""
    return MoveGenerator.color_moves(board, color).union(
        MoveGenerator.color_captures(board, color)
    ).is_not_empty()


def game_over(board: Checkerboard, to_move: Color) -> Optional[GameResult]:
    """
    Judge the position with *to_move* about to play.

    A full board is a draw. Otherwise the side to move loses when it has
    neither a step nor a capture, however many pieces it still has.
    Returns None while the game goes on.
    """
    if is_board_full(board):
        return GameResult.draw()
    if not has_any_move(board, to_move):
        return GameResult.victory(to_move.opposite)
    return None
