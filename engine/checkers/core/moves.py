"""
Move generation for checkers.

All generation works on whole sets of squares at once: a source set is
masked against the edges a direction would wrap across, shifted one
diagonal step, and intersected with the squares that make the step legal.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .bitboard import (
    Bitboard,
    LEFT_EDGE, RIGHT_EDGE, TOP_EDGE, BOTTOM_EDGE,
    LEFT_TWO, RIGHT_TWO, TOP_TWO, BOTTOM_TWO,
)
from .enums import Color

if TYPE_CHECKING:
    from .state import Checkerboard


@dataclass(frozen=True)
class Direction:
    """A diagonal direction with the edge masks it must not cross."""
    name: str
    offset: int
    edge: Bitboard      # excluded before a one-step shift
    edge_two: Bitboard  # excluded before a two-step jump


UP_LEFT = Direction("up-left", 7, LEFT_EDGE.union(TOP_EDGE), LEFT_TWO.union(TOP_TWO))
UP_RIGHT = Direction("up-right", 9, RIGHT_EDGE.union(TOP_EDGE), RIGHT_TWO.union(TOP_TWO))
DOWN_LEFT = Direction("down-left", -9, LEFT_EDGE.union(BOTTOM_EDGE), LEFT_TWO.union(BOTTOM_TWO))
DOWN_RIGHT = Direction("down-right", -7, RIGHT_EDGE.union(BOTTOM_EDGE), RIGHT_TWO.union(BOTTOM_TWO))

ALL_DIRECTIONS = (UP_LEFT, UP_RIGHT, DOWN_LEFT, DOWN_RIGHT)

# Men only move toward the opponent's back row
FORWARD_DIRECTIONS = {
    Color.WHITE: (UP_LEFT, UP_RIGHT),
    Color.BLACK: (DOWN_LEFT, DOWN_RIGHT),
}


def directions_for(color: Color, king: bool) -> tuple[Direction, ...]:
    """Directions a piece of this color and rank may move in."""
    return ALL_DIRECTIONS if king else FORWARD_DIRECTIONS[color]


def step(squares: Bitboard, direction: Direction) -> Bitboard:
    """Shift one diagonal step, dropping squares that would wrap."""
    return squares.shift(direction.offset, direction.edge)


def jump_over(squares: Bitboard, direction: Direction, opponents: Bitboard) -> Bitboard:
    """
    Landing squares two steps away, passing over an opponent square.

    The landing squares are not yet filtered for emptiness.
    """
    over = squares.shift(direction.offset, direction.edge_two).intersect(opponents)
    return over.shift(direction.offset)


class MoveGenerator:
    """Generates move and capture destinations for a board."""

    @staticmethod
    def piece_moves(board: Checkerboard, color: Color, king: bool, squares: Bitboard) -> Bitboard:
        """Single-step destinations reachable from any square in *squares*."""
        empty = board.empty()
        result = Bitboard()
        for direction in directions_for(color, king):
            result = result.union(step(squares, direction).intersect(empty))
        return result

    @staticmethod
    def piece_captures(board: Checkerboard, color: Color, king: bool, squares: Bitboard) -> Bitboard:
        """
        Jump landing squares reachable from any square in *squares*.

        Only destinations are returned; the captured square for a concrete
        start/end pair is recovered with Bitboard.midsquare.
        """
        empty = board.empty()
        opponents = board.opponents(color)
        result = Bitboard()
        for direction in directions_for(color, king):
            result = result.union(jump_over(squares, direction, opponents).intersect(empty))
        return result

    @staticmethod
    def color_moves(board: Checkerboard, color: Color) -> Bitboard:
        """Union of single-step destinations for all of a color's pieces."""
        return MoveGenerator.piece_moves(board, color, False, board.men(color)).union(
            MoveGenerator.piece_moves(board, color, True, board.kings(color))
        )

    @staticmethod
    def color_captures(board: Checkerboard, color: Color) -> Bitboard:
        """Union of jump destinations for all of a color's pieces."""
        return MoveGenerator.piece_captures(board, color, False, board.men(color)).union(
            MoveGenerator.piece_captures(board, color, True, board.kings(color))
        )

    @staticmethod
    def legal_moves(
        board: Checkerboard,
        color: Color,
        from_square: Optional[int] = None,
    ) -> list[tuple[int, int]]:
        """
        All legal (start, end) square pairs for a color.

        Rules:
        1. If any capture is available anywhere, only captures are legal
        2. With from_square, only moves starting there are listed
        """
        must_capture = MoveGenerator.color_captures(board, color).is_not_empty()
        sources = board.all_pieces(color)
        if from_square is not None:
            sources = sources.intersect(Bitboard.square(from_square))

        moves = []
        for src in sources.squares():
            src_bb = Bitboard.square(src)
            king = board.kings(color).contains(src)
            if must_capture:
                targets = MoveGenerator.piece_captures(board, color, king, src_bb)
            else:
                targets = MoveGenerator.piece_moves(board, color, king, src_bb)
            for dst in targets.squares():
                moves.append((src, dst))
        return moves


# Convenience functions
def get_legal_moves(board: Checkerboard, color: Color) -> list[tuple[int, int]]:
    """Get all legal moves for a color."""
    return MoveGenerator.legal_moves(board, color)


def is_legal_move(board: Checkerboard, color: Color, start: int, end: int) -> bool:
    """Check if a move is legal."""
    return (start, end) in MoveGenerator.legal_moves(board, color, from_square=start)


def get_move_count(board: Checkerboard, color: Color) -> int:
    """Get number of legal moves."""
    return len(MoveGenerator.legal_moves(board, color))
