"""
Board state representation for checkers.

The board is four mutually exclusive bitboards: white men, black men,
white kings and black kings. make_move is the only operation that mutates
them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
import numpy as np

from .bitboard import (
    ROWS, COLS, NUM_SQUARES,
    Bitboard, PLAYABLE, TOP_EDGE, BOTTOM_EDGE,
    WHITE_START_MEN, BLACK_START_MEN,
    sq_to_rowcol,
)
from .enums import Color
from .moves import MoveGenerator

WHITE_MEN = 0
BLACK_MEN = 1
WHITE_KINGS = 2
BLACK_KINGS = 3

WHITE_MAN_SYM = '○'
BLACK_MAN_SYM = '●'
WHITE_KING_SYM = '☆'
BLACK_KING_SYM = '★'
BLANK_SYM = ' '

_SYMBOLS = (WHITE_MAN_SYM, BLACK_MAN_SYM, WHITE_KING_SYM, BLACK_KING_SYM)

# Far row for each color
PROMOTION_EDGE = {
    Color.WHITE: TOP_EDGE,
    Color.BLACK: BOTTOM_EDGE,
}


class BoardInvariantError(RuntimeError):
    """A square is claimed by more than one piece set."""


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of attempting a move.

    An invalid result leaves the board untouched. A valid result names the
    color to move next: the same color means a jump sequence must continue
    from the landing square, the other color means the turn passed.
    """
    next_to_move: Optional[Color] = None

    @classmethod
    def invalid(cls) -> MoveResult:
        return cls(None)

    @classmethod
    def valid(cls, color: Color) -> MoveResult:
        return cls(color)

    @property
    def is_valid(self) -> bool:
        return self.next_to_move is not None

    def __str__(self) -> str:
        if self.next_to_move is None:
            return "Invalid"
        return "Valid(" + str(self.next_to_move) + ")"


def _starting_pieces() -> list[Bitboard]:
    return [WHITE_START_MEN, BLACK_START_MEN, Bitboard(), Bitboard()]


@dataclass
class Checkerboard:
    """
    Authoritative piece placement.

    Attributes:
        pieces: [white_men, black_men, white_kings, black_kings] bitboards
    """
    pieces: list[Bitboard] = field(default_factory=_starting_pieces)

    @classmethod
    def new_game(cls) -> Checkerboard:
        """Create a board in the starting position."""
        return cls()

    @classmethod
    def from_bitboards(
        cls,
        white_men: Bitboard = Bitboard(),
        black_men: Bitboard = Bitboard(),
        white_kings: Bitboard = Bitboard(),
        black_kings: Bitboard = Bitboard(),
    ) -> Checkerboard:
        """Build an arbitrary position. Overlapping sets are rejected."""
        board = cls(pieces=[white_men, black_men, white_kings, black_kings])
        overlap = board._overlap()
        if overlap.is_not_empty():
            raise ValueError(f"Squares claimed by more than one set: {overlap.squares()}")
        return board

    @staticmethod
    def index(color: Color, king: bool) -> int:
        """Position of a (color, rank) set in the pieces list."""
        return int(color) + (2 if king else 0)

    # -- Read accessors -----------------------------------------------------

    def men(self, color: Color) -> Bitboard:
        return self.pieces[self.index(color, False)]

    def kings(self, color: Color) -> Bitboard:
        return self.pieces[self.index(color, True)]

    def all_pieces(self, color: Color) -> Bitboard:
        """All squares occupied by *color*."""
        return self.men(color).union(self.kings(color))

    def opponents(self, color: Color) -> Bitboard:
        """All squares occupied by the other color."""
        return self.all_pieces(color.opposite)

    @property
    def occupied(self) -> Bitboard:
        return self.all_pieces(Color.WHITE).union(self.all_pieces(Color.BLACK))

    def empty(self) -> Bitboard:
        """Complement of every occupied square, including light squares."""
        return self.occupied.complement()

    def piece_count(self, color: Color) -> int:
        return self.all_pieces(color).count()

    def owner(self, square: Bitboard) -> Optional[Color]:
        """Color of the piece on a single square, or None if it is empty."""
        if not square.is_single_square():
            raise ValueError(f"Not a single square: {square.bits:#x}")
        white = square.intersect(self.all_pieces(Color.WHITE)).is_not_empty()
        black = square.intersect(self.all_pieces(Color.BLACK)).is_not_empty()
        if white and black:
            raise BoardInvariantError(
                f"White and black pieces on the same square {square.index()}"
            )
        if white:
            return Color.WHITE
        if black:
            return Color.BLACK
        return None

    def is_king(self, square: Bitboard) -> bool:
        return square.intersect(
            self.kings(Color.WHITE).union(self.kings(Color.BLACK))
        ).is_not_empty()

    # -- Mutation -----------------------------------------------------------

    def make_move(self, color: Color, start: Bitboard, end: Bitboard) -> MoveResult:
        """
        Attempt to move a piece of *color* from *start* to *end*.

        Both arguments must be single squares. Returns MoveResult.invalid()
        without touching the board when the move is illegal, including a
        plain step while any capture is available. On a capture the jumped
        piece is removed; a man reaching the far row is promoted at once.
        If the piece can capture again from *end*, the result names the same
        color and the caller must continue with start=end.
        """
        if not start.is_single_square() or not end.is_single_square():
            return MoveResult.invalid()

        king = start.intersect(self.kings(color)).is_not_empty()
        if not king and start.intersect(self.men(color)).is_empty():
            return MoveResult.invalid()

        move_bb = MoveGenerator.piece_moves(self, color, king, start).intersect(end)
        capture_bb = MoveGenerator.piece_captures(self, color, king, start).intersect(end)
        must_capture = MoveGenerator.color_captures(self, color).is_not_empty()
        if capture_bb.is_empty() and (move_bb.is_empty() or must_capture):
            return MoveResult.invalid()

        captured = capture_bb.is_not_empty()
        if captured:
            opp = color.opposite
            opp_square = Bitboard.midsquare(start, end)
            opp_king = opp_square.intersect(self.kings(opp)).is_not_empty()
            opp_index = self.index(opp, opp_king)
            self.pieces[opp_index] = self.pieces[opp_index].without(opp_square)

        index = self.index(color, king)
        self.pieces[index] = self.pieces[index].without(start)

        promoted = not king and end.intersect(PROMOTION_EDGE[color]).is_not_empty()
        now_king = king or promoted
        dest_index = self.index(color, now_king)
        self.pieces[dest_index] = self.pieces[dest_index].union(end)

        self._check_exclusive()

        if captured and MoveGenerator.piece_captures(self, color, now_king, end).is_not_empty():
            return MoveResult.valid(color)
        return MoveResult.valid(color.opposite)

    def _overlap(self) -> Bitboard:
        """Squares that appear in more than one of the four sets."""
        seen = Bitboard()
        overlap = Bitboard()
        for bb in self.pieces:
            overlap = overlap.union(seen.intersect(bb))
            seen = seen.union(bb)
        return overlap

    def _check_exclusive(self) -> None:
        overlap = self._overlap()
        if overlap.is_not_empty():
            raise BoardInvariantError(
                f"Squares claimed by more than one set: {overlap.squares()}"
            )

    def copy(self) -> Checkerboard:
        return Checkerboard(pieces=list(self.pieces))

    # -- Serialization ------------------------------------------------------

    def to_symbols(self) -> str:
        """
        One symbol per square in row-major order (square 0 first).

        ○ white man, ● black man, ☆ white king, ★ black king, space if blank.
        """
        self._check_exclusive()
        result = []
        for sq in range(NUM_SQUARES):
            ch = BLANK_SYM
            for idx, bb in enumerate(self.pieces):
                if bb.contains(sq):
                    ch = _SYMBOLS[idx]
                    break
            result.append(ch)
        return "".join(result)

    def to_tensor(self, color: Color) -> np.ndarray:
        """
        Convert the board to an evaluator input tensor from *color*'s side.

        Returns (5, 8, 8) float32 array:
          - Plane 0: Own men
          - Plane 1: Own kings
          - Plane 2: Opponent men
          - Plane 3: Opponent kings
          - Plane 4: Side indicator (all 1s if white, all 0s if black)
        """
        planes = np.zeros((5, ROWS, COLS), dtype=np.float32)
        sources = (
            self.men(color),
            self.kings(color),
            self.men(color.opposite),
            self.kings(color.opposite),
        )
        for plane, bb in enumerate(sources):
            for sq in bb.squares():
                row, col = sq_to_rowcol(sq)
                planes[plane, row, col] = 1.0

        if color == Color.WHITE:
            planes[4, :, :] = 1.0

        return planes

    def __str__(self) -> str:
        symbols = self.to_symbols()
        lines = []
        for row in range(ROWS - 1, -1, -1):
            lines.append(symbols[row * COLS:(row + 1) * COLS])
        return "\n".join(lines)

    def __repr__(self) -> str:
        """Pretty print the board."""
        symbols = self.to_symbols()
        lines = []
        for row in range(ROWS - 1, -1, -1):
            rank = f"{row + 1} |"
            for col in range(COLS):
                sq = row * COLS + col
                ch = symbols[sq]
                if ch == BLANK_SYM:
                    ch = "." if PLAYABLE.contains(sq) else " "
                rank += " " + ch
            lines.append(rank)

        lines.append("  +" + "-" * (COLS * 2))
        lines.append("    " + " ".join("abcdefgh"))
        return "\n".join(lines)
