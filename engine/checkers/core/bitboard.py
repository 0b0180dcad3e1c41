"""
Bitboard utilities for checkers.

Board layout (8x8 = 64 squares, one bit per square):

  8 | 56 57 58 59 60 61 62 63
  7 | 48 49 50 51 52 53 54 55
  6 | 40 41 42 43 44 45 46 47
  5 | 32 33 34 35 36 37 38 39
  4 | 24 25 26 27 28 29 30 31
  3 | 16 17 18 19 20 21 22 23
  2 |  8  9 10 11 12 13 14 15
  1 |  0  1  2  3  4  5  6  7
    +------------------------
       a  b  c  d  e  f  g  h

Square index = row * 8 + col (row 0 = rank 1, col 0 = file a).
Pieces only ever stand on the 32 dark squares (row + col even).

Diagonal offsets:
    up-left = +7, up-right = +9, down-left = -9, down-right = -7
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

# Board dimensions
ROWS = 8
COLS = 8
NUM_SQUARES = ROWS * COLS  # 64

FULL_MASK = (1 << NUM_SQUARES) - 1

# Raw edge masks
_LEFT = 0x0101010101010101
_RIGHT = _LEFT << 7
_BOTTOM = 0xFF
_TOP = _BOTTOM << 56

# Dark squares (a1, c1, ... b2, d2, ...)
_PLAYABLE = 0xAA55AA55AA55AA55


def sq_to_rowcol(sq: int) -> tuple[int, int]:
    """Convert square index to (row, col)."""
    return sq // COLS, sq % COLS


def rowcol_to_sq(row: int, col: int) -> int:
    """Convert (row, col) to square index."""
    return row * COLS + col


def is_playable_sq(sq: int) -> bool:
    """Check if a square index is one of the 32 dark squares."""
    return 0 <= sq < NUM_SQUARES and bool(_PLAYABLE >> sq & 1)


def sq_to_algebraic(sq: int) -> str:
    """Convert square index to algebraic notation (e.g., 'c3')."""
    row, col = sq_to_rowcol(sq)
    return chr(ord('a') + col) + str(row + 1)


def algebraic_to_sq(s: str) -> int:
    """Convert algebraic notation to square index."""
    s = s.strip().lower()
    if len(s) != 2 or not ('a' <= s[0] <= 'h') or not ('1' <= s[1] <= '8'):
        raise ValueError(f"Invalid square: {s!r}")
    col = ord(s[0]) - ord('a')
    row = int(s[1]) - 1
    return rowcol_to_sq(row, col)


def popcount(bb: int) -> int:
    """Count number of set bits."""
    return bin(bb).count('1')


def lsb(bb: int) -> int:
    """Return index of least significant bit (or -1 if empty)."""
    if bb == 0:
        return -1
    return (bb & -bb).bit_length() - 1


def iter_bits(bb: int) -> Iterator[int]:
    """Iterate over indices of set bits."""
    while bb:
        sq = lsb(bb)
        yield sq
        bb &= bb - 1  # Clear LSB


@dataclass(frozen=True)
class Bitboard:
    """
    An arbitrary subset of the 64 board squares.

    Values are immutable; every operation returns a new Bitboard. Shifts are
    always paired with an exclusion mask so that squares on the edge being
    shifted across are dropped before the shift instead of wrapping around
    to the opposite side of the board.
    """
    bits: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.bits <= FULL_MASK:
            raise ValueError(f"Bitboard value out of 64-bit range: {self.bits:#x}")

    # -- Construction -------------------------------------------------------

    @classmethod
    def empty(cls) -> Bitboard:
        return cls(0)

    @classmethod
    def square(cls, sq: int) -> Bitboard:
        """Single-square set for a square index."""
        if not 0 <= sq < NUM_SQUARES:
            raise ValueError(f"Square index out of range: {sq}")
        return cls(1 << sq)

    @classmethod
    def from_squares(cls, squares: Iterable[int]) -> Bitboard:
        bits = 0
        for sq in squares:
            bits |= cls.square(sq).bits
        return cls(bits)

    # -- Tests --------------------------------------------------------------

    def is_empty(self) -> bool:
        return self.bits == 0

    def is_not_empty(self) -> bool:
        return self.bits != 0

    def is_single_square(self) -> bool:
        """True iff exactly one bit is set."""
        return self.bits != 0 and self.bits & (self.bits - 1) == 0

    def contains(self, sq: int) -> bool:
        return bool(self.bits >> sq & 1)

    # -- Set algebra --------------------------------------------------------

    def union(self, other: Bitboard) -> Bitboard:
        return Bitboard(self.bits | other.bits)

    def intersect(self, other: Bitboard) -> Bitboard:
        return Bitboard(self.bits & other.bits)

    def xor(self, other: Bitboard) -> Bitboard:
        return Bitboard(self.bits ^ other.bits)

    def complement(self) -> Bitboard:
        return Bitboard(~self.bits & FULL_MASK)

    def without(self, other: Bitboard) -> Bitboard:
        """Squares of this set that are not in *other*."""
        return Bitboard(self.bits & ~other.bits)

    def shift(self, offset: int, exclude: Optional[Bitboard] = None) -> Bitboard:
        """
        Shift every square by a signed bit offset.

        Squares in *exclude* are removed before shifting. Positive offsets
        move toward higher indices (up the board), negative toward lower.
        Bits pushed past either end of the 64-bit word are discarded.
        """
        bits = self.bits
        if exclude is not None:
            bits &= ~exclude.bits
        if offset >= 0:
            bits = (bits << offset) & FULL_MASK
        else:
            bits >>= -offset
        return Bitboard(bits)

    # -- Inspection ---------------------------------------------------------

    def index(self) -> int:
        """Square index of a single-square set."""
        if not self.is_single_square():
            raise ValueError(f"Not a single square: {self.bits:#x}")
        return self.bits.bit_length() - 1

    def count(self) -> int:
        return popcount(self.bits)

    def squares(self) -> list[int]:
        """Square indices in ascending order."""
        return list(iter_bits(self.bits))

    # -- Geometry -----------------------------------------------------------

    @staticmethod
    def midsquare(left: Bitboard, right: Bitboard) -> Bitboard:
        """
        The square jumped over when moving from *left* to *right*.

        Both arguments must be single squares exactly two diagonal steps
        apart; anything else gives the empty set. The product of two powers
        of two is the power of two whose exponent is the sum of the indices,
        so the midpoint index is half that exponent.
        """
        if not left.is_single_square() or not right.is_single_square():
            return Bitboard()

        index_sum = (left.bits * right.bits).bit_length() - 1
        if index_sum & 1:
            return Bitboard()

        r1, c1 = sq_to_rowcol(left.index())
        r2, c2 = sq_to_rowcol(right.index())
        if abs(r1 - r2) != 2 or abs(c1 - c2) != 2:
            return Bitboard()

        return Bitboard(1 << (index_sum >> 1))

    def __str__(self) -> str:
        lines = []
        for row in range(ROWS - 1, -1, -1):
            lines.append("".join(
                "1" if self.bits >> rowcol_to_sq(row, col) & 1 else "0"
                for col in range(COLS)
            ))
        return "\n".join(lines) + "\n"


EMPTY = Bitboard()
FULL = Bitboard(FULL_MASK)
PLAYABLE = Bitboard(_PLAYABLE)

# Edge masks (one column / row)
LEFT_EDGE = Bitboard(_LEFT)
RIGHT_EDGE = Bitboard(_RIGHT)
BOTTOM_EDGE = Bitboard(_BOTTOM)
TOP_EDGE = Bitboard(_TOP)

# Edge masks two columns / rows deep, for jumps
LEFT_TWO = Bitboard(_LEFT | _LEFT << 1)
RIGHT_TWO = Bitboard(_RIGHT | _RIGHT >> 1)
BOTTOM_TWO = Bitboard(_BOTTOM | _BOTTOM << 8)
TOP_TWO = Bitboard(_TOP | _TOP >> 8)

# Starting position: three back rows of dark squares per side
WHITE_START_MEN = Bitboard(0x55AA55)
BLACK_START_MEN = Bitboard(0xAA55AA << 40)


def format_bitboard(bb: Bitboard, label: str = "") -> str:
    """Render a bitboard with rank and file labels."""
    lines = [f"{label}:"] if label else []
    for row in range(ROWS - 1, -1, -1):
        rank = str(row + 1) + " |"
        for col in range(COLS):
            rank += " 1" if bb.contains(rowcol_to_sq(row, col)) else " ."
        lines.append(rank)
    lines.append("  +" + "-" * (COLS * 2))
    lines.append("    " + " ".join("abcdefgh"))
    return "\n".join(lines)
