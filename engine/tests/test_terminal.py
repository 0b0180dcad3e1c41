"""Tests for terminal conditions and win detection."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from checkers.core.bitboard import Bitboard, PLAYABLE, rowcol_to_sq
from checkers.core.enums import Color
from checkers.core.state import Checkerboard
from checkers.core.terminal import GameResult, game_over, is_board_full, has_any_move

WHITE = Color.WHITE
BLACK = Color.BLACK


def sq(i):
    return Bitboard.square(i)


def rows_mask(first, last):
    """Playable squares on rows first..last inclusive."""
    bits = 0
    for row in range(first, last + 1):
        for col in range(8):
            bits |= 1 << rowcol_to_sq(row, col)
    return Bitboard(bits).intersect(PLAYABLE)


class TestOngoing:
    def test_starting_position(self):
        board = Checkerboard.new_game()
        assert game_over(board, WHITE) is None
        assert game_over(board, BLACK) is None
        assert not is_board_full(board)


class TestDraw:
    def test_full_board_one_color(self):
        board = Checkerboard.from_bitboards(white_men=PLAYABLE)
        assert is_board_full(board)
        assert game_over(board, WHITE) == GameResult.draw()
        assert game_over(board, BLACK) == GameResult.draw()

    def test_full_board_mixed(self):
        board = Checkerboard.from_bitboards(
            white_men=rows_mask(0, 2),
            white_kings=rows_mask(3, 3),
            black_kings=rows_mask(4, 4),
            black_men=rows_mask(5, 7),
        )
        assert game_over(board, WHITE).is_draw

    def test_one_open_square_is_not_full(self):
        board = Checkerboard.from_bitboards(white_men=PLAYABLE.without(sq(27)))
        assert not is_board_full(board)


class TestNoMovesLoses:
    def test_no_pieces(self):
        board = Checkerboard.from_bitboards(black_men=sq(41))
        assert game_over(board, WHITE) == GameResult.victory(BLACK)

    def test_stuck_on_far_row(self):
        # A man on the far row can neither step nor jump
        board = Checkerboard.from_bitboards(white_men=sq(57), black_men=sq(0))
        assert not has_any_move(board, WHITE)
        assert game_over(board, WHITE) == GameResult.victory(BLACK)
        assert game_over(board, BLACK) == GameResult.victory(WHITE)

    def test_blocked_regardless_of_piece_count(self):
        board = Checkerboard.from_bitboards(white_men=sq(0), black_men=Bitboard.from_squares([9, 18]))
        assert game_over(board, WHITE) == GameResult.victory(BLACK)

    def test_capture_counts_as_a_move(self):
        board = Checkerboard.from_bitboards(white_men=sq(0), black_men=sq(9))
        assert has_any_move(board, WHITE)
        assert game_over(board, WHITE) is None


class TestGameResult:
    def test_victory(self):
        result = GameResult.victory(WHITE)
        assert not result.is_draw
        assert result.winner == WHITE
        assert str(result) == "White won!"

    def test_draw(self):
        result = GameResult.draw()
        assert result.is_draw
        assert str(result) == "It was a draw!"
