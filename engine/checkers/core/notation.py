"""
Move notation for checkers.

Moves use algebraic square names:
- Step: "c3-d4" (piece moves one diagonal square)
- Jump chain: "c3xe5xc7" (each "x" is one capture, turn ends after the last)
"""

from __future__ import annotations
import re

from .bitboard import algebraic_to_sq, sq_to_algebraic

_MOVE_PATTERN = re.compile(r'^[a-h][1-8](?:([-x])[a-h][1-8])+$')


def parse_move(text: str) -> tuple[list[int], bool]:
    """
    Parse move text into (squares, is_capture).

    Raises ValueError for malformed text, mixed separators, or a step
    with more than two squares.
    """
    token = text.strip().lower()
    if not _MOVE_PATTERN.match(token):
        raise ValueError(f"Invalid move format: {text}")

    has_step = '-' in token
    has_capture = 'x' in token
    if has_step and has_capture:
        raise ValueError(f"Mixed step and capture separators: {text}")

    parts = re.split(r'[-x]', token)
    if has_step and len(parts) != 2:
        raise ValueError(f"A step move has exactly two squares: {text}")

    return [algebraic_to_sq(p) for p in parts], has_capture


def format_move(squares: list[int], capture: bool) -> str:
    """Format a list of square indices back into move text."""
    if len(squares) < 2:
        raise ValueError("A move needs at least two squares")
    if not capture and len(squares) != 2:
        raise ValueError("A step move has exactly two squares")
    sep = 'x' if capture else '-'
    return sep.join(sq_to_algebraic(sq) for sq in squares)
