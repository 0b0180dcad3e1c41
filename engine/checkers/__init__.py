"""Bitboard checkers rules engine."""

from .core import Bitboard, Checkerboard, Color, GameResult, MoveGenerator, MoveResult, game_over
from .session import GameSession, SessionConfig
