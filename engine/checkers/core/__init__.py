"""Core game logic: bitboards, board state, and move generation."""

from .bitboard import *
from .enums import Color
from .moves import MoveGenerator
from .state import Checkerboard, MoveResult, BoardInvariantError
from .terminal import GameResult, game_over
