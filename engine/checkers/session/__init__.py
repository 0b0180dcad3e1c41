"""Game session: turn tracking on top of the rules engine."""

from .config import SessionConfig
from .game import GameSession
