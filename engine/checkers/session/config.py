"""Session configuration."""

from __future__ import annotations
from dataclasses import dataclass

from ..core.enums import Color


@dataclass
class SessionConfig:
    """Configuration for a game session."""
    first_to_move: Color = Color.WHITE
    log_rejected_moves: bool = True  # Log invalid move attempts at DEBUG
