"""Side colors."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color. White starts on rows 1-3 and moves up the board."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.capitalize()
