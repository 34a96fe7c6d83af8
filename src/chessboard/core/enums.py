"""Core enumerations for the board domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @classmethod
    def parse(cls, name: str) -> Color:
        """Color from its lowercase name, e.g. ``'black'``."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Invalid color name: {name!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


class Role(IntEnum):
    """Piece roles ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()
