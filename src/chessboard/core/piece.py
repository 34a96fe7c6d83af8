"""Piece value objects.

A :class:`Piece` is just color and role. The identity store pairs it with
an identity number (:class:`IndexedPiece`, keyed by square) and with a
square (:class:`PlacedPiece`, keyed by identity).
"""

from __future__ import annotations

from dataclasses import dataclass

from chessboard.core.enums import Color, Role
from chessboard.core.types import Square

# Lowercase FEN letter ↔ role
_ROLE_BY_CHAR: dict[str, Role] = {
    "p": Role.PAWN,
    "r": Role.ROOK,
    "n": Role.KNIGHT,
    "b": Role.BISHOP,
    "q": Role.QUEEN,
    "k": Role.KING,
}

_CHAR_BY_ROLE: dict[Role, str] = {v: k for k, v in _ROLE_BY_CHAR.items()}


def role_from_char(char: str) -> Role | None:
    """Role for a FEN letter of either case, ``None`` if unknown."""
    return _ROLE_BY_CHAR.get(char.lower())


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    role: Role

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        char = _CHAR_BY_ROLE[self.role]
        return char.upper() if self.color == Color.WHITE else char

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        role = role_from_char(char)
        if role is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, role)

    def is_same_kind(self, other: Piece | IndexedPiece | PlacedPiece) -> bool:
        """Same color and role, ignoring identity and square."""
        return self.color == other.color and self.role == other.role


@dataclass(frozen=True, slots=True)
class IndexedPiece:
    """A piece on the board together with its identity number."""

    color: Color
    role: Role
    index: int

    @property
    def piece(self) -> Piece:
        return Piece(self.color, self.role)

    def placed(self, square: Square) -> PlacedPiece:
        return PlacedPiece(self.color, self.role, square)


@dataclass(frozen=True, slots=True)
class PlacedPiece:
    """An identity's piece together with the square it stands on."""

    color: Color
    role: Role
    square: Square

    @property
    def piece(self) -> Piece:
        return Piece(self.color, self.role)

    def indexed(self, index: int) -> IndexedPiece:
        return IndexedPiece(self.color, self.role, index)
