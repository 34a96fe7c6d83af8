"""Board session configuration."""

from __future__ import annotations

from dataclasses import dataclass

from chessboard.core.enums import Color
from chessboard.core.notation import STARTING_FEN


@dataclass(slots=True)
class BoardConfig:
    """Settings a :class:`~chessboard.board.session.BoardSession` starts from.

    Args:
        fen: Initial position; only the placement field is read.
        turn_color: Side to move.
        check: ``True`` if the side to move is in check, or the color in check.
        auto_castle: Expand king-to-rook and two-square king moves into castles.
        premove_castle: Offer castling squares among king premove destinations.
    """

    fen: str = STARTING_FEN
    turn_color: Color = Color.WHITE
    check: bool | Color | str | None = None
    auto_castle: bool = True
    premove_castle: bool = True
