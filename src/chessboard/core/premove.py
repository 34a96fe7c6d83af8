"""Pseudo-legal premove destinations.

Destinations follow piece geometry only. Sliding pieces are not stopped by
pieces in the way and nothing is checked for check or pins: a premove is
validated again by the rules engine once it is actually played.
"""

from __future__ import annotations

from collections.abc import Callable

from chessboard.core.enums import Color, Role
from chessboard.core.store import PieceStore
from chessboard.core.types import ALL_SQUARES, Square, square_to_pos

Mobility = Callable[[int, int, int, int], bool]  # x1, y1, x2, y2


def _pawn(color: Color) -> Mobility:
    def mobility(x1: int, y1: int, x2: int, y2: int) -> bool:
        if abs(x1 - x2) > 1:
            return False
        if color == Color.WHITE:
            return y2 == y1 + 1 or (y1 <= 1 and y2 == y1 + 2 and x1 == x2)
        return y2 == y1 - 1 or (y1 >= 6 and y2 == y1 - 2 and x1 == x2)

    return mobility


def _knight(x1: int, y1: int, x2: int, y2: int) -> bool:
    return {abs(x1 - x2), abs(y1 - y2)} == {1, 2}


def _bishop(x1: int, y1: int, x2: int, y2: int) -> bool:
    return abs(x1 - x2) == abs(y1 - y2)


def _rook(x1: int, y1: int, x2: int, y2: int) -> bool:
    return x1 == x2 or y1 == y2


def _queen(x1: int, y1: int, x2: int, y2: int) -> bool:
    return _bishop(x1, y1, x2, y2) or _rook(x1, y1, x2, y2)


def _king(color: Color, rook_files: list[int], can_castle: bool) -> Mobility:
    back_rank = 0 if color == Color.WHITE else 7

    def mobility(x1: int, y1: int, x2: int, y2: int) -> bool:
        if abs(x1 - x2) < 2 and abs(y1 - y2) < 2:
            return True
        if not can_castle or y1 != y2 or y1 != back_rank:
            return False
        if x1 == 4 and ((x2 == 2 and 0 in rook_files) or (x2 == 6 and 7 in rook_files)):
            return True
        return x2 in rook_files

    return mobility


def _rook_files(store: PieceStore, color: Color) -> list[int]:
    """Files of *color*'s rooks standing on its back rank."""
    back_rank = "1" if color == Color.WHITE else "8"
    return [
        square_to_pos(sq)[0]
        for sq in store.pieces(color, Role.ROOK)
        if sq[1] == back_rank
    ]


_FIXED_MOBILITY: dict[Role, Mobility] = {
    Role.KNIGHT: _knight,
    Role.BISHOP: _bishop,
    Role.ROOK: _rook,
    Role.QUEEN: _queen,
}


def premove_destinations(
    store: PieceStore, square: Square, allow_castle: bool
) -> list[Square]:
    """Squares the piece on *square* could premove to, in a1, a2 … h8 order.

    An empty *square* has no destinations. With *allow_castle* the king may
    also slide along its back rank towards its own rooks.
    """
    piece = store[square]
    if piece is None:
        return []

    if piece.role == Role.PAWN:
        mobility = _pawn(piece.color)
    elif piece.role == Role.KING:
        mobility = _king(piece.color, _rook_files(store, piece.color), allow_castle)
    else:
        mobility = _FIXED_MOBILITY[piece.role]

    x1, y1 = square_to_pos(square)
    destinations: list[Square] = []
    for candidate in ALL_SQUARES:
        if candidate == square:
            continue
        x2, y2 = square_to_pos(candidate)
        if mobility(x1, y1, x2, y2):
            destinations.append(candidate)
    return destinations
