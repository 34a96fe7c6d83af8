"""FEN piece-placement parsing and serialization.

Only the placement field (text before the first space) is interpreted.
Side to move, castling rights, en passant and clocks are ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from chessboard.core.enums import Color, Role
from chessboard.core.piece import IndexedPiece, Piece, role_from_char
from chessboard.core.store import PieceStore
from chessboard.core.types import FILES, Square, coords_to_square

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_KING_CHARS: dict[Color, str] = {Color.WHITE: "K", Color.BLACK: "k"}


def _placement(fen: str) -> str:
    return fen.split(" ", 1)[0]


def _scan(placement: str) -> Iterator[tuple[Square, str]]:
    """Yield ``(square, letter)`` for every piece letter, top rank first."""
    row = 0
    col = 0
    for ch in placement:
        if ch == "/":
            row += 1
            col = 0
        elif ch in "0123456789":
            col += int(ch)
        else:
            if col < 8 and row < 8:
                yield coords_to_square(col, row), ch
            else:
                _LOGGER.warning("FEN piece %r lies off the board: %r", ch, placement)
            col += 1


def _pieces(fen: str) -> Iterator[tuple[Square, Piece]]:
    placement = _placement(fen)
    for sq, ch in _scan(placement):
        if role_from_char(ch) is None:
            _LOGGER.warning("Skipping unknown FEN piece %r at %s", ch, sq)
            continue
        yield sq, Piece.from_char(ch)


# ── Decoding ────────────────────────────────────────────────────────────────


def store_from_fen(fen: str) -> tuple[PieceStore, int]:
    """Decode *fen* into a fresh :class:`PieceStore`.

    Identities run 0..N-1 in reading order (a8 to h8, then down to rank 1).
    Returns the store and the piece count N, which is the first identity a
    caller's allocator may hand out next.
    """
    board: dict[Square, IndexedPiece] = {}
    for index, (sq, piece) in enumerate(_pieces(fen)):
        board[sq] = IndexedPiece(piece.color, piece.role, index)
    return PieceStore.from_board_map(board), len(board)


def board_map_from_fen(fen: str) -> dict[Square, Piece]:
    """Decode *fen* into square → piece, without identities."""
    return dict(_pieces(fen))


def find_piece_square(fen: str, letter: str) -> Square:
    """First square holding the literal FEN *letter*, or ``""``.

    The match is case sensitive: ``'K'`` finds the white king only.
    """
    for sq, ch in _scan(_placement(fen)):
        if ch == letter:
            return sq
    return ""


def checked_square(
    check: bool | Color | str | None, turn_color: Color | str, fen: str
) -> Square:
    """Square of the king in check, or ``""``.

    *check* is ``True`` when the side to move is in check, a color (or
    color name) naming the side in check, or anything falsy for no check.
    """
    color: Color | None
    if check is True:
        color = Color.parse(turn_color) if isinstance(turn_color, str) else turn_color
    elif isinstance(check, Color):
        color = check
    elif check in ("white", "black"):
        color = Color.parse(check)
    else:
        color = None

    if color is None:
        return ""
    return find_piece_square(fen, _KING_CHARS[color])


# ── Encoding ────────────────────────────────────────────────────────────────


def piece_to_char(color: Color, role: Role) -> str:
    """FEN letter for a color and role, e.g. white knight → ``'N'``."""
    return str(Piece(color, role))


def _char_or_none(value: object) -> str | None:
    color = getattr(value, "color", None)
    role = getattr(value, "role", None)
    if not isinstance(color, Color) or not isinstance(role, Role):
        return None
    return piece_to_char(color, role)


def board_map_to_fen(
    board: Mapping[Square, Piece | IndexedPiece | None] | PieceStore,
) -> str:
    """Serialise a square → piece mapping to a FEN placement field.

    Values without a proper color and role are written as empty squares.
    """
    if isinstance(board, PieceStore):
        board = board.board

    rows: list[str] = []
    for rank in range(8, 0, -1):
        empty = 0
        row = ""
        for file in FILES:
            char = _char_or_none(board.get(f"{file}{rank}"))
            if char is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += char
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)
