"""Castle detection for king moves made on the board."""

from __future__ import annotations

from dataclasses import dataclass

from chessboard.core.enums import Role
from chessboard.core.move import FILLER, NO_MOVE, MoveStep
from chessboard.core.store import PieceStore
from chessboard.core.types import Square

# Castle side → (king target file, rook target file, rook corner file, files to clear)
_QUEENSIDE = ("c", "d", "a", ("d", "c"))
_KINGSIDE = ("g", "f", "h", ("f", "g"))


@dataclass(frozen=True, slots=True)
class CastleResult:
    """Outcome of :func:`resolve_castle`.

    ``rook_move`` is the empty step when ``is_castle`` is false.
    """

    king_move: MoveStep
    rook_move: MoveStep = NO_MOVE
    is_castle: bool = False


def resolve_castle(from_sq: Square, to_sq: Square, store: PieceStore) -> CastleResult:
    """Decide whether the king move *from_sq* → *to_sq* is a castle.

    Two gestures count as castling:

    1. the king dropped on the ``c``/``g`` file, with the squares between it
       and the corner empty and an own rook on that corner;
    2. the king dropped on an own rook standing on the ``a``/``h`` file.

    Either way the king lands on ``c``/``g`` and the rook on ``d``/``f`` of
    the king's rank. The store is never modified.
    """
    plain = CastleResult(MoveStep(from_sq, to_sq))

    king = store[from_sq]
    if king is None or king.role != Role.KING:
        return plain

    rank = from_sq[1]
    to_file = to_sq[0]

    if to_file in ("c", "g"):
        king_file, rook_file, corner_file, between = (
            _QUEENSIDE if to_file == "c" else _KINGSIDE
        )
        if all(store.is_empty(f + rank) for f in between):
            rook = store[corner_file + rank]
            if rook is not None and rook.role == Role.ROOK and rook.color == king.color:
                return CastleResult(
                    MoveStep(from_sq, king_file + rank),
                    MoveStep(corner_file + rank, rook_file + rank),
                    True,
                )

    target = store[to_sq]
    if (
        target is not None
        and target.role == Role.ROOK
        and target.color == king.color
        and to_file in ("a", "h")
    ):
        king_file, rook_file, _, _ = _QUEENSIDE if to_file < from_sq[0] else _KINGSIDE
        return CastleResult(
            MoveStep(from_sq, king_file + rank),
            MoveStep(to_sq, rook_file + rank),
            True,
        )

    return plain


def move_sequence(
    from_sq: Square, to_sq: Square, store: PieceStore, auto_castle: bool = True
) -> list[MoveStep]:
    """Steps to play for a move, castles expanded into king and rook steps.

    A castle takes four steps (king, two fillers, rook) so its length lines
    up with multi-move sequences; any other move is a single step.
    """
    if auto_castle:
        result = resolve_castle(from_sq, to_sq, store)
        if result.is_castle:
            return [result.king_move, FILLER, FILLER, result.rook_move]
    return [MoveStep(from_sq, to_sq)]
