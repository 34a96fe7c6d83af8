"""Carry piece identities over to a wholly new position.

Used when a position arrives from outside (a new FEN, a takeback, several
moves replayed at once) instead of as a single move. The result keeps as
many identities as possible so every surviving piece can be animated from
its old square to its new one instead of popping in and out.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from chessboard.core.piece import IndexedPiece, Piece
from chessboard.core.store import IndexAllocator, PieceStore
from chessboard.core.types import Square

_LOGGER = logging.getLogger(__name__)


def reconcile(
    store: PieceStore, allocator: IndexAllocator, target: Mapping[Square, Piece]
) -> PieceStore:
    """Build a store over exactly *target*'s squares, reusing identities.

    1. A target square whose current occupant has the same color and role
       keeps that occupant's identity.
    2. Every other target square takes the identity of the first unused
       current piece of the same color and role, in the store's iteration
       order; failing that, a new identity comes from *allocator*.

    The matching is greedy. When several interchangeable pieces move at
    once the pairing follows iteration order, not the shortest distance.
    *store* is left untouched; identities it holds that found no match are
    not released (see :func:`leftover_indexes`).
    """
    pool: dict[Square, IndexedPiece] = dict(store.board)
    result: dict[Square, IndexedPiece] = {}

    for sq, wanted in target.items():
        current = pool.get(sq)
        if current is not None and wanted.is_same_kind(current):
            result[sq] = current
            del pool[sq]
    retained = len(result)

    reused = 0
    allocated = 0
    for sq, wanted in target.items():
        if sq in result:
            continue

        match_sq = next((s for s, p in pool.items() if wanted.is_same_kind(p)), None)
        if match_sq is not None:
            result[sq] = pool.pop(match_sq)
            reused += 1
        else:
            result[sq] = IndexedPiece(wanted.color, wanted.role, allocator.allocate())
            allocated += 1

    _LOGGER.debug(
        "Reconciled %d squares: %d retained, %d reused, %d allocated, %d left over",
        len(result),
        retained,
        reused,
        allocated,
        len(pool),
    )
    return PieceStore.from_board_map(result)


def leftover_indexes(old: PieceStore, new: PieceStore) -> list[int]:
    """Identities of *old* that *new* no longer uses, in *old*'s order."""
    kept = new.indexes()
    return [p.index for p in old.board.values() if p.index not in kept]
