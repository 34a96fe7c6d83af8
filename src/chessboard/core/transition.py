"""Identity-level diff between two stores, for the animation layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessboard.core.piece import Piece, PlacedPiece
from chessboard.core.store import PieceStore
from chessboard.core.types import Square


@dataclass(frozen=True, slots=True)
class PieceTransition:
    """One identity travelling from one square to another."""

    index: int
    piece: Piece
    from_sq: Square
    to_sq: Square


@dataclass(frozen=True, slots=True)
class Transition:
    """Everything that changes between two stores.

    ``moved`` pieces slide, ``appeared`` pieces fade in on their square and
    ``vanished`` pieces (captured or removed) fade out where they stood.
    """

    moved: tuple[PieceTransition, ...] = ()
    appeared: dict[int, PlacedPiece] = field(default_factory=dict)
    vanished: dict[int, PlacedPiece] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not (self.moved or self.appeared or self.vanished)


def plan_transition(old: PieceStore, new: PieceStore) -> Transition:
    """Compare *old* and *new* identity by identity."""
    moved: list[PieceTransition] = []
    appeared: dict[int, PlacedPiece] = {}
    for index, placed in new.index_map.items():
        before = old.placed(index)
        if before is None:
            appeared[index] = placed
        elif before.square != placed.square:
            moved.append(PieceTransition(index, placed.piece, before.square, placed.square))

    vanished = {
        index: placed
        for index, placed in old.index_map.items()
        if new.placed(index) is None
    }
    return Transition(tuple(moved), appeared, vanished)
