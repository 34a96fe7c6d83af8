"""PieceStore - uniquely identified pieces on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from chessboard.core.enums import Color, Role
from chessboard.core.move import MoveStep
from chessboard.core.piece import IndexedPiece, Piece, PlacedPiece
from chessboard.core.types import FILES, Square


class IndexAllocator:
    """Hands out piece identities.

    Released identities wait in an insertion-ordered free pool and are
    reused earliest-first before any never-used identity is taken from the
    counter.
    """

    __slots__ = ("_free", "_next_index")

    def __init__(self, next_index: int = 0, free: Iterable[int] = ()) -> None:
        self._next_index = next_index
        self._free: dict[int, None] = dict.fromkeys(free)

    @property
    def next_index(self) -> int:
        """Smallest identity never handed out by the counter."""
        return self._next_index

    @property
    def free_indexes(self) -> tuple[int, ...]:
        """Released identities in reuse order."""
        return tuple(self._free)

    def release(self, index: int) -> None:
        self._free[index] = None

    def allocate(self) -> int:
        """Pop the earliest released identity, else advance the counter."""
        if self._free:
            index = next(iter(self._free))
            del self._free[index]
            return index
        index = self._next_index
        self._next_index += 1
        return index

    def copy(self) -> IndexAllocator:
        return IndexAllocator(self._next_index, self._free)

    def __repr__(self) -> str:
        return f"IndexAllocator(next_index={self._next_index}, free={list(self._free)})"


class PieceStore:
    """Dual map of a position: square → identity and identity → square.

    Both maps are kept exact inverses of each other. They are only ever
    changed together, through :func:`apply_move` and :func:`remove_piece`;
    callers get read-only views.
    """

    __slots__ = ("_board", "_index")

    def __init__(self) -> None:
        self._board: dict[Square, IndexedPiece] = {}
        self._index: dict[int, PlacedPiece] = {}

    @classmethod
    def from_board_map(cls, board: Mapping[Square, IndexedPiece]) -> PieceStore:
        """Build a store from square → indexed piece, deriving the index map."""
        store = cls()
        for sq, piece in board.items():
            if piece.index in store._index:
                raise ValueError(f"Duplicate piece index {piece.index} at {sq}")
            store._board[sq] = piece
            store._index[piece.index] = piece.placed(sq)
        return store

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> IndexedPiece | None:
        return self._board.get(sq)

    def __contains__(self, sq: object) -> bool:
        return sq in self._board

    def __iter__(self) -> Iterator[Square]:
        return iter(self._board)

    def __len__(self) -> int:
        return len(self._board)

    def is_empty(self, sq: Square) -> bool:
        return sq not in self._board

    def placed(self, index: int) -> PlacedPiece | None:
        """Piece and square of identity *index*, if it is on the board."""
        return self._index.get(index)

    def square_of(self, index: int) -> Square | None:
        placed = self._index.get(index)
        return placed.square if placed is not None else None

    # -- Views ----------------------------------------------------------------

    @property
    def board(self) -> Mapping[Square, IndexedPiece]:
        """Read-only square → indexed piece view."""
        return MappingProxyType(self._board)

    @property
    def index_map(self) -> Mapping[int, PlacedPiece]:
        """Read-only identity → placed piece view."""
        return MappingProxyType(self._index)

    def indexes(self) -> frozenset[int]:
        return frozenset(self._index)

    def piece_map(self) -> dict[Square, Piece]:
        """Square → piece without identities."""
        return {sq: p.piece for sq, p in self._board.items()}

    def pieces(self, color: Color, role: Role) -> list[Square]:
        """Squares occupied by *color*'s *role*."""
        return [
            sq for sq, p in self._board.items() if p.color == color and p.role == role
        ]

    # -- Copying / checking -------------------------------------------------

    def copy(self) -> PieceStore:
        store = PieceStore()
        store._board = self._board.copy()
        store._index = self._index.copy()
        return store

    def check_consistency(self) -> None:
        """Raise ``ValueError`` unless the two maps are exact inverses."""
        if len(self._board) != len(self._index):
            raise ValueError(
                f"Map sizes differ: {len(self._board)} squares, "
                f"{len(self._index)} indexes"
            )
        for sq, piece in self._board.items():
            placed = self._index.get(piece.index)
            if placed != piece.placed(sq):
                raise ValueError(f"Index {piece.index} does not point back to {sq}")

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PieceStore):
            return NotImplemented
        return self._board == other._board

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(8, 0, -1):
            row = []
            for file in FILES:
                p = self._board.get(f"{file}{rank}")
                row.append(str(p.piece) if p else ".")
            rows.append(f"{rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


# -- Mutation primitives ----------------------------------------------------


def apply_move(
    store: PieceStore, from_sq: Square, to_sq: Square, allocator: IndexAllocator
) -> None:
    """Move the occupant of *from_sq* to *to_sq*.

    Does nothing when *from_sq* is empty. An occupant of *to_sq* is dropped
    from both maps and its identity released into *allocator*. No legality
    checks; read *to_sq* beforehand if the captured piece matters.
    """
    moving = store._board.get(from_sq)
    if moving is None or from_sq == to_sq:
        return

    captured = store._board.get(to_sq)
    if captured is not None:
        del store._index[captured.index]
        allocator.release(captured.index)

    store._index[moving.index] = moving.placed(to_sq)
    store._board[to_sq] = moving
    del store._board[from_sq]


def apply_moves(
    store: PieceStore, steps: Iterable[MoveStep], allocator: IndexAllocator
) -> None:
    """Apply every non-filler step of a move sequence in order."""
    for step in steps:
        if not step.is_inert:
            apply_move(store, step.from_sq, step.to_sq, allocator)


def remove_piece(
    store: PieceStore, sq: Square, allocator: IndexAllocator
) -> IndexedPiece | None:
    """Take the piece off *sq*, releasing its identity. Returns it, if any."""
    piece = store._board.pop(sq, None)
    if piece is None:
        return None
    del store._index[piece.index]
    allocator.release(piece.index)
    return piece
