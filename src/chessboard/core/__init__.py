"""Core domain layer — board state and piece identities, zero external dependencies.

Quick start::

    from chessboard.core import STARTING_FEN, IndexAllocator, apply_move, store_from_fen

    store, count = store_from_fen(STARTING_FEN)
    allocator = IndexAllocator(count)
    apply_move(store, "e2", "e4", allocator)
    print(store["e4"])
"""

from chessboard.core.castle import CastleResult, move_sequence, resolve_castle
from chessboard.core.enums import Color, Role
from chessboard.core.move import FILLER, NO_MOVE, MoveStep
from chessboard.core.notation import (
    STARTING_FEN,
    board_map_from_fen,
    board_map_to_fen,
    checked_square,
    find_piece_square,
    piece_to_char,
    store_from_fen,
)
from chessboard.core.piece import IndexedPiece, Piece, PlacedPiece
from chessboard.core.premove import premove_destinations
from chessboard.core.reconcile import leftover_indexes, reconcile
from chessboard.core.store import (
    IndexAllocator,
    PieceStore,
    apply_move,
    apply_moves,
    remove_piece,
)
from chessboard.core.transition import PieceTransition, Transition, plan_transition
from chessboard.core.types import (
    Square,
    coords_to_square,
    is_valid_square,
    parse_square,
    pos_to_square,
    square_to_coords,
    square_to_pos,
)
from chessboard.core.validation import validate_index, validate_moves, validate_square

__all__ = [
    # Enums
    "Color",
    "Role",
    # Types / helpers
    "Square",
    "coords_to_square",
    "is_valid_square",
    "parse_square",
    "pos_to_square",
    "square_to_coords",
    "square_to_pos",
    # Domain objects
    "FILLER",
    "NO_MOVE",
    "CastleResult",
    "IndexAllocator",
    "IndexedPiece",
    "MoveStep",
    "Piece",
    "PieceStore",
    "PieceTransition",
    "PlacedPiece",
    "Transition",
    # Operations
    "apply_move",
    "apply_moves",
    "leftover_indexes",
    "move_sequence",
    "plan_transition",
    "premove_destinations",
    "reconcile",
    "remove_piece",
    "resolve_castle",
    # Notation
    "STARTING_FEN",
    "board_map_from_fen",
    "board_map_to_fen",
    "checked_square",
    "find_piece_square",
    "piece_to_char",
    "store_from_fen",
    # Validation
    "validate_index",
    "validate_moves",
    "validate_square",
]
