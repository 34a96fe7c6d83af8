"""Notation package: FEN piece-placement parsing and serialization."""

from chessboard.core.notation.fen import (
    STARTING_FEN,
    board_map_from_fen,
    board_map_to_fen,
    checked_square,
    find_piece_square,
    piece_to_char,
    store_from_fen,
)

__all__ = [
    "STARTING_FEN",
    "board_map_from_fen",
    "board_map_to_fen",
    "checked_square",
    "find_piece_square",
    "piece_to_char",
    "store_from_fen",
]
