"""Square type alias and coordinate helpers.

Squares are algebraic names (``"a1"`` .. ``"h8"``). Two coordinate
conventions are in use and must not be mixed:

* *coords* ``(col, row)`` with ``row = 8 - rank``: row 0 is rank 8, the way
  a FEN placement field is written (top to bottom).
* *pos* ``(x, y)`` with ``y = rank - 1``: y 0 is rank 1, used by the
  premove mobility predicates.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = str  # "a1" .. "h8"

FILES = "abcdefgh"
RANKS = "12345678"


def file_index(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return ord(sq[0]) - ord("a")


def rank_number(sq: Square) -> int:
    """Rank number 1–8."""
    return int(sq[1])


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank number (1–8)."""
    return FILES[file] + str(rank)


def is_valid_square(name: object) -> bool:
    """Whether *name* is a square name such as ``'e4'``."""
    return (
        isinstance(name, str)
        and len(name) == 2
        and name[0] in FILES
        and name[1] in RANKS
    )


def parse_square(name: str) -> Square:
    """Validate and return a square name, e.g. ``'e4'``."""
    if not is_valid_square(name):
        raise ValueError(f"Invalid square name: {name!r}")
    return name


# ── FEN-reading convention (row 0 = rank 8) ─────────────────────────────────


def square_to_coords(sq: Square) -> tuple[int, int]:
    """``'e4'`` → ``(4, 4)``; ``'a8'`` → ``(0, 0)``."""
    return file_index(sq), 8 - rank_number(sq)


def coords_to_square(col: int, row: int) -> Square:
    """``(3, 6)`` → ``'d2'``."""
    return make_square(col, 8 - row)


# ── Mobility convention (y 0 = rank 1) ──────────────────────────────────────


def square_to_pos(sq: Square) -> tuple[int, int]:
    """``'e4'`` → ``(4, 3)``; ``'a1'`` → ``(0, 0)``."""
    return file_index(sq), rank_number(sq) - 1


def pos_to_square(x: int, y: int) -> Square:
    """``(4, 3)`` → ``'e4'``."""
    return make_square(x, y + 1)


# File-major order: a1, a2, ..., a8, b1, ..., h8.
ALL_SQUARES: tuple[Square, ...] = tuple(
    pos_to_square(x, y) for x in range(8) for y in range(8)
)
