"""Loose input validators for values handed in by the presentation layer."""

from __future__ import annotations

import re
from collections.abc import Iterable

from chessboard.core.types import Square

_SQUARE_RE = re.compile(r"[a-h][1-8]")
_MOVE_RE = re.compile(r"[a-h][1-8][a-h][1-8]")


def validate_index(value: object) -> bool:
    """Whether *value* is an integer usable as a piece index (negatives too)."""
    return isinstance(value, int) and not isinstance(value, bool)


def validate_moves(moves: Iterable[str]) -> list[str]:
    """Keep only coordinate moves such as ``'e2e4'``."""
    return [m for m in moves if isinstance(m, str) and _MOVE_RE.fullmatch(m)]


def validate_square(value: object) -> Square:
    """*value* when it names a square such as ``'e2'``, else ``""``."""
    if isinstance(value, str) and _SQUARE_RE.fullmatch(value):
        return value
    return ""
