"""Move step value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessboard.core.types import Square


@dataclass(frozen=True, slots=True)
class MoveStep:
    """One origin → destination step of a move sequence.

    ``render=False`` marks a filler step: it only keeps step counts aligned
    between castles and multi-move sequences and never touches a store.
    """

    from_sq: Square
    to_sq: Square
    render: bool = True

    @property
    def is_inert(self) -> bool:
        """Whether applying this step must leave a store unchanged."""
        return not self.render or not self.from_sq or not self.to_sq

    def __str__(self) -> str:
        if self.is_inert:
            return "-"
        return f"{self.from_sq}{self.to_sq}"


NO_MOVE = MoveStep("", "")
FILLER = MoveStep("", "", render=False)
