"""BoardSession — the state behind one interactive chessboard.

Keeps two identity stores: *future* is the committed position, updated the
moment a move is made; *current* is what is on screen and catches up when
the presentation layer finishes (or cancels) its animation via
:meth:`BoardSession.commit`. Both share one :class:`IndexAllocator`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessboard.board.config import BoardConfig
from chessboard.core.castle import move_sequence
from chessboard.core.enums import Color
from chessboard.core.move import MoveStep
from chessboard.core.notation import (
    board_map_from_fen,
    board_map_to_fen,
    checked_square,
    store_from_fen,
)
from chessboard.core.piece import IndexedPiece, Piece
from chessboard.core.premove import premove_destinations
from chessboard.core.reconcile import leftover_indexes, reconcile
from chessboard.core.store import (
    IndexAllocator,
    PieceStore,
    apply_moves,
    remove_piece,
)
from chessboard.core.transition import Transition, plan_transition
from chessboard.core.types import Square
from chessboard.core.validation import validate_square

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Square, Square, Piece | None], None]  # from, to, captured
ChangeCallback = Callable[[], None]


@dataclass
class BoardEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_before_move: list[MoveCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_change: list[ChangeCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class BoardSession:
    """Owns the stores of one board and funnels every change through them.

    Not thread-safe: all calls are expected from the single thread that
    handles input for the board.
    """

    __slots__ = (
        "_config",
        "_allocator",
        "_current",
        "_future",
        "_pending",
        "_turn_color",
        "_check_square",
        "_last_move",
        "events",
    )

    def __init__(self, config: BoardConfig | None = None) -> None:
        self._config = config if config is not None else BoardConfig()
        store, count = store_from_fen(self._config.fen)
        self._allocator = IndexAllocator(count)
        self._future = store
        self._current = store.copy()
        self._pending: list[MoveStep] = []
        self._turn_color = self._config.turn_color
        self._check_square = checked_square(
            self._config.check, self._turn_color, self._config.fen
        )
        self._last_move: tuple[Square, Square] | None = None
        self.events = BoardEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def config(self) -> BoardConfig:
        return self._config

    @property
    def allocator(self) -> IndexAllocator:
        return self._allocator

    @property
    def current(self) -> PieceStore:
        """Store matching what is currently displayed."""
        return self._current

    @property
    def future(self) -> PieceStore:
        """Store holding the committed position."""
        return self._future

    @property
    def pending(self) -> tuple[MoveStep, ...]:
        """Steps applied to *future* but not yet to *current*."""
        return tuple(self._pending)

    @property
    def turn_color(self) -> Color:
        return self._turn_color

    @property
    def check_square(self) -> Square:
        """Square of the king in check, ``""`` if none."""
        return self._check_square

    @property
    def last_move(self) -> tuple[Square, Square] | None:
        return self._last_move

    @property
    def fen(self) -> str:
        """Placement field of the committed position."""
        return board_map_to_fen(self._future)

    # ── Moves ────────────────────────────────────────────────────────────

    def move(self, from_sq: str, to_sq: str) -> list[MoveStep]:
        """Play *from_sq* → *to_sq* on the committed position.

        Returns the steps to animate; they stay pending for the displayed
        store until :meth:`commit`. Invalid squares, an empty origin or a
        drop back on the origin leave everything untouched and return ``[]``.

        The move events report the piece found on *to_sq* as captured. For a
        king dropped on its own rook to castle, that is the own rook.
        """
        from_sq = validate_square(from_sq)
        to_sq = validate_square(to_sq)
        if not from_sq or not to_sq or from_sq == to_sq or self._future.is_empty(from_sq):
            return []

        self.commit()

        steps = move_sequence(from_sq, to_sq, self._future, self._config.auto_castle)
        target = self._future[to_sq]
        captured = target.piece if target is not None else None

        self._emit_move(self.events.on_before_move, from_sq, to_sq, captured)
        apply_moves(self._future, steps, self._allocator)
        self._pending = steps
        _LOGGER.debug(
            "Move %s%s: %d step(s), captured %s",
            from_sq,
            to_sq,
            len(steps),
            captured,
        )
        self._emit_move(self.events.on_move, from_sq, to_sq, captured)
        self._emit_change()

        self._turn_color = self._turn_color.opposite
        self._last_move = (from_sq, to_sq)
        self._check_square = ""
        return steps

    def commit(self) -> list[MoveStep]:
        """Bring the displayed store up to date with the pending steps."""
        steps = self._pending
        if steps:
            apply_moves(self._current, steps, self._allocator)
            self._pending = []
        return steps

    def remove_piece(self, square: str) -> IndexedPiece | None:
        """Delete the piece on *square* from both stores (piece dropped off-board)."""
        square = validate_square(square)
        if not square:
            return None
        self.commit()
        removed = remove_piece(self._future, square, self._allocator)
        remove_piece(self._current, square, self._allocator)
        if removed is not None:
            _LOGGER.debug("Removed %s (index %d) from %s", removed.piece, removed.index, square)
            self._emit_change()
        return removed

    # ── Whole positions ──────────────────────────────────────────────────

    def set_position(
        self,
        fen: str,
        *,
        turn_color: Color | None = None,
        check: bool | Color | str | None = None,
    ) -> Transition:
        """Replace the position, keeping as many piece identities as possible.

        Returns what the presentation layer has to animate to get from the
        displayed position to the new one.
        """
        self.commit()

        new_store = reconcile(self._future, self._allocator, board_map_from_fen(fen))
        for index in leftover_indexes(self._future, new_store):
            self._allocator.release(index)

        transition = plan_transition(self._current, new_store)
        self._future = new_store
        self._current = new_store.copy()

        if turn_color is not None:
            self._turn_color = turn_color
        self._check_square = checked_square(check, self._turn_color, fen)
        self._last_move = None

        _LOGGER.debug(
            "Position set: %d moved, %d appeared, %d vanished",
            len(transition.moved),
            len(transition.appeared),
            len(transition.vanished),
        )
        if not transition.is_empty:
            self._emit_change()
        return transition

    # ── Queries ──────────────────────────────────────────────────────────

    def premove_destinations(self, square: str) -> list[Square]:
        """Pseudo-legal premove squares for the committed piece on *square*."""
        square = validate_square(square)
        if not square:
            return []
        return premove_destinations(self._future, square, self._config.premove_castle)

    # ── Internal ─────────────────────────────────────────────────────────

    @staticmethod
    def _emit_move(
        handlers: list[MoveCallback],
        from_sq: Square,
        to_sq: Square,
        captured: Piece | None,
    ) -> None:
        for cb in handlers:
            cb(from_sq, to_sq, captured)

    def _emit_change(self) -> None:
        for cb in self.events.on_change:
            cb()
