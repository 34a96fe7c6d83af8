"""Tests for identity reconciliation against a new position."""

import pytest

from chessboard.core.enums import Color, Role
from chessboard.core.notation import STARTING_FEN, board_map_from_fen, store_from_fen
from chessboard.core.piece import IndexedPiece, Piece
from chessboard.core.reconcile import leftover_indexes, reconcile
from chessboard.core.store import IndexAllocator, PieceStore, remove_piece

AFTER_E4 = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
AFTER_E4_E5_NXE5 = "rnbqkbnr/pppp1ppp/8/4N3/4P3/8/PPPP1PPP/RNBQKB1R b KQkq - 0 3"
WHITE_KNIGHT = Piece(Color.WHITE, Role.KNIGHT)


class TestRetention:
    def test_identical_position_keeps_everything(
        self, start_store: PieceStore, allocator: IndexAllocator
    ) -> None:
        result = reconcile(start_store, allocator, start_store.piece_map())
        assert result == start_store
        assert allocator.next_index == 32
        assert allocator.free_indexes == ()

    def test_input_store_untouched(
        self, start_store: PieceStore, allocator: IndexAllocator
    ) -> None:
        before = start_store.copy()
        reconcile(start_store, allocator, board_map_from_fen(AFTER_E4))
        assert start_store == before


class TestTypeReuse:
    def test_knight_jump_keeps_identity(self) -> None:
        store = PieceStore.from_board_map({"b1": IndexedPiece(Color.WHITE, Role.KNIGHT, 0)})
        alloc = IndexAllocator(1)
        result = reconcile(store, alloc, {"c3": WHITE_KNIGHT})
        assert result["c3"] == IndexedPiece(Color.WHITE, Role.KNIGHT, 0)
        assert len(result) == 1
        assert alloc.next_index == 1

    def test_pawn_push(self, start_store: PieceStore, allocator: IndexAllocator) -> None:
        result = reconcile(start_store, allocator, board_map_from_fen(AFTER_E4))
        assert result["e4"] == IndexedPiece(Color.WHITE, Role.PAWN, 20)
        assert result["e2"] is None
        assert result.indexes() == start_store.indexes()
        result.check_consistency()

    def test_pairing_follows_pool_order(self) -> None:
        store, count = store_from_fen("8/8/8/8/8/8/PP6/8")
        alloc = IndexAllocator(count)
        result = reconcile(store, alloc, board_map_from_fen("8/8/8/8/8/1P6/P7/8"))
        # a2 stays, b2 travels to b3.
        assert result["a2"] == store["a2"]
        assert result["b3"] == store["b2"]

    def test_greedy_not_nearest(self) -> None:
        store = PieceStore.from_board_map(
            {
                "a1": IndexedPiece(Color.WHITE, Role.ROOK, 0),
                "h1": IndexedPiece(Color.WHITE, Role.ROOK, 1),
            }
        )
        target = {"h2": Piece(Color.WHITE, Role.ROOK), "a2": Piece(Color.WHITE, Role.ROOK)}
        result = reconcile(store, IndexAllocator(2), target)
        assert result["h2"] is not None and result["h2"].index == 0
        assert result["a2"] is not None and result["a2"].index == 1

    def test_color_must_match(self) -> None:
        store = PieceStore.from_board_map({"b1": IndexedPiece(Color.WHITE, Role.KNIGHT, 0)})
        alloc = IndexAllocator(1)
        result = reconcile(store, alloc, {"c6": Piece(Color.BLACK, Role.KNIGHT)})
        assert result["c6"] == IndexedPiece(Color.BLACK, Role.KNIGHT, 1)


class TestAllocation:
    def test_free_pool_before_counter(self) -> None:
        alloc = IndexAllocator(10, [5, 3])
        target = {
            "a1": Piece(Color.WHITE, Role.ROOK),
            "b1": WHITE_KNIGHT,
            "c1": Piece(Color.WHITE, Role.BISHOP),
        }
        result = reconcile(PieceStore(), alloc, target)
        assert [result[sq].index for sq in ("a1", "b1", "c1")] == [5, 3, 10]  # type: ignore[union-attr]
        assert alloc.free_indexes == ()
        assert alloc.next_index == 11

    def test_promotion_allocates(self) -> None:
        store = PieceStore.from_board_map({"e7": IndexedPiece(Color.WHITE, Role.PAWN, 0)})
        alloc = IndexAllocator(1)
        result = reconcile(store, alloc, {"e8": Piece(Color.WHITE, Role.QUEEN)})
        assert result["e8"] == IndexedPiece(Color.WHITE, Role.QUEEN, 1)
        assert leftover_indexes(store, result) == [0]


class TestLeftovers:
    def test_captures_are_not_released(
        self, start_store: PieceStore, allocator: IndexAllocator
    ) -> None:
        result = reconcile(start_store, allocator, board_map_from_fen(AFTER_E4_E5_NXE5))
        assert allocator.free_indexes == ()
        assert leftover_indexes(start_store, result) == [12]

    def test_knight_keeps_identity_across_capture(
        self, start_store: PieceStore, allocator: IndexAllocator
    ) -> None:
        result = reconcile(start_store, allocator, board_map_from_fen(AFTER_E4_E5_NXE5))
        assert result["e5"] == IndexedPiece(Color.WHITE, Role.KNIGHT, 30)
        assert result["e4"] == IndexedPiece(Color.WHITE, Role.PAWN, 20)

    def test_no_leftovers(self, start_store: PieceStore) -> None:
        assert leftover_indexes(start_store, start_store.copy()) == []


class TestNonCollision:
    @pytest.mark.parametrize(
        "fen",
        [
            STARTING_FEN,
            AFTER_E4_E5_NXE5,
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
            "QQQQQQQQ/8/8/8/8/8/8/qqqqqqqq w - - 0 1",
            "8/8/8/8/8/8/8/8 w - - 0 1",
        ],
    )
    def test_identities_unique(
        self, start_store: PieceStore, allocator: IndexAllocator, fen: str
    ) -> None:
        remove_piece(start_store, "a1", allocator)
        result = reconcile(start_store, allocator, board_map_from_fen(fen))
        indexes = [p.index for p in result.board.values()]
        assert len(indexes) == len(set(indexes))
        assert result.piece_map() == board_map_from_fen(fen)
        result.check_consistency()

        kept = set(indexes) & start_store.indexes()
        fresh = set(indexes) - start_store.indexes()
        assert kept.isdisjoint(fresh)
        assert all(i == 24 or i >= 32 for i in fresh)
