"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessboard.core.notation import STARTING_FEN, store_from_fen
from chessboard.core.store import IndexAllocator, PieceStore


@pytest.fixture
def start_store() -> PieceStore:
    """Starting position with identities 0..31 in FEN reading order."""
    store, _ = store_from_fen(STARTING_FEN)
    return store


@pytest.fixture
def allocator() -> IndexAllocator:
    """Allocator continuing after the 32 starting identities."""
    return IndexAllocator(32)
