"""Board session layer — current/future stores, moves, position changes.

Quick start::

    from chessboard.board import BoardSession

    session = BoardSession()
    steps = session.move("e2", "e4")
    session.commit()
    transition = session.set_position("rnbqkbnr/pppp1ppp/8/4p3/4P3/8/PPPP1PPP/RNBQKBNR")
"""

from chessboard.board.config import BoardConfig
from chessboard.board.session import BoardEvents, BoardSession

__all__ = [
    "BoardConfig",
    "BoardEvents",
    "BoardSession",
]
