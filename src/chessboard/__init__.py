"""Board state and piece-identity engine for chessboard widgets."""

__version__ = "0.1.0"
