"""Chess position state machine: squares, FEN codec and move application."""

from chessmachine.core import (
    STARTING_FEN,
    Board,
    CastlingRights,
    Color,
    FenError,
    MoveError,
    MoveResult,
    Piece,
    PieceType,
    Square,
    SquareError,
)

__version__ = "0.1.0"

__all__ = [
    "STARTING_FEN",
    "Board",
    "CastlingRights",
    "Color",
    "FenError",
    "MoveError",
    "MoveResult",
    "Piece",
    "PieceType",
    "Square",
    "SquareError",
    "__version__",
]
