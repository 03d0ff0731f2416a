"""Core domain layer — pure position state machine with zero external dependencies.

Quick start::

    from chessmachine.core import Board

    board = Board.starting_position()
    board.play_move("e2", "e4")
    board.play_move((4, 6), (4, 4))
    print(board.to_fen())
"""

from chessmachine.core.board import Board
from chessmachine.core.enums import CastlingRights, Color, MoveResult, PieceType
from chessmachine.core.errors import (
    ChessMachineError,
    FenError,
    FenErrorKind,
    MoveError,
    MoveErrorKind,
    SquareError,
    SquareErrorKind,
)
from chessmachine.core.notation import STARTING_FEN, board_from_fen, board_to_fen
from chessmachine.core.piece import Piece
from chessmachine.core.square import Square, SquareLike

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "MoveResult",
    "PieceType",
    # Errors
    "ChessMachineError",
    "FenError",
    "FenErrorKind",
    "MoveError",
    "MoveErrorKind",
    "SquareError",
    "SquareErrorKind",
    # Domain objects
    "Board",
    "Piece",
    "Square",
    "SquareLike",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
]
