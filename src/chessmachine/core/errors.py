"""Typed errors raised by the core layer.

All of them derive from :class:`ValueError`, so callers that only care about
"bad input" can keep catching that. The ``kind`` attribute tells which check
failed.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessmachine.core.square import Square


class SquareErrorKind(Enum):
    INVALID_LENGTH = "invalid-length"
    INVALID_FILE = "invalid-file"
    INVALID_RANK = "invalid-rank"
    OUT_OF_RANGE = "out-of-range"


class FenErrorKind(Enum):
    WRONG_FIELD_COUNT = "wrong-field-count"
    INVALID_PIECE_PLACEMENT = "invalid-piece-placement"
    INVALID_ACTIVE_COLOR = "invalid-active-color"
    INVALID_CASTLING_TOKEN = "invalid-castling-token"
    INVALID_EN_PASSANT_SQUARE = "invalid-en-passant-square"
    INVALID_COUNTER = "invalid-counter"


class MoveErrorKind(Enum):
    EMPTY_SOURCE = "empty-source"


class ChessMachineError(ValueError):
    """Base class for every error raised by :mod:`chessmachine.core`."""


class SquareError(ChessMachineError):
    """A square could not be built from the given value."""

    def __init__(self, kind: SquareErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class FenError(ChessMachineError):
    """A FEN string was rejected.

    Args:
        kind: Which FEN field failed.
        message: Human-readable description.
        rank: Rank number (1–8) of the offending placement segment, if any.
        field: Counter field name (``"halfmove clock"`` / ``"fullmove number"``).
    """

    def __init__(
        self,
        kind: FenErrorKind,
        message: str,
        *,
        rank: int | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.rank = rank
        self.field = field


class MoveError(ChessMachineError):
    """A move could not be applied to the board."""

    def __init__(self, kind: MoveErrorKind, message: str, *, square: Square) -> None:
        super().__init__(message)
        self.kind = kind
        self.square = square
