"""Square value type and coordinate helpers.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63

A square can be written three ways, all of which normalize to the same
:class:`Square`::

    Square.coerce("D4") == Square.coerce((3, 3)) == Square.coerce([3, 3])
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias, Union

from chessmachine.core.errors import SquareError, SquareErrorKind

_FILES = "abcdefgh"
_RANKS = "12345678"


def _check_coordinate(name: str, value: object) -> None:
    # bool is an int subclass, but True/False are never coordinates
    if isinstance(value, bool) or not isinstance(value, int):
        raise SquareError(
            SquareErrorKind.OUT_OF_RANGE,
            f"Square {name} must be an integer in 0..7, got {value!r}",
        )
    if not 0 <= value <= 7:
        raise SquareError(
            SquareErrorKind.OUT_OF_RANGE,
            f"Square {name} out of range 0..7: {value}",
        )


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable board coordinate.

    ``file`` 0–7 maps to columns a–h, ``rank`` 0–7 maps to rows 1–8.
    """

    file: int
    rank: int

    def __post_init__(self) -> None:
        _check_coordinate("file", self.file)
        _check_coordinate("rank", self.rank)

    # ── Constructors ─────────────────────────────────────────────────────

    @classmethod
    def from_name(cls, name: str) -> Square:
        """Parse an algebraic name such as ``"e4"`` or ``"E4"``."""
        if not isinstance(name, str):
            raise TypeError(f"Square name must be a str, got {type(name).__name__}")
        if len(name) != 2:
            raise SquareError(
                SquareErrorKind.INVALID_LENGTH,
                f"Square name must be 2 characters: {name!r}",
            )
        file_char, rank_char = name[0].lower(), name[1]
        if len(file_char) != 1 or file_char not in _FILES:
            raise SquareError(
                SquareErrorKind.INVALID_FILE, f"Invalid square file: {name!r}"
            )
        if rank_char not in _RANKS:
            raise SquareError(
                SquareErrorKind.INVALID_RANK, f"Invalid square rank: {name!r}"
            )
        return cls(_FILES.index(file_char), _RANKS.index(rank_char))

    @classmethod
    def from_index(cls, index: int) -> Square:
        """Square for a board index 0–63."""
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < 64:
            raise SquareError(
                SquareErrorKind.OUT_OF_RANGE, f"Square index out of range 0..63: {index!r}"
            )
        return cls(index & 7, index >> 3)

    @classmethod
    def coerce(cls, value: SquareLike) -> Square:
        """Build a square from any accepted representation.

        Accepts a :class:`Square`, an algebraic string, a ``(file, rank)``
        tuple or a ``[file, rank]`` list.
        """
        if isinstance(value, Square):
            return value
        if isinstance(value, str):
            return cls.from_name(value)
        if isinstance(value, (tuple, list)):
            if len(value) != 2:
                raise SquareError(
                    SquareErrorKind.INVALID_LENGTH,
                    f"Square coordinates need exactly 2 items: {value!r}",
                )
            return cls(value[0], value[1])
        raise TypeError(f"Cannot interpret {type(value).__name__} as a square")

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def index(self) -> int:
        """Canonical board index, ``rank * 8 + file``."""
        return self.rank * 8 + self.file

    @property
    def name(self) -> str:
        """Lowercase algebraic name, e.g. ``"e4"``."""
        return _FILES[self.file] + _RANKS[self.rank]

    def as_tuple(self) -> tuple[int, int]:
        return (self.file, self.rank)

    def __str__(self) -> str:
        return self.name


SquareLike: TypeAlias = Union[Square, str, tuple[int, int], list[int]]


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(f, 7) for f in range(8))
