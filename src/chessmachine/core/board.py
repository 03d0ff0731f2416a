"""Board — complete position state (placement + metadata) and move application."""

from __future__ import annotations

from chessmachine.core.enums import CastlingRights, Color, MoveResult, PieceType
from chessmachine.core.errors import MoveError, MoveErrorKind
from chessmachine.core.piece import Piece
from chessmachine.core.square import A1, A8, E1, E8, H1, H8, Square, SquareLike

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# Rook home squares and the castling right each one carries.
_ROOK_CORNERS: dict[Square, tuple[Piece, CastlingRights]] = {
    A1: (Piece(Color.WHITE, PieceType.ROOK), CastlingRights.WHITE_QUEENSIDE),
    H1: (Piece(Color.WHITE, PieceType.ROOK), CastlingRights.WHITE_KINGSIDE),
    A8: (Piece(Color.BLACK, PieceType.ROOK), CastlingRights.BLACK_QUEENSIDE),
    H8: (Piece(Color.BLACK, PieceType.ROOK), CastlingRights.BLACK_KINGSIDE),
}

_KING_HOMES: dict[Color, Square] = {Color.WHITE: E1, Color.BLACK: E8}
_PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}
_PAWN_LAST_RANK: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}
_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
_PROMOTION_TYPES = frozenset(
    {PieceType.KNIGHT, PieceType.BISHOP, PieceType.ROOK, PieceType.QUEEN}
)


def _check_counter(name: str, value: int, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


class Board:
    """Mutable chess position: 64 cells plus side to move, castling rights,
    en passant target and the two move counters.

    :meth:`play_move` is the only state transition. It relocates a piece
    mechanically (no legality checks) and derives every secondary field from
    the move, the same way the FEN of the resulting position would describe it.
    """

    __slots__ = (
        "_squares",
        "active_color",
        "castling",
        "en_passant",
        "_halfmove_clock",
        "_fullmove_number",
    )

    def __init__(
        self,
        active_color: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: SquareLike | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self._squares: list[Piece | None] = [None] * 64
        self.active_color = active_color
        self.castling = castling
        self.en_passant = Square.coerce(en_passant) if en_passant is not None else None
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def empty(cls) -> Board:
        """Board with no pieces, White to move and no castling rights."""
        return cls()

    @classmethod
    def starting_position(cls) -> Board:
        """Standard starting position."""
        board = cls(castling=CastlingRights.ALL)
        for file, piece_type in enumerate(_BACK_RANK):
            board._squares[Square(file, 0).index] = Piece(Color.WHITE, piece_type)
            board._squares[Square(file, 1).index] = Piece(Color.WHITE, PieceType.PAWN)
            board._squares[Square(file, 6).index] = Piece(Color.BLACK, PieceType.PAWN)
            board._squares[Square(file, 7).index] = Piece(Color.BLACK, piece_type)
        return board

    @classmethod
    def from_fen(cls, fen: str) -> Board:
        """Parse a FEN string; raises :class:`~chessmachine.core.errors.FenError`."""
        from chessmachine.core.notation.fen import board_from_fen

        return board_from_fen(fen)

    def to_fen(self) -> str:
        """Serialise the position to FEN."""
        from chessmachine.core.notation.fen import board_to_fen

        return board_to_fen(self)

    # ── Counters ─────────────────────────────────────────────────────────

    @property
    def halfmove_clock(self) -> int:
        """Plies since the last capture or pawn move."""
        return self._halfmove_clock

    @halfmove_clock.setter
    def halfmove_clock(self, value: int) -> None:
        self._halfmove_clock = _check_counter("halfmove_clock", value, 0)

    @property
    def fullmove_number(self) -> int:
        """Move pair number, starting at 1 and incremented after Black moves."""
        return self._fullmove_number

    @fullmove_number.setter
    def fullmove_number(self, value: int) -> None:
        self._fullmove_number = _check_counter("fullmove_number", value, 1)

    # ── Element access ───────────────────────────────────────────────────

    def __getitem__(self, sq: SquareLike) -> Piece | None:
        return self._squares[Square.coerce(sq).index]

    def __setitem__(self, sq: SquareLike, piece: Piece | None) -> None:
        self._squares[Square.coerce(sq).index] = piece

    def is_empty(self, sq: SquareLike) -> bool:
        return self[sq] is None

    def pieces(
        self, color: Color | None = None, piece_type: PieceType | None = None
    ) -> list[Square]:
        """Occupied squares, a1 first, optionally filtered by color and kind."""
        return [
            Square.from_index(index)
            for index, piece in enumerate(self._squares)
            if piece is not None
            and (color is None or piece.color == color)
            and (piece_type is None or piece.piece_type == piece_type)
        ]

    # ── Moves ────────────────────────────────────────────────────────────

    def play_move(self, from_sq: SquareLike, to_sq: SquareLike) -> MoveResult:
        """Move the piece on *from_sq* to *to_sq* and update derived state.

        Whatever stands on *to_sq* is captured, whatever its color. A pawn
        moving diagonally onto the en passant target also removes the pawn it
        passed, and a king stepping two files from its home square brings the
        corner rook along.

        Returns:
            :attr:`MoveResult.PAWN_PROMOTE` when a pawn reached the last rank
            (see :meth:`promote`), otherwise :attr:`MoveResult.OK`.

        Raises:
            MoveError: *from_sq* is empty. The board is left unchanged.
        """
        from_sq = Square.coerce(from_sq)
        to_sq = Square.coerce(to_sq)

        piece = self._squares[from_sq.index]
        if piece is None:
            raise MoveError(
                MoveErrorKind.EMPTY_SOURCE,
                f"No piece on {from_sq}",
                square=from_sq,
            )

        captured: Piece | None = None
        capture_sq = to_sq
        if to_sq != from_sq:
            captured = self._squares[to_sq.index]
        is_pawn = piece.piece_type == PieceType.PAWN

        # En passant: the captured pawn sits beside the origin, not on the target
        if (
            is_pawn
            and captured is None
            and to_sq == self.en_passant
            and abs(to_sq.file - from_sq.file) == 1
            and to_sq.rank - from_sq.rank == _PAWN_DIRECTION[piece.color]
        ):
            passed_sq = Square(to_sq.file, from_sq.rank)
            enemy_pawn = Piece(piece.color.opposite, PieceType.PAWN)
            if self._squares[passed_sq.index] == enemy_pawn:
                capture_sq = passed_sq
                captured = enemy_pawn

        self._squares[from_sq.index] = None
        if captured is not None:
            self._squares[capture_sq.index] = None
        self._squares[to_sq.index] = piece

        if piece.piece_type == PieceType.KING:
            self._slide_castling_rook(piece.color, from_sq, to_sq)

        # Clocks and derived state
        if is_pawn or captured is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        self.en_passant = self._skipped_square(piece, from_sq, to_sq)
        taken_on_target = captured if capture_sq == to_sq else None
        self._update_castling(piece, from_sq, to_sq, taken_on_target)

        mover = self.active_color
        self.active_color = mover.opposite
        if mover == Color.BLACK:
            self.fullmove_number += 1

        if is_pawn and to_sq.rank == _PAWN_LAST_RANK[piece.color]:
            return MoveResult.PAWN_PROMOTE
        return MoveResult.OK

    def promote(self, sq: SquareLike, piece_type: PieceType) -> None:
        """Turn the piece on *sq* into *piece_type*, keeping its color.

        Intended for completing a move that returned
        :attr:`MoveResult.PAWN_PROMOTE`.
        """
        sq = Square.coerce(sq)
        piece = self._squares[sq.index]
        if piece is None:
            raise MoveError(MoveErrorKind.EMPTY_SOURCE, f"No piece on {sq}", square=sq)
        if piece_type not in _PROMOTION_TYPES:
            raise ValueError(f"Cannot promote to {piece_type.name}")
        self._squares[sq.index] = Piece(piece.color, piece_type)

    def _skipped_square(
        self, piece: Piece, from_sq: Square, to_sq: Square
    ) -> Square | None:
        if piece.piece_type != PieceType.PAWN or from_sq.file != to_sq.file:
            return None
        direction = _PAWN_DIRECTION[piece.color]
        if (
            from_sq.rank == _PAWN_START_RANK[piece.color]
            and to_sq.rank == from_sq.rank + 2 * direction
        ):
            return Square(from_sq.file, from_sq.rank + direction)
        return None

    def _slide_castling_rook(self, color: Color, from_sq: Square, to_sq: Square) -> None:
        if from_sq != _KING_HOMES[color] or to_sq.rank != from_sq.rank:
            return
        if to_sq.file == 6:
            rook_from, rook_to = Square(7, to_sq.rank), Square(5, to_sq.rank)
        elif to_sq.file == 2:
            rook_from, rook_to = Square(0, to_sq.rank), Square(3, to_sq.rank)
        else:
            return
        rook = self._squares[rook_from.index]
        if rook != Piece(color, PieceType.ROOK):
            return
        self._squares[rook_from.index] = None
        self._squares[rook_to.index] = rook

    def _update_castling(
        self,
        piece: Piece,
        from_sq: Square,
        to_sq: Square,
        captured: Piece | None,
    ) -> None:
        castling = self.castling
        if piece.piece_type == PieceType.KING:
            castling &= ~CastlingRights.both(piece.color)
        # A right goes only with its own rook leaving or being taken at home
        for sq, occupant in ((from_sq, piece), (to_sq, captured)):
            corner = _ROOK_CORNERS.get(sq)
            if corner is not None and occupant == corner[0]:
                castling &= ~corner[1]
        self.castling = castling

    # ── Copying ──────────────────────────────────────────────────────────

    def copy(self) -> Board:
        """Independent copy; later moves on either board do not affect the other."""
        board = Board(
            active_color=self.active_color,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )
        board._squares = self._squares.copy()
        return board

    def __copy__(self) -> Board:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, object]) -> Board:
        # Pieces and squares are immutable, a shallow list copy is enough.
        return self.copy()

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._squares == other._squares
            and self.active_color == other.active_color
            and self.castling == other.castling
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_fen()

    def __repr__(self) -> str:
        return f"Board({self.to_fen()!r})"

    def ascii(self) -> str:
        """Text diagram of the placement, rank 8 at the top."""
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self._squares[Square(file, rank).index]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
