"""FEN parsing and serialization."""

from __future__ import annotations

from chessmachine.core.board import Board
from chessmachine.core.enums import CastlingRights, Color
from chessmachine.core.errors import FenError, FenErrorKind, SquareError
from chessmachine.core.piece import Piece
from chessmachine.core.square import Square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_SIDES: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}

# Serialisation order is the canonical KQkq order.
_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}

# 0-based ranks a double pawn step can skip over (ranks 3 and 6).
_EN_PASSANT_RANKS = (2, 5)


def board_from_fen(fen: str) -> Board:
    """Parse a FEN string into a :class:`Board`.

    All six fields are required. Nothing is returned unless every field is
    valid; on failure a :class:`FenError` names the offending field.
    """
    parts = fen.strip().split(" ")
    if len(parts) != 6:
        raise FenError(
            FenErrorKind.WRONG_FIELD_COUNT,
            f"Invalid FEN (need 6 space-separated fields, got {len(parts)}): {fen!r}",
        )
    placement, side_part, castling_part, ep_part, halfmove_part, fullmove_part = parts

    # Fields are checked left to right; the board never escapes half-built.
    board = Board()
    _parse_placement(placement, board)
    board.active_color = _parse_side(side_part)
    board.castling = _parse_castling(castling_part)
    board.en_passant = _parse_en_passant(ep_part)
    board.halfmove_clock = _parse_counter(halfmove_part, "halfmove clock", 0)
    board.fullmove_number = _parse_counter(fullmove_part, "fullmove number", 1)
    return board


def _parse_placement(placement: str, board: Board) -> None:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise FenError(
            FenErrorKind.INVALID_PIECE_PLACEMENT,
            f"Invalid FEN board (must contain 8 ranks, got {len(ranks)}): {placement!r}",
        )
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in "12345678":
                file += int(ch)
            else:
                try:
                    piece = Piece.from_char(ch)
                except ValueError:
                    raise FenError(
                        FenErrorKind.INVALID_PIECE_PLACEMENT,
                        f"Invalid FEN piece character {ch!r} on rank {rank + 1}",
                        rank=rank + 1,
                    ) from None
                if file < 8:
                    board[Square(file, rank)] = piece
                file += 1
            if file > 8:
                break
        if file != 8:
            raise FenError(
                FenErrorKind.INVALID_PIECE_PLACEMENT,
                f"Invalid FEN rank width on rank {rank + 1}: {rank_text!r}",
                rank=rank + 1,
            )


def _parse_side(text: str) -> Color:
    side = _SIDES.get(text)
    if side is None:
        raise FenError(
            FenErrorKind.INVALID_ACTIVE_COLOR,
            f"Invalid FEN side-to-move field: {text!r}",
        )
    return side


def _parse_castling(text: str) -> CastlingRights:
    castling = CastlingRights.NONE
    if text == "-":
        return castling
    if not text:
        raise FenError(FenErrorKind.INVALID_CASTLING_TOKEN, "Empty FEN castling field")
    for ch in text:
        right = _CASTLING_CHARS.get(ch)
        if right is None or castling & right:
            raise FenError(
                FenErrorKind.INVALID_CASTLING_TOKEN,
                f"Invalid FEN castling field: {text!r}",
            )
        castling |= right
    return castling


def _parse_en_passant(text: str) -> Square | None:
    if text == "-":
        return None
    try:
        square = Square.from_name(text)
    except SquareError as exc:
        raise FenError(
            FenErrorKind.INVALID_EN_PASSANT_SQUARE,
            f"Invalid FEN en-passant square: {text!r}",
        ) from exc
    if square.rank not in _EN_PASSANT_RANKS:
        raise FenError(
            FenErrorKind.INVALID_EN_PASSANT_SQUARE,
            f"Invalid FEN en-passant square (must be on rank 3 or 6): {text!r}",
        )
    return square


def _parse_counter(text: str, field: str, minimum: int) -> int:
    if not (text.isascii() and text.isdigit()):
        raise FenError(
            FenErrorKind.INVALID_COUNTER,
            f"Invalid FEN {field}: {text!r}",
            field=field,
        )
    try:
        value = int(text)
    except ValueError as exc:
        raise FenError(
            FenErrorKind.INVALID_COUNTER,
            f"Invalid FEN {field} (too many digits)",
            field=field,
        ) from exc
    if value < minimum:
        raise FenError(
            FenErrorKind.INVALID_COUNTER,
            f"Invalid FEN {field} (must be >= {minimum}): {text!r}",
            field=field,
        )
    return value


def board_to_fen(board: Board) -> str:
    """Serialise a :class:`Board` to FEN."""
    # 1. Placement
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board[Square(file, rank)]
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)

    # 2. Side
    side_str = "w" if board.active_color == Color.WHITE else "b"

    # 3. Castling
    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if board.castling & right
    ) or "-"

    # 4. En passant
    ep_str = board.en_passant.name if board.en_passant is not None else "-"

    return (
        f"{'/'.join(rows)} {side_str} {castling_str} {ep_str} "
        f"{board.halfmove_clock} {board.fullmove_number}"
    )
