"""Tests for Board placement, factories and copying."""

import copy

import pytest

from chessmachine.core.board import Board
from chessmachine.core.enums import CastlingRights, Color, PieceType
from chessmachine.core.notation import STARTING_FEN
from chessmachine.core.piece import Piece
from chessmachine.core.square import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2, E3,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E4,
    Square,
)


class TestBoardStartingPosition:
    def test_white_king_position(self, start_board: Board) -> None:
        assert start_board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self, start_board: Board) -> None:
        assert start_board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self, start_board: Board) -> None:
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert start_board[sq] == Piece(Color.WHITE, pt), f"Mismatch at {sq}"

    def test_black_back_rank(self, start_board: Board) -> None:
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert start_board[sq] == Piece(Color.BLACK, pt), f"Mismatch at {sq}"

    def test_pawns(self, start_board: Board) -> None:
        white = start_board.pieces(Color.WHITE, PieceType.PAWN)
        black = start_board.pieces(Color.BLACK, PieceType.PAWN)
        assert [sq.rank for sq in white] == [1] * 8
        assert [sq.rank for sq in black] == [6] * 8

    def test_metadata(self, start_board: Board) -> None:
        assert start_board.active_color == Color.WHITE
        assert start_board.castling == CastlingRights.ALL
        assert start_board.en_passant is None
        assert start_board.halfmove_clock == 0
        assert start_board.fullmove_number == 1

    def test_equals_parsed_starting_fen(self, start_board: Board) -> None:
        assert start_board == Board.from_fen(STARTING_FEN)
        assert start_board.to_fen() == STARTING_FEN

    def test_piece_count(self, start_board: Board) -> None:
        assert len(start_board.pieces()) == 32
        assert len(start_board.pieces(Color.WHITE)) == 16


class TestBoardOperations:
    def test_empty(self) -> None:
        board = Board.empty()
        assert board.pieces() == []
        assert board.castling == CastlingRights.NONE
        assert board.to_fen() == "8/8/8/8/8/8/8/8 w - - 0 1"

    def test_set_and_get_any_square_form(self) -> None:
        board = Board.empty()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board["e4"] = piece
        assert board[E4] == piece
        assert board[(4, 3)] == piece
        assert board[[4, 3]] == piece
        assert board.is_empty(E2)

    def test_copy_independence(self, start_board: Board) -> None:
        other = start_board.copy()
        assert start_board == other
        other.play_move("e2", "e4")
        assert start_board != other
        assert start_board[E2] == Piece(Color.WHITE, PieceType.PAWN)
        assert start_board.active_color == Color.WHITE

    def test_stdlib_copy(self, start_board: Board) -> None:
        for clone in (copy.copy(start_board), copy.deepcopy(start_board)):
            clone[E1] = None
            assert start_board[E1] is not None

    def test_equality_includes_metadata(self, start_board: Board) -> None:
        other = start_board.copy()
        other.active_color = Color.BLACK
        assert start_board != other

    def test_constructor_coerces_en_passant(self) -> None:
        board = Board(Color.BLACK, en_passant="e3")
        assert board.en_passant == E3

    def test_negative_halfmove_rejected(self) -> None:
        board = Board.empty()
        with pytest.raises(ValueError, match="halfmove_clock"):
            board.halfmove_clock = -1

    def test_zero_fullmove_rejected(self) -> None:
        with pytest.raises(ValueError, match="fullmove_number"):
            Board(fullmove_number=0)

    def test_str_and_repr(self, start_board: Board) -> None:
        assert str(start_board) == STARTING_FEN
        assert repr(start_board) == f"Board({STARTING_FEN!r})"

    def test_ascii_diagram(self, start_board: Board) -> None:
        text = start_board.ascii()
        lines = text.splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[4] == "4 . . . . . . . ."
        assert lines[-1] == "  a b c d e f g h"

    def test_pieces_filter_by_kind(self, start_board: Board) -> None:
        assert start_board.pieces(piece_type=PieceType.KING) == [E1, E8]
        assert start_board.pieces(Color.BLACK, PieceType.QUEEN) == [Square(3, 7)]
