"""Tests for Square construction and accessors."""

import dataclasses

import pytest

from chessmachine.core.errors import SquareError, SquareErrorKind
from chessmachine.core.square import A1, D4, E4, H8, Square


class TestSquareEquivalence:
    def test_string_pair_and_list_agree(self) -> None:
        assert Square.coerce("D4") == Square.coerce((3, 3)) == Square.coerce([3, 3])

    def test_case_insensitive_file(self) -> None:
        assert Square.from_name("e4") == Square.from_name("E4") == E4

    def test_coerce_passes_square_through(self) -> None:
        assert Square.coerce(D4) is D4

    def test_named_constants(self) -> None:
        assert A1 == Square(0, 0)
        assert H8 == Square(7, 7)

    def test_hashable(self) -> None:
        assert len({Square(0, 0), A1, Square.from_name("a1")}) == 1


class TestSquareAccessors:
    def test_index(self) -> None:
        assert A1.index == 0
        assert D4.index == 27
        assert H8.index == 63

    def test_from_index_inverse(self) -> None:
        for index in range(64):
            assert Square.from_index(index).index == index

    def test_name_is_lowercase(self) -> None:
        assert Square.coerce((3, 3)).name == "d4"
        assert str(Square.from_name("H8")) == "h8"

    def test_as_tuple(self) -> None:
        assert Square.from_name("e4").as_tuple() == (4, 3)

    def test_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            E4.file = 0  # type: ignore[misc]


class TestSquareErrors:
    @pytest.mark.parametrize("text", ["", "e", "e44", "e4 "])
    def test_invalid_length(self, text: str) -> None:
        with pytest.raises(SquareError) as excinfo:
            Square.from_name(text)
        assert excinfo.value.kind == SquareErrorKind.INVALID_LENGTH

    @pytest.mark.parametrize("text", ["i4", "Z1", "44"])
    def test_invalid_file(self, text: str) -> None:
        with pytest.raises(SquareError) as excinfo:
            Square.from_name(text)
        assert excinfo.value.kind == SquareErrorKind.INVALID_FILE

    @pytest.mark.parametrize("text", ["e0", "e9", "ee"])
    def test_invalid_rank(self, text: str) -> None:
        with pytest.raises(SquareError) as excinfo:
            Square.from_name(text)
        assert excinfo.value.kind == SquareErrorKind.INVALID_RANK

    @pytest.mark.parametrize("value", [(8, 0), (0, 8), (-1, 3), [3, -1], (True, 0)])
    def test_out_of_range(self, value: tuple[int, int]) -> None:
        with pytest.raises(SquareError) as excinfo:
            Square.coerce(value)
        assert excinfo.value.kind == SquareErrorKind.OUT_OF_RANGE

    def test_constructor_rejects_out_of_range(self) -> None:
        with pytest.raises(SquareError):
            Square(3, 8)

    def test_wrong_sequence_length(self) -> None:
        with pytest.raises(SquareError) as excinfo:
            Square.coerce([1, 2, 3])
        assert excinfo.value.kind == SquareErrorKind.INVALID_LENGTH

    def test_from_index_out_of_range(self) -> None:
        with pytest.raises(SquareError, match="out of range"):
            Square.from_index(64)

    def test_square_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Square.from_name("x9")

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError):
            Square.coerce(3.5)  # type: ignore[arg-type]

    def test_from_name_rejects_bytes(self) -> None:
        with pytest.raises(TypeError, match="str"):
            Square.from_name(b"e4")  # type: ignore[arg-type]
