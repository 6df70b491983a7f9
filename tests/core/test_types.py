"""Tests for square geometry."""

import pytest

from qirkat.core.types import (
    A1,
    B2,
    C3,
    E4,
    E5,
    col_of,
    is_valid_neighbor,
    make_square,
    parse_square,
    row_of,
    square_name,
)


class TestSquareNames:
    def test_corners(self) -> None:
        assert square_name(A1) == "a1"
        assert square_name(E5) == "e5"

    def test_parse_roundtrip(self) -> None:
        for sq in range(25):
            assert parse_square(square_name(sq)) == sq

    def test_parse_center(self) -> None:
        assert parse_square("c3") == C3 == 12

    @pytest.mark.parametrize("name", ["f1", "a6", "a", "a10", ""])
    def test_parse_rejects_bad_names(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)

    def test_coordinates(self) -> None:
        assert col_of(B2) == 1
        assert row_of(B2) == 1
        assert make_square(4, 3) == E4


class TestNeighbors:
    def test_right_edge_does_not_wrap(self) -> None:
        assert not is_valid_neighbor(19, 1)

    def test_left_edge_does_not_wrap(self) -> None:
        assert not is_valid_neighbor(parse_square("a2"), -1)
        assert not is_valid_neighbor(parse_square("a3"), 4)

    def test_odd_squares_have_no_diagonals(self) -> None:
        b1 = parse_square("b1")
        assert not is_valid_neighbor(b1, 4)
        assert not is_valid_neighbor(b1, 6)
        assert is_valid_neighbor(b1, 5)

    def test_even_squares_have_diagonals(self) -> None:
        assert is_valid_neighbor(B2, 6)
        assert is_valid_neighbor(C3, -6)
        assert is_valid_neighbor(C3, -4)

    def test_off_board(self) -> None:
        assert not is_valid_neighbor(A1, -5)
        assert not is_valid_neighbor(E5, 5)
