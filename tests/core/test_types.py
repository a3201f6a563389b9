"""Tests for square numbering helpers."""

import pytest

from draughtie.core.types import (
    EDGE_SQUARES,
    col_of,
    is_edge_square,
    is_valid_square,
    make_square,
    parse_square,
    row_of,
)


class TestRowsAndColumns:
    def test_row_is_ceil_of_index_over_five(self) -> None:
        assert row_of(1) == 1
        assert row_of(5) == 1
        assert row_of(6) == 2
        assert row_of(46) == 10
        assert row_of(50) == 10

    def test_odd_rows_start_on_second_column(self) -> None:
        assert col_of(1) == 1
        assert col_of(5) == 9
        assert col_of(6) == 0
        assert col_of(10) == 8

    def test_make_square_round_trip(self) -> None:
        for sq in range(1, 51):
            assert make_square(row_of(sq), col_of(sq)) == sq

    def test_make_square_rejects_light_square(self) -> None:
        with pytest.raises(ValueError, match="playable"):
            make_square(1, 0)

    def test_make_square_rejects_off_board(self) -> None:
        with pytest.raises(ValueError, match="Off-board"):
            make_square(11, 1)


class TestEdgeSquares:
    def test_ten_edge_squares(self) -> None:
        assert len(EDGE_SQUARES) == 10

    def test_edge_squares_sit_on_outer_columns(self) -> None:
        for sq in EDGE_SQUARES:
            assert col_of(sq) in (0, 9)

    def test_is_edge_square(self) -> None:
        assert is_edge_square(36)
        assert not is_edge_square(37)


class TestParseSquare:
    def test_valid(self) -> None:
        assert parse_square("32") == 32

    @pytest.mark.parametrize("text", ["0", "51", "a1", ""])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_square(text)

    def test_is_valid_square(self) -> None:
        assert is_valid_square(1)
        assert is_valid_square(50)
        assert not is_valid_square(0)
        assert not is_valid_square(51)
