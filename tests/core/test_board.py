"""Tests for Board."""

from draughtie.core.board import Board
from draughtie.core.enums import Color, Piece


class TestBoardInitial:
    def test_black_men_on_first_twenty_squares(self) -> None:
        board = Board.initial()
        assert board.pieces(Piece.BLACK_MAN) == list(range(1, 21))

    def test_white_men_on_last_twenty_squares(self) -> None:
        board = Board.initial()
        assert board.pieces(Piece.WHITE_MAN) == list(range(31, 51))

    def test_middle_rows_empty(self) -> None:
        board = Board.initial()
        for sq in range(21, 31):
            assert board.is_empty(sq)

    def test_counts(self) -> None:
        board = Board.initial()
        assert board.count(Color.WHITE) == 20
        assert board.count(Color.BLACK) == 20


class TestBoardMutation:
    def test_set_and_clear_square(self) -> None:
        board = Board()
        board[28] = Piece.WHITE_KING
        assert board[28] == Piece.WHITE_KING
        assert board.all_pieces(Color.WHITE) == [28]

        board[28] = Piece.EMPTY
        assert board.is_empty(28)
        assert board.all_pieces(Color.WHITE) == []

    def test_replacing_piece_updates_owner(self) -> None:
        board = Board()
        board[12] = Piece.WHITE_MAN
        board[12] = Piece.BLACK_MAN
        assert board.all_pieces(Color.WHITE) == []
        assert board.all_pieces(Color.BLACK) == [12]

    def test_copy_is_independent(self) -> None:
        board = Board.initial()
        clone = board.copy()
        clone[31] = Piece.EMPTY
        assert board[31] == Piece.WHITE_MAN
        assert board != clone

    def test_contents_indexed_from_one(self) -> None:
        contents = Board.initial().contents()
        assert len(contents) == 51
        assert contents[0] == Piece.EMPTY
        assert contents[1] == Piece.BLACK_MAN
        assert contents[50] == Piece.WHITE_MAN

    def test_repr_has_ten_rows(self) -> None:
        assert len(repr(Board.initial()).splitlines()) == 10
