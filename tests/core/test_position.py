"""Tests for Position make/unmake."""

import pytest

from draughtie.core.enums import Color, Piece
from draughtie.core.move import Move
from draughtie.core.notation import STARTING_FEN, parse_move, position_from_fen, position_to_fen
from draughtie.core.position import Position


class TestMakeUnmake:
    def test_side_switches(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        pos.make_move(Move((32, 28)))
        assert pos.side_to_move == Color.BLACK

    def test_unmake_restores_side(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        move = Move((32, 28))
        pos.make_move(move)
        pos.unmake_move(move)
        assert pos.side_to_move == Color.WHITE

    def test_unmake_restores_fen(self) -> None:
        """After make+unmake of every legal move, FEN must match original."""
        pos = position_from_fen(STARTING_FEN)
        fen_before = position_to_fen(pos)
        for move in pos.legal_moves():
            pos.make_move(move)
            pos.unmake_move(move)
            assert position_to_fen(pos) == fen_before, f"Failed for {move}"

    def test_capture_removes_and_restores_pieces(self) -> None:
        pos = position_from_fen("W:W37:B32,22")
        fen_before = position_to_fen(pos)
        (move,) = pos.legal_moves()

        pos.make_move(move)
        assert pos.board[17] == Piece.WHITE_MAN
        assert pos.board[32] == Piece.EMPTY
        assert pos.board[22] == Piece.EMPTY
        assert pos.board.count(Color.BLACK) == 0

        pos.unmake_move(move)
        assert position_to_fen(pos) == fen_before

    def test_king_capture_back_to_origin(self) -> None:
        # Flying king with several multi-capture routes.
        pos = position_from_fen("W:WK46:B37,19,33,24")
        fen_before = position_to_fen(pos)
        for move in pos.legal_moves():
            pos.make_move(move)
            pos.unmake_move(move)
            assert position_to_fen(pos) == fen_before, f"Failed for {move}"

    def test_unmake_promotion_restores_man(self) -> None:
        pos = position_from_fen("W:W6:B45")
        move = parse_move(pos, "6-1")
        pos.make_move(move)
        assert pos.board[1] == Piece.WHITE_KING
        pos.unmake_move(move)
        assert pos.board[6] == Piece.WHITE_MAN
        assert pos.board[1] == Piece.EMPTY

    def test_make_move_from_empty_square_raises(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        with pytest.raises(ValueError, match="No piece"):
            pos.make_move(Move((28, 23)))

    def test_unmake_without_history_raises(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        with pytest.raises(ValueError, match="undo"):
            pos.unmake_move(Move((32, 28)))


class TestPositionQueries:
    def test_default_is_starting_position(self) -> None:
        assert position_to_fen(Position()) == position_to_fen(
            position_from_fen(STARTING_FEN)
        )

    def test_pieces_indexed_one_to_fifty(self) -> None:
        pieces = Position().pieces()
        assert pieces[1] == Piece.BLACK_MAN
        assert pieces[50] == Piece.WHITE_MAN
        assert pieces[25] == Piece.EMPTY

    def test_copy_drops_history(self) -> None:
        pos = Position()
        pos.make_move(Move((32, 28)))
        clone = pos.copy()
        assert clone.ply == 0
        assert position_to_fen(clone) == position_to_fen(pos)
