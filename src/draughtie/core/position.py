"""Complete game state (board + side to move) with make/unmake."""

from __future__ import annotations

from dataclasses import dataclass

from draughtie.core.board import Board
from draughtie.core.enums import Color, Piece
from draughtie.core.move import Move
from draughtie.core.move_generator import MoveGenerator
from draughtie.core.types import BLACK_PROMOTION_ROW, WHITE_PROMOTION_ROW, row_of


@dataclass(slots=True)
class _PositionState:
    """Snapshot saved before each move so we can undo it."""

    captured_pieces: tuple[Piece, ...]
    promoted: bool


def _promotion_row(color: Color) -> int:
    return WHITE_PROMOTION_ROW if color == Color.WHITE else BLACK_PROMOTION_ROW


class Position:
    """Full draughts position: board + side to move.

    Supports :meth:`make_move` / :meth:`unmake_move` via an internal
    history stack (Command pattern). The two are exact inverses, which the
    search relies on when it explores sibling moves in place.
    """

    __slots__ = ("board", "side_to_move", "_history")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self._history: list[_PositionState] = []

    # ── Core move operations ─────────────────────────────────────────────

    def make_move(self, move: Move) -> None:
        """Apply *move*, pushing undo state onto the history stack."""
        piece = self.board[move.from_sq]
        if piece == Piece.EMPTY:
            raise ValueError(f"No piece on {move.from_sq}")

        captured = tuple(self.board[sq] for sq in move.captures)
        promoted = piece.is_man and row_of(move.to_sq) == _promotion_row(piece.color)

        self._history.append(_PositionState(captured_pieces=captured, promoted=promoted))

        # Lift piece from origin, then remove everything it jumped
        self.board[move.from_sq] = Piece.EMPTY
        for sq in move.captures:
            self.board[sq] = Piece.EMPTY

        self.board[move.to_sq] = piece.promoted if promoted else piece
        self.side_to_move = self.side_to_move.opposite

    def unmake_move(self, move: Move) -> None:
        """Undo the last :meth:`make_move`."""
        if not self._history:
            raise ValueError("No move to undo")
        state = self._history.pop()

        self.side_to_move = self.side_to_move.opposite

        piece = self.board[move.to_sq]
        assert piece != Piece.EMPTY, f"No piece on {move.to_sq} to take back"
        if state.promoted:
            piece = piece.demoted

        self.board[move.to_sq] = Piece.EMPTY
        self.board[move.from_sq] = piece
        for sq, captured in zip(move.captures, state.captured_pieces, strict=True):
            self.board[sq] = captured

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move, in generator order."""
        return MoveGenerator(self).generate_legal_moves()

    def pieces(self) -> tuple[Piece, ...]:
        """Square contents indexed 1–50."""
        return self.board.contents()

    @property
    def ply(self) -> int:
        """Number of moves made on this object that can still be undone."""
        return len(self._history)

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy without history."""
        return Position(board=self.board.copy(), side_to_move=self.side_to_move)

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move} to move"
