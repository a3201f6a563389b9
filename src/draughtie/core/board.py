"""Board - piece placement on the 50 playable squares."""

from __future__ import annotations

from draughtie.core.enums import Color, Piece
from draughtie.core.types import ROW_COUNT, SQUARE_COUNT, Square, make_square


class Board:
    """Mutable 50-square board with per-color occupancy sets."""

    __slots__ = ("_squares", "_occupied")

    def __init__(self) -> None:
        # Index 0 is unused so that square numbers index directly.
        self._squares: list[Piece] = [Piece.EMPTY] * (SQUARE_COUNT + 1)
        # [color] -> squares occupied by that color.
        self._occupied: list[set[Square]] = [set(), set()]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece) -> None:
        old_piece = self._squares[sq]
        if old_piece == piece:
            return

        old_color = old_piece.color
        if old_color is not None:
            self._occupied[int(old_color)].discard(sq)

        self._squares[sq] = piece

        color = piece.color
        if color is not None:
            self._occupied[int(color)].add(sq)

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] == Piece.EMPTY

    # -- Query helpers ------------------------------------------------------

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*, in ascending order."""
        return sorted(self._occupied[int(color)])

    def pieces(self, piece: Piece) -> list[Square]:
        """Squares holding *piece*, in ascending order."""
        color = piece.color
        if color is None:
            return [sq for sq in range(1, SQUARE_COUNT + 1) if self.is_empty(sq)]
        return [sq for sq in self.all_pieces(color) if self._squares[sq] == piece]

    def count(self, color: Color) -> int:
        return len(self._occupied[int(color)])

    def contents(self) -> tuple[Piece, ...]:
        """Square contents indexed 1–50 (index 0 is always ``EMPTY``)."""
        return tuple(self._squares)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._occupied = [occ.copy() for occ in self._occupied]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: Black on 1–20, White on 31–50."""
        b = cls()
        for sq in range(1, 21):
            b[sq] = Piece.BLACK_MAN
        for sq in range(31, SQUARE_COUNT + 1):
            b[sq] = Piece.WHITE_MAN
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(1, ROW_COUNT + 1):
            cells = []
            for col in range(ROW_COUNT):
                if (row + col) % 2:
                    cells.append(" ")
                else:
                    cells.append(self[make_square(row, col)].symbol)
            rows.append(f"{row:>2} {' '.join(cells)}")
        return "\n".join(rows)
