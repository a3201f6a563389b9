"""Core enumerations for the draughts domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color. White moves first and is the maximizing side."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class Piece(IntEnum):
    """Content of a playable square."""

    EMPTY = 0
    WHITE_MAN = 1
    BLACK_MAN = 2
    WHITE_KING = 3
    BLACK_KING = 4

    @classmethod
    def man(cls, color: Color) -> Piece:
        return cls.WHITE_MAN if color == Color.WHITE else cls.BLACK_MAN

    @classmethod
    def king(cls, color: Color) -> Piece:
        return cls.WHITE_KING if color == Color.WHITE else cls.BLACK_KING

    @property
    def color(self) -> Color | None:
        """Owner of the piece, ``None`` for an empty square."""
        if self in (Piece.WHITE_MAN, Piece.WHITE_KING):
            return Color.WHITE
        if self in (Piece.BLACK_MAN, Piece.BLACK_KING):
            return Color.BLACK
        return None

    @property
    def is_man(self) -> bool:
        return self in (Piece.WHITE_MAN, Piece.BLACK_MAN)

    @property
    def is_king(self) -> bool:
        return self in (Piece.WHITE_KING, Piece.BLACK_KING)

    @property
    def promoted(self) -> Piece:
        """King of the same color (kings map to themselves)."""
        if self == Piece.WHITE_MAN:
            return Piece.WHITE_KING
        if self == Piece.BLACK_MAN:
            return Piece.BLACK_KING
        return self

    @property
    def demoted(self) -> Piece:
        """Man of the same color (men map to themselves)."""
        if self == Piece.WHITE_KING:
            return Piece.WHITE_MAN
        if self == Piece.BLACK_KING:
            return Piece.BLACK_MAN
        return self

    @property
    def symbol(self) -> str:
        """Single-character board symbol (``w``/``W`` white, ``b``/``B`` black)."""
        return _SYMBOLS[self]


_SYMBOLS: dict[Piece, str] = {
    Piece.EMPTY: ".",
    Piece.WHITE_MAN: "w",
    Piece.BLACK_MAN: "b",
    Piece.WHITE_KING: "W",
    Piece.BLACK_KING: "B",
}


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
