"""Square type alias and coordinate helpers.

Board layout (international draughts numbering, White at the bottom):

    row 1:    .  1  .  2  .  3  .  4  .  5
    row 2:    6  .  7  .  8  .  9  . 10  .
    ...
    row 10:  46  . 47  . 48  . 49  . 50  .

Rows count from Black's side (1) to White's side (10). Columns are 0-9
from left to right. Only the 50 dark squares are playable.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int  # 1–50

SQUARE_COUNT = 50
ROW_COUNT = 10
SQUARES_PER_ROW = 5

# Left edge (column 0) and right edge (column 9).
EDGE_SQUARES: frozenset[Square] = frozenset({5, 6, 15, 16, 25, 26, 35, 36, 45, 46})

WHITE_PROMOTION_ROW = 1
BLACK_PROMOTION_ROW = 10


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a playable square number."""
    return 1 <= sq <= SQUARE_COUNT


def row_of(sq: Square) -> int:
    """Row index 1–10, equal to ``ceil(sq / 5)``."""
    return (sq - 1) // SQUARES_PER_ROW + 1


def col_of(sq: Square) -> int:
    """Column index 0–9."""
    pos = (sq - 1) % SQUARES_PER_ROW
    if row_of(sq) % 2:
        return 2 * pos + 1
    return 2 * pos


def make_square(row: int, col: int) -> Square:
    """Create square from row (1–10) and column (0–9).

    Raises ``ValueError`` for light or off-board coordinates.
    """
    if not (1 <= row <= ROW_COUNT and 0 <= col < ROW_COUNT):
        raise ValueError(f"Off-board coordinates: row={row}, col={col}")
    if (row + col) % 2:
        raise ValueError(f"Not a playable square: row={row}, col={col}")
    return (row - 1) * SQUARES_PER_ROW + col // 2 + 1


def is_edge_square(sq: Square) -> bool:
    return sq in EDGE_SQUARES


def parse_square(text: str) -> Square:
    """Parse a square number, e.g. ``'32'`` → 32."""
    if not text.isdigit():
        raise ValueError(f"Invalid square name: {text!r}")
    sq = int(text)
    if not is_valid_square(sq):
        raise ValueError(f"Square out of range: {text!r}")
    return sq
