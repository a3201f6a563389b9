"""Core domain layer: pure draughts logic with zero external dependencies.

Quick start::

    from draughtie.core import Position, MoveGenerator, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    for move in MoveGenerator(pos).generate_legal_moves():
        print(move)
"""

from draughtie.core.board import Board
from draughtie.core.enums import Color, GameResult, Piece
from draughtie.core.move import Move
from draughtie.core.move_generator import MoveGenerator
from draughtie.core.notation import (
    STARTING_FEN,
    parse_move,
    position_from_fen,
    position_to_fen,
)
from draughtie.core.position import Position
from draughtie.core.rules import Rules
from draughtie.core.types import (
    EDGE_SQUARES,
    Square,
    col_of,
    is_edge_square,
    make_square,
    parse_square,
    row_of,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "Piece",
    # Types / helpers
    "EDGE_SQUARES",
    "Square",
    "col_of",
    "is_edge_square",
    "make_square",
    "parse_square",
    "row_of",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Position",
    "Rules",
    # Notation
    "STARTING_FEN",
    "parse_move",
    "position_from_fen",
    "position_to_fen",
]
