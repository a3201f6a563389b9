"""High-level draughts rules: game-over detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from draughtie.core.enums import Color, GameResult
from draughtie.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from draughtie.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # A side that cannot move (no pieces left, or all blocked) loses.

    @staticmethod
    def is_game_over(position: Position) -> bool:
        return not MoveGenerator(position).has_legal_moves()

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result."""
        if not Rules.is_game_over(position):
            return GameResult.IN_PROGRESS
        if position.side_to_move == Color.WHITE:
            return GameResult.BLACK_WINS
        return GameResult.WHITE_WINS
