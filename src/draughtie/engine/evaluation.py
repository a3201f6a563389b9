"""Static position evaluation.

Scores are White-centric: positive favors White (the first, maximizing
side), negative favors Black.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from draughtie.core.enums import Piece
from draughtie.core.types import SQUARE_COUNT, is_edge_square, is_valid_square, row_of
from draughtie.engine.search import GameState

# Diagonal neighbour offsets by row parity: odd rows (e.g. 12 touches 7, 8, 17, 18)
# and even rows (e.g. 17 touches 11, 12, 21, 22).
_ODD_ROW_NEIGHBOURS: tuple[int, ...] = (-5, -4, 5, 6)
_EVEN_ROW_NEIGHBOURS: tuple[int, ...] = (-6, -5, 4, 5)


@dataclass(slots=True, frozen=True)
class EvaluationWeights:
    """Weights of the evaluation terms.

    ``piece`` and ``king`` value single pieces inside the material term;
    the other four weight the sub-scores against each other. Material
    dominates, the rest break ties.
    """

    piece: int = 1
    king: int = 3
    count: int = 100
    center: int = 2
    formation: int = 1
    tempi: int = 1


def _neighbours(sq: int) -> tuple[int, ...]:
    offsets = _ODD_ROW_NEIGHBOURS if row_of(sq) % 2 else _EVEN_ROW_NEIGHBOURS
    return tuple(sq + off for off in offsets if is_valid_square(sq + off))


# NEIGHBOURS[sq] -> diagonal neighbours of a non-edge square.
_NEIGHBOURS: tuple[tuple[int, ...], ...] = (
    (),
    *(() if is_edge_square(sq) else _neighbours(sq) for sq in range(1, SQUARE_COUNT + 1)),
)


class Evaluator:
    """Weighted sum of material, center, formation and tempo sub-scores."""

    __slots__ = ("_weights",)

    def __init__(self, weights: EvaluationWeights | None = None) -> None:
        self._weights = weights or EvaluationWeights()

    def evaluate(self, position: GameState) -> int:
        pieces = position.pieces()
        w = self._weights
        return (
            w.count * self.material(pieces)
            + w.center * self.center(pieces)
            + w.formation * self.formation(pieces)
            + w.tempi * self.tempo(pieces)
        )

    # ── Sub-scores ───────────────────────────────────────────────────────

    def material(self, pieces: Sequence[Piece]) -> int:
        w = self._weights
        score = 0
        for sq in range(1, SQUARE_COUNT + 1):
            piece = pieces[sq]
            if piece == Piece.WHITE_MAN:
                score += w.piece
            elif piece == Piece.WHITE_KING:
                score += w.king
            elif piece == Piece.BLACK_MAN:
                score -= w.piece
            elif piece == Piece.BLACK_KING:
                score -= w.king
        return score

    def center(self, pieces: Sequence[Piece]) -> int:
        """Edge men control fewer diagonals than men elsewhere."""
        score = 0
        for sq in range(1, SQUARE_COUNT + 1):
            if not is_edge_square(sq):
                continue
            piece = pieces[sq]
            if piece == Piece.WHITE_MAN:
                score -= 1
            elif piece == Piece.BLACK_MAN:
                score += 1
        return score

    def formation(self, pieces: Sequence[Piece]) -> int:
        score = 0
        for sq in range(1, SQUARE_COUNT + 1):
            piece = pieces[sq]
            if not piece.is_man:
                continue
            for neighbour in _NEIGHBOURS[sq]:
                if pieces[neighbour].color != piece.color:
                    continue
                score += 1 if piece == Piece.WHITE_MAN else -1
        return score

    def tempo(self, pieces: Sequence[Piece]) -> int:
        """Advancement of men towards promotion (kings excluded)."""
        score = 0
        for sq in range(1, SQUARE_COUNT + 1):
            piece = pieces[sq]
            if piece == Piece.WHITE_MAN:
                score += 11 - row_of(sq)
            elif piece == Piece.BLACK_MAN:
                score -= row_of(sq)
        return score
