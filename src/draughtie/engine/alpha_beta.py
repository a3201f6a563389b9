"""Fixed-depth minimax search with alpha-beta pruning.

White is always the maximizing side and Black the minimizing side, so
scores keep the evaluator's White-centric sign at every level.
"""

from __future__ import annotations

from dataclasses import dataclass

from draughtie.core.enums import Color
from draughtie.core.move import Move
from draughtie.engine.search import INF_SCORE, GameState, PositionEvaluator, StopSignal


class SearchCancelled(Exception):
    """Raised inside the search once a stop request has been observed."""


@dataclass(slots=True)
class SearchNode:
    """A position plus the best move discovered while searching it.

    One node is created per recursive call and never reused.
    """

    position: GameState
    best_move: Move | None = None


class AlphaBetaEngine:
    """Recursive fail-soft alpha-beta over a :class:`GameState`.

    Moves are explored in generator order and applied / undone in place.
    The stop signal is checked (and consumed) on entry to every call.
    """

    __slots__ = ("_evaluator", "_stop", "nodes", "leaves")

    def __init__(self, evaluator: PositionEvaluator, stop: StopSignal | None = None) -> None:
        self._evaluator = evaluator
        self._stop = stop if stop is not None else StopSignal()
        self.nodes = 0
        self.leaves = 0

    def reset_counters(self) -> None:
        self.nodes = 0
        self.leaves = 0

    def search(self, node: SearchNode, alpha: int, beta: int, depth: int) -> int:
        """Value of *node* searched *depth* plies deep.

        Raises :class:`SearchCancelled` when a stop was requested.
        """
        if self._stop.consume():
            raise SearchCancelled

        self.nodes += 1
        if depth == 0:
            self.leaves += 1
            return self._evaluator.evaluate(node.position)

        if node.position.side_to_move == Color.WHITE:
            return self._alpha_beta_max(node, alpha, beta, depth)
        return self._alpha_beta_min(node, alpha, beta, depth)

    def _alpha_beta_max(self, node: SearchNode, alpha: int, beta: int, depth: int) -> int:
        position = node.position
        value = -INF_SCORE

        for move in position.legal_moves():
            position.make_move(move)
            try:
                score = self.search(SearchNode(position), alpha, beta, depth - 1)
            finally:
                position.unmake_move(move)

            value = max(value, score)
            if value > alpha:
                alpha = value
                node.best_move = move
            if alpha >= beta:
                break

        return value

    def _alpha_beta_min(self, node: SearchNode, alpha: int, beta: int, depth: int) -> int:
        position = node.position
        value = INF_SCORE

        for move in position.legal_moves():
            position.make_move(move)
            try:
                score = self.search(SearchNode(position), alpha, beta, depth - 1)
            finally:
                position.unmake_move(move)

            value = min(value, score)
            if value < beta:
                beta = value
                node.best_move = move
            if alpha >= beta:
                break

        return value
