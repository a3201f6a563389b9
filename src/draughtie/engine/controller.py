"""One fixed-depth search per turn with a random fallback."""

from __future__ import annotations

import logging
import random

from draughtie.core.move import Move
from draughtie.engine.alpha_beta import AlphaBetaEngine, SearchCancelled, SearchNode
from draughtie.engine.evaluation import EvaluationWeights, Evaluator
from draughtie.engine.search import (
    INF_SCORE,
    GameState,
    IEngine,
    PositionEvaluator,
    SearchLimits,
    SearchResult,
    StopSignal,
)

_LOGGER = logging.getLogger(__name__)


class SearchController(IEngine):
    """Runs the alpha-beta engine for the side to move and picks its move.

    If the search is stopped before it completes, or records no move, a
    uniformly random legal move is played instead. Work done before the
    stop is discarded.

    Thread-safety: :meth:`request_stop` may be called from any thread;
    everything else belongs to the thread that runs the search. The
    position must not be touched by other threads while a search runs.
    """

    __slots__ = ("_limits", "_evaluator", "_stop", "_engine", "_rng", "_last_score")

    def __init__(
        self,
        limits: SearchLimits | None = None,
        *,
        evaluator: PositionEvaluator | None = None,
        weights: EvaluationWeights | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._limits = limits or SearchLimits()
        if self._limits.max_depth <= 0:
            raise ValueError("Search depth must be >= 1")
        self._evaluator = evaluator if evaluator is not None else Evaluator(weights)
        self._stop = StopSignal()
        self._engine = AlphaBetaEngine(self._evaluator, self._stop)
        self._rng = rng or random.Random()
        self._last_score = 0

    # ── Configuration ────────────────────────────────────────────────────

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    @limits.setter
    def limits(self, limits: SearchLimits) -> None:
        if limits.max_depth <= 0:
            raise ValueError("Search depth must be >= 1")
        self._limits = limits

    # ── Public API ───────────────────────────────────────────────────────

    def select_move(self, position: GameState) -> Move | None:
        """Best move for the side to move, or ``None`` if it has none."""
        return self.search(position).best_move

    def last_evaluation_score(self) -> int:
        """Root score of the most recent search (0 if it was stopped)."""
        return self._last_score

    def request_stop(self) -> None:
        """Abort the running search as soon as it enters its next node."""
        self._stop.request()

    def reset(self) -> None:
        """Start a new session: drop any pending stop request and the last score."""
        self._stop.clear()
        self._last_score = 0

    def search(self, position: GameState) -> SearchResult:
        depth = self._limits.max_depth
        self._last_score = 0
        self._engine.reset_counters()
        root = SearchNode(position)

        try:
            score = self._engine.search(root, -INF_SCORE, INF_SCORE, depth)
        except SearchCancelled:
            _LOGGER.debug("Search stopped at depth %d after %d nodes", depth, self._engine.nodes)
            return self._fallback(position, depth)
        finally:
            # A request that arrived after the last node was entered must
            # not leak into the next session.
            self._stop.clear()

        self._last_score = score
        _LOGGER.debug(
            "depth=%2d, best move=%5s, value=%d, nodes=%d",
            depth,
            root.best_move,
            score,
            self._engine.nodes,
        )

        if root.best_move is None:
            return self._fallback(position, depth, score=score)

        return SearchResult(
            best_move=root.best_move,
            score=score,
            depth=depth,
            nodes=self._engine.nodes,
            leaves=self._engine.leaves,
        )

    # ── Internals ────────────────────────────────────────────────────────

    def _fallback(self, position: GameState, depth: int, score: int = 0) -> SearchResult:
        move = self.random_move(position)
        if move is None:
            _LOGGER.warning("No legal move available")
        else:
            _LOGGER.warning("No searched move found, playing random move %s", move)
        return SearchResult(
            best_move=move,
            score=score,
            depth=depth,
            nodes=self._engine.nodes,
            leaves=self._engine.leaves,
            is_fallback=True,
        )

    def random_move(self, position: GameState) -> Move | None:
        """Uniformly random legal move of *position*, or ``None``."""
        moves = position.legal_moves()
        if not moves:
            return None
        return self._rng.choice(moves)
