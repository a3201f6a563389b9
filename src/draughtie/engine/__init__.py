"""Draughts engine package: evaluation, alpha-beta search and Qt worker bridge."""

from draughtie.engine.alpha_beta import AlphaBetaEngine, SearchCancelled, SearchNode
from draughtie.engine.controller import SearchController
from draughtie.engine.evaluation import EvaluationWeights, Evaluator
from draughtie.engine.search import (
    INF_SCORE,
    GameState,
    IEngine,
    SearchLimits,
    SearchResult,
    StopSignal,
)

__all__ = [
    "INF_SCORE",
    "AlphaBetaEngine",
    "EvaluationWeights",
    "Evaluator",
    "GameState",
    "IEngine",
    "SearchCancelled",
    "SearchController",
    "SearchLimits",
    "SearchNode",
    "SearchResult",
    "StopSignal",
]
