"""Shared engine search models and protocols."""

from __future__ import annotations

import threading
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from draughtie.core.enums import Color, Piece
    from draughtie.core.move import Move

# Window bounds used as -inf / +inf. Far outside any evaluator score and
# safe to negate.
INF_SCORE = 1_000_000


class GameState(Protocol):
    """What the search needs from a position.

    ``make_move`` / ``unmake_move`` must be exact inverses, including the
    side-to-move flip.
    """

    side_to_move: Color

    def legal_moves(self) -> list[Move]: ...

    def make_move(self, move: Move) -> None: ...

    def unmake_move(self, move: Move) -> None: ...

    def pieces(self) -> Sequence[Piece]: ...


class PositionEvaluator(Protocol):
    """Static scorer: positive favors White, negative favors Black."""

    def evaluate(self, position: GameState) -> int: ...


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation.

    ``time_limit_ms`` is only honoured by an external timer (see
    :class:`~draughtie.engine.qt_bridge.EngineWorker`); the search itself
    never looks at the clock.
    """

    max_depth: int = 6
    time_limit_ms: int | None = None


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by one controller search."""

    best_move: Move | None
    score: int
    depth: int
    nodes: int
    leaves: int
    is_fallback: bool = False


class StopSignal:
    """One-shot stop request shared between a timer thread and the search.

    ``request`` may be called from any thread. ``consume`` atomically
    tests and clears the request so that exactly one caller observes it.
    """

    __slots__ = ("_event", "_lock")

    def __init__(self) -> None:
        self._event = threading.Event()
        self._lock = threading.Lock()

    def request(self) -> None:
        self._event.set()

    def is_requested(self) -> bool:
        return self._event.is_set()

    def consume(self) -> bool:
        with self._lock:
            if not self._event.is_set():
                return False
            self._event.clear()
            return True

    def clear(self) -> None:
        with self._lock:
            self._event.clear()


class IEngine(Protocol):
    """Protocol for engines driven by the worker bridge."""

    def search(self, position: GameState) -> SearchResult: ...

    def request_stop(self) -> None: ...

    def reset(self) -> None: ...
