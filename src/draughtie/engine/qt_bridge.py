"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from draughtie.core.position import Position
from draughtie.engine.controller import SearchController
from draughtie.engine.search import IEngine, SearchLimits

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    Acts as the time controller of the search: when a time limit is set,
    a timer thread asks the engine to stop once it expires, and the
    engine answers with its random fallback move.
    """

    best_move_ready = pyqtSignal(int, object, int, bool)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine", "_limits")

    def __init__(
        self,
        *,
        max_depth: int = 6,
        time_limit_ms: int | None = 1000,
    ) -> None:
        super().__init__()
        self._limits = SearchLimits(max_depth=max_depth, time_limit_ms=time_limit_ms)
        self._engine: IEngine = SearchController(self._limits)
        self._cancel_event = threading.Event()

    @pyqtSlot(object, int)
    def request_move(self, position_obj: object, request_id: int) -> None:
        """Search for the best move in *position_obj* and emit result."""
        if not isinstance(position_obj, Position):
            self.search_error.emit(request_id, "Engine received invalid position")
            return

        self._cancel_event.clear()
        self._engine.reset()
        timer = self._start_timer()
        try:
            result = self._engine.search(position_obj.copy())
        except Exception as exc:
            _LOGGER.exception("Engine search failed")
            self.search_error.emit(request_id, str(exc))
            return
        finally:
            if timer is not None:
                timer.cancel()

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id)
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.is_fallback,
        )

    @pyqtSlot()
    def stop(self) -> None:
        """Ask the running search for a move right now."""
        self._engine.request_stop()

    @pyqtSlot()
    def cancel(self) -> None:
        """Abandon the current search; its result is discarded."""
        self._cancel_event.set()
        self._engine.request_stop()

    @pyqtSlot(int, int)
    def set_limits(self, max_depth: int, time_limit_ms: int) -> None:
        """Update search limits (takes effect on the next search).

        A non-positive *time_limit_ms* disables the timer. A depth below 1
        is rejected and the previous limits stay in effect.
        """
        if max_depth <= 0:
            _LOGGER.warning("Ignoring invalid search depth %d", max_depth)
            return

        limits = SearchLimits(
            max_depth=max_depth,
            time_limit_ms=time_limit_ms if time_limit_ms > 0 else None,
        )
        if isinstance(self._engine, SearchController):
            self._engine.limits = limits
        self._limits = limits

    def _start_timer(self) -> threading.Timer | None:
        if self._limits.time_limit_ms is None:
            return None
        timer = threading.Timer(self._limits.time_limit_ms / 1000.0, self._engine.request_stop)
        timer.daemon = True
        timer.start()
        return timer
