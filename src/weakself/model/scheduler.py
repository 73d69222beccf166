"""
Deferred Execution on the UI Thread
===================================
The delayed "network request" of the demo runs on the Qt event loop. Callbacks
always run on the UI thread, so nothing here needs a lock.

Classes:
    Scheduler: Protocol the view model schedules through.
    QtScheduler: QTimer based implementation used by the application.
"""
from __future__ import annotations

import heapq
import itertools
import logging
from typing import Callable, Optional, Protocol

from PySide6.QtCore import QElapsedTimer, QObject, QTimer

logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        """Run `callback` once after `delay_ms`. There is no cancellation."""
        ...


class QtScheduler(QObject):
    """
    Queue of pending callables driven by one single-shot QTimer.

    A callable stays in the queue, and therefore alive together with
    everything it references, until it has run. The timer is re-armed for the
    earliest due entry after every change.
    """

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._clock = QElapsedTimer()
        self._clock.start()
        self._queue: list[tuple[int, int, Callable[[], None]]] = []
        self._seq = itertools.count()

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._run_due)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        if delay_ms < 0:
            raise ValueError(f"Delay must not be negative, got {delay_ms} ms.")
        due = self._clock.elapsed() + delay_ms
        heapq.heappush(self._queue, (due, next(self._seq), callback))
        logger.debug(f"Scheduling callback in {delay_ms} ms ({len(self._queue)} pending).")
        self._arm()

    def _arm(self) -> None:
        if not self._queue:
            self._timer.stop()
            return
        wait = max(0, self._queue[0][0] - self._clock.elapsed())
        self._timer.start(int(wait))

    def _run_due(self) -> None:
        now = self._clock.elapsed()
        try:
            while self._queue and self._queue[0][0] <= now:
                _, _, callback = heapq.heappop(self._queue)
                callback()
                # Release the callable (and what it captured) right after its run
                del callback
        finally:
            self._arm()
