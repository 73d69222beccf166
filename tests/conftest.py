from __future__ import annotations

import heapq
import itertools
import os
from typing import Callable

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QSettings  # noqa: E402

from weakself.model.counter import CounterStore  # noqa: E402


class ManualScheduler:
    """
    Virtual-time scheduler. Pending callables are held strongly until they run,
    exactly like Qt's timer queue.
    """

    def __init__(self) -> None:
        self.now = 0
        self._queue: list[tuple[int, int, Callable[[], None]]] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        if delay_ms < 0:
            raise ValueError(f"Delay must not be negative, got {delay_ms} ms.")
        heapq.heappush(self._queue, (self.now + delay_ms, next(self._seq), callback))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def advance(self, ms: int) -> None:
        target = self.now + ms
        while self._queue and self._queue[0][0] <= target:
            due, _, callback = heapq.heappop(self._queue)
            self.now = due
            callback()
            # The fired callable must not outlive its run
            del callback
        self.now = target


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def settings(tmp_path) -> QSettings:
    return QSettings(str(tmp_path / "weakself.ini"), QSettings.Format.IniFormat)


@pytest.fixture
def counter(settings) -> CounterStore:
    store = CounterStore(settings)
    store.reset()
    return store


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def clean_logger():
    """Undo setup_logging() on the 'weakself' logger after the test."""
    import logging

    logger = logging.getLogger("weakself")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
