"""
Detail Screen View Model
========================
The object whose lifetime the demo visualises.

Why is this file needed?
------------------------
1. Lifecycle hooks: Creation increments the persisted counter, destruction
   decrements it. The counter therefore shows how many instances are alive.
2. Deferred work: Creation also starts a simulated long request. Depending on
   the capture policy, that pending request either keeps the instance alive
   (STRONG) or lets it go with its screen (WEAK).

Classes:
    LifecycleState: Observable phases of an instance.
    DetailViewModel: The view model itself.
"""
from __future__ import annotations

import itertools
import logging
import weakref
from enum import Enum, auto
from typing import Optional

from PySide6.QtCore import QObject, Signal

from weakself.config import DEFAULT_DELAY_MS, DELAYED_DATA, INSTANT_DATA
from weakself.model.capture import CapturePolicy, bind
from weakself.model.counter import CounterStore
from weakself.model.scheduler import Scheduler

logger = logging.getLogger(__name__)

_serials = itertools.count(1)


class LifecycleState(Enum):
    CONSTRUCTED = auto()
    ACTIVE = auto()
    PENDING_DESTROY = auto()  # released by its screen, held by a pending task
    DESTROYED = auto()


def _release(counter: CounterStore, serial: int) -> None:
    # Finalizer callback: must not reference the view model itself.
    logger.info(f"DEINITIALIZE NOW #{serial}")
    counter.decrement()


class DetailViewModel(QObject):
    """
    View model of the detail screen.

    The destruction hook is a weakref.finalize registered on creation: it runs
    once when the last strong reference goes away, or earlier if on_destroy()
    is called explicitly. Either way it runs at most once.
    """
    data_changed = Signal(str)

    def __init__(self, counter: CounterStore, scheduler: Scheduler,
                 policy: CapturePolicy = CapturePolicy.WEAK,
                 delay_ms: int = DEFAULT_DELAY_MS,
                 parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        if delay_ms < 0:
            raise ValueError(f"Delay must not be negative, got {delay_ms} ms.")

        self.counter = counter
        self.scheduler = scheduler
        self.policy = CapturePolicy(policy)
        self.delay_ms = delay_ms
        self.serial = next(_serials)

        self._data: Optional[str] = None
        self._pending_tasks = 0
        self._finalizer: Optional[weakref.finalize] = None
        self.state = LifecycleState.CONSTRUCTED

        self.on_create()

    @property
    def data(self) -> Optional[str]:
        return self._data

    @data.setter
    def data(self, value: str) -> None:
        self._data = value
        self.data_changed.emit(value)

    @property
    def pending_tasks(self) -> int:
        return self._pending_tasks

    @property
    def alive(self) -> bool:
        """False once the destruction hook has run."""
        return self._finalizer is not None and self._finalizer.alive

    def on_create(self) -> None:
        if self._finalizer is not None:
            raise RuntimeError(f"on_create() already ran for view model #{self.serial}.")

        logger.info(f"INITIALIZE NOW #{self.serial} ({self.policy.value} capture)")
        self.counter.increment()
        self._finalizer = weakref.finalize(self, _release, self.counter, self.serial)
        # Interpreter shutdown is not a screen dismissal
        self._finalizer.atexit = False

        self.get_data()
        self.state = LifecycleState.ACTIVE

    def on_destroy(self) -> None:
        """Run the destruction hook now. Repeated calls do nothing."""
        self.state = LifecycleState.DESTROYED
        if self._finalizer is not None:
            self._finalizer()

    def get_data(self) -> None:
        """Set the instant value now and start the simulated long request."""
        self.data = INSTANT_DATA

        task = bind(self.policy, self, DetailViewModel._on_request_finished)
        self._pending_tasks += 1
        self.scheduler.call_later(self.delay_ms, task)

    def detach(self) -> None:
        """Called by the owning screen when it is dismissed."""
        if self.state is LifecycleState.DESTROYED:
            return
        if self.policy is CapturePolicy.STRONG and self._pending_tasks:
            self.state = LifecycleState.PENDING_DESTROY
            logger.info(f"View model #{self.serial} released by its screen, "
                        f"kept alive by {self._pending_tasks} pending task(s).")

    def _on_request_finished(self) -> None:
        self._pending_tasks -= 1
        if self.state is LifecycleState.DESTROYED:
            logger.debug(f"View model #{self.serial} already destroyed, ignoring late result.")
            return
        self.data = DELAYED_DATA
