"""
Instance Counter (Persisted)
============================
A single integer kept in the application settings under the "count" key.

Why is this file needed?
------------------------
1. Visualisation: The container window shows this value, so the user can see
   how many view models are alive at any moment.
2. Ownership: The store is one explicit object handed to every view model that
   mutates it, rather than ambient global state.

All access happens on the UI thread, hence no locking.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, QSettings, Signal

from weakself.config import COUNT_KEY

logger = logging.getLogger(__name__)


class CounterStore(QObject):
    """Persisted live-instance counter with a change signal for the views."""
    count_changed = Signal(int)

    def __init__(self, settings: Optional[QSettings] = None, key: str = COUNT_KEY,
                 parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        # QSettings() picks up the org/app names and INI format set in create_app()
        self._settings = settings if settings is not None else QSettings()
        self.key = key

    def read(self) -> int:
        return int(self._settings.value(self.key, 0, type=int))

    def increment(self) -> int:
        return self._write(self.read() + 1)

    def decrement(self) -> int:
        return self._write(self.read() - 1)

    def reset(self) -> None:
        """Start from zero; called on each fresh launch."""
        self._write(0)

    def _write(self, value: int) -> int:
        self._settings.setValue(self.key, value)
        self._settings.sync()
        logger.debug(f"'{self.key}' = {value}")
        self.count_changed.emit(value)
        return value
