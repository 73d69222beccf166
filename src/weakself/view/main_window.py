"""
Container Window
================
The "Screen 1" of the demo: a navigation stack, the live-instance badge and the
capture policy selector.

Why is this file needed?
------------------------
1. Navigation: "Navigate" pushes a new detail screen (and with it a new view
   model); "Back" pops the top one and releases its view model.
2. Feedback: The green badge mirrors the persisted counter, so a leaked view
   model shows up as a number higher than the count of open screens.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QStackedWidget, QLabel,
    QPushButton, QComboBox, QToolBar
)

from weakself.app.settings import DemoSettings
from weakself.config import VISIBLE_APP_NAME
from weakself.model.capture import CapturePolicy
from weakself.model.counter import CounterStore
from weakself.model.scheduler import Scheduler
from weakself.model.viewmodel import DetailViewModel
from weakself.view.detail_screen import DetailScreen

logger = logging.getLogger(__name__)

POLICY_LABELS = {
    CapturePolicy.WEAK: "Weak capture (fixed)",
    CapturePolicy.STRONG: "Strong capture (leaks until the task fires)",
}


class ContainerWindow(QMainWindow):
    def __init__(self, counter: CounterStore, scheduler: Scheduler,
                 settings: Optional[DemoSettings] = None) -> None:
        super().__init__()
        self.counter = counter
        self.scheduler = scheduler
        self.settings = settings or DemoSettings()
        self._screens: list[DetailScreen] = []

        self.setWindowTitle(f"{VISIBLE_APP_NAME} - Screen 1")
        self.resize(480, 640)

        # --- Toolbar ---
        toolbar = QToolBar(self)
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self.act_back = QAction("Back", self)
        self.act_back.triggered.connect(self.go_back)
        toolbar.addAction(self.act_back)

        self.act_navigate = QAction("Navigate", self)
        self.act_navigate.triggered.connect(self.navigate)
        toolbar.addAction(self.act_navigate)

        # --- Central ---
        central = QWidget(self)
        v = QVBoxLayout(central)

        top = QHBoxLayout()
        self.policy_combo = QComboBox(central)
        for policy, label in POLICY_LABELS.items():
            self.policy_combo.addItem(label, policy.value)
        top.addWidget(self.policy_combo)
        top.addStretch(1)

        self.badge = QLabel(central)
        self.badge.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.badge.setMinimumWidth(64)
        self.badge.setStyleSheet(
            "font-size: 28pt; padding: 8px; background-color: #4caf50; border-radius: 10px;"
        )
        top.addWidget(self.badge)
        v.addLayout(top)

        self.stack = QStackedWidget(central)
        self.stack.addWidget(self._build_root_page())
        v.addWidget(self.stack, 1)

        self.setCentralWidget(central)

        self.counter.count_changed.connect(self._update_badge)
        self.set_capture_policy(self.settings.capture)

        # Each launch starts from zero
        self.counter.reset()
        self._sync_navigation()

    def _build_root_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.addStretch(1)
        title = QLabel("Screen 1", page)
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-size: 20pt; font-weight: bold;")
        layout.addWidget(title)
        btn = QPushButton("Navigate", page)
        btn.clicked.connect(self.navigate)
        layout.addWidget(btn)
        layout.addStretch(1)
        return page

    # ---------- Policy ----------

    def capture_policy(self) -> CapturePolicy:
        return CapturePolicy(self.policy_combo.currentData())

    def set_capture_policy(self, policy: CapturePolicy) -> None:
        idx = self.policy_combo.findData(CapturePolicy(policy).value)
        self.policy_combo.setCurrentIndex(idx)

    # ---------- Navigation ----------

    def open_screens(self) -> int:
        return len(self._screens)

    def navigate(self) -> DetailScreen:
        """Push a new detail screen backed by a fresh view model."""
        vm = DetailViewModel(
            self.counter, self.scheduler,
            policy=self.capture_policy(),
            delay_ms=self.settings.delay_ms,
        )
        screen = DetailScreen(vm, parent=self.stack)
        self.stack.addWidget(screen)
        self.stack.setCurrentWidget(screen)
        self._screens.append(screen)
        self._sync_navigation()
        logger.info(f"Opened screen {len(self._screens)} (view model #{vm.serial}).")
        return screen

    def go_back(self) -> None:
        """Pop the top detail screen, if any, and release its view model."""
        if not self._screens:
            return
        screen = self._screens.pop()
        logger.info(f"Closing screen {len(self._screens) + 1}.")
        self.stack.removeWidget(screen)
        screen.dismiss()
        screen.deleteLater()
        self._sync_navigation()

    def _sync_navigation(self) -> None:
        self.act_back.setEnabled(bool(self._screens))
        title = "Second View" if self._screens else "Screen 1"
        self.setWindowTitle(f"{VISIBLE_APP_NAME} - {title}")

    def _update_badge(self, count: int) -> None:
        self.badge.setText(str(count))
