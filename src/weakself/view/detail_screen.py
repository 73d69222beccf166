"""
Detail Screen
=============
The "Second View" of the demo: a red title and the view model's current data.

Why is this file needed?
------------------------
1. Ownership: The screen is the only long-lived holder of its view model. When
   the screen is dismissed it lets go, so whether the view model dies now or
   later depends only on the pending delayed task.
2. Display: The data label follows the view model's data_changed signal, so the
   switch from the instant text to the delayed text is visible.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from weakself.model.viewmodel import DetailViewModel

logger = logging.getLogger(__name__)


class DetailScreen(QWidget):
    """The "Second View": a title and whatever data the view model holds."""

    def __init__(self, vm: DetailViewModel, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.vm: Optional[DetailViewModel] = vm

        layout = QVBoxLayout(self)
        layout.addStretch(1)

        self.title_label = QLabel("Second View", self)
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.title_label.setStyleSheet("font-size: 28pt; color: red;")
        layout.addWidget(self.title_label)

        self.data_label = QLabel(vm.data or "", self)
        self.data_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.data_label.setVisible(vm.data is not None)
        layout.addWidget(self.data_label)

        layout.addStretch(1)

        # Connect to the label's own slot: the view model must not hold this screen.
        vm.data_changed.connect(self.data_label.setText)
        vm.data_changed.connect(self.data_label.show)

    def dismiss(self) -> None:
        """Drop the view model. Qt may keep this widget around until deleteLater runs."""
        if self.vm is None:
            return
        logger.debug(f"Dismissing screen of view model #{self.vm.serial}")
        self.vm.detach()
        self.vm = None
