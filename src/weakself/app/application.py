"""
Qt Application Setup
====================
Creates the QApplication and sets the process-wide identity that QSettings()
uses to locate the settings file holding the instance count.
"""
from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from PySide6.QtCore import QCoreApplication, QSettings
from PySide6.QtWidgets import QApplication

from weakself.config import ORG_ID, APP_ID, VISIBLE_APP_NAME


def create_app(argv: Optional[Sequence[str]] = None) -> QApplication:
    """Create and configure the QApplication instance, or reuse the running one."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    # QSettings() without arguments resolves to <org>/<app>.ini from here on
    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance()
    if app is None:
        app = QApplication(list(argv) if argv is not None else sys.argv[:1])
    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    return app
