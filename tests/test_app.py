"""
Tests for application bootstrap: the Qt identity that selects the settings
file, the default counter store, and the composition root.
"""
from __future__ import annotations

import gc
from pathlib import Path

import pytest
from PySide6.QtCore import QCoreApplication, QSettings
from PySide6.QtTest import QTest

from weakself.app.application import create_app
from weakself.app.main import build_window, main
from weakself.app.settings import DemoSettings
from weakself.config import APP_ID, COUNT_KEY, ORG_ID
from weakself.model.capture import CapturePolicy
from weakself.model.counter import CounterStore
from weakself.model.scheduler import QtScheduler

DELAY = 50


@pytest.fixture
def user_settings_dir(qapp, tmp_path):
    """Point the per-user INI location at a temporary directory."""
    old_format = QSettings.defaultFormat()
    old_org = QCoreApplication.organizationName()
    old_app = QCoreApplication.applicationName()
    QSettings.setPath(QSettings.Format.IniFormat, QSettings.Scope.UserScope, str(tmp_path))
    yield tmp_path
    QSettings.setDefaultFormat(old_format)
    QCoreApplication.setOrganizationName(old_org)
    QCoreApplication.setApplicationName(old_app)


def test_create_app_sets_identity(user_settings_dir, qapp) -> None:
    app = create_app()
    assert app is qapp
    assert QCoreApplication.organizationName() == ORG_ID
    assert QCoreApplication.applicationName() == APP_ID
    assert QSettings.defaultFormat() == QSettings.Format.IniFormat


def test_default_counter_store_uses_app_settings(user_settings_dir) -> None:
    create_app()
    store = CounterStore()
    store.reset()
    store.increment()
    store.increment()

    path = Path(QSettings().fileName())
    assert path.suffix == ".ini"
    assert user_settings_dir in path.parents

    reopened = QSettings(str(path), QSettings.Format.IniFormat)
    assert int(reopened.value(COUNT_KEY, 0, type=int)) == 2


def test_build_window_wires_real_scheduler(user_settings_dir) -> None:
    create_app()
    # Left over from a previous run
    CounterStore().increment()

    win = build_window(DemoSettings(delay_ms=DELAY, capture=CapturePolicy.STRONG))
    assert isinstance(win.scheduler, QtScheduler)
    assert win.counter.read() == 0
    assert win.capture_policy() is CapturePolicy.STRONG

    win.navigate()
    win.go_back()
    gc.collect()
    assert win.counter.read() == 1

    for _ in range(100):
        gc.collect()
        if win.counter.read() == 0:
            break
        QTest.qWait(10)
    assert win.counter.read() == 0
    assert win.badge.text() == "0"


def test_main_rejects_invalid_environment(monkeypatch, clean_logger) -> None:
    monkeypatch.setenv("WEAKSELF_CAPTURE", "unowned")
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


def test_main_rejects_invalid_arguments(clean_logger) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--delay-ms", "soon"])
    assert exc.value.code == 2
