"""
Tests for the strong/weak binding of deferred calls.
"""
from __future__ import annotations

import gc
import logging
import weakref

import pytest

from weakself.model.capture import CapturePolicy, bind


class Target:
    def __init__(self) -> None:
        self.hits = 0

    def hit(self) -> None:
        self.hits += 1


def test_strong_binding_keeps_target_alive() -> None:
    target = Target()
    ref = weakref.ref(target)
    task = bind(CapturePolicy.STRONG, target, Target.hit)

    del target
    gc.collect()
    assert ref() is not None

    task()
    assert ref().hits == 1

    del task
    gc.collect()
    assert ref() is None


def test_weak_binding_does_not_keep_target_alive() -> None:
    target = Target()
    ref = weakref.ref(target)
    task = bind(CapturePolicy.WEAK, target, Target.hit)

    task()
    assert target.hits == 1

    del target
    gc.collect()
    assert ref() is None


def test_weak_binding_is_noop_after_target_is_gone(caplog) -> None:
    calls: list[Target] = []
    target = Target()
    task = bind(CapturePolicy.WEAK, target, calls.append)
    del target
    gc.collect()

    with caplog.at_level(logging.DEBUG, logger="weakself"):
        task()

    assert calls == []
    assert "no longer exists" in caplog.text


@pytest.mark.parametrize("name, expected", [
    ("strong", CapturePolicy.STRONG),
    ("WEAK", CapturePolicy.WEAK),
    (" Weak ", CapturePolicy.WEAK),
])
def test_parse(name: str, expected: CapturePolicy) -> None:
    assert CapturePolicy.parse(name) is expected


def test_parse_rejects_unknown_name() -> None:
    with pytest.raises(ValueError, match="unowned"):
        CapturePolicy.parse("unowned")
