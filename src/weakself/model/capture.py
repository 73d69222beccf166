"""
Capture Policies for Deferred Work
==================================
A scheduled callback either owns the object it will act on, or it only holds a
weak handle and checks that the object is still alive before acting.

Why is this file needed?
------------------------
1. Lesson: This is the whole point of the demo. A STRONG capture keeps the
   target alive until the callback has run; a WEAK capture lets the target die
   on time and turns the late callback into a no-op.
2. Reuse: The view model builds its delayed task here, and the tests use the
   same helper directly on plain objects.
"""
from __future__ import annotations

import logging
import weakref
from enum import Enum
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CapturePolicy(str, Enum):
    """How a deferred callback refers to its target."""
    STRONG = "strong"
    WEAK = "weak"

    @classmethod
    def parse(cls, name: str) -> CapturePolicy:
        """Case-insensitive lookup by value; raises ValueError on unknown names."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown capture policy '{name}' (expected one of: {choices}).") from None


def bind(policy: CapturePolicy, target: T, action: Callable[[T], None]) -> Callable[[], None]:
    """
    Build a zero-argument callable that runs `action(target)` later.

    With STRONG, the returned callable references `target` directly, so whoever
    holds the callable (a timer queue) keeps `target` alive.
    With WEAK, only a weakref is kept; if the target is gone when the callable
    runs, nothing happens.
    """
    if policy is CapturePolicy.STRONG:
        def run_strong() -> None:
            action(target)

        return run_strong

    ref = weakref.ref(target)
    description = f"{type(target).__name__}@{id(target):#x}"

    def run_weak() -> None:
        alive = ref()
        if alive is None:
            logger.debug(f"Deferred call skipped: {description} no longer exists.")
            return
        action(alive)

    return run_weak
