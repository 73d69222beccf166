"""
Runtime Settings
================
Resolves the delay and the capture policy from the defaults in
weakself.config, the environment, and (in main()) the command line.

Classes:
    DemoSettings: Resolved runtime settings.
Functions:
    load_settings: Build DemoSettings from the environment.
    parse_delay: Validate a delay given as text.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from weakself.config import DEFAULT_DELAY_MS, DEFAULT_POLICY, ENV_CAPTURE, ENV_DELAY_MS
from weakself.model.capture import CapturePolicy


@dataclass(frozen=True)
class DemoSettings:
    """Runtime knobs of the demo."""
    delay_ms: int = DEFAULT_DELAY_MS
    capture: CapturePolicy = CapturePolicy(DEFAULT_POLICY)

    def __post_init__(self) -> None:
        if self.delay_ms < 0:
            raise ValueError(f"Delay must not be negative, got {self.delay_ms} ms.")


def parse_delay(raw: str) -> int:
    try:
        delay_ms = int(raw)
    except ValueError:
        raise ValueError(f"Delay must be an integer number of milliseconds, got '{raw}'.") from None
    if delay_ms < 0:
        raise ValueError(f"Delay must not be negative, got {delay_ms} ms.")
    return delay_ms


def load_settings(environ: Optional[Mapping[str, str]] = None) -> DemoSettings:
    """
    Resolve the settings from environment variables, falling back to defaults.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Raises:
        ValueError: If a variable holds an invalid value.
    """
    env = os.environ if environ is None else environ

    delay_ms = DEFAULT_DELAY_MS
    if env.get(ENV_DELAY_MS):
        delay_ms = parse_delay(env[ENV_DELAY_MS])

    capture = CapturePolicy.parse(env.get(ENV_CAPTURE) or DEFAULT_POLICY)

    return DemoSettings(delay_ms=delay_ms, capture=capture)
