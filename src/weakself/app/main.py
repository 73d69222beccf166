"""
Application Initialization
==========================
Parses the command line, constructs the model objects and the container window,
and starts the Qt event loop.

Why is this file needed?
------------------------
It acts as the composition root. It:
1. Sets up logging.
2. Resolves settings (environment first, command line on top).
3. Creates the counter store and the scheduler and hands them to the window.

Run with: python -m weakself [--capture strong|weak] [--delay-ms N]
"""
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from weakself.app.application import create_app
from weakself.app.settings import DemoSettings, load_settings, parse_delay
from weakself.logging_config import setup_logging
from weakself.model.capture import CapturePolicy
from weakself.model.counter import CounterStore
from weakself.model.scheduler import QtScheduler
from weakself.view.main_window import ContainerWindow

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weakself",
        description="Show how a delayed callback can keep a view model alive.",
    )
    parser.add_argument("--capture", type=CapturePolicy.parse, default=None,
                        help="Capture policy for new screens: strong or weak.")
    parser.add_argument("--delay-ms", type=parse_delay, default=None,
                        help="Delay of the simulated long request in milliseconds.")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    return parser


def resolve_settings(args: argparse.Namespace, base: DemoSettings) -> DemoSettings:
    """Command-line values win over the environment."""
    return DemoSettings(
        delay_ms=base.delay_ms if args.delay_ms is None else args.delay_ms,
        capture=base.capture if args.capture is None else args.capture,
    )


def build_window(settings: DemoSettings) -> ContainerWindow:
    """
    Wire the process-wide counter and the Qt scheduler into the container window.

    Requires a running QApplication (see create_app), whose organisation and
    application names select the settings file holding the count.
    """
    return ContainerWindow(CounterStore(), QtScheduler(), settings)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    try:
        settings = resolve_settings(args, load_settings())
    except ValueError as e:
        parser.error(str(e))

    app = create_app()
    logger.info(f"Starting with {settings.capture.value} capture, delay {settings.delay_ms} ms.")

    win = build_window(settings)
    win.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
