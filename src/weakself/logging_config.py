"""
Logging Configuration
=====================
Console (and optional file) output for the demo's lifecycle trace.

The interesting lines are the view model's "INITIALIZE NOW #n" and
"DEINITIALIZE NOW #n": with strong capture the DEINITIALIZE line of a closed
screen only shows up once its delayed request has fired. DEBUG adds the
scheduler queue and skipped weak callbacks.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "weakself"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the 'weakself' namespace logger and return it.

    Args:
        level: Logging level, as a number (logging.DEBUG) or a name ("DEBUG").
        log_file: Optional path; the trace is also written there (overwritten).

    Raises:
        ValueError: If `level` is an unknown level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level '{level}'.")
        level = resolved

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # main() may run more than once in a process (tests); replace, don't stack
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}"
                + (f", writing to {log_file}." if log_file else "."))
    return logger
