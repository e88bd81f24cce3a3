"""Logging setup for puzzlegrid.

Engine modules grab their logger through :func:`get_logger` at import time.
Placement retries log at DEBUG; content attempts and short word lists log
at INFO and WARNING.
"""

from __future__ import annotations

import logging
from typing import Optional

ROOT_LOGGER_NAME = "puzzlegrid"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: int = logging.INFO) -> None:
    """Send records to stderr at ``level``, replacing any existing root handlers."""

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for ``name`` (``puzzlegrid`` when omitted).

    Installs the stderr handler on first use unless the host application
    already attached one to the root logger.
    """

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or ROOT_LOGGER_NAME)
