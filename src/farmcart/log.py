"""Centralized logging configuration.

Usage:
    from farmcart.log import get_logger
    logger = get_logger(__name__)

Library code only creates loggers; ``configure_logging`` is called once
by the CLI entry point so importing farmcart never installs handlers.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _level_from_env(default: str) -> int:
    level_name = os.environ.get("LOG_LEVEL", default).upper()
    return getattr(logging, level_name, logging.WARNING)


def configure_logging(verbose: bool = False) -> None:
    """Attach a stderr handler to the ``farmcart`` logger.

    The level comes from ``LOG_LEVEL`` (default WARNING); ``verbose``
    forces DEBUG.
    """
    root = logging.getLogger("farmcart")
    level = logging.DEBUG if verbose else _level_from_env("WARNING")
    root.setLevel(level)

    # Only configure once
    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
