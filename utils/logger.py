"""
utils/logger.py
---------------
Logging for the record store.

Every module calls ``get_logger(__name__)``. The loggers hang under one
``food_store`` parent, which gets its handler and level here, so the host
application's root logger is left alone.
"""

import logging
import sys

from config import LOG_LEVEL

ROOT_LOGGER_NAME = "food_store"

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def _resolve_level(name: str) -> int:
    """Map a level name like 'DEBUG' to its number; unknown names mean INFO."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _init_logging() -> None:
    """Attach the stdout handler to the ``food_store`` logger once."""
    global _initialized
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    parent = logging.getLogger(ROOT_LOGGER_NAME)
    parent.setLevel(_resolve_level(LOG_LEVEL))
    parent.addHandler(handler)
    parent.propagate = False
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for one module of the record store.

    Args:
        name: Usually ``__name__`` of the calling module, e.g. ``repositories.order_repo``.

    Returns:
        The ``food_store.<name>`` logger.
    """
    _init_logging()
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
