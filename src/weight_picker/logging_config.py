"""Logging for the ``weight_picker`` namespace.

Modules log through ``logging.getLogger(__name__)``; only the demo
application calls :func:`setup_logging`, a library host is free to route
the ``weight_picker`` logger however it likes.
"""

import logging
import sys
from typing import List, Optional, Union

LOGGER_NAME = "weight_picker"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def resolve_level(level: Union[int, str]) -> Optional[int]:
    """Numeric level for ``level`` (``"debug"``, ``"INFO"``, ``10``), or None."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else None


def setup_logging(
    level: Union[int, str] = logging.INFO, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Send ``weight_picker`` records to stdout and, optionally, ``log_file``.

    Calling it again replaces the handlers from the previous call, so the
    demo can start at INFO and switch to the configured level once its
    settings are loaded. An unknown level name falls back to INFO.
    """
    numeric = resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(logging.INFO if numeric is None else numeric)

    if numeric is None:
        logger.warning("unknown log level %r, using INFO", level)
    return logger


__all__ = [
    "DATE_FORMAT",
    "LOGGER_NAME",
    "LOG_FORMAT",
    "resolve_level",
    "setup_logging",
]
