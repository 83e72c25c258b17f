"""
Logging utilities for the boxwhisker library.

Library modules only call get_logger(__name__). Scripts that want output
call configure_logging() once; it attaches a stderr handler to the
"boxwhisker" logger and never touches the root logger, so a host
application's own logging setup is left alone.

Example:
    ```python
    from boxwhisker.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d:%(funcName)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Consulted when configure_logging() gets no explicit level.
LOG_LEVEL_ENV = "BOXWHISKER_LOG_LEVEL"

ROOT_LOGGER_NAME = "boxwhisker"


def _stderr_handler(logger: logging.Logger) -> Optional[logging.StreamHandler]:
    for h in logger.handlers:
        if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
            return h
    return None


def configure_logging(level: Optional[Union[str, int]] = None, *, fmt: str = DEFAULT_FMT) -> None:
    """
    Send boxwhisker logs to stderr at the given level.

    Parameters
    ----------
    level:
        Logging level (e.g. "DEBUG"). Defaults to $BOXWHISKER_LOG_LEVEL, else "INFO".
    fmt:
        Log message format.

    Calling again only updates the level; a second stderr handler is never added.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    handler = _stderr_handler(logger)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=DEFAULT_DATEFMT))
        logger.addHandler(handler)
    handler.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for name, or the package's "boxwhisker" logger when name is None."""
    return logging.getLogger(name or ROOT_LOGGER_NAME)
