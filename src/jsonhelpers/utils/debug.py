"""Logging setup for jsonhelpers entry points.

The library modules only create module-level loggers; they never attach
handlers. Entry points (the CLI) call ``setup_logger()`` once, and the
``debug()``/``info()``/``warn()``/``error()`` helpers route through it.
Verbose output is enabled by the JSONHELPERS_DEBUG environment variable.
"""

import logging
import os
from typing import Optional

LOGGER_NAME = "jsonhelpers"

_logger: Optional[logging.Logger] = None


def debug_enabled() -> bool:
    """Return True when JSONHELPERS_DEBUG=1."""
    return os.getenv("JSONHELPERS_DEBUG", "0") == "1"


def setup_logger() -> logging.Logger:
    """Attach a stderr handler to the package logger (once) and return it."""
    global _logger
    if _logger is not None:
        return _logger
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("[%(levelname)s] %(asctime)s %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    # A level chosen by the application wins unless
    # JSONHELPERS_DEBUG asks for more.
    if debug_enabled():
        logger.setLevel(logging.DEBUG)
    elif logger.level == logging.NOTSET:
        logger.setLevel(logging.WARNING)
    _logger = logger
    return logger


def debug(msg: str) -> None:
    """Log a debug message."""
    setup_logger().debug(msg)


def info(msg: str) -> None:
    """Log an info message."""
    setup_logger().info(msg)


def warn(msg: str) -> None:
    """Log a warning message."""
    setup_logger().warning(msg)


def error(msg: str) -> None:
    """Log an error message."""
    setup_logger().error(msg)
