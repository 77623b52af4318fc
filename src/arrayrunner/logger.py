"""
Logger access for arrayrunner.

By default, uses Python's standard logging with the 'arrayrunner' namespace.

Usage:
    from arrayrunner.logger import get_logger
    logger = get_logger(__name__)

    # Route everything through another logger (structlog, loguru, ...)
    from arrayrunner.logger import set_logger
    set_logger(structlog.get_logger())
"""

import logging
from typing import Any

_custom_logger: Any = None


def set_logger(logger: Any) -> None:
    """
    Set a custom logger for all runners.

    Args:
        logger: Any object with debug/info/warning/error/exception methods.
                Pass None to go back to standard logging.
    """
    global _custom_logger
    _custom_logger = logger


def get_logger(name: str = "arrayrunner") -> Any:
    """
    Return the custom logger if one was set, otherwise a standard logger.

    A NullHandler is attached so that library use never triggers
    "No handler found" warnings.
    """
    if _custom_logger is not None:
        return _custom_logger

    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


def configure_default_logging(
    level: int = logging.INFO,
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
) -> None:
    """Simple console logging for applications that don't configure their own."""
    logging.basicConfig(level=level, format=format_string)
    logging.getLogger("arrayrunner").setLevel(level)
