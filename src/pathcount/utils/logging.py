"""
Package logger.

Library code only emits records; handlers are attached by applications
(see ``configure_logging`` and the CLI).
"""

from __future__ import annotations

import logging
from typing import Optional

LOGGER_NAME = "pathcount"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())

_console_handler: Optional[logging.Handler] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name:
        return logger
    return logger.getChild(name)


def configure_logging(*, debug: bool = False, verbose: bool = False) -> None:
    """Attach a stderr handler to the package logger, replacing any earlier one."""
    global _console_handler  # noqa: PLW0603
    if _console_handler is not None:
        logger.removeHandler(_console_handler)
    _console_handler = logging.StreamHandler()
    _console_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(_console_handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING)


def reset_logging() -> None:
    global _console_handler  # noqa: PLW0603
    if _console_handler is not None:
        logger.removeHandler(_console_handler)
        _console_handler = None
    logger.setLevel(logging.NOTSET)
