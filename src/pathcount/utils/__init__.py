"""
Miscellaneous utilities shared across pathcount.
"""

from .logging import configure_logging, get_logger, logger, reset_logging
from .config import PathCountConfig, config

__all__ = ["logger", "get_logger", "configure_logging", "reset_logging", "config", "PathCountConfig"]
