"""
Logging configuration for the package.

The package itself only emits records through module-level loggers;
configure_logging() is meant for applications and scripts that embed it.
Logging must not change program behavior.
"""

import logging
import sys
from typing import Optional

from src.core.config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
            Defaults to the STEPRANGE_LOG_LEVEL setting.
    """
    level = level or get_settings().log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
