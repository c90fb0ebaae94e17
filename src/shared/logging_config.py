"""Logging setup for applications using the Result library.

The library itself only emits records through module loggers; calling
``configure_logging`` is left to the host application.
"""

import logging
import sys
from typing import Optional

from src.shared.config import get_settings

CAPTURE_LOGGER = "src.shared.result"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure stdout logging and surface exceptions captured by of_throwable.

    Captured exceptions are logged at DEBUG. When
    ``RESULT_LOG_CAPTURED_EXCEPTIONS`` is on, the capture logger is lowered
    to DEBUG so those records reach the handler whatever the root level is;
    otherwise it inherits the root level.

    Args:
        level: Root logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to ``RESULT_LOG_LEVEL``.
    """
    settings = get_settings()
    if level is None:
        level = settings.log_level

    # Convert string level to logging constant
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    capture_level = logging.DEBUG if settings.log_captured_exceptions else logging.NOTSET
    logging.getLogger(CAPTURE_LOGGER).setLevel(capture_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
