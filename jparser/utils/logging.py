"""
Logging utilities for jparser.

Every module logs through get_logger(__name__) so output shares one format
and honours LOG_LEVEL.

What goes into the log:
- The rejection class and its client-facing message (field names, wire
  keys, byte offsets)
- The request method and path a rejection belongs to
- Tracebacks of 500-class decode failures; these stay server-side

What stays out: request bodies themselves. A rejected body can hold
credentials or personal data, and the offset in the message is enough to
find the fault when the caller reproduces it.
"""

import logging
from typing import Optional

from jparser.config import settings


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to the LOG_LEVEL setting)

    Returns:
        Configured logger instance

    Usage:
        >>> from jparser.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = settings.log_level_value

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
