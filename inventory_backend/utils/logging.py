"""
Logging utilities for the inventory backend.

SECURITY RULES:
- NEVER log raw PINs or passwords
- NEVER log pin_hash values
- NEVER log Supabase keys

Acceptable logging: table names, row ids, task ids, counts and
sanitized backend error messages.
"""

import logging
from typing import Optional, Union

from inventory_backend.config import settings


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to settings.LOG_LEVEL)

    Returns:
        Configured logger instance

    Usage:
        >>> from inventory_backend.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Items fetched")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = settings.LOG_LEVEL.upper()

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
