"""
Logger factory bound to the application settings.
"""

import logging

from library_facade.config import settings
from library_facade.utils.logging_utils import setup_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger configured from the current settings

    Args:
        name: Logger name, usually ``__name__`` of the calling module

    Returns:
        Configured logger
    """
    return setup_logger(
        name,
        level=settings.effective_log_level,
        log_format=settings.logging.format,
        console_enabled=settings.logging.console_enabled,
        log_dir=settings.logging.log_dir if settings.logging.file_enabled else None,
    )
