"""Logging utilities for pbrsa modules."""

import logging

ROOT_LOGGER_NAME = 'pbrsa'


def get_logger(name: str) -> logging.Logger:
    """Get a logger that automatically inherits from root logger.

    The logger propagates to the root logger and only gets a default
    level when the root logger has no handlers (basicConfig not called).

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logger.setLevel(logging.WARNING)

    return logger
