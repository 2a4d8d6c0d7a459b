"""Console logging for the courtstats CLI."""

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = '%(levelname)s: %(message)s'
DEBUG_FORMAT = '%(asctime)s %(name)s %(levelname)s: %(message)s'


def setup_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attach one console handler to the ``courtstats`` logger.

    Any handler from an earlier call is replaced. At DEBUG level records
    carry a timestamp and the module logger name.

    Args:
        level: Logging level (default: INFO)
        stream: Output stream (default: stderr, keeping stdout for reports)

    Returns:
        The configured ``courtstats`` logger
    """
    logger = logging.getLogger('courtstats')
    logger.setLevel(level)
    logger.handlers = []

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    fmt = DEBUG_FORMAT if level <= logging.DEBUG else LOG_FORMAT
    handler.setFormatter(logging.Formatter(fmt, datefmt='%H:%M:%S'))
    logger.addHandler(handler)

    return logger
