"""
Logging setup for simscope.

Every module logs through ``get_logger(__name__)``, which places it under
the ``simscope`` namespace. Nothing is emitted until the entry point calls
``setup_logging``; embedding hosts can instead attach their own handlers
to the ``simscope`` logger.
"""

import logging
import sys
from typing import Optional

DEFAULT_LOG_FILE = '/tmp/simscope_debug.log'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
ROOT_LOGGER = 'simscope'


def _handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def setup_logging(
    level: str = 'WARNING',
    log_file: Optional[str] = DEFAULT_LOG_FILE,
    console: bool = False
) -> logging.Logger:
    """
    Configure the ``simscope`` logger and return it.

    Args:
        level: Log level name; unknown names fall back to WARNING
        log_file: File written (truncated) at DEBUG or INFO only
        console: Also log to stderr
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    # Per-frame debug output is too chatty for a terminal; it goes to a file
    if log_file and numeric_level <= logging.INFO:
        logger.addHandler(_handler(logging.FileHandler(log_file, mode='w'), numeric_level))
    if console:
        logger.addHandler(_handler(logging.StreamHandler(sys.stderr), numeric_level))
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.debug(f"Logging configured: level={level}, log_file={log_file}, console={console}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, always below the ``simscope`` namespace."""
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{ROOT_LOGGER}.{name}')
