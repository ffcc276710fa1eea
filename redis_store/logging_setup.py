"""
redis-store — Logging Setup

Configures standard-library logging for applications embedding the store.
"""

import logging

from .config import LogLevel, get_config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: LogLevel | str | None = None) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name; defaults to the configured LOG_LEVEL
    """
    if level is None:
        level = get_config().log_level
    if isinstance(level, LogLevel):
        level = level.value

    # basicConfig is a no-op when handlers already exist; the level still applies
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(str(level).upper())
    logging.getLogger(__name__).debug("Logging configured at %s", level)
