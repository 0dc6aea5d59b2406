"""Logging setup for the command line entry point."""

import logging

from src.config import LoggingConfig


def setup_logging(config: LoggingConfig) -> None:
    """Configure root logging from the logging section of the config.

    Unknown level names fall back to INFO.

    Args:
        config: LoggingConfig with the level name and format string.
    """
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=config.format)
