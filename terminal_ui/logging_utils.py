"""Logging setup for the terminal driver."""

import logging

from config import config

DATE_FORMAT = "%H:%M:%S"


def setup_logging(
    level: str = config.logging.level,
    fmt: str = config.logging.format,
) -> None:
    """Call once at program start. The engine only ever creates loggers."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=fmt,
        datefmt=DATE_FORMAT,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
