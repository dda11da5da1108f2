"""
Logging setup for linopt.

The library modules never log; they raise. Logging is configured by the
process entry point through configure_logging(), which installs one
stream handler on the 'linopt' logger and leaves the root logger alone.
"""

from __future__ import annotations

import logging

from linopt.core.config import DEFAULT_LOG_FORMAT, parse_log_level

ROOT_LOGGER_NAME = 'linopt'


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger in the linopt hierarchy ('linopt' or 'linopt.<name>')."""
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    force: bool = False,
) -> logging.Logger:
    """
    Configure the linopt logger and return it.

    Args:
        level: Numeric level or level name; defaults to INFO
        fmt: Format string; defaults to DEFAULT_LOG_FORMAT
        force: Replace an existing handler instead of keeping it

    Returns:
        The 'linopt' logger

    Raises:
        ValidationError: If level is an unknown level name
    """
    if level is None:
        level = logging.INFO
    elif isinstance(level, str):
        level = parse_log_level(level)

    logger = get_logger()
    logger.setLevel(level)

    if logger.handlers and not force:
        return logger

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
