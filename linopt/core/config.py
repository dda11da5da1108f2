"""
Runtime configuration for linopt.

Configuration is read from environment variables once, at process
startup, into an immutable RuntimeConfig. Library code never consults the
environment directly; only the entry point does.

Environment variables:
    LINOPT_LOG_LEVEL    Minimum severity to emit (default: INFO)
    LINOPT_LOG_FORMAT   logging format string
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from linopt.core.exceptions import ValidationError

LOG_LEVEL_ENV = 'LINOPT_LOG_LEVEL'
LOG_FORMAT_ENV = 'LINOPT_LOG_FORMAT'

DEFAULT_LOG_LEVEL = 'INFO'
DEFAULT_LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def parse_log_level(value: str) -> int:
    """
    Map a level name ('debug', 'INFO', ...) to a logging constant.

    Raises:
        ValidationError: If the name is not one of LOG_LEVELS
    """
    name = value.strip().upper()
    if name not in LOG_LEVELS:
        raise ValidationError(
            f"unknown log level {value!r}, expected one of {', '.join(LOG_LEVELS)}"
        )
    return getattr(logging, name)


@dataclass(frozen=True)
class RuntimeConfig:
    """
    Process-wide settings.

    Attributes:
        log_level: Numeric logging level
        log_format: Format string handed to logging
    """
    log_level: int = logging.INFO
    log_format: str = DEFAULT_LOG_FORMAT

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        log_level: str | None = None,
    ) -> RuntimeConfig:
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (for tests)
            log_level: Level name that takes precedence over
                LINOPT_LOG_LEVEL; the environment value is then not parsed

        Raises:
            ValidationError: If the level in use names an unknown level
        """
        env = os.environ if environ is None else environ
        if log_level is None:
            log_level = env.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL
        level = parse_log_level(log_level)
        fmt = env.get(LOG_FORMAT_ENV) or DEFAULT_LOG_FORMAT
        return cls(log_level=level, log_format=fmt)
