"""
Process entry point.

Configures log verbosity and exits; there is no runtime loop. The
command-line level overrides LINOPT_LOG_LEVEL from the environment.

Usage:
    python -m linopt
    python -m linopt --log-level debug
    linopt --version
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from linopt import __version__
from linopt.core.config import LOG_LEVELS, RuntimeConfig
from linopt.core.exceptions import ValidationError
from linopt.core.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='linopt',
        description='Dense matrix toolkit.',
    )
    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help='minimum severity to emit (default: $LINOPT_LOG_LEVEL or INFO)',
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}',
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the entry point and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = RuntimeConfig.from_env(log_level=args.log_level)
    except ValidationError as e:
        parser.error(str(e))

    level = config.log_level
    log = configure_logging(level, fmt=config.log_format, force=True)
    log.debug("log level set to %s", logging.getLevelName(level))
    log.info("linopt %s", __version__)
    return 0
