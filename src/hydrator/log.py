"""Logging setup.

Modules log through loguru's shared ``logger``; this only decides where the
records go.
"""

from __future__ import annotations

import sys

from loguru import logger

from hydrator.config import get_settings


def configure_logging(level: str | None = None) -> None:
    """Replace loguru's default sink with a single stderr sink.

    Args:
        level: Minimum level to emit. Defaults to the configured log_level.
    """
    logger.remove()
    logger.add(sys.stderr, level=level or get_settings().log_level)
