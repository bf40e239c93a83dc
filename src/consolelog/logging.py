"""Centralized logging configuration using loguru."""

import sys

from loguru import logger

from consolelog.config import settings

# Diagnostics only; rendered records never go through this logger.
# colorize=True forces ANSI colors even without TTY
logger.remove()
logger.add(sys.stderr, level=settings.log_level.upper(), colorize=True)

__all__ = ["logger"]
