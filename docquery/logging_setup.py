"""Loguru sink configuration shared by the HTTP app, MCP server and scripts."""

from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level:<7} | {name}:{line} - {message}"


def configure_logging(level: str = "INFO") -> None:
    """Send all log records to stderr.

    stdout stays reserved for program output (JSON-RPC frames in stdio mode).
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT, backtrace=False)
