"""Logging configuration helpers."""

import logging
import sys


LOGGER_NAMES = ("mcp_brewcraft", "brewcraft_common")


def configure_logging(level: str | int = logging.INFO) -> None:
    """
    Configure package logging with a single stderr stream handler.

    Stdout carries the MCP stdio transport, so nothing may log there.
    Calling this again only updates the level.
    """
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if logger.handlers:
            continue
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
