"""Logging setup shared by the MCP and HTTP entrypoints."""
from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_THIRD_PARTY_LOGGERS = ("httpx", "httpcore", "mcp", "uvicorn", "uvicorn.error", "uvicorn.access")


def configure_logging(level: str) -> None:
    # stdout carries the MCP stdio transport, so records must go to stderr.
    # ``force=True`` replaces handlers installed by uvicorn or the SDK.
    log_level = logging.getLevelName(level.upper())
    logging.basicConfig(level=log_level, format=LOG_FORMAT, stream=sys.stderr, force=True)
    for name in _THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(log_level)
    logging.getLogger(__name__).info("Logging configured at %s", level.upper())
