# trash-mcp/log_config.py
# Purpose: Logging setup; everything goes to stderr so stdout stays free for the stdio transport.
from __future__ import annotations

import logging
import os
import sys

FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(name: str | None = None) -> int:
    name = (name or os.getenv("TRASH_LOG_LEVEL", "info")).strip().upper()
    if name == "WARN":
        name = "WARNING"
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure(log_level: str | None = None) -> None:
    root = logging.getLogger()
    root.setLevel(resolve_level(log_level))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(FORMAT, datefmt=DATE_FORMAT))

    # Avoid duplicate handlers when reconfiguring.
    root.handlers.clear()
    root.addHandler(handler)
