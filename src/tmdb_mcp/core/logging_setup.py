"""Process-wide logging configuration.

stdout carries the MCP stdio protocol, so every log record goes to stderr
through a Rich handler.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_CONFIGURED = False


def configure_logging(level: str | int = "INFO") -> None:
    """Install the stderr handler on the root logger (idempotent)."""

    global _CONFIGURED

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    if _CONFIGURED:
        logging.getLogger().setLevel(level)
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(level)
    # httpx logs every request at INFO, including the api_key query string.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    _CONFIGURED = True
