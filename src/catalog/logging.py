"""Console logging setup for the catalog CLI and HTTP server.

Records go to stderr through a Rich handler. Only the root logger is
configured; modules log through ``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "catalog"


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other libraries (uvicorn, httpx, ...) with their name."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "uvicorn.error" -> "[uvicorn]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def parse_level(value: str | int) -> int:
    """Map 'debug', 'INFO', 20, ... to a logging level constant.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    if isinstance(value, int):
        return value
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value!r}")
    return level


def config_console_handler(level: int = logging.INFO, color: bool = True) -> RichHandler:
    console = Console(color_system="auto" if color else None, stderr=True)
    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=level <= logging.DEBUG,
    )
    handler.setFormatter(logging.Formatter(fmt="%(prefix)s %(message)s"))
    handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def configure_logging(level: str | int = logging.INFO, color: bool = True) -> logging.Logger:
    """Attach a console handler to the root logger and return the project logger.

    Calling this again replaces the previously installed console handler
    instead of stacking a second one.
    """
    numeric = parse_level(level)
    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    root.addHandler(config_console_handler(numeric, color=color))
    root.setLevel(numeric)
    return logging.getLogger(PROJECT_PREFIX)
