"""Configuration helpers for the catalog.

Settings come from the environment and are read at call time, so tests
can change them with ``monkeypatch.setenv`` without reloading modules.
"""

from __future__ import annotations

import os
from pathlib import Path

# When installed in editable mode the project root is the repo root.
ROOT = Path(__file__).resolve().parents[2]

DATA_DIR_ENV = "CATALOG_DATA_DIR"
LOG_LEVEL_ENV = "CATALOG_LOG_LEVEL"
HTTP_HOST_ENV = "CATALOG_HTTP_HOST"
HTTP_PORT_ENV = "CATALOG_HTTP_PORT"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_HTTP_HOST = "127.0.0.1"
DEFAULT_HTTP_PORT = 8000


class ConfigError(Exception):
    """Raised when an environment setting has an unusable value."""


def _env(name: str, default: str) -> str:
    value = os.environ.get(name)
    return value if value else default


def get_data_dir() -> Path:
    """Directory holding ``products.json``; defaults to ``<root>/data``."""
    return Path(_env(DATA_DIR_ENV, str(ROOT / "data")))


def get_log_level() -> str:
    return _env(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()


def get_http_host() -> str:
    return _env(HTTP_HOST_ENV, DEFAULT_HTTP_HOST)


def get_http_port() -> int:
    raw = _env(HTTP_PORT_ENV, str(DEFAULT_HTTP_PORT))
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(
            f"Invalid {HTTP_PORT_ENV} value {raw!r}; must be an integer."
        ) from None
