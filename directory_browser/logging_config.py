from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

FORMAT_ENV = "DIRECTORY_BROWSER_LOG_FORMAT"
LEVEL_ENV = "DIRECTORY_BROWSER_LOG_LEVEL"

JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"
PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _format_mode(force_format: Optional[str]) -> str:
    if force_format is not None:
        return force_format.lower()
    return os.getenv(FORMAT_ENV, "json").lower()


def _level(default: int) -> int:
    name = os.getenv(LEVEL_ENV)
    if not name:
        return default
    level = logging.getLevelName(name.upper())
    # getLevelName hands back "Level X" for names it doesn't know
    return level if isinstance(level, int) else default


def build_formatter(format_mode: str) -> logging.Formatter:
    if format_mode == "plain":
        return logging.Formatter(PLAIN_FORMAT)
    # records carry their context in `extra=`, which JsonFormatter emits as keys
    return JsonFormatter(JSON_FIELDS)


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
) -> None:
    """
    Install one root handler for the directory browser.

    Format: `force_format` ("json" or "plain") wins, then the
    DIRECTORY_BROWSER_LOG_FORMAT env var, then JSON.
    Level: DIRECTORY_BROWSER_LOG_LEVEL (e.g. "DEBUG" to watch coordinator
    transitions) overrides `level`.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(_format_mode(force_format)))

    root = logging.getLogger()
    root.setLevel(_level(level))
    # Replace any existing handlers to avoid duplicate logs
    root.handlers.clear()
    root.addHandler(handler)
