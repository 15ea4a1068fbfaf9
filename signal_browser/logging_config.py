from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "SIGNAL_BROWSER_LOG_FORMAT"
LOG_LEVEL_ENV = "SIGNAL_BROWSER_LOG_LEVEL"

FORMAT_JSON = "json"
FORMAT_PLAIN = "plain"


def resolve_log_level(default: Union[int, str] = logging.INFO) -> int:
    """
    Level from SIGNAL_BROWSER_LOG_LEVEL ("DEBUG", "warning", "10", ...),
    else `default`. Unknown names fall back to `default`.
    """
    raw = os.getenv(LOG_LEVEL_ENV, "").strip()
    if not raw:
        return _as_level(default)
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else _as_level(default)


def _as_level(value: Union[int, str]) -> int:
    if isinstance(value, int):
        return value
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else logging.INFO


def build_formatter(format_mode: str) -> logging.Formatter:
    if format_mode == FORMAT_PLAIN:
        return logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    # Structured `extra=` fields from the engines become JSON keys
    return jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")


def configure_logging(
        level: Optional[Union[int, str]] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure the root logger for the signal browser.

    Format: `force_format` ("json" / "plain"), else SIGNAL_BROWSER_LOG_FORMAT,
    else JSON.
    Level: `level` when given, else SIGNAL_BROWSER_LOG_LEVEL, else INFO.
    """
    format_mode = (force_format or os.getenv(LOG_FORMAT_ENV, FORMAT_JSON)).lower()
    resolved = _as_level(level) if level is not None else resolve_log_level()

    root = logging.getLogger()
    root.setLevel(resolved)

    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(format_mode))

    # One StreamHandler on the root; drop whatever was installed before
    root.handlers.clear()
    root.addHandler(handler)
