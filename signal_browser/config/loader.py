from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from signal_browser.config.model import (
    VIEW_TABLE,
    VIEW_THUMBNAILS,
    GlobalConfig,
    RecordSourceConfig,
)
from signal_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a config directory.

    Expected structure:

        root/
            global.json

    Recognised keys (all optional):

    - ui_title / subtitle: navbar text
    - default_page_size: initial rows per page, must be one of page_size_options
    - page_size_options: page sizes offered by the pager
    - default_view: "table" or "thumbnails"
    - max_sessions: number of browser sessions kept in memory
    - record_source: {"type": "mock", "count": 500, "seed": 1} or {"type": "file", "path": "..."}

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if a value is malformed.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open() as f:
        try:
            raw: Dict[str, Any] = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    defaults = GlobalConfig()

    page_size_options = [int(v) for v in raw.get("page_size_options", defaults.page_size_options)]
    if not page_size_options or any(v <= 0 for v in page_size_options):
        raise ConfigError(f"page_size_options must be positive integers, got {page_size_options}")

    default_page_size = int(raw.get("default_page_size", page_size_options[0]))
    if default_page_size not in page_size_options:
        raise ConfigError(
            f"default_page_size {default_page_size} is not one of {page_size_options}"
        )

    default_view = raw.get("default_view", VIEW_TABLE)
    if default_view not in (VIEW_TABLE, VIEW_THUMBNAILS):
        raise ConfigError(f"default_view must be '{VIEW_TABLE}' or '{VIEW_THUMBNAILS}'")

    max_sessions = int(raw.get("max_sessions", defaults.max_sessions))
    if max_sessions <= 0:
        raise ConfigError(f"max_sessions must be positive, got {max_sessions}")

    config = GlobalConfig(
        ui_title=raw.get("ui_title", defaults.ui_title),
        subtitle=raw.get("subtitle", defaults.subtitle),
        default_page_size=default_page_size,
        page_size_options=page_size_options,
        default_view=default_view,
        max_sessions=max_sessions,
        record_source=RecordSourceConfig.from_raw(raw.get("record_source"), root),
    )

    logger.info(
        "Global config loaded",
        extra={
            "config_root": str(root),
            "record_source": config.record_source.type,
            "default_page_size": config.default_page_size,
        },
    )
    return config
