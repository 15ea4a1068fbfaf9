from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from signal_browser.core.exceptions import ConfigError

VIEW_TABLE = "table"
VIEW_THUMBNAILS = "thumbnails"


@dataclass(frozen=True)
class RecordSourceConfig:
    """
    Where the record snapshot comes from.

    - type: "mock" (generated demo data) or "file" (JSON array / CSV)
    - count / seed: mock generator settings
    - path: file location, resolved against the config root when relative
    """
    type: str = "mock"
    count: int = 500
    seed: Optional[int] = None
    path: Optional[Path] = None

    @classmethod
    def from_raw(cls, raw: Optional[Dict[str, Any]], root: Path) -> RecordSourceConfig:
        raw = raw or {}
        source_type = raw.get("type", "mock")

        if source_type == "mock":
            count = int(raw.get("count", 500))
            if count < 0:
                raise ConfigError(f"record_source.count must be >= 0, got {count}")
            seed = raw.get("seed")
            return cls(type="mock", count=count, seed=int(seed) if seed is not None else None)

        if source_type == "file":
            path_raw = raw.get("path")
            if not path_raw:
                raise ConfigError("record_source.path is required for type 'file'")
            path = Path(path_raw)
            if not path.is_absolute():
                path = (root / path).resolve()
            return cls(type="file", path=path)

        raise ConfigError(f"Unknown record_source.type '{source_type}'")


@dataclass
class GlobalConfig:
    ui_title: str = "Amateur Radio Signal Monitor"
    subtitle: str = "Signal reception browser"
    default_page_size: int = 10
    page_size_options: List[int] = field(default_factory=lambda: [10, 25, 50, 100])
    default_view: str = VIEW_TABLE
    max_sessions: int = 64
    record_source: RecordSourceConfig = field(default_factory=RecordSourceConfig)
