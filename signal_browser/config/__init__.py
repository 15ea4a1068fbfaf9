"""
Config package for signal_browser.

Responsible for:
- config models (GlobalConfig, RecordSourceConfig)
- config I/O helpers (load_global_config)
"""

from .model import GlobalConfig, RecordSourceConfig
from .loader import load_global_config

__all__ = ["GlobalConfig", "RecordSourceConfig", "load_global_config"]
