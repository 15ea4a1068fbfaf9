from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

from .exceptions import InvalidArgumentError

Columns = Tuple["ColumnConfig", ...]

DEFAULT_VISIBLE_KEYS = (
    "id",
    "call_sign",
    "frequency_mhz",
    "mode",
    "band",
    "signal_strength_db",
    "timestamp",
)


@dataclass(frozen=True)
class ColumnConfig:
    """
    One renderable column of the signal table.

    :param key: SignalRecord attribute rendered in this column
    :param label: header text
    :param visible: whether the column is currently shown
    :param type: "string", "number" or "date"
    :param unit: optional unit suffix ("MHz", "dB", "W")
    """
    key: str
    label: str
    visible: bool = True
    type: str = "string"
    unit: Optional[str] = None


def default_columns() -> Columns:
    columns = (
        ColumnConfig("id", "ID", type="number"),
        ColumnConfig("call_sign", "Call Sign"),
        ColumnConfig("frequency_mhz", "Frequency", type="number", unit="MHz"),
        ColumnConfig("mode", "Mode"),
        ColumnConfig("band", "Band"),
        ColumnConfig("signal_strength_db", "Signal Strength", type="number", unit="dB"),
        ColumnConfig("timestamp", "Timestamp", type="date"),
        ColumnConfig("location", "Location"),
        ColumnConfig("country", "Country"),
        ColumnConfig("power_watts", "Power", type="number", unit="W"),
        ColumnConfig("notes", "Notes"),
    )
    return reset_to_default(columns)


def toggle_column(columns: Sequence[ColumnConfig], key: str) -> Columns:
    if not any(c.key == key for c in columns):
        raise InvalidArgumentError(f"Unknown column '{key}'")
    return tuple(replace(c, visible=not c.visible) if c.key == key else c for c in columns)


def set_visible_keys(columns: Sequence[ColumnConfig], keys: Sequence[str]) -> Columns:
    """Show exactly `keys`, hide everything else (checklist-style update)."""
    wanted = set(keys)
    return tuple(replace(c, visible=c.key in wanted) for c in columns)


def select_all(columns: Sequence[ColumnConfig]) -> Columns:
    return tuple(replace(c, visible=True) for c in columns)


def select_none(columns: Sequence[ColumnConfig]) -> Columns:
    return tuple(replace(c, visible=False) for c in columns)


def reset_to_default(columns: Sequence[ColumnConfig]) -> Columns:
    return set_visible_keys(columns, DEFAULT_VISIBLE_KEYS)


def visible_columns(columns: Sequence[ColumnConfig]) -> List[ColumnConfig]:
    return [c for c in columns if c.visible]
