from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from signal_browser.core.columns import ColumnConfig
from signal_browser.core.exceptions import InvalidArgumentError, InvalidTimeFormatError
from signal_browser.core.filter_state import DateTimeRange, FilterSpec, NumericRange
from signal_browser.core.record import SignalRecord
from signal_browser.core.sort_engine import SORT_ASC, SortSpec, no_sort
from signal_browser.core.time_of_day import format_time_input, normalize_time_of_day
from signal_browser.core.view_controller import FilterOptions
from signal_browser.ui.formatting import (
    format_frequency,
    format_notes,
    format_power,
    format_signal_strength,
    format_timestamp,
)

logger = logging.getLogger(__name__)

_FORMATTERS = {
    "frequency_mhz": format_frequency,
    "signal_strength_db": format_signal_strength,
    "power_watts": format_power,
    "timestamp": format_timestamp,
    "notes": format_notes,
}


def dropdown_options(values: Sequence[str]) -> List[dict]:
    return [{"label": v, "value": v} for v in values]


def get_filter_dropdown_options(
    options: FilterOptions,
) -> tuple[List[dict], List[dict], List[dict], List[dict]]:
    return (
        dropdown_options(options.modes),
        dropdown_options(options.bands),
        dropdown_options(options.countries),
        dropdown_options(options.call_signs),
    )


def filter_spec_from_inputs(
    *,
    modes: Optional[Sequence[str]] = None,
    bands: Optional[Sequence[str]] = None,
    countries: Optional[Sequence[str]] = None,
    call_signs: Optional[Sequence[str]] = None,
    start_date: Optional[str] = None,
    start_time: Optional[str] = None,
    end_date: Optional[str] = None,
    end_time: Optional[str] = None,
    frequency_min: Optional[float] = None,
    frequency_max: Optional[float] = None,
    strength_min: Optional[float] = None,
    strength_max: Optional[float] = None,
) -> FilterSpec:
    """
    Build a FilterSpec from raw sidebar values (None / [] / "" = unset).

    Time strings are normalised to HH:MM:SS; anything unparseable is dropped
    so the bound falls back to its default time.
    """
    date_time = DateTimeRange.from_dict(
        {
            "start_date": start_date,
            "start_time": _clean_time(start_time),
            "end_date": end_date,
            "end_time": _clean_time(end_time),
        }
    )
    return FilterSpec(
        modes=tuple(modes or ()),
        bands=tuple(bands or ()),
        countries=tuple(countries or ()),
        call_signs=tuple(call_signs or ()),
        frequency_range=NumericRange.from_dict({"min": frequency_min, "max": frequency_max}),
        signal_strength_range=NumericRange.from_dict({"min": strength_min, "max": strength_max}),
        date_time=date_time,
    )


def _clean_time(raw: Optional[str]) -> str:
    if not raw:
        return ""
    try:
        return normalize_time_input(raw)
    except InvalidTimeFormatError:
        logger.info("Ignoring invalid time filter", extra={"raw": raw})
        return ""


def normalize_time_input(raw: str) -> str:
    """
    Normalise a typed time to HH:MM:SS, accepting bare digits ("1430") by
    running them through the as-you-type colon mask first.

    :raises InvalidTimeFormatError: if neither form is a valid time of day
    """
    if ":" not in raw:
        raw = format_time_input(raw)
    return normalize_time_of_day(raw)


def sort_spec_from_sort_by(sort_by: Optional[List[Dict[str, Any]]]) -> SortSpec:
    """
    Translate DataTable `sort_by` ([{"column_id": ..., "direction": "asc"|"desc"}])
    into a SortSpec. Only the first entry is used (single-column sort).
    """
    if not sort_by:
        return no_sort()
    first = sort_by[0]
    try:
        return SortSpec(column=first.get("column_id"), direction=first.get("direction", SORT_ASC))
    except InvalidArgumentError:
        logger.warning("Ignoring invalid sort request", extra={"sort_by": sort_by})
        return no_sort()


def table_columns(columns: Sequence[ColumnConfig]) -> List[dict]:
    return [
        {"name": f"{c.label} ({c.unit})" if c.unit else c.label, "id": c.key}
        for c in columns
        if c.visible
    ]


def record_to_row(record: SignalRecord) -> Dict[str, Any]:
    """Display row for the DataTable; values pre-formatted, `id` kept raw for row ids."""
    row = record.to_dict()
    for key, fmt in _FORMATTERS.items():
        row[key] = fmt(getattr(record, key))
    return row


def active_filter_summary(spec: FilterSpec) -> List[str]:
    """Short human-readable chips for every active clause."""
    chips: List[str] = []
    for label, values in (
        ("Mode", spec.modes),
        ("Band", spec.bands),
        ("Country", spec.countries),
        ("Call sign", spec.call_signs),
    ):
        if values:
            chips.append(f"{label}: {', '.join(values)}")

    for label, rng, unit in (
        ("Frequency", spec.frequency_range, "MHz"),
        ("Strength", spec.signal_strength_range, "dB"),
    ):
        if not rng.is_unbounded():
            low = "-∞" if rng.min is None else f"{rng.min:g}"
            high = "∞" if rng.max is None else f"{rng.max:g}"
            chips.append(f"{label}: {low} to {high} {unit}")

    start = spec.date_time.start_instant()
    end = spec.date_time.end_instant()
    if start is not None:
        chips.append(f"From {format_timestamp(start)}")
    if end is not None:
        chips.append(f"Until {format_timestamp(end)}")
    return chips
