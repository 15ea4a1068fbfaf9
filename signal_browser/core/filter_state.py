from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Iterable, Optional, Tuple

from .time_of_day import END_OF_DAY, START_OF_DAY, parse_time_of_day


@dataclass(frozen=True)
class NumericRange:
    """
    Inclusive [min, max] range; either bound may be None (unset).

    min > max is allowed and simply matches nothing.
    """
    min: Optional[float] = None
    max: Optional[float] = None

    def is_unbounded(self) -> bool:
        return self.min is None and self.max is None

    def to_dict(self) -> Dict[str, Any]:
        return {"min": self.min, "max": self.max}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> NumericRange:
        data = data or {}
        return cls(min=_optional_float(data.get("min")), max=_optional_float(data.get("max")))


@dataclass(frozen=True)
class DateTimeRange:
    """
    Optional start / end instants, each built from a calendar date and a
    time-of-day string.

    A side is only active when its date is set. The start time defaults to
    00:00:00; the end time defaults to the end of that day, so a date-only
    end bound includes every record from that date.
    """
    start_date: Optional[date] = None
    start_time: str = ""
    end_date: Optional[date] = None
    end_time: str = ""

    def start_instant(self) -> Optional[datetime]:
        if self.start_date is None:
            return None
        return datetime.combine(self.start_date, parse_time_of_day(self.start_time, START_OF_DAY))

    def end_instant(self) -> Optional[datetime]:
        if self.end_date is None:
            return None
        return datetime.combine(self.end_date, parse_time_of_day(self.end_time, END_OF_DAY))

    def is_unbounded(self) -> bool:
        return self.start_date is None and self.end_date is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "start_time": self.start_time,
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "end_time": self.end_time,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> DateTimeRange:
        data = data or {}
        return cls(
            start_date=_optional_date(data.get("start_date")),
            start_time=data.get("start_time") or "",
            end_date=_optional_date(data.get("end_date")),
            end_time=data.get("end_time") or "",
        )


@dataclass(frozen=True)
class FilterSpec:
    """
    Conjunctive (AND) composition of independent, individually optional clauses.

    Fields:

    - modes / bands / countries / call_signs: accepted values; empty = no constraint
    - frequency_range: inclusive MHz range
    - signal_strength_range: inclusive dB range
    - date_time: timestamp range
    """

    modes: Tuple[str, ...] = ()
    bands: Tuple[str, ...] = ()
    countries: Tuple[str, ...] = ()
    call_signs: Tuple[str, ...] = ()

    frequency_range: NumericRange = field(default_factory=NumericRange)
    signal_strength_range: NumericRange = field(default_factory=NumericRange)
    date_time: DateTimeRange = field(default_factory=DateTimeRange)

    def __post_init__(self) -> None:
        # Lists from callers are frozen into tuples; FilterSpec must stay hashable
        for name in ("modes", "bands", "countries", "call_signs"):
            object.__setattr__(self, name, tuple(getattr(self, name) or ()))

    def is_empty(self) -> bool:
        return (
            not (self.modes or self.bands or self.countries or self.call_signs)
            and self.frequency_range.is_unbounded()
            and self.signal_strength_range.is_unbounded()
            and self.date_time.is_unbounded()
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "modes": list(self.modes),
            "bands": list(self.bands),
            "countries": list(self.countries),
            "call_signs": list(self.call_signs),
            "frequency_range": self.frequency_range.to_dict(),
            "signal_strength_range": self.signal_strength_range.to_dict(),
            "date_time": self.date_time.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FilterSpec:
        return cls(
            modes=_str_tuple(data.get("modes")),
            bands=_str_tuple(data.get("bands")),
            countries=_str_tuple(data.get("countries")),
            call_signs=_str_tuple(data.get("call_signs")),
            frequency_range=NumericRange.from_dict(data.get("frequency_range")),
            signal_strength_range=NumericRange.from_dict(data.get("signal_strength_range")),
            date_time=DateTimeRange.from_dict(data.get("date_time")),
        )


def empty_filter_spec() -> FilterSpec:
    """Neutral filter: every clause unconstrained, every record passes."""
    return FilterSpec()


# -------------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------------

def _str_tuple(values: Optional[Iterable[Any]]) -> Tuple[str, ...]:
    if not values:
        return ()
    return tuple(str(v) for v in values)


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


def _optional_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # Dash date pickers send "YYYY-MM-DD" (sometimes with a time suffix)
    return date.fromisoformat(str(value)[:10])
