from __future__ import annotations

import re
from datetime import time
from typing import Optional

from .exceptions import InvalidTimeFormatError

# 24-hour H[H]:MM[:SS]
TIME_OF_DAY_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9](:[0-5][0-9])?$")

START_OF_DAY = time(0, 0, 0)
END_OF_DAY = time(23, 59, 59, 999999)


def is_valid_time_of_day(raw: Optional[str]) -> bool:
    if not raw:
        return False
    return TIME_OF_DAY_PATTERN.match(raw.strip()) is not None


def normalize_time_of_day(raw: str) -> str:
    """
    Normalise a user-entered time of day to zero-padded HH:MM:SS.

    "7:05" -> "07:05:00", "23:59:59" -> "23:59:59".

    :raises InvalidTimeFormatError: if the string is empty or does not match H[H]:MM[:SS]
    """
    value = (raw or "").strip()
    if not TIME_OF_DAY_PATTERN.match(value):
        raise InvalidTimeFormatError(raw)

    parts = value.split(":")
    hours = parts[0].zfill(2)
    minutes = parts[1].zfill(2)
    seconds = parts[2].zfill(2) if len(parts) > 2 else "00"
    return f"{hours}:{minutes}:{seconds}"


def parse_time_of_day(raw: Optional[str], default: time = START_OF_DAY) -> time:
    """
    Parse a time-of-day string into a `datetime.time`.

    Empty or invalid strings fall back to `default` rather than raising.
    """
    if not is_valid_time_of_day(raw):
        return default
    hours, minutes, seconds = (int(p) for p in normalize_time_of_day(raw).split(":"))
    return time(hours, minutes, seconds)


def format_time_input(raw: Optional[str]) -> str:
    """
    As-you-type mask for time inputs: keep digits only and insert colons
    after the hour and minute digits, e.g. "1430" -> "14:30", "143015" -> "14:30:15".
    """
    value = re.sub(r"[^\d]", "", raw or "")
    if len(value) >= 2:
        value = value[:2] + ":" + value[2:]
    if len(value) >= 6:
        value = value[:5] + ":" + value[5:7]
    return value[:8]
