from __future__ import annotations

from datetime import datetime
from typing import Optional


def format_frequency(frequency_mhz: float) -> str:
    return f"{frequency_mhz:.3f} MHz"


def format_signal_strength(strength_db: float) -> str:
    return f"{strength_db:.1f} dB"


def format_power(power_watts: float) -> str:
    return f"{power_watts:g} W"


def format_timestamp(timestamp: datetime) -> str:
    return timestamp.strftime("%Y-%m-%d %H:%M:%S")


def format_notes(notes: Optional[str]) -> str:
    return notes or ""


def strength_percent(strength_db: float, floor_db: float = -120.0) -> float:
    """Map a dB reading onto 0..100 for progress bars (floor_db -> 0, 0 dB -> 100)."""
    pct = (strength_db - floor_db) / -floor_db * 100.0
    return max(0.0, min(100.0, pct))
