from __future__ import annotations

from dataclasses import dataclass, asdict, fields
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

# Categorical fields that can back a filter dropdown
CATEGORICAL_FIELDS = ("mode", "band", "country", "call_sign", "location")
NUMERIC_FIELDS = ("id", "frequency_mhz", "signal_strength_db", "power_watts")
TEXT_FIELDS = ("call_sign", "mode", "band", "country", "location", "notes")

# Wire names used by the JSON record shape (camelCase) -> attribute names
_WIRE_ALIASES = {
    "callSign": "call_sign",
    "frequency": "frequency_mhz",
    "frequencyMHz": "frequency_mhz",
    "signalStrength": "signal_strength_db",
    "signalStrengthDb": "signal_strength_db",
    "power": "power_watts",
    "powerWatts": "power_watts",
}


@dataclass(frozen=True)
class SignalRecord:
    """
    One observed signal reception event.

    Fields:

    - id: unique identifier, never reused
    - call_sign: operator identifier (e.g. "W1ABC")
    - frequency_mhz: frequency in MHz (e.g. 14.205)
    - mode: operating mode (e.g. "SSB", "CW", "FT8")
    - band: amateur band (e.g. "20m", "70cm")
    - signal_strength_db: received strength in dB, typically -120..0
    - timestamp: when the signal was received
    - location: grid square / location label
    - country: country of origin
    - power_watts: transmit power in watts
    - notes: optional free text
    """

    id: int
    call_sign: str
    frequency_mhz: float
    mode: str
    band: str
    signal_strength_db: float
    timestamp: datetime
    location: str
    country: str
    power_watts: float
    notes: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SignalRecord:
        """
        Build a record from a plain dict.

        Accepts both attribute names and the camelCase names of the JSON
        record shape; timestamps may be datetimes or ISO-8601 strings.
        """
        raw = {_WIRE_ALIASES.get(k, k): v for k, v in data.items()}

        timestamp = raw.get("timestamp")
        if isinstance(timestamp, str):
            timestamp = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
        elif isinstance(timestamp, pd.Timestamp):
            timestamp = timestamp.to_pydatetime()

        notes = raw.get("notes")
        if not isinstance(notes, str) or not notes.strip():
            # CSV round trips turn missing notes into NaN / ""
            notes = None

        return cls(
            id=int(raw["id"]),
            call_sign=str(raw["call_sign"]),
            frequency_mhz=float(raw["frequency_mhz"]),
            mode=str(raw["mode"]),
            band=str(raw["band"]),
            signal_strength_db=float(raw["signal_strength_db"]),
            timestamp=timestamp,
            location=str(raw["location"]),
            country=str(raw["country"]),
            power_watts=float(raw["power_watts"]),
            notes=notes,
        )


RECORD_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(SignalRecord))


def records_to_frame(records: Sequence[SignalRecord]) -> pd.DataFrame:
    """
    Column-oriented view of a record sequence.

    Row order (and the RangeIndex) matches the input order, so positional
    masks computed on the frame map straight back onto `records`.
    """
    columns: Dict[str, List[Any]] = {name: [] for name in RECORD_FIELDS}
    for rec in records:
        for name in RECORD_FIELDS:
            columns[name].append(getattr(rec, name))
    return pd.DataFrame(columns, columns=list(RECORD_FIELDS))
