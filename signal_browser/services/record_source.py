from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from signal_browser.config.model import RecordSourceConfig
from signal_browser.core.exceptions import ConfigError, RecordSourceError
from signal_browser.core.record import SignalRecord

logger = logging.getLogger(__name__)


class RecordSource(ABC):
    """
    Supplies a complete, static snapshot of signal records.

    Implementations either return every record or raise RecordSourceError;
    a partial snapshot is never handed to the view controller.
    """

    @abstractmethod
    def load(self) -> List[SignalRecord]:
        pass


# -------------------------------------------------------------------------
# Mock data (demo mode)
# -------------------------------------------------------------------------

CALL_SIGNS = [
    "W1ABC", "K2DEF", "VE3GHI", "JA1JKL", "G0MNO", "DL1PQR", "VK2STU", "W0VWX",
    "K5YZA", "VE7BCD", "JA7EFG", "G3HIJ", "DL9KLM", "VK4NOP", "W2QRS", "K8TUV",
    "VE9WXY", "JA3ZAB", "G8CDE", "DL4FGH", "VK7IJK", "W4LMN", "K0OPQ", "VE1RST",
]

MODES = [
    "SSB", "CW", "FM", "AM", "FT8", "FT4", "PSK31", "RTTY", "JT65", "MFSK",
    "OLIVIA", "CONTESTIA", "HELL", "THOR", "PACKET", "APRS",
]

COUNTRIES = [
    "USA", "Canada", "Japan", "United Kingdom", "Germany", "Australia", "France",
    "Italy", "Spain", "Brazil", "Argentina", "Sweden", "Norway", "Denmark", "Finland",
]

GRID_SQUARES = [
    "FN20", "DM79", "EM12", "CN87", "FN31", "DM43", "EM25", "CN98", "FN42", "DM13",
    "EM34", "CN76", "FN53", "DM25", "EM45", "CN65", "FN64", "DM37", "EM56", "CN54",
]

# Band -> (low MHz, high MHz)
BAND_RANGES: Dict[str, Tuple[float, float]] = {
    "160m": (1.8, 2.0),
    "80m": (3.5, 4.0),
    "40m": (7.0, 7.3),
    "30m": (10.1, 10.15),
    "20m": (14.0, 14.35),
    "17m": (18.068, 18.168),
    "15m": (21.0, 21.45),
    "12m": (24.89, 24.99),
    "10m": (28.0, 29.7),
    "6m": (50.0, 54.0),
    "2m": (144.0, 148.0),
    "70cm": (420.0, 450.0),
}

NOTES = [
    "Strong signal",
    "Weak copy",
    "QRM present",
    "Contest station",
    "DX expedition",
    "Clear copy",
    "Fading signal",
    "Good contact",
]


class MockRecordSource(RecordSource):
    """
    Random but plausible records: band-consistent frequencies, strength in
    [-120, 0] dB, power in [1, 1500] W, timestamps over the last `days` days.
    Pass `seed` (and `now`) for a reproducible set.
    """

    def __init__(
        self,
        count: int = 500,
        seed: Optional[int] = None,
        now: Optional[datetime] = None,
        days: int = 30,
    ):
        self.count = count
        self.seed = seed
        self.now = now
        self.days = days

    def load(self) -> List[SignalRecord]:
        rng = np.random.default_rng(self.seed)
        now = self.now or datetime.now().replace(microsecond=0)
        window_s = self.days * 24 * 60 * 60
        bands = list(BAND_RANGES)

        records: List[SignalRecord] = []
        for i in range(1, self.count + 1):
            band = bands[rng.integers(len(bands))]
            low, high = BAND_RANGES[band]
            offset_s = int(rng.integers(window_s))

            records.append(
                SignalRecord(
                    id=i,
                    call_sign=CALL_SIGNS[rng.integers(len(CALL_SIGNS))],
                    frequency_mhz=_rounded_uniform(rng, low, high),
                    mode=MODES[rng.integers(len(MODES))],
                    band=band,
                    signal_strength_db=_rounded_uniform(rng, -120.0, 0.0),
                    timestamp=now - timedelta(seconds=offset_s),
                    location=GRID_SQUARES[rng.integers(len(GRID_SQUARES))],
                    country=COUNTRIES[rng.integers(len(COUNTRIES))],
                    power_watts=_rounded_uniform(rng, 1.0, 1500.0),
                    notes=NOTES[rng.integers(len(NOTES))] if rng.random() > 0.7 else None,
                )
            )

        logger.info(
            "Mock records generated",
            extra={"n_records": len(records), "seed": self.seed},
        )
        return records


def _rounded_uniform(rng: np.random.Generator, low: float, high: float) -> float:
    return round(float(rng.uniform(low, high)), 2)


# -------------------------------------------------------------------------
# File-backed records
# -------------------------------------------------------------------------

class FileRecordSource(RecordSource):
    """
    Records from a JSON array (.json) or a CSV file with one column per field (.csv).

    Column / key names may be attribute names (call_sign) or the camelCase
    JSON names (callSign, frequency, signalStrength, power).
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> List[SignalRecord]:
        if not self.path.is_file():
            raise RecordSourceError(f"Record file not found at {self.path}")

        suffix = self.path.suffix.lower()
        try:
            if suffix == ".json":
                with self.path.open() as f:
                    rows = json.load(f)
                if not isinstance(rows, list):
                    raise RecordSourceError(f"{self.path} must contain a JSON array of records")
            elif suffix == ".csv":
                df = pd.read_csv(self.path, keep_default_na=True)
                df = df.astype(object).where(pd.notna(df), None)
                rows = df.to_dict("records")
            else:
                raise RecordSourceError(f"Unsupported record file type '{suffix}' (use .json or .csv)")

            records = [SignalRecord.from_dict(row) for row in rows]
        except RecordSourceError:
            raise
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise RecordSourceError(f"Could not read records from {self.path}: {e}") from e

        ids = [rec.id for rec in records]
        if len(set(ids)) != len(ids):
            raise RecordSourceError(f"Duplicate record ids in {self.path}")

        logger.info(
            "Records loaded from file",
            extra={"path": str(self.path), "n_records": len(records)},
        )
        return records


def build_record_source(cfg: RecordSourceConfig) -> RecordSource:
    if cfg.type == "mock":
        return MockRecordSource(count=cfg.count, seed=cfg.seed)
    if cfg.type == "file" and cfg.path is not None:
        return FileRecordSource(cfg.path)
    raise ConfigError(f"Cannot build record source from {cfg!r}")
