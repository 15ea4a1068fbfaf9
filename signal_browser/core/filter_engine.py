from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd
from pandas.api.types import is_datetime64_any_dtype

from .filter_state import DateTimeRange, FilterSpec, NumericRange, empty_filter_spec
from .record import SignalRecord, records_to_frame

logger = logging.getLogger(__name__)

__all__ = ["apply_filters", "empty_filter_spec"]


def apply_filters(records: Sequence[SignalRecord], spec: Optional[FilterSpec]) -> List[SignalRecord]:
    """
    Return the records that pass every active clause of `spec`, in input order.

    Clauses:
    - categorical sets (mode, band, country, call sign): exact membership, empty = all
    - numeric ranges (frequency, signal strength): inclusive, None bound = open
    - date-time range: timestamp within [start_instant, end_instant]

    Unsatisfiable clauses (min > max, start after end) match nothing; they never raise.
    """
    records = list(records)
    if not records or spec is None or spec.is_empty():
        return records

    df = records_to_frame(records)
    mask = np.ones(len(df), dtype=bool)

    if spec.modes:
        mask &= df["mode"].isin(spec.modes).to_numpy()

    if spec.bands:
        mask &= df["band"].isin(spec.bands).to_numpy()

    if spec.countries:
        mask &= df["country"].isin(spec.countries).to_numpy()

    if spec.call_signs:
        mask &= df["call_sign"].isin(spec.call_signs).to_numpy()

    mask &= _range_mask(df["frequency_mhz"], spec.frequency_range)
    mask &= _range_mask(df["signal_strength_db"], spec.signal_strength_range)
    mask &= _date_time_mask(df["timestamp"], spec.date_time)

    kept = [rec for rec, keep in zip(records, mask) if keep]

    logger.debug(
        "filters_applied",
        extra={"n_in": len(records), "n_out": len(kept)},
    )
    return kept


# -------------------------------------------------------------------------
# Clause masks
# -------------------------------------------------------------------------

def _range_mask(values: pd.Series, rng: NumericRange) -> np.ndarray:
    mask = np.ones(len(values), dtype=bool)
    if rng.min is not None:
        mask &= (values >= rng.min).to_numpy()
    if rng.max is not None:
        mask &= (values <= rng.max).to_numpy()
    return mask


def _date_time_mask(timestamps: pd.Series, dt_range: DateTimeRange) -> np.ndarray:
    mask = np.ones(len(timestamps), dtype=bool)

    start = dt_range.start_instant()
    end = dt_range.end_instant()
    if start is None and end is None:
        return mask

    if not is_datetime64_any_dtype(timestamps):
        # Aware timestamps with differing offsets land in an object column
        timestamps = pd.to_datetime(timestamps, utc=True)

    if start is not None:
        mask &= (timestamps >= _align_to(start, timestamps)).to_numpy()
    if end is not None:
        mask &= (timestamps <= _align_to(end, timestamps)).to_numpy()
    return mask


def _align_to(instant: datetime, timestamps: pd.Series) -> pd.Timestamp:
    """Interpret a naive bound in the records' timezone (if they carry one)."""
    bound = pd.Timestamp(instant)
    tz = timestamps.dt.tz
    if tz is not None and bound.tzinfo is None:
        bound = bound.tz_localize(tz)
    elif tz is None and bound.tzinfo is not None:
        bound = bound.tz_convert(None)
    return bound
