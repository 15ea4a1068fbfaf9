from datetime import date, datetime

import pytest

from signal_browser.core.columns import default_columns, select_all
from signal_browser.core.exceptions import InvalidTimeFormatError
from signal_browser.core.filter_state import FilterSpec, NumericRange
from signal_browser.core.record import SignalRecord
from signal_browser.core.sort_engine import SortSpec
from signal_browser.core.view_controller import FilterOptions
from signal_browser.ui.helpers import (
    active_filter_summary,
    filter_spec_from_inputs,
    get_filter_dropdown_options,
    normalize_time_input,
    record_to_row,
    sort_spec_from_sort_by,
    table_columns,
)


def _make_record() -> SignalRecord:
    return SignalRecord(
        id=42,
        call_sign="DL1PQR",
        frequency_mhz=7.0741,
        mode="FT8",
        band="40m",
        signal_strength_db=-88.04,
        timestamp=datetime(2024, 1, 10, 21, 15, 0),
        location="JO62",
        country="Germany",
        power_watts=25.0,
    )


def test_filter_spec_from_inputs_treats_blanks_as_unset():
    spec = filter_spec_from_inputs(
        modes=[],
        bands=None,
        start_date=None,
        start_time="",
        frequency_min=None,
        frequency_max=None,
    )

    assert spec.is_empty()


def test_filter_spec_from_inputs_normalises_times():
    spec = filter_spec_from_inputs(
        modes=["CW"],
        start_date="2024-01-10",
        start_time="7:05",
        end_date="2024-01-11",
        end_time="1800",
        strength_min=-90,
    )

    assert spec.modes == ("CW",)
    assert spec.date_time.start_date == date(2024, 1, 10)
    assert spec.date_time.start_time == "07:05:00"
    assert spec.date_time.end_time == "18:00:00"
    assert spec.signal_strength_range == NumericRange(min=-90.0, max=None)


def test_filter_spec_from_inputs_drops_invalid_time():
    spec = filter_spec_from_inputs(start_date="2024-01-10", start_time="25:00")

    assert spec.date_time.start_time == ""
    assert spec.date_time.start_instant() == datetime(2024, 1, 10, 0, 0, 0)


def test_normalize_time_input():
    assert normalize_time_input("14:30") == "14:30:00"
    assert normalize_time_input("143015") == "14:30:15"

    with pytest.raises(InvalidTimeFormatError):
        normalize_time_input("2599")


def test_sort_spec_from_sort_by():
    assert sort_spec_from_sort_by(None) == SortSpec()
    assert sort_spec_from_sort_by([]) == SortSpec()
    assert sort_spec_from_sort_by(
        [{"column_id": "frequency_mhz", "direction": "desc"}, {"column_id": "id", "direction": "asc"}]
    ) == SortSpec("frequency_mhz", "desc")


def test_sort_spec_from_sort_by_ignores_unknown_column():
    assert sort_spec_from_sort_by([{"column_id": "antenna", "direction": "asc"}]) == SortSpec()


def test_table_columns_only_visible_with_units():
    cols = table_columns(default_columns())

    assert [c["id"] for c in cols] == [
        "id", "call_sign", "frequency_mhz", "mode", "band", "signal_strength_db", "timestamp",
    ]
    assert {"name": "Frequency (MHz)", "id": "frequency_mhz"} in cols
    assert len(table_columns(select_all(default_columns()))) == 11


def test_record_to_row_formats_values():
    row = record_to_row(_make_record())

    assert row["id"] == 42
    assert row["frequency_mhz"] == "7.074 MHz"
    assert row["signal_strength_db"] == "-88.0 dB"
    assert row["power_watts"] == "25 W"
    assert row["timestamp"] == "2024-01-10 21:15:00"
    assert row["notes"] == ""


def test_get_filter_dropdown_options():
    options = FilterOptions(modes=("CW",), bands=("20m", "40m"), countries=(), call_signs=("W1ABC",))

    modes, bands, countries, call_signs = get_filter_dropdown_options(options)

    assert modes == [{"label": "CW", "value": "CW"}]
    assert [o["value"] for o in bands] == ["20m", "40m"]
    assert countries == []
    assert call_signs == [{"label": "W1ABC", "value": "W1ABC"}]


def test_active_filter_summary():
    assert active_filter_summary(FilterSpec()) == []

    chips = active_filter_summary(
        filter_spec_from_inputs(
            modes=["CW", "FT8"],
            frequency_min=7,
            start_date="2024-01-10",
        )
    )

    assert chips == [
        "Mode: CW, FT8",
        "Frequency: 7 to ∞ MHz",
        "From 2024-01-10 00:00:00",
    ]
