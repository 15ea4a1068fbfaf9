from datetime import date, datetime, timezone

from signal_browser.core.filter_engine import apply_filters, empty_filter_spec
from signal_browser.core.filter_state import DateTimeRange, FilterSpec, NumericRange
from signal_browser.core.record import SignalRecord


def _make_record(
    id: int,
    *,
    frequency_mhz: float = 14.205,
    mode: str = "SSB",
    band: str = "20m",
    country: str = "USA",
    call_sign: str = "W1ABC",
    signal_strength_db: float = -60.0,
    timestamp: datetime = datetime(2024, 1, 10, 12, 0, 0),
) -> SignalRecord:
    return SignalRecord(
        id=id,
        call_sign=call_sign,
        frequency_mhz=frequency_mhz,
        mode=mode,
        band=band,
        signal_strength_db=signal_strength_db,
        timestamp=timestamp,
        location="FN20",
        country=country,
        power_watts=100.0,
    )


def test_empty_spec_returns_all_records_in_order():
    records = [_make_record(i) for i in range(1, 6)]

    out = apply_filters(records, empty_filter_spec())

    assert out == records
    assert out is not records


def test_none_spec_and_empty_input():
    records = [_make_record(1)]

    assert apply_filters(records, None) == records
    assert apply_filters([], FilterSpec(modes=("CW",))) == []


def test_frequency_min_only_keeps_order():
    records = [
        _make_record(1, frequency_mhz=14.205),
        _make_record(2, frequency_mhz=7.100),
        _make_record(3, frequency_mhz=145.500),
    ]
    spec = FilterSpec(frequency_range=NumericRange(min=10.0, max=None))

    out = apply_filters(records, spec)

    assert [r.frequency_mhz for r in out] == [14.205, 145.500]


def test_mode_membership_keeps_positions():
    records = [
        _make_record(0, mode="SSB"),
        _make_record(1, mode="CW"),
        _make_record(2, mode="FT8"),
        _make_record(3, mode="FM"),
    ]

    out = apply_filters(records, FilterSpec(modes=["CW", "FT8"]))

    assert [r.id for r in out] == [1, 2]


def test_categorical_match_is_exact():
    records = [_make_record(1, mode="CW"), _make_record(2, mode="cw")]

    out = apply_filters(records, FilterSpec(modes=("CW",)))

    assert [r.id for r in out] == [1]


def test_clauses_are_anded():
    records = [
        _make_record(1, mode="CW", band="20m", country="USA"),
        _make_record(2, mode="CW", band="40m", country="USA"),
        _make_record(3, mode="SSB", band="20m", country="USA"),
        _make_record(4, mode="CW", band="20m", country="Japan"),
    ]
    spec = FilterSpec(modes=("CW",), bands=("20m",), countries=("USA",))

    assert [r.id for r in apply_filters(records, spec)] == [1]


def test_call_sign_filter():
    records = [
        _make_record(1, call_sign="W1ABC"),
        _make_record(2, call_sign="K2DEF"),
        _make_record(3, call_sign="W1ABC"),
    ]

    out = apply_filters(records, FilterSpec(call_signs=("W1ABC",)))

    assert [r.id for r in out] == [1, 3]


def test_numeric_bounds_are_inclusive():
    records = [
        _make_record(1, signal_strength_db=-80.0),
        _make_record(2, signal_strength_db=-60.0),
        _make_record(3, signal_strength_db=-40.0),
        _make_record(4, signal_strength_db=-20.0),
    ]
    spec = FilterSpec(signal_strength_range=NumericRange(min=-60.0, max=-40.0))

    assert [r.id for r in apply_filters(records, spec)] == [2, 3]


def test_inverted_range_matches_nothing():
    records = [_make_record(i, frequency_mhz=f) for i, f in enumerate([7.0, 14.0, 21.0])]
    spec = FilterSpec(frequency_range=NumericRange(min=20.0, max=10.0))

    assert apply_filters(records, spec) == []


def test_start_date_without_time_starts_at_midnight():
    records = [
        _make_record(1, timestamp=datetime(2024, 1, 9, 23, 59, 59)),
        _make_record(2, timestamp=datetime(2024, 1, 10, 0, 0, 0)),
        _make_record(3, timestamp=datetime(2024, 1, 10, 18, 30, 0)),
        _make_record(4, timestamp=datetime(2024, 2, 1, 6, 0, 0)),
    ]
    spec = FilterSpec(date_time=DateTimeRange(start_date=date(2024, 1, 10), start_time=""))

    assert [r.id for r in apply_filters(records, spec)] == [2, 3, 4]


def test_end_date_without_time_includes_whole_day():
    records = [
        _make_record(1, timestamp=datetime(2024, 1, 10, 0, 0, 0)),
        _make_record(2, timestamp=datetime(2024, 1, 10, 23, 59, 59)),
        _make_record(3, timestamp=datetime(2024, 1, 11, 0, 0, 0)),
    ]
    spec = FilterSpec(date_time=DateTimeRange(end_date=date(2024, 1, 10)))

    assert [r.id for r in apply_filters(records, spec)] == [1, 2]


def test_date_time_window_with_times():
    records = [
        _make_record(1, timestamp=datetime(2024, 1, 10, 8, 59, 59)),
        _make_record(2, timestamp=datetime(2024, 1, 10, 9, 0, 0)),
        _make_record(3, timestamp=datetime(2024, 1, 10, 17, 30, 0)),
        _make_record(4, timestamp=datetime(2024, 1, 10, 17, 30, 1)),
    ]
    spec = FilterSpec(
        date_time=DateTimeRange(
            start_date=date(2024, 1, 10),
            start_time="09:00",
            end_date=date(2024, 1, 10),
            end_time="17:30:00",
        )
    )

    assert [r.id for r in apply_filters(records, spec)] == [2, 3]


def test_invalid_start_time_falls_back_to_midnight():
    records = [
        _make_record(1, timestamp=datetime(2024, 1, 10, 0, 0, 0)),
        _make_record(2, timestamp=datetime(2024, 1, 10, 12, 0, 0)),
    ]
    spec = FilterSpec(date_time=DateTimeRange(start_date=date(2024, 1, 10), start_time="25:99"))

    assert [r.id for r in apply_filters(records, spec)] == [1, 2]


def test_naive_bounds_apply_to_aware_timestamps():
    records = [
        _make_record(1, timestamp=datetime(2024, 1, 9, 22, 0, tzinfo=timezone.utc)),
        _make_record(2, timestamp=datetime(2024, 1, 10, 1, 0, tzinfo=timezone.utc)),
    ]
    spec = FilterSpec(date_time=DateTimeRange(start_date=date(2024, 1, 10)))

    assert [r.id for r in apply_filters(records, spec)] == [2]


def test_filter_does_not_mutate_input():
    records = [_make_record(1, mode="CW"), _make_record(2, mode="SSB")]
    before = list(records)

    apply_filters(records, FilterSpec(modes=("CW",)))

    assert records == before
