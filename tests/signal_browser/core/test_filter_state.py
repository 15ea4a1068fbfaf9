from datetime import date, datetime, time

from signal_browser.core.filter_state import (
    DateTimeRange,
    FilterSpec,
    NumericRange,
    empty_filter_spec,
)


def test_empty_filter_spec_is_empty():
    spec = empty_filter_spec()

    assert spec.is_empty()
    assert spec == FilterSpec()


def test_lists_are_frozen_into_tuples():
    spec = FilterSpec(modes=["CW", "FT8"], bands=None)

    assert spec.modes == ("CW", "FT8")
    assert spec.bands == ()
    hash(spec)


def test_any_clause_makes_spec_non_empty():
    assert not FilterSpec(countries=("Japan",)).is_empty()
    assert not FilterSpec(frequency_range=NumericRange(max=30.0)).is_empty()
    assert not FilterSpec(date_time=DateTimeRange(end_date=date(2024, 1, 1))).is_empty()


def test_to_dict_from_dict_roundtrip():
    spec = FilterSpec(
        modes=("CW",),
        bands=("20m", "40m"),
        countries=("USA",),
        call_signs=("W1ABC",),
        frequency_range=NumericRange(min=7.0, max=14.35),
        signal_strength_range=NumericRange(min=-90.0),
        date_time=DateTimeRange(
            start_date=date(2024, 1, 10),
            start_time="09:00:00",
            end_date=date(2024, 1, 12),
        ),
    )

    data = spec.to_dict()
    restored = FilterSpec.from_dict(data)

    assert restored == spec
    assert data["date_time"]["start_date"] == "2024-01-10"
    assert data["signal_strength_range"] == {"min": -90.0, "max": None}


def test_from_dict_accepts_ui_values():
    spec = FilterSpec.from_dict(
        {
            "modes": None,
            "frequency_range": {"min": "", "max": "14.35"},
            "date_time": {"start_date": "2024-01-10T00:00:00", "start_time": None},
        }
    )

    assert spec.modes == ()
    assert spec.frequency_range == NumericRange(min=None, max=14.35)
    assert spec.date_time.start_date == date(2024, 1, 10)
    assert spec.date_time.start_time == ""


def test_instants_use_day_defaults():
    rng = DateTimeRange(start_date=date(2024, 1, 10), end_date=date(2024, 1, 11))

    assert rng.start_instant() == datetime(2024, 1, 10, 0, 0, 0)
    assert rng.end_instant() == datetime.combine(date(2024, 1, 11), time(23, 59, 59, 999999))


def test_instants_use_explicit_times():
    rng = DateTimeRange(
        start_date=date(2024, 1, 10),
        start_time="7:05",
        end_date=date(2024, 1, 10),
        end_time="18:00:30",
    )

    assert rng.start_instant() == datetime(2024, 1, 10, 7, 5, 0)
    assert rng.end_instant() == datetime(2024, 1, 10, 18, 0, 30)


def test_unset_dates_are_unconstrained():
    rng = DateTimeRange(start_time="12:00", end_time="13:00")

    assert rng.is_unbounded()
    assert rng.start_instant() is None
    assert rng.end_instant() is None
