from datetime import datetime

import pytest

from signal_browser.core.exceptions import InvalidArgumentError
from signal_browser.core.record import SignalRecord
from signal_browser.core.sort_engine import SortSpec, no_sort, sort_records


def _make_record(id: int, **overrides) -> SignalRecord:
    values = dict(
        id=id,
        call_sign="W1ABC",
        frequency_mhz=14.0,
        mode="SSB",
        band="20m",
        signal_strength_db=-60.0,
        timestamp=datetime(2024, 1, 10, 12, 0, 0),
        location="FN20",
        country="USA",
        power_watts=100.0,
    )
    values.update(overrides)
    return SignalRecord(**values)


def test_no_sort_is_identity():
    records = [_make_record(3), _make_record(1), _make_record(2)]

    assert sort_records(records, no_sort()) == records
    assert sort_records(records, None) == records


def test_numeric_ascending_and_descending():
    records = [
        _make_record(1, frequency_mhz=14.2),
        _make_record(2, frequency_mhz=7.1),
        _make_record(3, frequency_mhz=145.5),
    ]

    asc = sort_records(records, SortSpec("frequency_mhz", "asc"))
    desc = sort_records(records, SortSpec("frequency_mhz", "desc"))

    assert [r.id for r in asc] == [2, 1, 3]
    assert [r.id for r in desc] == [3, 1, 2]


def test_strings_compare_case_sensitively():
    records = [
        _make_record(1, call_sign="k2def"),
        _make_record(2, call_sign="W1ABC"),
        _make_record(3, call_sign="K2DEF"),
    ]

    out = sort_records(records, SortSpec("call_sign"))

    # Uppercase sorts before lowercase
    assert [r.call_sign for r in out] == ["K2DEF", "W1ABC", "k2def"]


def test_timestamps_sort_chronologically():
    records = [
        _make_record(1, timestamp=datetime(2024, 3, 1)),
        _make_record(2, timestamp=datetime(2023, 12, 31)),
        _make_record(3, timestamp=datetime(2024, 1, 15)),
    ]

    out = sort_records(records, SortSpec("timestamp"))

    assert [r.id for r in out] == [2, 3, 1]


def test_ties_keep_input_order_in_both_directions():
    records = [
        _make_record(1, mode="CW"),
        _make_record(2, mode="SSB"),
        _make_record(3, mode="CW"),
        _make_record(4, mode="SSB"),
    ]

    asc = sort_records(records, SortSpec("mode", "asc"))
    desc = sort_records(records, SortSpec("mode", "desc"))

    assert [r.id for r in asc] == [1, 3, 2, 4]
    assert [r.id for r in desc] == [2, 4, 1, 3]


def test_missing_notes_sort_last_when_ascending():
    records = [
        _make_record(1, notes=None),
        _make_record(2, notes="Weak copy"),
        _make_record(3, notes="Clear copy"),
    ]

    out = sort_records(records, SortSpec("notes"))

    assert [r.id for r in out] == [3, 2, 1]


def test_sort_returns_new_list():
    records = [_make_record(2), _make_record(1)]

    out = sort_records(records, SortSpec("id"))

    assert [r.id for r in records] == [2, 1]
    assert [r.id for r in out] == [1, 2]


def test_unknown_column_is_rejected():
    with pytest.raises(InvalidArgumentError):
        SortSpec("not_a_field")


def test_bad_direction_is_rejected():
    with pytest.raises(InvalidArgumentError):
        SortSpec("id", "up")


@pytest.mark.parametrize("direction", ["asc", "desc"])
@pytest.mark.parametrize("column", ["mode", "notes", "timestamp", "signal_strength_db"])
def test_sort_is_idempotent(column, direction):
    records = [
        _make_record(1, mode="CW", notes=None, timestamp=datetime(2024, 1, 2)),
        _make_record(2, mode="SSB", notes="Weak copy", signal_strength_db=-80.0),
        _make_record(3, mode="CW", notes="Clear copy", timestamp=datetime(2024, 1, 2)),
        _make_record(4, mode="FT8", notes=None, signal_strength_db=-80.0),
        _make_record(5, mode="SSB", notes="Weak copy", timestamp=datetime(2023, 12, 1)),
    ]
    spec = SortSpec(column, direction)

    once = sort_records(records, spec)
    twice = sort_records(once, spec)

    assert [r.id for r in twice] == [r.id for r in once]
