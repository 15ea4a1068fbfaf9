from datetime import datetime

from signal_browser.ui.formatting import (
    format_frequency,
    format_notes,
    format_power,
    format_signal_strength,
    format_timestamp,
    strength_percent,
)


def test_unit_formatting():
    assert format_frequency(14.2) == "14.200 MHz"
    assert format_frequency(145.5) == "145.500 MHz"
    assert format_signal_strength(-72.46) == "-72.5 dB"
    assert format_power(100.0) == "100 W"
    assert format_power(12.5) == "12.5 W"


def test_format_timestamp_and_notes():
    assert format_timestamp(datetime(2024, 1, 10, 7, 5, 9)) == "2024-01-10 07:05:09"
    assert format_notes(None) == ""
    assert format_notes("QRM present") == "QRM present"


def test_strength_percent_is_clamped():
    assert strength_percent(-120.0) == 0.0
    assert strength_percent(-60.0) == 50.0
    assert strength_percent(0.0) == 100.0
    assert strength_percent(-150.0) == 0.0
    assert strength_percent(5.0) == 100.0
