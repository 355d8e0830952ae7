import pytest

from schoolhub.utils.time_utils import (
    INVALID_TIME_LABEL,
    calculate_end_time,
    format_time_display,
    format_time_from_parts,
    is_valid_time_format,
    minutes_between,
    normalize_time_string,
    time_range,
    time_to_minutes,
)


@pytest.mark.parametrize("raw, expected", [
    ("9:30", "09:30"),
    ("09:30", "09:30"),
    ("9:30:00", "09:30"),
    ("9:5", "09:05"),
    ("23:59:59", "23:59"),
    ("0:00", "00:00"),
    ("9", "09:00"),
    (" 14:15 ", "14:15"),
])
def test_normalize_accepts_loose_formats(raw, expected):
    assert normalize_time_string(raw) == expected


@pytest.mark.parametrize("raw", [
    "", None, "25:00", "24:00", "12:60", "12:30:60", "ab:cd", "9:", ":30",
    "9.30", "123:00", "-1:00", "12:30 PM", "1:2:3:4",
])
def test_normalize_rejects_malformed(raw):
    assert normalize_time_string(raw) is None


def test_normalize_never_raises_on_non_string():
    assert normalize_time_string(930) is None


def test_time_to_minutes():
    assert time_to_minutes("00:00") == 0
    assert time_to_minutes("23:59") == 1439
    assert time_to_minutes("09:30") == 570


def test_is_valid_time_format():
    assert is_valid_time_format("9:30")
    assert is_valid_time_format("23:59:59")
    assert not is_valid_time_format("24:00")
    assert not is_valid_time_format("9:5")
    assert not is_valid_time_format("")
    assert not is_valid_time_format(None)


def test_format_time_from_parts():
    assert format_time_from_parts(7, 5) == "07:05"


def test_calculate_end_time_wraps_past_midnight():
    assert calculate_end_time("9", "30", 45) == "10:15"
    assert calculate_end_time("23", "30", 60) == "00:30"


def test_minutes_between():
    assert minutes_between("9:00", "10:15") == 75
    assert minutes_between("9:00", "bad") is None


@pytest.mark.parametrize("raw, expected", [
    ("13:30", "1:30 PM"),
    ("09:05", "9:05 AM"),
    ("00:15", "12:15 AM"),
    ("12:00", "12:00 PM"),
    ("10:00:00", "10:00 AM"),
])
def test_format_time_display(raw, expected):
    assert format_time_display(raw) == expected


def test_format_time_display_invalid():
    assert format_time_display("25:00") == INVALID_TIME_LABEL
    assert format_time_display("") == INVALID_TIME_LABEL


def test_time_range_default():
    out = time_range()
    assert out[0] == "07:00"
    assert out[1] == "07:30"
    assert out[-1] == "17:30"
    assert len(out) == 22


def test_time_range_stops_at_midnight():
    assert time_range(23, 23, 30) == ["23:00", "23:30"]
    assert time_range(23, 24, 30) == ["23:00", "23:30"]


def test_time_range_rejects_bad_step():
    with pytest.raises(ValueError):
        time_range(7, 17, 0)


@pytest.mark.parametrize("raw", ["٩:٣٠", "０９:３０", "१०:००"])
def test_non_ascii_digits_rejected(raw):
    assert normalize_time_string(raw) is None
    assert not is_valid_time_format(raw)
