from __future__ import annotations

from datetime import time, timedelta

from hr_attendance.biometric.decoders import (
    cell_text,
    decode_count,
    decode_day_pair,
    decode_duration,
    decode_minutes,
    decode_name,
)


def test_duration_hours_can_exceed_a_day():
    assert decode_duration("63:33") == 3813
    assert decode_duration("0:05") == 5
    assert decode_duration("8:00:00") == 480


def test_duration_blank_and_dash_are_zero_without_issue():
    seen = []
    for value in (None, "", "  ", "-", "--"):
        assert decode_duration(value, seen.append) == 0
    assert seen == []


def test_duration_malformed_is_zero_and_reported():
    seen = []
    assert decode_duration("abc", seen.append) == 0
    assert decode_duration("-3:00", seen.append) == 0
    assert decode_duration("1:75", seen.append) == 0
    assert seen == ["abc", "-3:00", "1:75"]


def test_duration_malformed_without_callback_does_not_raise():
    assert decode_duration("abc") == 0


def test_duration_accepts_native_cell_types():
    assert decode_duration(time(7, 45)) == 465
    assert decode_duration(timedelta(hours=30, minutes=5)) == 1805
    assert decode_duration(0) == 0


def test_day_pair():
    assert decode_day_pair("10/9") == (10, 9)
    assert decode_day_pair(" 22 / 20 ") == (22, 20)
    assert decode_day_pair("-") == (0, 0)

    seen = []
    assert decode_day_pair("10-9", seen.append) == (0, 0)
    assert seen == ["10-9"]


def test_count():
    assert decode_count(3) == 3
    assert decode_count(3.0) == 3
    assert decode_count("4") == 4
    assert decode_count(None) == 0

    seen = []
    assert decode_count("x", seen.append) == 0
    assert decode_count(2.5, seen.append) == 0
    assert decode_count(-1, seen.append) == 0
    assert len(seen) == 3


def test_minutes_accept_plain_numbers_or_durations():
    assert decode_minutes(15) == 15
    assert decode_minutes("15") == 15
    assert decode_minutes(15.0) == 15
    assert decode_minutes("1:05") == 65
    assert decode_minutes("-") == 0

    seen = []
    assert decode_minutes(-4, seen.append) == 0
    assert decode_minutes("n/a", seen.append) == 0
    assert seen == ["-4", "n/a"]


def test_name_tildes_become_single_spaces():
    assert decode_name("JUAN~CARLOS~~PEREZ") == "JUAN CARLOS PEREZ"
    assert decode_name(" ANA ~ ") == "ANA"
    assert decode_name(None) == ""


def test_cell_text_drops_float_suffix_on_ids():
    assert cell_text(12345678.0) == "12345678"
    assert cell_text(" 0071 ") == "0071"
