from datetime import date

import pytest

from smartpill_backend.utils.calendar_date import (
    days_between,
    format_calendar_date,
    is_valid_calendar_date_string,
    is_valid_time_string,
    parse_calendar_date,
)


def test_parse_calendar_date_returns_plain_date() -> None:
    parsed = parse_calendar_date("2025-02-15")
    assert parsed == date(2025, 2, 15)


@pytest.mark.parametrize(
    "value",
    ["2025-02-30", "2025-13-01", "2023-02-29", "0000-01-01", "2025-2-15", "20250215", "not-a-date", "", "2025-02-15\n"],
)
def test_invalid_calendar_date_strings_are_rejected(value: str) -> None:
    assert is_valid_calendar_date_string(value) is False
    with pytest.raises(ValueError):
        parse_calendar_date(value)


def test_leap_day_is_valid_only_in_leap_years() -> None:
    assert is_valid_calendar_date_string("2024-02-29") is True
    assert is_valid_calendar_date_string("2100-02-29") is False


def test_non_string_is_not_a_valid_date() -> None:
    assert is_valid_calendar_date_string(None) is False  # type: ignore[arg-type]


def test_days_between_counts_calendar_days() -> None:
    assert days_between(date(2025, 2, 15), date(2025, 2, 15)) == 0
    assert days_between(date(2025, 2, 15), date(2025, 3, 1)) == 14
    assert days_between(date(2025, 3, 1), date(2025, 2, 15)) == -14
    # 서머타임 전환 주간(미국 2025-03-09, 유럽 2025-03-30)에도 정확히 1일
    assert days_between(date(2025, 3, 8), date(2025, 3, 9)) == 1
    assert days_between(date(2025, 3, 29), date(2025, 3, 31)) == 2
    assert days_between(date(2024, 12, 31), date(2025, 1, 1)) == 1


def test_format_calendar_date_zero_pads() -> None:
    assert format_calendar_date(date(2025, 2, 5)) == "2025-02-05"
    assert format_calendar_date(date(987, 1, 1)) == "0987-01-01"


@pytest.mark.parametrize("value", ["08:00", "23:59", "09:30:15", "00:00:00"])
def test_valid_times(value: str) -> None:
    assert is_valid_time_string(value) is True


@pytest.mark.parametrize("value", ["24:00", "12:60", "12:00:60", "noon", "12", "12:0", "123:00", "8:00", "9:30", "9:30:15", ""])
def test_invalid_times(value: str) -> None:
    assert is_valid_time_string(value) is False
