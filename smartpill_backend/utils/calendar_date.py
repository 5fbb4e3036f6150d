"""달력 날짜(YYYY-MM-DD) 유틸리티.

날짜는 시각/타임존이 없는 ``datetime.date`` 로만 다룬다. 일수 차이는 날짜끼리의
뺄셈으로 계산하므로 서머타임(DST)이나 서버 로컬 타임존의 영향을 받지 않는다.
"""
import re
from datetime import date

DATE_FORMAT_HINT = "YYYY-MM-DD"

_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_TIME_RE = re.compile(r"([0-9]{2}):([0-9]{2})(?::([0-9]{2}))?")


def parse_calendar_date(s: str) -> date:
    """``YYYY-MM-DD`` 문자열을 달력 날짜로 변환. 형식 오류·존재하지 않는 날짜는 ValueError."""
    m = _DATE_RE.fullmatch(s)
    if not m:
        raise ValueError(f"invalid calendar date {s!r} (use {DATE_FORMAT_HINT})")
    year, month, day = (int(g) for g in m.groups())
    # 2025-02-30 처럼 범위를 넘는 값은 date()가 ValueError
    return date(year, month, day)


def is_valid_calendar_date_string(s: str) -> bool:
    try:
        parse_calendar_date(s)
    except (TypeError, ValueError):
        return False
    return True


def days_between(a: date, b: date) -> int:
    """a에서 b까지의 달력 일수 (b가 앞이면 음수)."""
    return (b - a).days


def format_calendar_date(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def is_valid_time_string(s: str) -> bool:
    """HH:MM 또는 HH:MM:SS (시 0~23, 분/초 0~59). 두 자리 고정이라 문자열 순서가 시각 순서와 같다."""
    m = _TIME_RE.fullmatch(s)
    if not m:
        return False
    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 23 or minute > 59:
        return False
    if m.group(3) is not None and int(m.group(3)) > 59:
        return False
    return True
