"""주간 복용 리포트: start_date부터 7일간 예상 복용 vs 실제 복용.

입력 검증(parse_start_date)과 날짜 계산을 분리해 두어, 리포트 계산은 DB 없이
가짜 저장소만으로도 테스트할 수 있다.
"""
import logging
from datetime import date, timedelta

from ..schemas.consumption_report import ActualConsumption, DayResult, ExpectedConsumption
from ..utils.calendar_date import (
    DATE_FORMAT_HINT,
    format_calendar_date,
    is_valid_calendar_date_string,
    parse_calendar_date,
)
from .consumptions import ConsumptionStore
from .medications import MedicationDirectory
from .schedule import expected_slots_on_date

logger = logging.getLogger(__name__)

REPORT_DAYS = 7
# 이 날짜 이후로 시작하면 7일 창이 date.max를 넘는다
LAST_START_DATE = date.max - timedelta(days=REPORT_DAYS - 1)


class ReportValidationError(Exception):
    """리포트 요청 파라미터 오류 (HTTP 400)."""

    code = "invalid_parameter"

    def __init__(self, message: str, field: str = "start_date") -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class MissingParameter(ReportValidationError):
    code = "missing_parameter"


class InvalidDateFormat(ReportValidationError):
    code = "invalid_date_format"


def parse_start_date(start_date_param: str | None) -> date:
    trimmed = start_date_param.strip() if isinstance(start_date_param, str) else ""
    if not trimmed:
        raise MissingParameter("start_date is required")
    if not is_valid_calendar_date_string(trimmed):
        raise InvalidDateFormat(f"Invalid start_date (use {DATE_FORMAT_HINT})")
    start = parse_calendar_date(trimmed)
    if start > LAST_START_DATE:
        raise InvalidDateFormat(
            f"Invalid start_date (use {DATE_FORMAT_HINT} no later than {format_calendar_date(LAST_START_DATE)})"
        )
    return start


def report_dates(start: date) -> list[date]:
    """start부터 연속된 REPORT_DAYS일 (오름차순)."""
    return [start + timedelta(days=i) for i in range(REPORT_DAYS)]


async def build_weekly_report(
    directory: MedicationDirectory,
    store: ConsumptionStore,
    user_id: int,
    start_date_param: str | None,
) -> list[DayResult]:
    """7일치 DayResult 생성.

    - expected: 날짜별로 약 목록 순서(최근 등록 순) 그대로, 약마다 dose_index 오름차순
    - actual: 7일 범위를 한 번에 조회해 날짜 문자열로 분류. 약이 없으면 조회 생략
    파라미터 오류는 ReportValidationError, 저장소 오류는 그대로 전파.
    """
    start = parse_start_date(start_date_param)
    medications = await directory.list_for_user(user_id)

    days = report_dates(start)
    expected_by_date: dict[str, list[ExpectedConsumption]] = {}
    actual_by_date: dict[str, list[ActualConsumption]] = {}
    for d in days:
        key = format_calendar_date(d)
        expected: list[ExpectedConsumption] = []
        for med in medications:
            expected.extend(expected_slots_on_date(med, d))
        expected_by_date[key] = expected
        actual_by_date[key] = []

    if medications:
        rows = await store.list_for_medications(
            user_id,
            [med.id for med in medications],
            days[0],
            days[-1],
        )
        for row in rows:
            bucket = actual_by_date.get(row.date)
            if bucket is None:
                # 조회 범위와 생성된 날짜가 어긋난 경우: 정상이라면 발생하지 않음
                logger.warning("consumption %s dated %s is outside the report window; dropped", row.id, row.date)
                continue
            bucket.append(row)

    logger.debug(
        "weekly report for user %s from %s: %d medications",
        user_id, format_calendar_date(start), len(medications),
    )
    return [
        DayResult(date=key, expected=expected_by_date[key], actual=actual_by_date[key])
        for key in expected_by_date
    ]
