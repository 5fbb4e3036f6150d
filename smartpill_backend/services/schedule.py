"""복용 주기 계산: 특정 날짜가 복용일인지, 예상 복용 슬롯이 몇 개인지."""
from datetime import date

from ..models.medication import Medication
from ..schemas.consumption_report import ExpectedConsumption
from ..utils.calendar_date import days_between


def is_dose_day(medication: Medication, on: date) -> bool:
    """start_date부터 day_interval일 간격인 날만 복용일. start_date 이전은 항상 False."""
    delta = days_between(medication.start_date, on)
    return delta >= 0 and delta % medication.day_interval == 0


def expected_slots_on_date(medication: Medication, on: date) -> list[ExpectedConsumption]:
    """복용일이면 dose_index 1..daily_frequency 순서로 슬롯 생성, 아니면 빈 리스트.

    약 이름은 조회 시점의 현재 이름을 사용한다.
    """
    if not is_dose_day(medication, on):
        return []
    return [
        ExpectedConsumption(
            medication_id=medication.id,
            medication_name=medication.name,
            dose_index=i,
        )
        for i in range(1, medication.daily_frequency + 1)
    ]
