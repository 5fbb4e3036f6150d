"""주간 복용 리포트 스키마 (예상 복용 vs 실제 복용)."""
from pydantic import BaseModel, ConfigDict


class ExpectedConsumption(BaseModel):
    """복용 주기에서 계산된 예상 복용 슬롯. 요청마다 새로 계산되며 저장하지 않음."""
    model_config = ConfigDict(frozen=True)

    medication_id: int
    medication_name: str
    dose_index: int  # 1..daily_frequency


class ActualConsumption(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    medication_id: int
    medication_name: str
    date: str  # YYYY-MM-DD
    time: str


class DayResult(BaseModel):
    date: str  # YYYY-MM-DD
    expected: list[ExpectedConsumption]
    actual: list[ActualConsumption]


WeeklyConsumptionReport = list[DayResult]
