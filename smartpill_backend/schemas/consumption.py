"""복용 기록 API 스키마."""
from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator

from ..utils.calendar_date import DATE_FORMAT_HINT, is_valid_time_string, parse_calendar_date


class ConsumptionInput(BaseModel):
    date: str = Field(..., description=DATE_FORMAT_HINT)
    time: str = Field(..., description="HH:MM 또는 HH:MM:SS")

    @field_validator("date")
    @classmethod
    def _calendar_date(cls, value: str) -> str:
        v = value.strip()
        parse_calendar_date(v)
        return v

    @field_validator("time")
    @classmethod
    def _time_of_day(cls, value: str) -> str:
        v = value.strip()
        if not is_valid_time_string(v):
            raise ValueError("invalid time (use HH:MM or HH:MM:SS)")
        return v


class ConsumptionResponse(BaseModel):
    id: int
    medication_id: int
    date: date
    time: str
    created_at: datetime

    model_config = {"from_attributes": True}
