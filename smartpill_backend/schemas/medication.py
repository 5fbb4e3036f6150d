"""복용 약 API 스키마."""
from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator

from ..utils.calendar_date import DATE_FORMAT_HINT, parse_calendar_date


class MedicationInput(BaseModel):
    """생성/수정 공통 입력. 문자열은 앞뒤 공백 제거."""
    name: str = Field(..., max_length=200)
    dose: str = Field(..., max_length=100)
    start_date: date = Field(..., description=DATE_FORMAT_HINT)
    daily_frequency: int = Field(..., ge=1, strict=True, description="복용일 하루 복용 횟수")
    day_interval: int = Field(..., ge=1, strict=True, description="복용일 간격(일)")

    @field_validator("name", "dose")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        v = value.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("start_date", mode="before")
    @classmethod
    def _calendar_date(cls, value: object) -> date:
        if not isinstance(value, str):
            raise ValueError(f"use {DATE_FORMAT_HINT}")
        return parse_calendar_date(value.strip())


class MedicationResponse(BaseModel):
    id: int
    name: str
    dose: str
    start_date: date
    daily_frequency: int
    day_interval: int
    created_at: datetime

    model_config = {"from_attributes": True}


class MedicationListResponse(BaseModel):
    medications: list[MedicationResponse]
