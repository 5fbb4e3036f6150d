"""REPORT-01: 주간 복용 리포트 (예상 vs 실제)."""
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ...config.database import get_db
from ...models.user import User
from ...schemas.consumption_report import DayResult
from ...services.medications import MedicationDirectory
from ...services.consumptions import ConsumptionStore
from ...services.consumption_report import build_weekly_report
from ...middleware.jwt import get_current_user

router = APIRouter()


@router.get(
    "",
    response_model=list[DayResult],
    summary="REPORT-01 start_date부터 7일간 예상/실제 복용",
    responses={
        400: {"description": "start_date 누락 또는 형식 오류 (YYYY-MM-DD)"},
        401: {"description": "토큰 없음/만료"},
    },
)
async def weekly_report(
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
    start_date: str | None = Query(None, description="YYYY-MM-DD"),
):
    # start_date 검증은 서비스에서 (누락/형식 오류 → ReportValidationError → 400)
    return await build_weekly_report(
        MedicationDirectory(db),
        ConsumptionStore(db),
        user.id,
        start_date,
    )
