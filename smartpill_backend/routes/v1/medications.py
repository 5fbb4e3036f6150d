"""MED-01~05: 복용 약 CRUD, MED-06: 복용 기록."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ...config.database import get_db
from ...models.user import User
from ...schemas.medication import MedicationInput, MedicationResponse, MedicationListResponse
from ...schemas.consumption import ConsumptionInput, ConsumptionResponse
from ...services.medications import MedicationDirectory
from ...services.consumptions import ConsumptionStore
from ...middleware.jwt import get_current_user

router = APIRouter()

MedicationId = Annotated[int, Path(ge=1, description="medication id")]

NOT_FOUND = "Medication not found"


@router.get(
    "",
    response_model=MedicationListResponse,
    summary="MED-01 복용 약 목록 (최근 등록 순)",
    responses={401: {"description": "토큰 없음/만료"}},
)
async def medication_list(
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
):
    rows = await MedicationDirectory(db).list_for_user(user.id)
    return MedicationListResponse(medications=[MedicationResponse.model_validate(r) for r in rows])


@router.post(
    "",
    response_model=MedicationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="MED-02 복용 약 등록",
    responses={400: {"description": "입력값 오류"}},
)
async def medication_create(
    body: MedicationInput,
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
):
    medication = await MedicationDirectory(db).create(user.id, body)
    return MedicationResponse.model_validate(medication)


@router.get(
    "/{medication_id}",
    response_model=MedicationResponse,
    summary="MED-03 복용 약 조회",
    responses={404: {"description": "약 없음 (다른 사용자 소유 포함)"}},
)
async def medication_get(
    medication_id: MedicationId,
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
):
    medication = await MedicationDirectory(db).get_for_user(user.id, medication_id)
    if not medication:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return MedicationResponse.model_validate(medication)


@router.put(
    "/{medication_id}",
    response_model=MedicationResponse,
    summary="MED-04 복용 약 수정",
    responses={
        400: {"description": "입력값 오류"},
        404: {"description": "약 없음 (다른 사용자 소유 포함)"},
    },
)
async def medication_update(
    medication_id: MedicationId,
    body: MedicationInput,
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
):
    medication = await MedicationDirectory(db).update(user.id, medication_id, body)
    if not medication:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return MedicationResponse.model_validate(medication)


@router.delete(
    "/{medication_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="MED-05 복용 약 삭제 (복용 기록 포함)",
    responses={404: {"description": "약 없음 (다른 사용자 소유 포함)"}},
)
async def medication_delete(
    medication_id: MedicationId,
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
):
    if not await MedicationDirectory(db).delete(user.id, medication_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{medication_id}/consumptions",
    response_model=ConsumptionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="MED-06 복용 기록 추가",
    responses={
        400: {"description": "날짜(YYYY-MM-DD)/시간(HH:MM[:SS]) 형식 오류"},
        404: {"description": "약 없음 (다른 사용자 소유 포함)"},
    },
)
async def consumption_create(
    medication_id: MedicationId,
    body: ConsumptionInput,
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
):
    consumption = await ConsumptionStore(db).create(user.id, medication_id, body)
    if not consumption:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return ConsumptionResponse.model_validate(consumption)
