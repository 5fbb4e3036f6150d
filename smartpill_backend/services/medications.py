"""복용 약 저장소: 모든 조회/수정은 소유자(user_id) 기준."""
import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.medication import Medication
from ..models.medication_consumption import MedicationConsumption
from ..schemas.medication import MedicationInput

logger = logging.getLogger(__name__)


class MedicationDirectory:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_for_user(self, user_id: int) -> list[Medication]:
        """사용자의 전체 약 목록 (최근 등록 순)."""
        result = await self.db.execute(
            select(Medication)
            .where(Medication.user_id == user_id)
            .order_by(Medication.created_at.desc(), Medication.id.desc())
        )
        return list(result.scalars().all())

    async def get_for_user(self, user_id: int, medication_id: int) -> Medication | None:
        result = await self.db.execute(
            select(Medication).where(
                Medication.id == medication_id,
                Medication.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def create(self, user_id: int, body: MedicationInput) -> Medication:
        medication = Medication(
            user_id=user_id,
            name=body.name,
            dose=body.dose,
            start_date=body.start_date,
            daily_frequency=body.daily_frequency,
            day_interval=body.day_interval,
        )
        self.db.add(medication)
        await self.db.flush()
        await self.db.refresh(medication)
        logger.info("medication %s created for user %s", medication.id, user_id)
        return medication

    async def update(self, user_id: int, medication_id: int, body: MedicationInput) -> Medication | None:
        medication = await self.get_for_user(user_id, medication_id)
        if not medication:
            return None
        medication.name = body.name
        medication.dose = body.dose
        medication.start_date = body.start_date
        medication.daily_frequency = body.daily_frequency
        medication.day_interval = body.day_interval
        await self.db.flush()
        await self.db.refresh(medication)
        return medication

    async def delete(self, user_id: int, medication_id: int) -> bool:
        """약과 복용 기록을 함께 삭제. 소유한 약이 없으면 False."""
        medication = await self.get_for_user(user_id, medication_id)
        if not medication:
            return False
        await self.db.execute(
            delete(MedicationConsumption).where(MedicationConsumption.medication_id == medication.id)
        )
        await self.db.delete(medication)
        await self.db.flush()
        logger.info("medication %s deleted for user %s", medication_id, user_id)
        return True
