"""복용 기록 저장소."""
import logging
from collections.abc import Iterable
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.medication import Medication
from ..models.medication_consumption import MedicationConsumption
from ..schemas.consumption import ConsumptionInput
from ..schemas.consumption_report import ActualConsumption
from ..utils.calendar_date import format_calendar_date, parse_calendar_date

logger = logging.getLogger(__name__)


class ConsumptionStore:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create(
        self,
        user_id: int,
        medication_id: int,
        body: ConsumptionInput,
    ) -> MedicationConsumption | None:
        """소유한 약에 복용 기록 추가. 약이 없거나 다른 사용자 소유면 None."""
        owned = await self.db.execute(
            select(Medication.id).where(
                Medication.id == medication_id,
                Medication.user_id == user_id,
            )
        )
        if owned.scalar_one_or_none() is None:
            return None
        consumption = MedicationConsumption(
            medication_id=medication_id,
            date=parse_calendar_date(body.date),
            time=body.time,
        )
        self.db.add(consumption)
        await self.db.flush()
        await self.db.refresh(consumption)
        return consumption

    async def list_for_medications(
        self,
        user_id: int,
        medication_ids: Iterable[int],
        date_from: date,
        date_to: date,
    ) -> list[ActualConsumption]:
        """date_from~date_to(양끝 포함) 복용 기록, (date, time) 오름차순."""
        ids = list(medication_ids)
        if not ids:
            return []
        q = (
            select(
                MedicationConsumption.id,
                MedicationConsumption.medication_id,
                Medication.name.label("medication_name"),
                MedicationConsumption.date,
                MedicationConsumption.time,
            )
            .join(Medication, MedicationConsumption.medication_id == Medication.id)
            .where(
                Medication.user_id == user_id,
                MedicationConsumption.medication_id.in_(ids),
                MedicationConsumption.date >= date_from,
                MedicationConsumption.date <= date_to,
            )
            .order_by(
                MedicationConsumption.date.asc(),
                MedicationConsumption.time.asc(),
                MedicationConsumption.id.asc(),
            )
        )
        result = await self.db.execute(q)
        rows = result.all()
        logger.debug("fetched %d consumptions for user %s (%s ~ %s)", len(rows), user_id, date_from, date_to)
        return [
            ActualConsumption(
                id=r.id,
                medication_id=r.medication_id,
                medication_name=r.medication_name,
                date=format_calendar_date(r.date),
                time=r.time,
            )
            for r in rows
        ]
