"""medication_consumptions 테이블: 실제 복용 기록."""
import datetime as dt
from sqlalchemy import BigInteger, Integer, String, Date, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from ..config.database import Base


class MedicationConsumption(Base):
    __tablename__ = "medication_consumptions"

    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    medication_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("medications.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # 컬럼명이 date/time이라 datetime 모듈은 dt로 참조
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, comment="복용일")
    time: Mapped[str] = mapped_column(String(8), nullable=False, comment="HH:MM 또는 HH:MM:SS (입력값 그대로)")
    created_at: Mapped[dt.datetime] = mapped_column(DateTime, nullable=False, default=dt.datetime.utcnow)

    medication = relationship("Medication", back_populates="consumptions")
