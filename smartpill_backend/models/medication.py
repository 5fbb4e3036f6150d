"""medications 테이블: 사용자별 복용 약과 복용 주기."""
from datetime import date, datetime
from sqlalchemy import BigInteger, Integer, String, Date, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from ..config.database import Base


class Medication(Base):
    __tablename__ = "medications"

    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    dose: Mapped[str] = mapped_column(String(100), nullable=False)
    # 복용 주기: start_date부터 day_interval일마다, 하루 daily_frequency회
    start_date: Mapped[date] = mapped_column(Date, nullable=False, comment="첫 복용일")
    daily_frequency: Mapped[int] = mapped_column(Integer, nullable=False, comment="복용일 하루 복용 횟수")
    day_interval: Mapped[int] = mapped_column(Integer, nullable=False, comment="복용일 간격(일)")
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)

    user = relationship("User", back_populates="medications")
    consumptions = relationship("MedicationConsumption", back_populates="medication", passive_deletes=True)
