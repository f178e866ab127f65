from datetime import datetime
from typing import List, Optional, TYPE_CHECKING
from sqlalchemy import Boolean, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func
from app.db.session import Base

if TYPE_CHECKING:
    from app.db.models.bet import Bet
    from app.db.models.driver import Driver
    from app.db.models.result import Result

class Race(Base):
    __tablename__ = "races"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    location: Mapped[str] = mapped_column(String, nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    season: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    round: Mapped[int] = mapped_column(Integer, nullable=False)
    # Fechas guardadas en UTC sin zona horaria
    betting_deadline: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    is_completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    fastest_lap_driver_id: Mapped[Optional[str]] = mapped_column(String(32), ForeignKey("drivers.id"), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), onupdate=func.now(), server_default=func.now())

    # Relaciones
    fastest_lap_driver: Mapped[Optional["Driver"]] = relationship("Driver")
    results: Mapped[List["Result"]] = relationship(
        "Result", back_populates="race", cascade="all, delete-orphan", order_by="Result.position"
    )
    bets: Mapped[List["Bet"]] = relationship("Bet", back_populates="race", cascade="all, delete-orphan")
