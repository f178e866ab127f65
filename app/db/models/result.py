from typing import Optional
from sqlalchemy import Boolean, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.db.session import Base

class Result(Base):
    __tablename__ = "results"
    __table_args__ = (
        # Un piloto tiene un único resultado por carrera
        UniqueConstraint("race_id", "driver_id", name="uq_race_driver"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    race_id: Mapped[int] = mapped_column(Integer, ForeignKey("races.id", ondelete="CASCADE"), nullable=False)
    driver_id: Mapped[str] = mapped_column(String(32), ForeignKey("drivers.id"), nullable=False)
    position: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)  # None = DNF / no clasificado
    dnf: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    fastest_lap: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Relaciones
    race: Mapped["Race"] = relationship("Race", back_populates="results")
    driver: Mapped["Driver"] = relationship("Driver")
