from datetime import datetime
from typing import Optional
from sqlalchemy import Integer, ForeignKey, UniqueConstraint, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func
from app.db.session import Base
from app.schemas.scoring import Prediction

class Bet(Base):
    __tablename__ = "bets"
    __table_args__ = (
        # Un usuario solo puede hacer 1 apuesta por carrera
        UniqueConstraint("user_id", "race_id", name="uq_user_race"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    race_id: Mapped[int] = mapped_column(Integer, ForeignKey("races.id", ondelete="CASCADE"), nullable=False)
    predictions: Mapped[dict] = mapped_column(JSON, nullable=False)
    score: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    scoring_details: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), onupdate=func.now(), server_default=func.now())

    # Relaciones
    user: Mapped["User"] = relationship("User", back_populates="bets")
    race: Mapped["Race"] = relationship("Race", back_populates="bets")

    @property
    def parsed_prediction(self) -> Prediction:
        """El JSON guardado, ya validado (lanza ValidationError si está corrupto)."""
        return Prediction.model_validate(self.predictions)
