import uuid
from datetime import datetime
from sqlalchemy import Boolean, Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func
from app.db.session import Base

class Driver(Base):
    __tablename__ = "drivers"

    # El id es el que viaja en predicciones y resultados (driver_id)
    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=lambda: uuid.uuid4().hex)
    name: Mapped[str] = mapped_column(String, nullable=False) # Ej: Max Verstappen
    number: Mapped[int] = mapped_column(Integer, nullable=False) # Ej: 1
    team: Mapped[str] = mapped_column(String, nullable=False) # Ej: Red Bull Racing
    code: Mapped[str] = mapped_column(String(3), unique=True, index=True, nullable=False) # Ej: VER
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
