from datetime import datetime, timezone
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, field_validator
from app.schemas.result import ResultOut


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    # La BD guarda fechas UTC sin tzinfo
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class RaceCreate(BaseModel):
    name: str
    location: str
    date: datetime
    season: int
    round: int
    betting_deadline: datetime
    is_completed: bool = False
    is_active: bool = True

    normalize_dates = field_validator("date", "betting_deadline")(to_naive_utc)

class RaceUpdate(BaseModel):
    name: Optional[str] = None
    location: Optional[str] = None
    date: Optional[datetime] = None
    season: Optional[int] = None
    round: Optional[int] = None
    betting_deadline: Optional[datetime] = None
    is_completed: Optional[bool] = None
    is_active: Optional[bool] = None
    fastest_lap_driver_id: Optional[str] = None

    normalize_dates = field_validator("date", "betting_deadline")(to_naive_utc)

class RaceOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    location: str
    date: datetime
    season: int
    round: int
    betting_deadline: datetime
    is_completed: bool
    is_active: bool
    fastest_lap_driver_id: Optional[str] = None

class RaceDetailOut(RaceOut):
    results: List[ResultOut] = []
