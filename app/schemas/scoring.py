from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

# Typed records consumed and produced by the scoring engine.
# Stored bet JSON is parsed into these at the storage boundary.


class PredictionPosition(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: int = Field(ge=1)
    driver_id: str


class Prediction(BaseModel):
    model_config = ConfigDict(frozen=True)

    positions: List[PredictionPosition] = Field(default_factory=list)
    fastest_lap: Optional[str] = None
    dnfs: List[str] = Field(default_factory=list)


class RaceResultEntry(BaseModel):
    """One driver's official result. `position` is None for DNF / unclassified."""
    model_config = ConfigDict(frozen=True, from_attributes=True)

    driver_id: str = Field(min_length=1)
    position: Optional[int] = Field(default=None, ge=1)
    dnf: bool = False
    fastest_lap: bool = False


class ScoringDetail(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    points: int
    description: str


class ScoringBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_score: int
    details: List[ScoringDetail] = Field(default_factory=list)
