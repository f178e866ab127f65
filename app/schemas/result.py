from typing import List, Optional
from pydantic import BaseModel, ConfigDict, model_validator
from app.schemas.driver import DriverOut
from app.schemas.scoring import RaceResultEntry

class RaceResultsSubmit(BaseModel):
    results: List[RaceResultEntry]
    fastest_lap_driver: Optional[str] = None

    @model_validator(mode="after")
    def check_unique_entries(self):
        drivers = [r.driver_id for r in self.results]
        if len(drivers) != len(set(drivers)):
            raise ValueError("Each driver can only appear once in the results")
        # Los DNF no tienen posición, así que solo se comparan las clasificadas
        positions = [r.position for r in self.results if r.position is not None]
        if len(positions) != len(set(positions)):
            raise ValueError("Each position can only be assigned once")
        return self

class ResultOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    driver_id: str
    position: Optional[int] = None
    dnf: bool
    fastest_lap: bool
    driver: Optional[DriverOut] = None

class ScoringRunOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    race_id: int
    scored: int
    failed_bet_ids: List[int] = []
