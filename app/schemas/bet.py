from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, model_validator
from app.schemas.race import RaceOut
from app.schemas.scoring import Prediction


class BetPrediction(Prediction):
    """
    Predicción tal y como la envía el usuario.
    El motor de puntuación no valida nada: las posiciones o pilotos
    repetidos se rechazan aquí, al guardar la apuesta.
    """

    @model_validator(mode="after")
    def check_unique_entries(self):
        positions = [p.position for p in self.positions]
        if len(positions) != len(set(positions)):
            raise ValueError("Each position can only be predicted once")

        drivers = [p.driver_id for p in self.positions]
        if len(drivers) != len(set(drivers)):
            raise ValueError("Each driver can only be placed once")

        return self

class BetCreate(BaseModel):
    race_id: int
    predictions: BetPrediction

class BetOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    race_id: int
    predictions: dict
    score: Optional[int] = None
    scoring_details: Optional[dict] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class BetWithRaceOut(BetOut):
    race: RaceOut
