from typing import List
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session
from app.core.deps import get_db
from app.api.races import get_race_or_404
from app.schemas.bet import BetWithRaceOut
from app.schemas.user import UserOut
from app.services.leaderboard import season_standings, race_standings, recent_winners

router = APIRouter(tags=["Standings"])


class StandingOut(BaseModel):
    position: int
    user_id: int
    username: str
    name: str
    points: int
    bets: int | None = None

class WinnerOut(BetWithRaceOut):
    user: UserOut


@router.get("/standings/season/{season}", response_model=List[StandingOut])
def individual_season_standings(season: int, db: Session = Depends(get_db)):
    return season_standings(db, season)

@router.get("/standings/race/{race_id}", response_model=List[StandingOut])
def race_leaderboard(race_id: int, db: Session = Depends(get_db)):
    get_race_or_404(db, race_id)
    return race_standings(db, race_id)

@router.get("/winners", response_model=List[WinnerOut])
def get_winners(db: Session = Depends(get_db)):
    return recent_winners(db)
