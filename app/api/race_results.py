import logging
from typing import List
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.orm import Session, joinedload
from app.db.models.result import Result
from app.schemas.result import RaceResultsSubmit, ResultOut, ScoringRunOut
from app.schemas.race import RaceDetailOut
from app.services.results import submit_race_results, score_race_bets
from app.services.f1_sync import F1SyncError, sync_race_results
from app.api.races import get_race_or_404
from app.core.deps import get_db, require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/races/{race_id}/results", tags=["Race Results"])

@router.post("")
def submit_results(
    race_id: int,
    data: RaceResultsSubmit,
    db: Session = Depends(get_db),
    current_user = Depends(require_admin)
):
    race = get_race_or_404(db, race_id)

    # 🔥 Guardar y calcular puntuaciones automáticamente
    run = submit_race_results(db, race, data.results, data.fastest_lap_driver)

    return {
        "race": RaceDetailOut.model_validate(race),
        "scoring": ScoringRunOut.model_validate(run),
    }

@router.get("", response_model=List[ResultOut])
def get_results(race_id: int, db: Session = Depends(get_db)):
    get_race_or_404(db, race_id)

    return (
        db.query(Result)
        .options(joinedload(Result.driver))
        .filter(Result.race_id == race_id)
        .order_by(Result.position.is_(None), Result.position)
        .all()
    )

@router.post("/rescore", response_model=ScoringRunOut)
def rescore_bets(
    race_id: int,
    db: Session = Depends(get_db),
    current_user = Depends(require_admin)
):
    race = get_race_or_404(db, race_id)
    if not race.is_completed:
        raise HTTPException(status_code=400, detail="Race results not submitted yet")

    return score_race_bets(db, race)

@router.post("/sync", response_model=ScoringRunOut)
def sync_results(
    race_id: int,
    db: Session = Depends(get_db),
    current_user = Depends(require_admin)
):
    race = get_race_or_404(db, race_id)

    try:
        return sync_race_results(db, race)
    except F1SyncError as e:
        logger.exception("FastF1 sync failed for race %s", race_id)
        raise HTTPException(status_code=502, detail=f"FastF1 sync failed: {e}")
