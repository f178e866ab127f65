from typing import List
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.orm import Session, joinedload
from app.db.models.race import Race
from app.db.models.result import Result
from app.schemas.race import RaceCreate, RaceUpdate, RaceOut, RaceDetailOut
from app.core.deps import get_db, require_admin

router = APIRouter(prefix="/races", tags=["Races"])


def get_race_or_404(db: Session, race_id: int) -> Race:
    race = db.get(Race, race_id)
    if not race:
        raise HTTPException(status_code=404, detail="Race not found")
    return race


@router.get("", response_model=List[RaceOut])
def list_races(db: Session = Depends(get_db)):
    return db.query(Race).order_by(Race.date.desc()).all()

@router.post("", response_model=RaceOut, status_code=201)
def create_race(
    race: RaceCreate,
    db: Session = Depends(get_db),
    current_user = Depends(require_admin)
):
    new_race = Race(**race.model_dump())
    db.add(new_race)
    db.commit()
    db.refresh(new_race)
    return new_race

@router.get("/{race_id}", response_model=RaceDetailOut)
def get_race(race_id: int, db: Session = Depends(get_db)):
    race = (
        db.query(Race)
        .options(joinedload(Race.results).joinedload(Result.driver))
        .filter(Race.id == race_id)
        .first()
    )
    if not race:
        raise HTTPException(status_code=404, detail="Race not found")
    return race

@router.patch("/{race_id}", response_model=RaceOut)
def update_race(
    race_id: int,
    race_update: RaceUpdate,
    db: Session = Depends(get_db),
    current_user = Depends(require_admin)
):
    race = get_race_or_404(db, race_id)

    # Solo lo que venga en el JSON
    for field, value in race_update.model_dump(exclude_unset=True).items():
        setattr(race, field, value)

    db.commit()
    db.refresh(race)
    return race

@router.delete("/{race_id}")
def delete_race(
    race_id: int,
    db: Session = Depends(get_db),
    current_user = Depends(require_admin)
):
    race = get_race_or_404(db, race_id)
    # Resultados y apuestas se borran en cascada
    db.delete(race)
    db.commit()
    return {"message": "Race deleted successfully"}
