from typing import List
from fastapi import APIRouter, HTTPException, Depends, Response
from sqlalchemy.orm import Session, joinedload
from app.db.models.bet import Bet
from app.db.models.race import Race
from app.db.models.user import User
from app.schemas.bet import BetCreate, BetOut, BetWithRaceOut
from app.schemas.race import utcnow
from app.core.deps import get_current_user, get_db

router = APIRouter(prefix="/bets", tags=["Bets"])

@router.get("", response_model=List[BetWithRaceOut])
def list_my_bets(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return (
        db.query(Bet)
        .options(joinedload(Bet.race))
        .filter(Bet.user_id == current_user.id)
        .order_by(Bet.created_at.desc(), Bet.id.desc())
        .all()
    )

@router.post("", response_model=BetOut)
def upsert_bet(
    bet_in: BetCreate,
    response: Response,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    race = db.get(Race, bet_in.race_id)
    if not race:
        raise HTTPException(status_code=404, detail="Race not found")

    if utcnow() >= race.betting_deadline:
        raise HTTPException(status_code=400, detail="Betting is closed for this race")

    predictions = bet_in.predictions.model_dump()

    bet = (
        db.query(Bet)
        .filter(
            Bet.user_id == current_user.id,
            Bet.race_id == race.id
        )
        .first()
    )

    if bet:
        bet.predictions = predictions
        db.commit()
        db.refresh(bet)
        return bet

    bet = Bet(
        user_id=current_user.id,
        race_id=race.id,
        predictions=predictions,
    )
    db.add(bet)
    db.commit()
    db.refresh(bet)

    response.status_code = 201
    return bet

@router.get("/{bet_id}", response_model=BetWithRaceOut)
def get_bet(
    bet_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    bet = db.get(Bet, bet_id)
    if not bet:
        raise HTTPException(status_code=404, detail="Bet not found")

    if bet.user_id != current_user.id and not current_user.is_admin:
        raise HTTPException(status_code=403, detail="Not your bet")

    return bet
