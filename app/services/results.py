import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.db.models.bet import Bet
from app.db.models.race import Race
from app.db.models.result import Result
from app.schemas.scoring import RaceResultEntry
from app.services.scoring import calculate_score

logger = logging.getLogger(__name__)


@dataclass
class ScoringRun:
    race_id: int
    scored: int = 0
    failed_bet_ids: List[int] = field(default_factory=list)


def submit_race_results(
    db: Session,
    race: Race,
    entries: Sequence[RaceResultEntry],
    fastest_lap_driver_id: Optional[str] = None,
) -> ScoringRun:
    """
    Guarda el resultado oficial, cierra la carrera y puntúa todas sus apuestas.
    Sobrescribe cualquier resultado anterior de la carrera.
    """
    # Si no nos dicen quién hizo la vuelta rápida, usamos el flag de los resultados
    if fastest_lap_driver_id is None:
        fastest_lap_driver_id = next((e.driver_id for e in entries if e.fastest_lap), None)

    # 🔄 Borramos datos anteriores
    db.query(Result).filter(Result.race_id == race.id).delete()

    # 🏁 Guardar posiciones
    for entry in entries:
        db.add(Result(
            race_id=race.id,
            driver_id=entry.driver_id,
            position=entry.position,
            dnf=entry.dnf,
            fastest_lap=entry.fastest_lap,
        ))

    race.is_completed = True
    race.fastest_lap_driver_id = fastest_lap_driver_id
    db.commit()
    db.expire(race)

    logger.info("Stored %d results for race %s", len(entries), race.id)

    return score_race_bets(db, race)


def score_race_bets(db: Session, race: Race) -> ScoringRun:
    """
    Puntúa cada apuesta de la carrera por separado.
    Si una apuesta falla se deshace solo esa (SAVEPOINT) y se sigue con el resto.
    """
    race_results = db.query(Result).filter(Result.race_id == race.id).all()
    entries = [RaceResultEntry.model_validate(r) for r in race_results]

    bets = (
        db.query(Bet)
        .filter(Bet.race_id == race.id)
        .order_by(Bet.id)
        .all()
    )

    run = ScoringRun(race_id=race.id)

    for bet in bets:
        bet_id = bet.id
        try:
            with db.begin_nested():
                breakdown = calculate_score(
                    bet.parsed_prediction,
                    entries,
                    race.fastest_lap_driver_id,
                )
                bet.score = breakdown.total_score
                bet.scoring_details = breakdown.model_dump()
        except (ValidationError, SQLAlchemyError):
            logger.exception("Could not score bet %s for race %s", bet_id, race.id)
            run.failed_bet_ids.append(bet_id)
            continue

        run.scored += 1

    db.commit()

    logger.info(
        "Scored %d bets for race %s (%d failed)",
        run.scored, race.id, len(run.failed_bet_ids),
    )
    return run
