import logging
import os
from typing import Dict, List, Optional, Tuple
import fastf1
import pandas as pd
from fastf1.core import DataNotLoadedError
from sqlalchemy.orm import Session
from app.core.config import FASTF1_CACHE_DIR
from app.db.models.driver import Driver
from app.db.models.race import Race
from app.schemas.scoring import RaceResultEntry
from app.services.results import ScoringRun, submit_race_results

logger = logging.getLogger(__name__)
logging.getLogger("fastf1").setLevel(logging.WARNING)

# No tomaron la salida o fueron descalificados: sin posición, pero tampoco DNF
NOT_STARTED_STATUSES = ("did not start", "withdrew", "did not qualify")

# Errores de FastF1 al descargar o leer una sesión (requests.RequestException es un OSError)
FETCH_ERRORS = (DataNotLoadedError, ValueError, KeyError, OSError)


class F1SyncError(Exception):
    """No se pudo obtener de FastF1 una clasificación utilizable."""


def enable_cache():
    os.makedirs(FASTF1_CACHE_DIR, exist_ok=True)
    fastf1.Cache.enable_cache(FASTF1_CACHE_DIR)


def fetch_race_session(season: int, round_number: int):
    enable_cache()
    session = fastf1.get_session(season, round_number, "R")
    # Solo necesitamos resultados y vueltas
    session.load(telemetry=False, weather=False, messages=False)
    return session


def classify_row(raw_pos, raw_status) -> Tuple[Optional[int], bool]:
    """
    Devuelve (posición, dnf) a partir de ClassifiedPosition y Status de FastF1.
    ClassifiedPosition: '1'..'20', 'R', 'D', 'E', 'W', 'N'...
    """
    raw_pos = "" if pd.isna(raw_pos) else str(raw_pos)
    status = "" if pd.isna(raw_status) else str(raw_status).lower()

    if raw_pos.isnumeric():
        return int(raw_pos), False

    if status in NOT_STARTED_STATUSES or "disqualified" in status:
        return None, False

    # Sin posición y sin otra explicación: abandono en carrera
    return None, True


def fastest_lap_code(session) -> Optional[str]:
    lap = session.laps.pick_fastest()
    if lap is None or lap.empty:
        return None
    return str(lap["Driver"])


def results_from_session(
    results: pd.DataFrame,
    fastest_driver_code: Optional[str],
    drivers_by_code: Dict[str, str],
) -> List[RaceResultEntry]:
    """Convierte `session.results` de FastF1 en resultados de nuestra BD."""
    entries = []

    for _, row in results.iterrows():
        code = str(row["Abbreviation"])
        driver_id = drivers_by_code.get(code)
        if driver_id is None:
            logger.warning("Skipping unknown driver code %s", code)
            continue

        position, dnf = classify_row(row.get("ClassifiedPosition"), row.get("Status"))

        entries.append(RaceResultEntry(
            driver_id=driver_id,
            position=position,
            dnf=dnf,
            fastest_lap=(code == fastest_driver_code),
        ))

    return entries


def sync_race_results(db: Session, race: Race) -> ScoringRun:
    """Descarga la carrera de FastF1 y la guarda como resultado oficial."""
    drivers_by_code = {d.code: d.id for d in db.query(Driver).all()}

    logger.info("Loading FastF1 session %s round %s", race.season, race.round)
    try:
        session = fetch_race_session(race.season, race.round)
        results = session.results
        if results is None or results.empty:
            raise F1SyncError("FastF1 returned no results for this race")
        fl_code = fastest_lap_code(session)
        entries = results_from_session(results, fl_code, drivers_by_code)
    except FETCH_ERRORS as e:
        raise F1SyncError(str(e)) from e

    # Sin clasificación no tocamos los resultados ya guardados
    if not entries:
        raise F1SyncError("No FastF1 driver matches a driver in the pool")

    return submit_race_results(db, race, entries, drivers_by_code.get(fl_code))
