from sqlalchemy import func, desc
from sqlalchemy.orm import Session, joinedload
from app.db.models.bet import Bet
from app.db.models.race import Race
from app.db.models.user import User


def season_standings(db: Session, season: int):
    """
    Clasificación de la temporada: suma de puntos de las apuestas ya puntuadas.
    Empates ordenados por username.
    """
    points = func.coalesce(func.sum(Bet.score), 0).label("points")

    rows = (
        db.query(
            User.id,
            User.username,
            User.name,
            points,
            func.count(Bet.id).label("bets"),
        )
        .join(Bet, Bet.user_id == User.id)
        .join(Race, Race.id == Bet.race_id)
        .filter(Race.season == season, Bet.score.isnot(None))
        .group_by(User.id, User.username, User.name)
        .order_by(desc(points), User.username)
        .all()
    )

    return [
        {
            "position": index,
            "user_id": row.id,
            "username": row.username,
            "name": row.name,
            "points": row.points,
            "bets": row.bets,
        }
        for index, row in enumerate(rows, start=1)
    ]


def race_standings(db: Session, race_id: int):
    rows = (
        db.query(User.id, User.username, User.name, Bet.score)
        .join(Bet, Bet.user_id == User.id)
        .filter(Bet.race_id == race_id, Bet.score.isnot(None))
        .order_by(Bet.score.desc(), User.username)
        .all()
    )

    return [
        {
            "position": index,
            "user_id": row.id,
            "username": row.username,
            "name": row.name,
            "points": row.score,
        }
        for index, row in enumerate(rows, start=1)
    ]


def recent_winners(db: Session, limit: int = 10):
    """Las apuestas con más puntos de todas las carreras."""
    return (
        db.query(Bet)
        .options(joinedload(Bet.user), joinedload(Bet.race))
        .filter(Bet.score.isnot(None))
        .order_by(Bet.score.desc(), Bet.id)
        .limit(limit)
        .all()
    )
