"""Shared fixtures: in-memory database, API client and a few factories."""

import os

# Antes de importar la app: nada de ficheros .db en los tests
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.session import Base
from app.db.models import _all  # noqa: F401
from app.db.models.driver import Driver
from app.db.models.race import Race
from app.db.models.user import User
from app.core.deps import get_db
from app.core.security import create_access_token, hash_password
from main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    Session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def client(engine):
    Session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    def override_get_db():
        session = Session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_user(db, username="racer", is_admin=False):
    user = User(
        name=username.title(),
        email=f"{username}@example.com",
        username=username,
        hashed_password=hash_password("Password1"),
        is_admin=is_admin,
    )
    db.add(user)
    db.commit()
    return user


def auth_headers(user):
    token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user(db):
    return make_user(db, "racer")


@pytest.fixture
def admin(db):
    return make_user(db, "steward", is_admin=True)


@pytest.fixture
def user_headers(user):
    return auth_headers(user)


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)


@pytest.fixture
def drivers(db):
    """Ten drivers keyed by code, VER..ALB."""
    grid = [
        ("VER", "Max Verstappen", 1, "Red Bull Racing"),
        ("NOR", "Lando Norris", 4, "McLaren"),
        ("LEC", "Charles Leclerc", 16, "Ferrari"),
        ("RUS", "George Russell", 63, "Mercedes"),
        ("HAM", "Lewis Hamilton", 44, "Ferrari"),
        ("PIA", "Oscar Piastri", 81, "McLaren"),
        ("SAI", "Carlos Sainz", 55, "Williams"),
        ("ALO", "Fernando Alonso", 14, "Aston Martin"),
        ("GAS", "Pierre Gasly", 10, "Alpine"),
        ("ALB", "Alexander Albon", 23, "Williams"),
    ]
    by_code = {}
    for code, name, number, team in grid:
        driver = Driver(id=code.lower(), code=code, name=name, number=number, team=team)
        db.add(driver)
        by_code[code] = driver
    db.commit()
    return by_code


def make_race(db, season=2025, round_number=1, deadline_in=timedelta(days=2)):
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    race = Race(
        name=f"Round {round_number}",
        location="Somewhere",
        date=now + deadline_in + timedelta(hours=2),
        season=season,
        round=round_number,
        betting_deadline=now + deadline_in,
    )
    db.add(race)
    db.commit()
    return race


@pytest.fixture
def open_race(db):
    return make_race(db)


@pytest.fixture
def closed_race(db):
    return make_race(db, round_number=2, deadline_in=timedelta(hours=-1))
