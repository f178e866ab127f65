import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import CORS_ORIGINS, LOG_LEVEL

# Base y Engine para la creación de tablas
from app.db.session import engine, Base

# Importar modelos para que SQLAlchemy los "vea" antes de crear las tablas
from app.db.models import _all

# Importar las rutas (los routers)
from app.api.auth import router as auth_router
from app.api.drivers import router as drivers_router
from app.api.races import router as races_router
from app.api.race_results import router as race_results_router
from app.api.bets import router as bets_router
from app.api.standings import router as standings_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(
    title="F1 Fantasy Betting",
    version="1.0.0"
)

# Creamos las tablas en la base de datos
Base.metadata.create_all(bind=engine)

# Conectamos las piezas (routers)
app.include_router(auth_router)
app.include_router(drivers_router)
app.include_router(races_router)
app.include_router(race_results_router)
app.include_router(bets_router)
app.include_router(standings_router)

# Permiso para que el frontend hable con la API
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
def read_root():
    return {"message": "F1 Fantasy Betting API running 🏎️"}
