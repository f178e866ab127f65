import os
from dotenv import load_dotenv

# Lee el .env de la raíz del proyecto (si existe)
load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./f1_betting.db")

# JWT
SECRET_KEY = os.getenv("SECRET_KEY", "change-me-in-production")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))

# Orígenes permitidos para el frontend
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
    ).split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

FASTF1_CACHE_DIR = os.getenv("FASTF1_CACHE_DIR", "cache")
