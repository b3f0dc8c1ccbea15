# backend/config/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./food_ordering.db").strip()

TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", "24"))

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
DEBUG = _as_bool(os.getenv("DEBUG", "False"))

APP_VERSION = "1.0.0"
