import os

SECRET_KEY = os.getenv("SECRET_KEY", "change-me")

DEBUG = False

STORE_BACKEND = os.getenv("STORE_BACKEND", "mysql")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timeclock_db"),
}

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))

API_PREFIX = os.getenv("API_PREFIX", "/api")
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

SESSION_TTL_HOURS = int(os.getenv("SESSION_TTL_HOURS", "0"))
ENFORCE_SINGLE_ACTIVE_BREAK = bool(int(os.getenv("ENFORCE_SINGLE_ACTIVE_BREAK", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
