SECRET_KEY = "test-secret-key"

DEBUG = False
TESTING = True

STORE_BACKEND = "memory"

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "timeclock_test",
}

AUTO_INIT_DB = False
AUTO_SEED_DB = True
SEED_DEMO_DATA = False

API_PREFIX = "/api"
CORS_ORIGINS = "*"

SESSION_TTL_HOURS = 0
ENFORCE_SINGLE_ACTIVE_BREAK = False

LOG_LEVEL = "WARNING"
