import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "mulykap_test"),
}

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "1234"

ARRIVAL_THRESHOLD = "08:15"
DEPARTURE_REFERENCE = "17:00"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
PORT = 3000

AUTO_INIT_DB = False
AUTO_SEED_DB = False
