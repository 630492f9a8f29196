import os

SECRET_KEY = os.getenv("SECRET_KEY", "mulykap-secret")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "mulykap"),
}

# Fixed administrator account
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "1234")

# Reference times for the history (HH:MM, on the stored UTC clock)
ARRIVAL_THRESHOLD = os.getenv("ARRIVAL_THRESHOLD", "08:15")
DEPARTURE_REFERENCE = os.getenv("DEPARTURE_REFERENCE", "17:00")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
PORT = int(os.getenv("PORT", "3000"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo agents on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
