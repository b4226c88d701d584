import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# memory | mysql
STORE_BACKEND = os.getenv("STORE_BACKEND", "memory")
STORE_NAMESPACE = os.getenv("STORE_NAMESPACE", "college_attendance")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

DEBUG = True

# session: collections are wiped on every start; durable: they are kept
PERSISTENCE_LIFETIME = os.getenv("PERSISTENCE_LIFETIME", "durable")

# Creates the kv_store table on startup (CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: demo roster and subjects on startup
AUTO_SEED = bool(int(os.getenv("AUTO_SEED", "0")))

# static | hashed
CREDENTIALS_BACKEND = os.getenv("CREDENTIALS_BACKEND", "static")
ACCOUNTS = []

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FILE = os.getenv("LOG_FILE", "")
