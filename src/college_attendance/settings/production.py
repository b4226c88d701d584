import json
import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORE_BACKEND = os.getenv("STORE_BACKEND", "mysql")
STORE_NAMESPACE = os.getenv("STORE_NAMESPACE", "college_attendance")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

DEBUG = False

PERSISTENCE_LIFETIME = os.getenv("PERSISTENCE_LIFETIME", "durable")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED = False

CREDENTIALS_BACKEND = os.getenv("CREDENTIALS_BACKEND", "hashed")
# [{"username": ..., "password_hash": ..., "role": ..., "class_number": ...}]
ACCOUNTS = json.loads(os.getenv("ACCOUNTS_JSON", "[]"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "logs/college_attendance.log")
