SECRET_KEY = "test-secret"

STORE_BACKEND = "memory"
STORE_NAMESPACE = "college_attendance_test"

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "attendance_test",
}

DEBUG = False
TESTING = True

PERSISTENCE_LIFETIME = "session"

AUTO_INIT_DB = False
AUTO_SEED = False

CREDENTIALS_BACKEND = "static"
ACCOUNTS = []

LOG_LEVEL = "WARNING"
LOG_FILE = ""
