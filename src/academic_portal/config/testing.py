import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", "system"),
    "database": os.getenv("DB_NAME", "sbk_portal_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

# Tests always run against the in-memory store
USE_DATABASE = False
AUTO_INIT_DB = False

DEFAULT_ADMIN_PASSWORD = "admin123"
DEFAULT_FACULTY_ID = "FAC001"
SESSION_TTL_MINUTES = 30
