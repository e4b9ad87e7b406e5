import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_attendance_test"),
}

# Fixed defaults so tests do not depend on the shell environment
DEDUCTION_POLICY = {}
ORGANIZATION_NAME = "Empresa de Prueba"
CURRENCY_SYMBOL = "S/."
MAX_UPLOAD_BYTES = 1024 * 1024

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
