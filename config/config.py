import os


def db_config_from_env(default_password: str = "") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", "hr_attendance"),
    }


def deduction_policy_from_env() -> dict:
    # Unset keys stay out so DeductionPolicy keeps its defaults
    names = {
        "tardy_minute_rate": "DEDUCTION_TARDY_MINUTE_RATE",
        "absence_day_rate": "DEDUCTION_ABSENCE_DAY_RATE",
        "early_leave_minute_rate": "DEDUCTION_EARLY_LEAVE_MINUTE_RATE",
        "tolerance_minutes": "DEDUCTION_TOLERANCE_MINUTES",
        "max_deduction_percent": "DEDUCTION_MAX_PERCENT",
    }
    return {key: os.environ[env] for key, env in names.items() if os.getenv(env)}


ORGANIZATION_NAME = os.getenv("ORGANIZATION_NAME", "Empresa")
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "S/.")
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))
