import os

from .config import CURRENCY_SYMBOL, MAX_UPLOAD_BYTES, ORGANIZATION_NAME, db_config_from_env, deduction_policy_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = db_config_from_env()

DEDUCTION_POLICY = deduction_policy_from_env()

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
