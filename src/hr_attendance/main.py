from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .biometric.controller import register as register_biometric
from .container import Container, build_container
from .core.constants import DEFAULT_CURRENCY_SYMBOL, DEFAULT_MAX_UPLOAD_BYTES, DEFAULT_ORGANIZATION_NAME
from .database.connection import DBConfig


def create_app(container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["ORGANIZATION_NAME"] = getattr(settings, "ORGANIZATION_NAME", DEFAULT_ORGANIZATION_NAME)
    app.config["CURRENCY_SYMBOL"] = getattr(settings, "CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL)
    app.config["MAX_UPLOAD_BYTES"] = int(getattr(settings, "MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES))
    # multipart overhead on top of the file limit checked in the controller
    app.config["MAX_CONTENT_LENGTH"] = app.config["MAX_UPLOAD_BYTES"] + 64 * 1024

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger = logging.getLogger("hr_attendance")
    logger.info("settings=%s db=%s", settings_module, DBConfig.from_mapping(db_config).describe())

    if container is None:
        container = build_container(
            db_config=db_config,
            deduction_policy=getattr(settings, "DEDUCTION_POLICY", None),
        )

    register_biometric(app, container)
    return app
