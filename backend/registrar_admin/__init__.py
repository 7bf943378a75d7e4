"""Registrar admin dashboard: Flask application factory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from flask import Flask, jsonify, send_from_directory
from pymongo.errors import PyMongoError

from . import config
from .config import ConfigError
from .db import seed_admin
from .routes import auth_simple_bp, reports_bp, settings_bp
from .routes.state import STORE_EXTENSION_KEY
from .store import DashboardStore

logger = logging.getLogger(__name__)

STATIC_FOLDER = Path(__file__).resolve().parents[2] / "frontend"


def _seed_admin_account() -> bool:
    try:
        inserted = seed_admin()
    except (ConfigError, PyMongoError):
        logger.exception(
            "Could not seed the admin account; logins will fail until it exists"
        )
        return False

    if inserted:
        logger.info("Admin account '%s' created", config.ADMIN_USER)
    return True


def create_app(
    overrides: Mapping[str, Any] | None = None,
    store: DashboardStore | None = None,
) -> Flask:
    app = Flask(__name__, static_folder=str(STATIC_FOLDER), static_url_path="/")
    app.secret_key = config.SECRET_KEY
    app.config.update(
        SESSION_COOKIE_NAME=config.SESSION_COOKIE_NAME,
        ADMIN_API_PROTECTED=config.ADMIN_API_PROTECTED,
        SEED_ADMIN=config.SEED_ADMIN_ON_STARTUP,
        ACTIVITY_LOG_LIMIT=config.ACTIVITY_LOG_LIMIT,
    )
    if overrides:
        app.config.update(overrides)

    app.extensions[STORE_EXTENSION_KEY] = store or DashboardStore(
        max_entries=app.config["ACTIVITY_LOG_LIMIT"]
    )

    app.register_blueprint(auth_simple_bp)
    app.register_blueprint(reports_bp)
    app.register_blueprint(settings_bp)

    app.config["ADMIN_SEEDED"] = _seed_admin_account() if app.config["SEED_ADMIN"] else None

    @app.get("/api/health")
    def health():
        return jsonify({"ok": True, "admin_seeded": app.config["ADMIN_SEEDED"]})

    @app.route("/")
    def root():
        return send_from_directory(app.static_folder, "login.html")

    return app


__all__ = ["create_app"]
