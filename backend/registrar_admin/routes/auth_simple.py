"""Simple admin authentication endpoints."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable, TypeVar, cast

from flask import Blueprint, current_app, jsonify, request, session
from pymongo.errors import PyMongoError

from ..config import ConfigError
from ..db import find_admin
from .state import get_store

auth_simple_bp = Blueprint("auth_simple", __name__, url_prefix="/api/admin")

logger = logging.getLogger(__name__)

_F = TypeVar("_F", bound=Callable[..., Any])


def require_admin(func: _F) -> _F:
    """Ensure the current session belongs to an admin when protection is on."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        if current_app.config.get("ADMIN_API_PROTECTED") and not session.get("is_admin"):
            return jsonify({"error": "forbidden"}), 403
        return func(*args, **kwargs)

    return cast(_F, wrapper)


def _login_failed():
    return (
        jsonify({
            "success": False,
            "message": "Invalid username or password",
            "adminName": None,
        }),
        401,
    )


@auth_simple_bp.post("/login")
def login():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    username = str(payload.get("username", ""))
    password = str(payload.get("password", ""))

    try:
        admin = find_admin(username, password)
    except ConfigError as exc:
        logger.exception("Missing configuration for MongoDB")
        return jsonify({"error": str(exc)}), 500
    except PyMongoError:
        logger.exception("Failed to look up admin due to MongoDB error")
        return jsonify({"error": "Database unavailable. Please try again later."}), 503

    if admin is None:
        session.clear()
        logger.warning("Rejected login for username %r", username)
        return _login_failed()

    session.clear()
    session["is_admin"] = True
    session["admin_name"] = admin["name"]
    session.permanent = False

    get_store().record("login", admin["name"], "Logged into the system", "login")
    logger.info("Admin %s logged in", admin["username"])

    return jsonify({
        "success": True,
        "message": "Login successful",
        "adminName": admin["name"],
    })


@auth_simple_bp.post("/logout")
def logout():
    session.clear()
    return jsonify({"ok": True})


@auth_simple_bp.get("/me")
def me():
    return jsonify({
        "is_admin": bool(session.get("is_admin", False)),
        "adminName": session.get("admin_name"),
    })


__all__ = ["auth_simple_bp", "require_admin"]
