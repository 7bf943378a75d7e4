"""Activity feed and system settings endpoints."""

from __future__ import annotations

import logging

from flask import Blueprint, jsonify, request

from ..store import SystemSettings
from .auth_simple import require_admin
from .state import get_store

settings_bp = Blueprint("settings", __name__, url_prefix="/api/admin")

logger = logging.getLogger(__name__)

SETTINGS_ACTOR = "System Administrator"


@settings_bp.get("/getActivityLog")
@require_admin
def activity_log():
    return jsonify(get_store().activity_feed())


@settings_bp.get("/getSettings")
@require_admin
def get_settings():
    return jsonify(get_store().get_settings())


@settings_bp.post("/saveSettings")
@require_admin
def save_settings():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({"error": "Request body must be a JSON object."}), 400

    store = get_store()
    store.replace_settings(SystemSettings.from_payload(payload))
    store.record("settings", SETTINGS_ACTOR, "Updated system settings", "settings")
    logger.info("System settings updated for %s", payload.get("semester"))

    return jsonify({"success": True, "message": "Settings saved successfully"})


__all__ = ["settings_bp"]
