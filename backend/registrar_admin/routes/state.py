"""Access to the application's dashboard store from request handlers."""

from flask import current_app

from ..store import DashboardStore

STORE_EXTENSION_KEY = "dashboard_store"


def get_store() -> DashboardStore:
    return current_app.extensions[STORE_EXTENSION_KEY]
