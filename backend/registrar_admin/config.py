"""Application configuration helpers."""

import os

from dotenv import load_dotenv

_BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_DOTENV_PATH = os.path.join(_BASE_DIR, ".env")

if os.path.exists(_DOTENV_PATH):
    load_dotenv(_DOTENV_PATH)


class ConfigError(RuntimeError):
    """Raised when configuration values are missing or invalid."""


def _env_flag(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer.") from None


SECRET_KEY = os.getenv("SECRET_KEY", "dev-registrar-admin-secret")
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "registrar_admin_session")

DEFAULT_ADMIN_USER = "admin"
DEFAULT_ADMIN_PASS = "admin123"

ADMIN_USER = os.getenv("ADMIN_USER", DEFAULT_ADMIN_USER)
ADMIN_PASS = os.getenv("ADMIN_PASS", DEFAULT_ADMIN_PASS)
ADMIN_NAME = os.getenv("ADMIN_NAME", "System Administrator")

SEED_ADMIN_ON_STARTUP = _env_flag("SEED_ADMIN_ON_STARTUP", True)
ADMIN_API_PROTECTED = _env_flag("ADMIN_API_PROTECTED", False)
ACTIVITY_LOG_LIMIT = _env_int("ACTIVITY_LOG_LIMIT", 0)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

_MONGO_URI_CACHE = None
_DB_NAME_CACHE = None


def get_mongo_uri():
    """Return the MongoDB connection string from the environment."""

    global _MONGO_URI_CACHE

    if _MONGO_URI_CACHE:
        return _MONGO_URI_CACHE

    uri = os.getenv("MONGODB_URI")
    if not uri:
        raise ConfigError("MONGODB_URI is not set. Define it in backend/.env.")

    _MONGO_URI_CACHE = uri
    return uri


def get_db_name():
    """Return the database name derived from the MongoDB URI or env var."""

    global _DB_NAME_CACHE

    if _DB_NAME_CACHE:
        return _DB_NAME_CACHE

    db_name = os.getenv("MONGODB_DB")
    if db_name:
        _DB_NAME_CACHE = db_name
        return db_name

    uri = get_mongo_uri()
    main = uri.split("?", 1)[0].rstrip("/")
    after_scheme = main.split("://", 1)[1] if "://" in main else main

    candidate = after_scheme.split("/", 1)[1] if "/" in after_scheme else ""
    if not candidate:
        raise ConfigError(
            "Database name not found. Provide it via MONGODB_URI or MONGODB_DB."
        )

    _DB_NAME_CACHE = candidate
    return candidate


def uses_default_admin_credentials():
    return ADMIN_USER == DEFAULT_ADMIN_USER and ADMIN_PASS == DEFAULT_ADMIN_PASS


__all__ = [
    "ConfigError",
    "get_mongo_uri",
    "get_db_name",
    "uses_default_admin_credentials",
]
