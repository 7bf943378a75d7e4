"""MongoDB helpers for the application."""

from __future__ import annotations

import hmac
import logging
from typing import Any, Dict

from pymongo import MongoClient
from pymongo.collection import Collection

from . import config
from .config import get_db_name, get_mongo_uri

logger = logging.getLogger(__name__)

_MONGO_CLIENT = None
_MONGO_DB = None


def _get_client():
    """Create (or reuse) a MongoDB client using the configured URI."""

    global _MONGO_CLIENT

    if _MONGO_CLIENT is None:
        _MONGO_CLIENT = MongoClient(get_mongo_uri(), serverSelectionTimeoutMS=5000)
    return _MONGO_CLIENT


def get_db():
    """Return the application's MongoDB database instance."""

    global _MONGO_DB

    if _MONGO_DB is None:
        _MONGO_DB = _get_client()[get_db_name()]
    return _MONGO_DB


def close_client() -> None:
    global _MONGO_CLIENT, _MONGO_DB

    if _MONGO_CLIENT is not None:
        _MONGO_CLIENT.close()
    _MONGO_CLIENT = None
    _MONGO_DB = None


_admins_indexes_created = False


def _ensure_admins_indexes(collection: Collection) -> None:
    global _admins_indexes_created
    if _admins_indexes_created:
        return

    collection.create_index("username", unique=True, name="unique_username")
    _admins_indexes_created = True


def get_admins_collection() -> Collection:
    """Return the collection that stores admin accounts."""

    collection = get_db()["admins"]
    _ensure_admins_indexes(collection)
    return collection


def serialize_admin(document):
    """Convert an admin document into a dict safe to hand to callers.

    The password never leaves this module.
    """

    return {
        "_id": str(document.get("_id", "")),
        "username": document.get("username"),
        "name": document.get("name"),
    }


def find_admin(username: str, password: str) -> Dict[str, Any] | None:
    """Return the admin whose username and password both match exactly."""

    document = get_admins_collection().find_one({"username": username})
    if not document:
        return None

    stored = str(document.get("password", ""))
    if not hmac.compare_digest(stored.encode("utf-8"), password.encode("utf-8")):
        return None
    return serialize_admin(document)


def seed_admin() -> bool:
    """Insert the configured admin account unless one already exists.

    Uses a single upsert against the unique username index, so concurrent
    startups cannot create duplicates. Returns True when a document was
    inserted.
    """

    collection = get_admins_collection()
    result = collection.update_one(
        {"username": config.ADMIN_USER},
        {
            "$setOnInsert": {
                "username": config.ADMIN_USER,
                "password": config.ADMIN_PASS,
                "name": config.ADMIN_NAME,
            }
        },
        upsert=True,
    )

    if config.uses_default_admin_credentials():
        logger.warning(
            "Admin account '%s' uses the default password; set ADMIN_PASS in backend/.env",
            config.ADMIN_USER,
        )

    return result.upserted_id is not None


def get_courses_collection() -> Collection:
    """Return the course catalogue collection."""

    return get_db()["courses"]


def count_courses() -> int:
    return get_courses_collection().count_documents({})


__all__ = [
    "get_db",
    "close_client",
    "get_admins_collection",
    "serialize_admin",
    "find_admin",
    "seed_admin",
    "get_courses_collection",
    "count_courses",
]
