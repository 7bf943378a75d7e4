"""Seed helper that loads the admin account and course catalogue into MongoDB."""

from __future__ import annotations

from pymongo.errors import PyMongoError

from registrar_admin import config
from registrar_admin.config import ConfigError, get_db_name
from registrar_admin.db import close_client, get_courses_collection, seed_admin
from registrar_admin.sample_data import course_catalogue


def main() -> None:
    try:
        db_name = get_db_name()
    except ConfigError as exc:  # pragma: no cover - simple CLI utility
        print(f"Configuration error: {exc}")
        raise SystemExit(1)

    try:
        courses = get_courses_collection()
        documents = course_catalogue()
        courses.delete_many({})
        courses.insert_many(documents)
        print(f"Loaded {len(documents)} document(s) into 'courses' collection")

        if seed_admin():
            print(f"Created admin account '{config.ADMIN_USER}'")
        else:
            print(f"Admin account '{config.ADMIN_USER}' already exists")

        print(f"Seeding complete for database '{db_name}'.")
    except PyMongoError as exc:  # pragma: no cover - requires Mongo connection
        print(f"MongoDB error: {exc}")
        raise SystemExit(1)
    finally:
        close_client()


if __name__ == "__main__":
    main()
