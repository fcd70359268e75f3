"""Schema bootstrap: idempotent migrations and a single admin seed."""

import pytest

from catalog_api.app.core.db import MIGRATIONS, Store, init_db, resolve_database_path
from catalog_api.app.core.security import verify_password
from catalog_api.app.main import create_app

from tests.conftest import ADMIN_PASSWORD, ADMIN_USERNAME, make_settings


def _tables(store):
    with store.cursor() as cursor:
        rows = cursor.execute("SELECT name FROM sqlite_master WHERE type = 'table'").fetchall()
    return {row["name"] for row in rows}


def test_init_db_creates_all_tables(store, settings):
    init_db(store, settings)
    assert {"users", "admins", "services", "requests", "migrations"} <= _tables(store)


def test_init_db_records_every_migration(store, settings):
    init_db(store, settings)
    with store.cursor() as cursor:
        versions = [row["version"] for row in cursor.execute("SELECT version FROM migrations ORDER BY version")]
    assert versions == [version for version, _ in MIGRATIONS]


def test_init_db_is_idempotent_and_seeds_admin_once(store, settings):
    init_db(store, settings)
    init_db(store, settings)
    with store.cursor() as cursor:
        admins = cursor.execute("SELECT username, password, role FROM admins").fetchall()
    assert len(admins) == 1
    assert admins[0]["username"] == ADMIN_USERNAME
    assert admins[0]["role"] == "admin"
    assert verify_password(ADMIN_PASSWORD, admins[0]["password"])


def test_rerunning_init_db_keeps_existing_rows(store, settings):
    init_db(store, settings)
    with store.cursor() as cursor:
        cursor.execute(
            "INSERT INTO services (category, name) VALUES (?, ?)", ("Cleaning", "Carpet")
        )
    init_db(store, settings)
    with store.cursor() as cursor:
        assert cursor.execute("SELECT COUNT(*) AS n FROM services").fetchone()["n"] == 1


def test_store_cursor_rolls_back_on_error(store, settings):
    init_db(store, settings)
    try:
        with store.cursor() as cursor:
            cursor.execute("INSERT INTO services (category, name) VALUES (?, ?)", ("A", "B"))
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    with store.cursor() as cursor:
        assert cursor.execute("SELECT COUNT(*) AS n FROM services").fetchone()["n"] == 0


def test_relative_database_path_resolves_to_project_root():
    path = resolve_database_path("catalog.db")
    assert path.endswith("catalog.db")
    assert path != "catalog.db"


def test_in_memory_database_is_rejected():
    # Each cursor opens its own connection, so :memory: would never see the schema.
    with pytest.raises(ValueError, match=":memory:"):
        Store(":memory:")


def test_app_factory_rejects_in_memory_database(tmp_path):
    with pytest.raises(ValueError):
        create_app(make_settings(tmp_path, database_url=":memory:"))
