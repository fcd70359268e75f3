"""
SQLite store handle and schema bootstrap.

``Store`` is constructed once by the application factory and handed to
services through the ``api.deps.get_store`` dependency.  Each service
call opens its own short-lived connection with ``Store.cursor()``, which commits
on success, rolls back on error and always closes the connection.

``init_db`` applies the versioned schema (recorded in the
``migrations`` table) and seeds the configured administrator.  It is
idempotent and runs once before the application starts serving.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import Settings
from .security import hash_password

logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            username TEXT NOT NULL UNIQUE,
            password TEXT NOT NULL,
            role TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS admins (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            username TEXT NOT NULL UNIQUE,
            password TEXT NOT NULL,
            role TEXT NOT NULL DEFAULT 'admin'
        );

        CREATE TABLE IF NOT EXISTS services (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            category TEXT NOT NULL,
            name TEXT NOT NULL,
            price REAL,
            image_url TEXT,
            description TEXT
        );

        CREATE TABLE IF NOT EXISTS requests (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            username TEXT NOT NULL,
            product_name TEXT NOT NULL,
            quantity INTEGER NOT NULL DEFAULT 1,
            request_date TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            status TEXT DEFAULT 'Pending'
        );
        """,
    ),
    # Migration 2: lookups by username on the request tracking page
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_requests_username ON requests(username);
        """,
    ),
]


def resolve_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are used as is; relative paths are resolved against
    the project root.  ``:memory:`` is refused because every
    ``Store.cursor()`` opens a new connection, and each one would see
    its own empty database.
    """
    if database_url == ":memory:":
        raise ValueError(
            "DATABASE_URL=:memory: is not supported; point it at a file "
            "(a path under a temporary directory works for throwaway runs)"
        )
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


class Store:
    """Handle on the SQLite database shared by all request handlers."""

    def __init__(self, database_url: str) -> None:
        self.path = resolve_database_path(database_url)

    def connect(self) -> sqlite3.Connection:
        """Open a new connection returning rows keyed by column name."""
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor on a fresh connection and release it on exit."""
        conn = self.connect()
        try:
            yield conn.cursor()
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()


def init_db(store: Store, settings: Settings) -> None:
    """Apply pending migrations and seed the administrator account.

    Safe to call on every start: migrations already recorded in the
    ``migrations`` table are skipped and the admin seed is an
    insert-or-ignore keyed on the username.
    """
    with store.cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) AS version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying migration %s", version)
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version

        cursor.execute(
            "INSERT OR IGNORE INTO admins (username, password, role) VALUES (?, ?, 'admin')",
            (settings.admin_username, hash_password(settings.admin_password)),
        )
        if cursor.rowcount:
            logger.info("Seeded admin account %s", settings.admin_username)
    logger.info("Database ready at %s", store.path)
