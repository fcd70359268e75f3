"""
Service layer for the services catalog.

Catalog entries are created by the add route and listed in full; the
catalog is never updated or deleted through the API.  All queries use
parameterized statements.
"""

import logging
import sqlite3
from typing import List

from ..core.db import Store
from ..core.errors import InternalError, ValidationError
from ..schemas.service import ServiceCreate, ServiceRead

logger = logging.getLogger(__name__)

_COLUMNS = "id, category, name, price, image_url, description"


class CatalogService:
    """Service class for catalog entries."""

    @classmethod
    async def add_service(cls, store: Store, data: ServiceCreate) -> ServiceRead:
        """Insert a catalog entry and return the stored row."""
        if not data.category or not data.name:
            raise ValidationError("Category and name are required")
        try:
            with store.cursor() as cursor:
                cursor.execute(
                    """
                    INSERT INTO services (category, name, price, image_url, description)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (data.category, data.name, data.price, data.imageUrl, data.description),
                )
                row = cursor.execute(
                    f"SELECT {_COLUMNS} FROM services WHERE id = ?",
                    (cursor.lastrowid,),
                ).fetchone()
        except sqlite3.Error:
            logger.exception("Error adding service %s", data.name)
            raise InternalError()
        logger.info("Added service %s (id=%s) to %s", data.name, row["id"], data.category)
        return cls._row_to_service(row)

    @classmethod
    async def list_services(cls, store: Store) -> List[ServiceRead]:
        """Return every catalog entry."""
        try:
            with store.cursor() as cursor:
                rows = cursor.execute(f"SELECT {_COLUMNS} FROM services").fetchall()
        except sqlite3.Error:
            logger.exception("Error fetching services")
            raise InternalError()
        return [cls._row_to_service(row) for row in rows]

    @staticmethod
    def _row_to_service(row: sqlite3.Row) -> ServiceRead:
        return ServiceRead(
            id=row["id"],
            category=row["category"],
            name=row["name"],
            price=row["price"],
            imageUrl=row["image_url"],
            description=row["description"],
        )
