"""
Service layer for service requests.

Users submit requests for catalog items; administrators list them and
change their status.  Status values are free text and transitions are
not checked.  Concurrent status updates on the same row are resolved
by the database (last write wins).
"""

import logging
import sqlite3
from typing import List

from ..core.db import Store
from ..core.errors import InternalError, NotFoundError, ValidationError
from ..schemas.request import RequestCreate, RequestRead

logger = logging.getLogger(__name__)

_COLUMNS = "id, username, product_name, quantity, request_date, status"


class RequestService:
    """Submission and tracking of requests."""

    @classmethod
    async def submit(cls, store: Store, data: RequestCreate) -> RequestRead:
        """Store a new request with the default ``Pending`` status."""
        logger.debug("Request received: %s", data.model_dump())
        if not data.username or not data.product_name or not data.quantity:
            logger.info(
                "Rejected request with missing fields: username=%r product_name=%r quantity=%r",
                data.username,
                data.product_name,
                data.quantity,
            )
            raise ValidationError("Missing username, product name, or quantity")
        try:
            with store.cursor() as cursor:
                cursor.execute(
                    "INSERT INTO requests (username, product_name, quantity) VALUES (?, ?, ?)",
                    (data.username, data.product_name, data.quantity),
                )
                row = cursor.execute(
                    f"SELECT {_COLUMNS} FROM requests WHERE id = ?",
                    (cursor.lastrowid,),
                ).fetchone()
        except sqlite3.Error:
            logger.exception("Error submitting request for %s", data.username)
            raise InternalError()
        logger.info("Stored request %s from %s", row["id"], data.username)
        return RequestRead(**dict(row))

    @classmethod
    async def list_requests(cls, store: Store) -> List[RequestRead]:
        """Return every request from every user."""
        try:
            with store.cursor() as cursor:
                rows = cursor.execute(f"SELECT {_COLUMNS} FROM requests").fetchall()
        except sqlite3.Error:
            logger.exception("Error fetching all requests")
            raise InternalError()
        return [RequestRead(**dict(row)) for row in rows]

    @classmethod
    async def list_for_user(cls, store: Store, username: str) -> List[RequestRead]:
        """Return the requests submitted by ``username`` (possibly none)."""
        try:
            with store.cursor() as cursor:
                rows = cursor.execute(
                    f"SELECT {_COLUMNS} FROM requests WHERE username = ?",
                    (username,),
                ).fetchall()
        except sqlite3.Error:
            logger.exception("Error fetching requests for %s", username)
            raise InternalError()
        return [RequestRead(**dict(row)) for row in rows]

    @classmethod
    async def update_status(cls, store: Store, request_id: int, status: str | None) -> RequestRead:
        """Set the status of a request and return the updated row.

        Raises ``NotFoundError`` when no request has ``request_id``,
        including ids too large to be a SQLite row id.
        """
        if not status:
            raise ValidationError("Status is required")
        try:
            with store.cursor() as cursor:
                cursor.execute(
                    "UPDATE requests SET status = ? WHERE id = ?",
                    (status, request_id),
                )
                if cursor.rowcount == 0:
                    row = None
                else:
                    row = cursor.execute(
                        f"SELECT {_COLUMNS} FROM requests WHERE id = ?",
                        (request_id,),
                    ).fetchone()
        except OverflowError:
            row = None
        except sqlite3.Error:
            logger.exception("Error updating status of request %s", request_id)
            raise InternalError()
        if row is None:
            raise NotFoundError("Request not found")
        logger.info("Request %s status set to %s", request_id, status)
        return RequestRead(**dict(row))
