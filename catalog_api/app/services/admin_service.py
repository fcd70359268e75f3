"""
Service layer for administrator accounts.

Admins live in their own table with the role fixed to ``admin``.
Unlike user registration, adding an admin whose username already
exists is a silent no-op (``INSERT OR IGNORE``).
"""

import logging
import sqlite3
from typing import Any, List, Optional

from starlette.concurrency import run_in_threadpool

from ..core.config import Settings
from ..core.db import Store
from ..core.errors import AuthError, InternalError, NotFoundError, ValidationError
from ..core.security import hash_password
from ..schemas.admin import AdminRead, AdminToken
from ..schemas.user import LoginRequest
from ..utils.enums import UserRole
from .user_service import check_credentials, issue_token

logger = logging.getLogger(__name__)


class AdminService:
    """Service for managing administrators."""

    @classmethod
    async def add_admin(cls, store: Store, data: LoginRequest) -> str:
        """Create an admin unless one with that username exists.

        Returns the confirmation message in both cases.
        """
        if not data.username or not data.password:
            raise ValidationError("Missing username or password.")
        hashed = await run_in_threadpool(hash_password, data.password)
        try:
            with store.cursor() as cursor:
                cursor.execute(
                    "INSERT OR IGNORE INTO admins (username, password, role) VALUES (?, ?, ?)",
                    (data.username, hashed, UserRole.ADMIN.value),
                )
                created = cursor.rowcount > 0
        except sqlite3.Error:
            logger.exception("Error adding admin %s", data.username)
            raise InternalError("Internal server error.")
        if created:
            logger.info("Added admin %s", data.username)
        else:
            logger.info("Admin %s already exists, nothing added", data.username)
        return f"Admin {data.username} added successfully!"

    @classmethod
    async def login(cls, store: Store, settings: Settings, data: LoginRequest) -> AdminToken:
        """Authenticate an admin and return a signed token.

        Missing credentials are treated like an unknown admin.
        """
        row: Optional[sqlite3.Row] = None
        if data.username:
            try:
                with store.cursor() as cursor:
                    row = cursor.execute(
                        "SELECT id, username, password, role FROM admins WHERE username = ?",
                        (data.username,),
                    ).fetchone()
            except sqlite3.Error:
                logger.exception("Error during admin login for %s", data.username)
                raise InternalError("Internal server error.")
        try:
            admin = await check_credentials(row, data.password, "Invalid username or password.")
        except AuthError:
            logger.info("Failed admin login for %s", data.username)
            raise
        logger.info("Admin %s logged in", admin.username)
        return AdminToken(token=issue_token(admin, settings))

    @classmethod
    async def get_profile(cls, store: Store, admin_id: Any) -> AdminRead:
        """Return the admin identified by a token's ``id`` claim."""
        try:
            with store.cursor() as cursor:
                row = cursor.execute(
                    "SELECT id, username, role FROM admins WHERE id = ?",
                    (admin_id,),
                ).fetchone()
        except sqlite3.Error:
            logger.exception("Error fetching admin %s", admin_id)
            raise InternalError("Internal server error.")
        if row is None:
            raise NotFoundError("Admin not found.")
        return AdminRead(**dict(row))

    @classmethod
    async def list_admins(cls, store: Store) -> List[AdminRead]:
        try:
            with store.cursor() as cursor:
                rows = cursor.execute("SELECT id, username, role FROM admins").fetchall()
        except sqlite3.Error:
            logger.exception("Error fetching admins")
            raise InternalError("Internal server error.")
        return [AdminRead(**dict(row)) for row in rows]
