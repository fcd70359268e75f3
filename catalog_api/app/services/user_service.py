"""
Business logic for user accounts.

Registration hashes the password and inserts a row; a duplicate
username surfaces as ``ConflictError``.  Login verifies the password
and issues a signed token.  Unknown usernames and wrong passwords
produce the same ``AuthError`` so callers cannot tell which accounts
exist.
"""

import logging
import sqlite3
from typing import Optional

from starlette.concurrency import run_in_threadpool

from ..core.config import Settings
from ..core.db import Store
from ..core.errors import AuthError, ConflictError, InternalError, ValidationError
from ..core.security import create_access_token, hash_password, verify_password
from ..schemas.user import LoginRequest, LoginResponse, UserRead, UserRegister

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


def issue_token(account: UserRead, settings: Settings) -> str:
    """Sign a token carrying the account's id, username and role."""
    return create_access_token(
        {"id": account.id, "username": account.username, "role": account.role},
        settings.secret_key,
        expires_delta=settings.access_token_expire_minutes * 60,
    )


async def check_credentials(row: Optional[sqlite3.Row], password: Optional[str], message: str) -> UserRead:
    """Return the account for ``row`` if ``password`` matches its hash.

    Raises ``AuthError`` with ``message`` when the row is missing or the
    password does not verify.  The PBKDF2 check runs in the threadpool
    so that it does not stall the event loop.
    """
    if row is None or not password:
        raise AuthError(message)
    if not await run_in_threadpool(verify_password, password, row["password"]):
        raise AuthError(message)
    return UserRead(id=row["id"], username=row["username"], role=row["role"])


class UserService:
    """Registration and login for regular accounts."""

    @classmethod
    async def register(cls, store: Store, data: UserRegister) -> UserRead:
        """Create a new user and return it without the password hash."""
        if not data.username or not data.password or not data.role:
            raise ValidationError("Missing username, password, or role")
        hashed = await run_in_threadpool(hash_password, data.password)
        try:
            with store.cursor() as cursor:
                cursor.execute(
                    "INSERT INTO users (username, password, role) VALUES (?, ?, ?)",
                    (data.username, hashed, data.role),
                )
                user_id = cursor.lastrowid
        except sqlite3.IntegrityError:
            logger.info("Registration rejected, username %s already exists", data.username)
            raise ConflictError("Username already exists")
        except sqlite3.Error:
            logger.exception("Error registering user %s", data.username)
            raise InternalError()
        logger.info("Registered user %s (id=%s, role=%s)", data.username, user_id, data.role)
        return UserRead(id=user_id, username=data.username, role=data.role)

    @classmethod
    async def get_by_username(cls, store: Store, username: str) -> Optional[sqlite3.Row]:
        try:
            with store.cursor() as cursor:
                return cursor.execute(
                    "SELECT id, username, password, role FROM users WHERE username = ?",
                    (username,),
                ).fetchone()
        except sqlite3.Error:
            logger.exception("Error looking up user %s", username)
            raise InternalError()

    @classmethod
    async def login(cls, store: Store, settings: Settings, data: LoginRequest) -> LoginResponse:
        """Authenticate a user and return a token with the username."""
        if not data.username or not data.password:
            raise ValidationError("Missing username or password")
        row = await cls.get_by_username(store, data.username)
        try:
            user = await check_credentials(row, data.password, INVALID_CREDENTIALS)
        except AuthError:
            logger.info("Failed login for %s", data.username)
            raise
        logger.info("User %s logged in", user.username)
        return LoginResponse(
            message="Login successful",
            token=issue_token(user, settings),
            username=user.username,
        )
