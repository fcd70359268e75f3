"""
Pydantic models for user accounts and authentication.

Request bodies declare every field optional: presence is checked by the
service layer so that a missing or empty value yields the same
``{"error": ...}`` response as the rest of the API rather than a
field-level validation report.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserRegister(BaseModel):
    """Payload for ``POST /api/auth/register``."""

    username: Optional[str] = Field(None, examples=["alice"])
    password: Optional[str] = Field(None, examples=["p1"])
    # Free text; any non-empty value is accepted.
    role: Optional[str] = Field(None, examples=["user"])


class LoginRequest(BaseModel):
    """Credentials for user and admin login."""

    username: Optional[str] = Field(None, examples=["alice"])
    password: Optional[str] = Field(None, examples=["p1"])


class UserRead(BaseModel):
    """Public view of an account; never includes the password hash."""

    id: int
    username: str
    role: str

    model_config = {
        "from_attributes": True,
    }


class UserRegistered(BaseModel):
    message: str
    user: UserRead


class LoginResponse(BaseModel):
    message: str
    token: str
    username: str
