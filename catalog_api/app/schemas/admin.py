"""Pydantic schemas for administrator accounts."""

from pydantic import BaseModel

from .user import UserRead


class AdminRead(UserRead):
    """An administrator as returned by the profile and listing routes."""


class AdminToken(BaseModel):
    token: str


class Message(BaseModel):
    message: str
