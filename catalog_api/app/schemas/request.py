"""
Pydantic schemas for service requests.

A request records that a user asked for a quantity of a catalog item.
Requests start in the ``Pending`` status; administrators move them
through whatever statuses the front end uses (the value is free text).
"""

from typing import Optional

from pydantic import BaseModel, Field

SQLITE_INT_MAX = 2**63 - 1
SQLITE_INT_MIN = -(2**63)


class RequestCreate(BaseModel):
    """Schema for submitting a request."""

    username: Optional[str] = None
    product_name: Optional[str] = None
    # Zero counts as missing.  Bounded to the SQLite INTEGER range.
    quantity: Optional[int] = Field(None, ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX, examples=[1])


class RequestStatusUpdate(BaseModel):
    """Schema for changing the status of a request."""

    status: Optional[str] = Field(None, examples=["Dispatched"])


class RequestRead(BaseModel):
    """Schema for reading a request."""

    id: int
    username: str
    product_name: str
    quantity: int
    # Stored by SQLite as ``YYYY-MM-DD HH:MM:SS`` (UTC).
    request_date: Optional[str] = None
    status: Optional[str] = None


class RequestSubmitted(BaseModel):
    message: str
    request: RequestRead
