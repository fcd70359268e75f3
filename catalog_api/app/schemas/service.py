"""
Pydantic schemas for catalog services.

A service is an offering shown in the front end catalog.  ``category``
and ``name`` are required; price, image and description are optional.
The image location is exposed as ``imageUrl`` to match the front end.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ServiceCreate(BaseModel):
    """Schema for adding a service to the catalog."""

    category: Optional[str] = Field(None, description="Catalog section the service is listed under")
    name: Optional[str] = Field(None, description="Display name")
    price: Optional[float] = None
    imageUrl: Optional[str] = Field(None, description="Path or URL of the image")
    description: Optional[str] = None


class ServiceRead(BaseModel):
    """Schema for reading a catalog service."""

    id: int
    category: str
    name: str
    price: Optional[float] = None
    imageUrl: Optional[str] = None
    description: Optional[str] = None


class ServiceCreated(BaseModel):
    message: str
    service: ServiceRead
