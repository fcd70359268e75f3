"""
Catalog endpoints.

Adding and listing the services offered in the front end catalog.
Both routes are public.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from catalog_api.app.api.deps import get_store
from catalog_api.app.core.db import Store
from catalog_api.app.schemas.service import ServiceCreate, ServiceCreated, ServiceRead
from catalog_api.app.services.catalog_service import CatalogService

router = APIRouter()


@router.post("", response_model=ServiceCreated, status_code=status.HTTP_201_CREATED)
async def add_service(payload: ServiceCreate, store: Store = Depends(get_store)) -> ServiceCreated:
    service = await CatalogService.add_service(store, payload)
    return ServiceCreated(message="Service added successfully!", service=service)


@router.get("", response_model=List[ServiceRead])
async def list_services(store: Store = Depends(get_store)) -> List[ServiceRead]:
    """Return the whole catalog; there is no pagination."""
    return await CatalogService.list_services(store)
