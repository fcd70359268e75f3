"""
Request tracking endpoints.

Users submit requests and look up their own by username.  Listing all
requests and changing a request's status belong to the admin screens;
they pass through ``admin_guard``, which only demands an admin token
when ``ENFORCE_ADMIN_GUARD`` is set.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from catalog_api.app.api.deps import get_store
from catalog_api.app.core.db import Store
from catalog_api.app.core.security import admin_guard
from catalog_api.app.schemas.request import (
    RequestCreate,
    RequestRead,
    RequestStatusUpdate,
    RequestSubmitted,
)
from catalog_api.app.services.request_service import RequestService

router = APIRouter()


@router.post("", response_model=RequestSubmitted, status_code=status.HTTP_201_CREATED)
async def submit_request(payload: RequestCreate, store: Store = Depends(get_store)) -> RequestSubmitted:
    request = await RequestService.submit(store, payload)
    return RequestSubmitted(message="Request submitted successfully!", request=request)


@router.get("", response_model=List[RequestRead], dependencies=[Depends(admin_guard)])
async def list_requests(store: Store = Depends(get_store)) -> List[RequestRead]:
    """Return every request from every user."""
    return await RequestService.list_requests(store)


@router.get("/{username}", response_model=List[RequestRead])
async def list_user_requests(username: str, store: Store = Depends(get_store)) -> List[RequestRead]:
    """Return the requests submitted by ``username``; empty if none."""
    return await RequestService.list_for_user(store, username)


@router.patch("/{request_id}", response_model=RequestSubmitted, dependencies=[Depends(admin_guard)])
async def update_request_status(
    request_id: int,
    payload: RequestStatusUpdate,
    store: Store = Depends(get_store),
) -> RequestSubmitted:
    """Change the status of a request (e.g. when it is dispatched)."""
    request = await RequestService.update_status(store, request_id, payload.status)
    return RequestSubmitted(message="Status updated successfully!", request=request)
