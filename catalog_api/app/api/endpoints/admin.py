"""
Administrator endpoints.

``/login`` and ``/profile`` are the admin counterparts of user login.
``/add`` and ``/all`` manage the admin accounts themselves and go
through ``admin_guard`` like the other admin-only routes.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from catalog_api.app.api.deps import get_settings, get_store
from catalog_api.app.core.config import Settings
from catalog_api.app.core.db import Store
from catalog_api.app.core.security import admin_guard, get_token_claims
from catalog_api.app.schemas.admin import AdminRead, AdminToken, Message
from catalog_api.app.schemas.user import LoginRequest
from catalog_api.app.services.admin_service import AdminService

router = APIRouter()


@router.post("/add", response_model=Message, dependencies=[Depends(admin_guard)])
async def add_admin(payload: LoginRequest, store: Store = Depends(get_store)) -> Message:
    """Create an admin account; re-adding an existing username is a no-op."""
    return Message(message=await AdminService.add_admin(store, payload))


@router.post("/login", response_model=AdminToken)
async def admin_login(
    payload: LoginRequest,
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> AdminToken:
    return await AdminService.login(store, settings, payload)


@router.get("/profile", response_model=AdminRead)
async def admin_profile(
    claims: Dict[str, Any] = Depends(get_token_claims),
    store: Store = Depends(get_store),
) -> AdminRead:
    """Return the admin identified by the bearer token.

    401 without a valid token, 404 if the admin no longer exists.
    """
    return await AdminService.get_profile(store, claims.get("id"))


@router.get("/all", response_model=List[AdminRead], dependencies=[Depends(admin_guard)])
async def list_admins(store: Store = Depends(get_store)) -> List[AdminRead]:
    return await AdminService.list_admins(store)
