"""
Authentication endpoints.

Registration of regular accounts and password login.  Successful login
returns a bearer token valid for one hour together with the username
for display in the front end.
"""

from fastapi import APIRouter, Depends, status

from catalog_api.app.api.deps import get_settings, get_store
from catalog_api.app.core.config import Settings
from catalog_api.app.core.db import Store
from catalog_api.app.schemas.user import LoginRequest, LoginResponse, UserRegister, UserRegistered
from catalog_api.app.services.user_service import UserService

router = APIRouter()


@router.post("/register", response_model=UserRegistered, status_code=status.HTTP_201_CREATED)
async def register(payload: UserRegister, store: Store = Depends(get_store)) -> UserRegistered:
    """Register a new account.

    Returns 400 when a field is missing and 409 when the username is
    already taken.
    """
    user = await UserService.register(store, payload)
    return UserRegistered(message="User registered successfully!", user=user)


@router.post("/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest,
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> LoginResponse:
    """Exchange a username and password for a bearer token."""
    return await UserService.login(store, settings, payload)
