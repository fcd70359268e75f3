"""
Top-level API router.

Aggregates the per-area routers under their prefixes.  The application
mounts this router under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import admin, auth, catalog, requests

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(catalog.router, prefix="/services", tags=["services"])
router.include_router(requests.router, prefix="/requests", tags=["requests"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
