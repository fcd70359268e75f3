"""
Shared FastAPI dependencies.

The application factory attaches the ``Settings`` and ``Store`` it
built to ``app.state``; handlers obtain them through these
dependencies instead of importing module-level globals.
"""

from fastapi import Request

from ..core.config import Settings
from ..core.db import Store


def get_store(request: Request) -> Store:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
