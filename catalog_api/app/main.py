"""
Main entrypoint for the Services Catalog API.

``create_app`` builds and configures the FastAPI application: logging,
the SQLite store handle, CORS, error handlers, the ``/api`` routers
and, when present, the static front end.  The schema bootstrap runs in
the application lifespan, before the first request is served.  An
instance is created at import time as ``app`` so that it can be run
with uvicorn, e.g.::

    uvicorn catalog_api.app.main:app --reload
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import Store, init_db
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.

    Returns
    -------
    FastAPI
        A configured application whose ``state`` carries ``settings``
        and ``store``.
    """
    settings = settings or default_settings
    setup_logging(settings)
    store = Store(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(store, settings)
        yield

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store

    origins = settings.cors_origin_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentialed requests to a wildcard origin.
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router, prefix="/api")

    # Mounted last so that it never shadows an API route.
    if os.path.isdir(settings.frontend_dir):
        app.mount("/", StaticFiles(directory=settings.frontend_dir, html=True), name="frontend")
        logger.info("Serving front end from %s", settings.frontend_dir)

    if not settings.enforce_admin_guard:
        logger.warning(
            "Admin guard disabled: request listing, status updates and admin "
            "management are reachable without a token"
        )
    return app


app = create_app()
