"""
Application package initializer.

The API is organised by concern: ``core`` holds configuration,
logging, errors, persistence and security; ``schemas`` the pydantic
payloads; ``services`` the per-entity business logic; and ``api`` the
routers that expose it under ``/api``.

Importing this package has no side effects.  The ASGI application lives
in ``catalog_api.app.main`` (``uvicorn catalog_api.app.main:app``), so
tools such as ``reset_admin_password.py`` that only need ``core`` do not
configure logging or read the front end directory.
"""
