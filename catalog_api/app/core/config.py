"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first so that local deployments can keep secrets out of the
shell.  Defaults are provided for all fields; in production you should
at least override ``JWT_SECRET`` and the admin seed credentials.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Services Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Listener used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by ``core.db``.
    database_url: str = os.getenv("DATABASE_URL", "catalog.db")

    secret_key: str = os.getenv("JWT_SECRET", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

    # Credentials of the administrator seeded at startup.  Seeding is an
    # insert-or-ignore, so changing these later does not overwrite an
    # existing row; use ``reset_admin_password.py`` for that.
    admin_username: str = os.getenv("ADMIN_USERNAME", "ADMIN")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "default_password")

    # When enabled, admin-only routes (request listing and status
    # changes, admin creation and listing) require an admin bearer token.
    # Off by default to keep those routes publicly reachable.
    enforce_admin_guard: bool = _as_bool(os.getenv("ENFORCE_ADMIN_GUARD", "false"))

    # Comma-separated list of allowed CORS origins.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Directory holding the static front end.  Mounted at ``/`` only if
    # it exists.
    frontend_dir: str = os.getenv("FRONTEND_DIR", "frontend")

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
