"""
Logging configuration for the application.

``setup_logging`` derives the root log level and the optional log file
from ``Settings`` and installs them with ``logging.config.dictConfig``.
Loggers created before the call (uvicorn's, for instance) keep working.
Configuration happens at most once per process, so building several
apps (as the tests do) does not stack handlers.
"""

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_logging_config(settings: Settings) -> Dict[str, Any]:
    """Return a ``dictConfig`` schema for ``settings``.

    Unknown level names fall back to ``INFO``.  A file handler is only
    added when ``LOG_FILE`` is set.
    """
    level = settings.log_level.upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"

    handlers: Dict[str, Dict[str, Any]] = {
        "console": {"class": "logging.StreamHandler", "formatter": "default"},
    }
    if settings.log_file:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "default",
            "filename": str(Path(settings.log_file).resolve()),
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT}},
        "handlers": handlers,
        "root": {"level": level, "handlers": list(handlers)},
    }


def setup_logging(settings: Settings) -> bool:
    """Configure the root logger from ``settings``.

    Returns ``False`` without touching anything if the root logger
    already has handlers.
    """
    if logging.getLogger().handlers:
        return False
    logging.config.dictConfig(build_logging_config(settings))
    return True
