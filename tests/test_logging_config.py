"""Root logger configuration derived from Settings."""

import logging

from catalog_api.app.core.logging_config import build_logging_config, setup_logging

from tests.conftest import make_settings


def test_level_comes_from_settings(tmp_path):
    config = build_logging_config(make_settings(tmp_path, log_level="debug"))
    assert config["root"]["level"] == "DEBUG"
    assert config["root"]["handlers"] == ["console"]
    assert config["disable_existing_loggers"] is False


def test_unknown_level_falls_back_to_info(tmp_path):
    config = build_logging_config(make_settings(tmp_path, log_level="chatty"))
    assert config["root"]["level"] == "INFO"


def test_log_file_adds_file_handler(tmp_path):
    log_file = tmp_path / "catalog.log"
    config = build_logging_config(make_settings(tmp_path, log_file=str(log_file)))
    assert config["root"]["handlers"] == ["console", "file"]
    assert config["handlers"]["file"]["class"] == "logging.FileHandler"
    assert config["handlers"]["file"]["filename"] == str(log_file.resolve())


def test_setup_is_skipped_when_root_already_has_handlers(tmp_path, monkeypatch):
    root = logging.getLogger()
    existing = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [existing])
    assert setup_logging(make_settings(tmp_path, log_level="DEBUG")) is False
    assert root.handlers == [existing]
