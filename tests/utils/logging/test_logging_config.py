# ABOUTME: Tests for logging configuration module
# ABOUTME: Validates dual-mode logging setup and third-party library suppression

import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from loguru import logger

from campaign_registry.config import reload_config
from campaign_registry.utils.logging import get_logger, with_campaign_type_context
from campaign_registry.utils.logging.config import (
    LoggingMode,
    configure_logging,
    detect_logging_mode,
    get_logging_status,
)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger.remove()
    for logger_name in ["", "sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncio", "py.warnings"]:
        logging.getLogger(logger_name).setLevel(logging.NOTSET)
    logging.captureWarnings(False)
    reload_config()


class TestDetectLoggingMode:
    """Test logging mode detection logic."""

    def test_detect_mode_from_env_production(self):
        with patch.dict(os.environ, {"CAMPAIGN_REGISTRY_LOG_MODE": "production"}):
            assert detect_logging_mode() == LoggingMode.PRODUCTION

    def test_detect_mode_from_env_invalid(self):
        with (
            patch.dict(os.environ, {"CAMPAIGN_REGISTRY_LOG_MODE": "invalid"}),
            patch("sys.stdout.isatty", return_value=True),
        ):
            assert detect_logging_mode() == LoggingMode.INTERACTIVE

    def test_detect_mode_from_tty_production(self):
        with patch.dict(os.environ, {}, clear=True), patch("sys.stdout.isatty", return_value=False):
            assert detect_logging_mode() == LoggingMode.PRODUCTION


class TestConfigureLogging:
    """Test logging configuration functionality."""

    def test_configure_interactive_mode(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        configure_logging(mode=LoggingMode.INTERACTIVE, log_level="DEBUG")

        assert (tmp_path / "logs").is_dir()
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_configure_production_mode(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        configure_logging(mode=LoggingMode.PRODUCTION, log_level="WARNING")

        assert not Path("logs").exists()
        assert logging.getLogger().level == logging.WARNING


    def test_falls_back_to_configured_settings(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("CAMPAIGN_REGISTRY_LOG_MODE", "interactive")
        monkeypatch.setenv("CAMPAIGN_REGISTRY_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("CAMPAIGN_REGISTRY_LOG_FILE", str(tmp_path / "custom.log"))
        reload_config()

        configure_logging()

        assert logging.getLogger().level == logging.ERROR
        assert (tmp_path / "custom.log").exists()
        assert not (tmp_path / "logs" / "campaign-registry.log").exists()

    def test_explicit_arguments_override_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("CAMPAIGN_REGISTRY_LOG_MODE", "interactive")
        monkeypatch.setenv("CAMPAIGN_REGISTRY_LOG_LEVEL", "ERROR")
        reload_config()

        configure_logging(mode=LoggingMode.PRODUCTION, log_level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG
        assert not (tmp_path / "logs").exists()

def test_get_logging_status_production():
    with patch.dict(os.environ, {"CAMPAIGN_REGISTRY_LOG_MODE": "production"}):
        status = get_logging_status()

    assert status["mode"] == LoggingMode.PRODUCTION
    assert status["log_files"]["main"] is None
    assert "sqlalchemy.engine" in status["third_party_suppressed"]


def test_campaign_type_context_binds_identity():
    context = with_campaign_type_context(7, "newsletter")

    assert context.context == {"campaign_type_id": 7, "handle": "newsletter", "entity_type": "campaign_type"}
    assert get_logger("campaign_registry.tests") is not None
