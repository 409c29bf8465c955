# ABOUTME: Tests for environment-driven application configuration
# ABOUTME: Validates defaults, overrides, and the lazy singleton

import os
from unittest.mock import patch

from campaign_registry.config import Config, get_config, reload_config


def test_defaults():
    with patch.dict(os.environ, {}, clear=True):
        config = Config(_env_file=None)

    assert config.database_url == "sqlite+aiosqlite:///./campaign_registry.db"
    assert config.database_echo is False
    assert config.log_level == "INFO"
    assert config.log_mode is None
    assert config.log_file is None


def test_environment_overrides():
    env = {
        "CAMPAIGN_REGISTRY_DATABASE_URL": "sqlite+aiosqlite:///:memory:",
        "CAMPAIGN_REGISTRY_LOG_LEVEL": "DEBUG",
        "CAMPAIGN_REGISTRY_DATABASE_ECHO": "true",
    }
    with patch.dict(os.environ, env, clear=True):
        config = Config(_env_file=None)

    assert config.database_url == "sqlite+aiosqlite:///:memory:"
    assert config.log_level == "DEBUG"
    assert config.database_echo is True


def test_get_config_is_cached_until_reload():
    first = get_config()
    assert get_config() is first

    reloaded = reload_config()
    assert reloaded is not first
    assert get_config() is reloaded
