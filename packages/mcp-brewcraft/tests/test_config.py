"""
Tests for BrewCraft server configuration and logging setup.
"""

import logging
from pathlib import Path

import pytest
from brewcraft_common.exceptions import ConfigurationError

from mcp_brewcraft.app_logging import configure_logging
from mcp_brewcraft.config import BrewCraftConfig, get_config


ENV_VARS = (
    "BREWCRAFT_STORAGE",
    "BREWCRAFT_DATA_DIR",
    "BREWCRAFT_REMOTE_URL",
    "BREWCRAFT_REMOTE_API_KEY",
    "BREWCRAFT_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestGetConfig:
    """Tests for environment configuration."""

    def test_defaults(self):
        config = get_config()
        assert config.storage == "local"
        assert config.data_dir == Path("~/.brewcraft").expanduser()
        assert config.log_level == "INFO"

    def test_data_dir(self, monkeypatch, tmp_path):
        monkeypatch.setenv("BREWCRAFT_DATA_DIR", str(tmp_path))
        assert get_config().data_dir == tmp_path

    def test_remote(self, monkeypatch):
        monkeypatch.setenv("BREWCRAFT_STORAGE", "Remote")
        monkeypatch.setenv("BREWCRAFT_REMOTE_URL", "https://docs.example.com/api/")
        monkeypatch.setenv("BREWCRAFT_REMOTE_API_KEY", "secret")
        config = get_config()
        assert config.storage == "remote"
        assert config.base_url == "https://docs.example.com/api"
        assert config.remote_api_key == "secret"

    def test_remote_without_url(self, monkeypatch):
        monkeypatch.setenv("BREWCRAFT_STORAGE", "remote")
        with pytest.raises(ConfigurationError):
            get_config()

    def test_unknown_backend(self, monkeypatch):
        monkeypatch.setenv("BREWCRAFT_STORAGE", "s3")
        with pytest.raises(ConfigurationError):
            get_config()

    def test_log_level_upper_cased(self, monkeypatch):
        monkeypatch.setenv("BREWCRAFT_LOG_LEVEL", "debug")
        assert get_config().log_level == "DEBUG"

    def test_base_url_unset(self):
        assert BrewCraftConfig().base_url is None


class TestConfigureLogging:
    """Tests for logging setup."""

    def test_single_handler(self):
        configure_logging("INFO")
        configure_logging("DEBUG")
        for name in ("mcp_brewcraft", "brewcraft_common"):
            logger = logging.getLogger(name)
            assert len(logger.handlers) == 1
            assert logger.level == logging.DEBUG
            assert logger.propagate is False
