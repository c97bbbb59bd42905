"""Tests for client settings and logging configuration."""

import logging

import pytest

from neo_storage_client.config.logging_config import (
    LoggingConfig,
    PACKAGE_LOGGER,
    get_log_level_from_verbosity,
    get_logger,
)
from neo_storage_client.config.settings import (
    DEFAULT_API_BASE,
    DEFAULT_MAX_FILE_SIZE_BYTES,
    ClientSettings,
)


class TestClientSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("STORAGE_CLIENT_API_BASE", raising=False)
        monkeypatch.delenv("STORAGE_CLIENT_MAX_FILE_SIZE_BYTES", raising=False)
        settings = ClientSettings()

        assert settings.api_base == DEFAULT_API_BASE
        assert settings.max_file_size_bytes == 50 * 1024 * 1024
        assert settings.unauthorized_cooldown_seconds == 0.5
        assert settings.default_page_size == 10
        assert settings.default_sort == "desc"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("STORAGE_CLIENT_API_BASE", "https://files.example.com/")
        monkeypatch.setenv("STORAGE_CLIENT_MAX_FILE_SIZE_BYTES", "2048")

        settings = ClientSettings()

        assert settings.api_base == "https://files.example.com"
        assert settings.max_file_size_bytes == 2048
        assert settings.endpoint("/files") == "https://files.example.com/files"

    @pytest.mark.parametrize("value", ["lots", "0", "-5"])
    def test_unusable_max_size_falls_back(self, value):
        assert ClientSettings(max_file_size_bytes=value).max_file_size_bytes == DEFAULT_MAX_FILE_SIZE_BYTES

    def test_invalid_sort_rejected(self):
        with pytest.raises(ValueError):
            ClientSettings(default_sort="random")


class TestLoggingConfig:

    def test_verbosity_mapping(self):
        assert get_log_level_from_verbosity("quiet") == "ERROR"
        assert get_log_level_from_verbosity("VERBOSE") == "INFO"
        assert get_log_level_from_verbosity("nonsense") == "WARNING"

    def test_explicit_level_wins(self):
        config = LoggingConfig.build(verbosity="QUIET", level="debug")

        assert config["loggers"][PACKAGE_LOGGER]["level"] == "DEBUG"
        assert config["loggers"][f"{PACKAGE_LOGGER}.platform.gateway"]["level"] == "DEBUG"

    def test_per_request_modules_quiet_by_default(self):
        config = LoggingConfig.build(verbosity="VERBOSE", log_format="json")

        assert config["loggers"][PACKAGE_LOGGER]["level"] == "INFO"
        assert config["loggers"][f"{PACKAGE_LOGGER}.platform.resources"]["level"] == "WARNING"
        assert config["loggers"]["httpx"]["level"] == "ERROR"
        assert config["formatters"]["client"]["format"].startswith('{"time"')
        assert "root" not in config

    def test_get_logger_stays_in_package_tree(self):
        assert get_logger("custom").name == f"{PACKAGE_LOGGER}.custom"
        assert get_logger(f"{PACKAGE_LOGGER}.client") is logging.getLogger(f"{PACKAGE_LOGGER}.client")
