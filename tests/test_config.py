"""Tests for the configuration module."""

import logging
import os
from unittest.mock import patch

import pytest

from firmware_descriptor.config import ConfigurationError, Settings, get_settings


class TestSettingsEnvironment:
    """Tests for loading Settings from the environment."""

    def test_loads_from_environment(self):
        """Settings load values from environment variables."""
        with patch.dict(os.environ, {
            "FIRMWARE_API_URL": "https://fw.example.com",
            "HTTP_TIMEOUT_SECONDS": "2.5",
            "MAX_RECENT_FIRMWARES": "7",
            "LOG_LEVEL": "WARNING",
        }, clear=False):
            settings = Settings(_env_file=None)  # type: ignore[call-arg]

            assert settings.FIRMWARE_API_URL == "https://fw.example.com"
            assert settings.HTTP_TIMEOUT_SECONDS == 2.5
            assert settings.MAX_RECENT_FIRMWARES == 7
            assert settings.log_level == logging.WARNING

    def test_uses_defaults(self):
        """Settings use default values when not set."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)  # type: ignore[call-arg]

            assert settings.FIRMWARE_API_URL is None
            assert settings.HTTP_TIMEOUT_SECONDS == 10.0
            assert settings.MAX_RECENT_FIRMWARES == 10
            assert settings.LOG_LEVEL == "INFO"

    def test_names_are_case_sensitive(self):
        """Lower-case environment variables are not picked up."""
        with patch.dict(os.environ, {"max_recent_firmwares": "99"}, clear=True):
            settings = Settings(_env_file=None)  # type: ignore[call-arg]

            assert settings.MAX_RECENT_FIRMWARES == 10

    def test_get_settings_is_cached(self):
        """get_settings() returns the same instance until the cache is cleared."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestValidateConfig:
    """Tests for Settings.validate_config()."""

    def test_valid_settings_pass(self):
        """Defaults and a proper URL validate."""
        settings = Settings(_env_file=None, FIRMWARE_API_URL="http://localhost:8080")  # type: ignore[call-arg]

        settings.validate_config()

    def test_log_level_is_case_insensitive(self):
        """Lower-case log levels are accepted."""
        settings = Settings(_env_file=None, LOG_LEVEL="debug")  # type: ignore[call-arg]

        settings.validate_config()
        assert settings.log_level == logging.DEBUG

    @pytest.mark.parametrize(
        "overrides,expected",
        [
            ({"HTTP_TIMEOUT_SECONDS": 0}, "HTTP_TIMEOUT_SECONDS"),
            ({"MAX_RECENT_FIRMWARES": 0}, "MAX_RECENT_FIRMWARES"),
            ({"LOG_LEVEL": "LOUD"}, "LOG_LEVEL"),
            ({"FIRMWARE_API_URL": "ftp://fw.example.com"}, "FIRMWARE_API_URL"),
        ],
    )
    def test_invalid_setting_rejected(self, overrides, expected):
        """Each invalid setting is reported."""
        settings = Settings(_env_file=None, **overrides)  # type: ignore[call-arg]

        with pytest.raises(ConfigurationError, match=expected):
            settings.validate_config()

    def test_all_errors_reported_together(self):
        """Every problem is listed in one error."""
        settings = Settings(  # type: ignore[call-arg]
            _env_file=None, HTTP_TIMEOUT_SECONDS=-1, MAX_RECENT_FIRMWARES=-1
        )

        with pytest.raises(ConfigurationError) as exc_info:
            settings.validate_config()

        message = str(exc_info.value)
        assert "HTTP_TIMEOUT_SECONDS" in message
        assert "MAX_RECENT_FIRMWARES" in message
