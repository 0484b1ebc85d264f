"""
Unit tests for Settings.

Covers defaults, environment overrides and listen address parsing.
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from snowhook.config.settings import Settings, get_settings, parse_listen_address


@pytest.mark.unit
class TestSettingsDefaults:

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.config_file == "config/servicenow.yml"
        assert settings.listen_address == ":9877"
        assert settings.listen_host == "0.0.0.0"
        assert settings.listen_port == 9877
        assert settings.log_level == "INFO"
        assert settings.servicenow_timeout == 30.0

    def test_environment_overrides(self):
        env = {
            "SNOWHOOK_CONFIG_FILE": "/etc/snowhook/servicenow.yml",
            "SNOWHOOK_LISTEN_ADDRESS": "127.0.0.1:8080",
            "SNOWHOOK_SERVICENOW_TIMEOUT": "5",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)

        assert settings.config_file == "/etc/snowhook/servicenow.yml"
        assert settings.listen_host == "127.0.0.1"
        assert settings.listen_port == 8080
        assert settings.servicenow_timeout == 5.0

    def test_invalid_listen_address_rejected(self):
        with pytest.raises(ValidationError):
            Settings(listen_address="localhost", _env_file=None)

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValidationError):
            Settings(servicenow_timeout=0, _env_file=None)

    def test_log_level_normalized(self):
        assert Settings(log_level="debug", _env_file=None).log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with patch.dict(os.environ, {"SNOWHOOK_LOG_LEVEL": "LOUD"}):
            with pytest.raises(ValidationError, match="Invalid log level"):
                Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


@pytest.mark.unit
class TestParseListenAddress:

    @pytest.mark.parametrize(
        "address,expected",
        [
            (":9877", ("0.0.0.0", 9877)),
            ("0.0.0.0:80", ("0.0.0.0", 80)),
            ("localhost:9877", ("localhost", 9877)),
            ("[::1]:9877", ("::1", 9877)),
            (" :9000 ", ("0.0.0.0", 9000)),
        ],
    )
    def test_valid_addresses(self, address, expected):
        assert parse_listen_address(address) == expected

    @pytest.mark.parametrize("address", ["9877", "host:", "host:http", ":0", ":70000"])
    def test_invalid_addresses(self, address):
        with pytest.raises(ValueError):
            parse_listen_address(address)
