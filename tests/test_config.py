"""Tests for RoleGraphConfig."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from rolegraph import ConfigurationError, LogLevel, RoleGraphConfig, load_config_from_env


class TestRoleGraphConfig:
    """Tests for RoleGraphConfig model."""

    def test_create_default_config(self) -> None:
        """Test creating a RoleGraphConfig with defaults."""
        config = RoleGraphConfig()
        assert config.log_level == LogLevel.INFO
        assert config.log_json is False
        assert config.validate_tables is True
        assert config.strict_max_role is False

    def test_create_custom_config(self) -> None:
        """Test creating a RoleGraphConfig with custom values."""
        config = RoleGraphConfig(
            log_level=LogLevel.DEBUG,
            log_json=True,
            validate_tables=False,
            strict_max_role=True,
        )
        assert config.log_level == LogLevel.DEBUG
        assert config.log_json is True
        assert config.validate_tables is False
        assert config.strict_max_role is True

    def test_log_level_from_string(self) -> None:
        """Test log level given as a lowercase string."""
        config = RoleGraphConfig(log_level="debug")
        assert config.log_level == LogLevel.DEBUG

    def test_log_level_invalid(self) -> None:
        """Test creating config with invalid log level."""
        with pytest.raises(ValueError, match="Invalid log level"):
            RoleGraphConfig(log_level="INVALID")

    def test_extra_fields_forbidden(self) -> None:
        """Test that extra fields are forbidden."""
        with pytest.raises(Exception):  # Pydantic validation error
            RoleGraphConfig(extra_field="value")  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        """Test that config cannot be changed after creation."""
        config = RoleGraphConfig()
        with pytest.raises(Exception):
            config.strict_max_role = True  # type: ignore[misc]


class TestLoadConfigFromEnv:
    """Tests for load_config_from_env function."""

    @patch.dict(os.environ, {}, clear=True)
    def test_load_defaults(self) -> None:
        """Test loading config with no environment variables."""
        config = load_config_from_env()
        assert config == RoleGraphConfig()

    @patch.dict(
        os.environ,
        {
            "ROLEGRAPH_LOG_LEVEL": "WARNING",
            "ROLEGRAPH_LOG_JSON": "true",
            "ROLEGRAPH_VALIDATE_TABLES": "no",
            "ROLEGRAPH_STRICT_MAX_ROLE": "1",
        },
        clear=True,
    )
    def test_load_from_env(self) -> None:
        """Test loading config from environment variables."""
        config = load_config_from_env()
        assert config.log_level == LogLevel.WARNING
        assert config.log_json is True
        assert config.validate_tables is False
        assert config.strict_max_role is True

    def test_flag_variants(self) -> None:
        """Test boolean flags accept common spellings."""
        for value in ("true", "1", "yes", "on", "TRUE"):
            with patch.dict(os.environ, {"ROLEGRAPH_STRICT_MAX_ROLE": value}, clear=True):
                assert load_config_from_env().strict_max_role is True
        for value in ("false", "0", "no", "off", ""):
            with patch.dict(os.environ, {"ROLEGRAPH_STRICT_MAX_ROLE": value}, clear=True):
                assert load_config_from_env().strict_max_role is False

    @patch.dict(os.environ, {"ROLEGRAPH_LOG_JSON": "maybe"}, clear=True)
    def test_invalid_flag(self) -> None:
        """Test unrecognized flag values raise ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_config_from_env()
        assert exc_info.value.details["variable"] == "ROLEGRAPH_LOG_JSON"

    @patch.dict(os.environ, {"ROLEGRAPH_LOG_LEVEL": "LOUD"}, clear=True)
    def test_invalid_log_level(self) -> None:
        """Test invalid log level raises ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_config_from_env()
        assert exc_info.value.code == "CONFIGURATION_ERROR"
