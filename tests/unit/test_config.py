"""
Unit tests for configuration management.

Tests Settings loading, validation, and environment parsing.
"""

import pytest
from pydantic import ValidationError

from shared.utils import Settings, get_settings


class TestSettings:
    """Tests for Settings configuration class."""

    def test_settings_with_defaults(self, monkeypatch):
        """Test Settings with default values."""
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        settings = Settings()

        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert settings.log_format == "text"
        assert settings.sources_join_delimiter == "\n"
        assert settings.sources_heading == "Sources"
        assert settings.sources_html_output is False

    def test_settings_from_environment(self, monkeypatch):
        """Test Settings loaded from environment variables."""
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("SOURCES_JOIN_DELIMITER", " | ")
        monkeypatch.setenv("SOURCES_HTML_OUTPUT", "true")

        settings = Settings()

        assert settings.environment == "production"
        assert settings.log_level == "WARNING"
        assert settings.sources_join_delimiter == " | "
        assert settings.sources_html_output is True

    def test_settings_invalid_environment(self, monkeypatch):
        """Test that invalid environment values are rejected."""
        monkeypatch.setenv("ENVIRONMENT", "invalid_env")

        with pytest.raises(ValidationError) as exc_info:
            Settings()

        assert "Environment must be one of" in str(exc_info.value)

    def test_settings_invalid_log_level(self):
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            Settings(log_level="LOUD")

        assert "Log level must be one of" in str(exc_info.value)

    @pytest.mark.parametrize("field,value", [("log_format", "xml"), ("log_output", "syslog")])
    def test_settings_invalid_log_destination(self, field, value):
        """Test log format and output are validated."""
        with pytest.raises(ValidationError):
            Settings(**{field: value})

    def test_get_settings_caching(self):
        """Test that get_settings() returns cached instance."""
        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2
