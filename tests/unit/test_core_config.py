"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Settings loading from environment variables
- Environment detection
- Validation (log level, blank values)
- Default values
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config import Environment, Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset the cached settings around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.mark.unit
class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


@pytest.mark.unit
class TestSettingsDefaults:
    """Test default values with an empty environment."""

    def test_defaults(self):
        """Test every field has a usable default."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

            assert settings.environment == Environment.DEVELOPMENT
            assert settings.log_level == "INFO"
            assert settings.office_admin_role == "OfficeAdmin"
            assert settings.permission_none_label == "No access"
            assert settings.permission_label_separator == ", "


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings field validation."""

    def test_loads_from_environment(self):
        """Test environment variables override defaults."""
        env_values = {
            "ENVIRONMENT": "testing",
            "OFFICE_ADMIN_ROLE": "Partner",
            "PERMISSION_NONE_LABEL": "None",
        }
        with patch.dict(os.environ, env_values, clear=True):
            settings = get_settings()

            assert settings.environment == Environment.TESTING
            assert settings.office_admin_role == "Partner"
            assert settings.permission_none_label == "None"

    def test_log_level_normalized(self):
        """Test log level is upper-cased."""
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True):
            assert Settings().log_level == "DEBUG"

    def test_log_level_invalid(self):
        """Test unknown log levels are rejected."""
        with patch.dict(os.environ, {"LOG_LEVEL": "VERBOSE"}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings()

            assert any(
                "log_level must be one of" in str(error)
                for error in exc_info.value.errors()
            )

    @pytest.mark.parametrize("key", ["OFFICE_ADMIN_ROLE", "PERMISSION_NONE_LABEL"])
    def test_blank_values_rejected(self, key: str):
        """Test the admin role and none-label cannot be blank."""
        with patch.dict(os.environ, {key: "   "}, clear=True):
            with pytest.raises(ValidationError):
                Settings()

    def test_invalid_environment(self):
        """Test unknown environments are rejected."""
        with patch.dict(os.environ, {"ENVIRONMENT": "staging"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()


@pytest.mark.unit
class TestEnvironmentProperties:
    """Test environment check convenience properties."""

    def test_is_development(self):
        """Test is_development property."""
        with patch.dict(os.environ, {"ENVIRONMENT": "development"}, clear=True):
            settings = get_settings()

            assert settings.is_development is True
            assert settings.is_testing is False
            assert settings.is_ci is False
            assert settings.is_production is False

    def test_is_testing(self):
        """Test is_testing property."""
        with patch.dict(os.environ, {"ENVIRONMENT": "testing"}, clear=True):
            settings = get_settings()

            assert settings.is_testing is True
            assert settings.is_development is False

    def test_is_ci(self):
        """Test is_ci property."""
        with patch.dict(os.environ, {"ENVIRONMENT": "ci"}, clear=True):
            settings = get_settings()

            assert settings.is_ci is True
            assert settings.is_development is False

    def test_is_production(self):
        """Test is_production property."""
        with patch.dict(os.environ, {"ENVIRONMENT": "production"}, clear=True):
            settings = get_settings()

            assert settings.is_production is True
            assert settings.is_development is False


@pytest.mark.unit
class TestSettingsCaching:
    """Test Settings singleton caching behavior."""

    def test_get_settings_cached(self):
        """Test that get_settings returns cached instance."""
        with patch.dict(os.environ, {}, clear=True):
            settings1 = get_settings()
            settings2 = get_settings()

            assert settings1 is settings2  # Same instance (cached)
